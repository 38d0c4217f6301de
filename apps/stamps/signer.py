from __future__ import annotations

import logging

from eth_account import Account
from eth_account.messages import encode_defunct

from .exceptions import AddressResolutionError
from .types import RequestPayload

logger = logging.getLogger(__name__)


def recover_signer(challenge: str, signature: str) -> str:
    if not challenge or not signature:
        raise AddressResolutionError("signer challenge and signature are required.")
    try:
        return Account.recover_message(encode_defunct(text=challenge), signature=signature)
    except Exception as exc:
        raise AddressResolutionError(f"Unable to recover signer: {exc}") from exc


def get_address(payload: RequestPayload) -> str:
    """
    Derive the signal bound into a proof check: the address that signed the
    challenge when a signer is supplied, otherwise the claimed address.
    """
    claimed = str(payload.address or "").strip().lower()
    if payload.signer is not None:
        recovered = recover_signer(payload.signer.challenge, payload.signer.signature).lower()
        if claimed and claimed != recovered:
            logger.warning("stamps.signer.address_mismatch", extra={"stamp_type": payload.type})
            raise AddressResolutionError("Signer does not match the supplied address.")
        return recovered
    if not claimed:
        raise AddressResolutionError("address is required.")
    return claimed
