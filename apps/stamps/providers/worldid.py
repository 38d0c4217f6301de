from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Union

import requests
from django.conf import settings

from apps.stamps.exceptions import MalformedResponseError
from apps.stamps.signer import get_address
from apps.stamps.types import Invalid, RequestPayload, Valid, VerifiedPayload

from .base import Provider

logger = logging.getLogger(__name__)

# World ID API endpoint that checks a ZKP for an action
VERIFY_ENDPOINT = "https://developer.worldcoin.org/api/v1/verify"
# Production action id; only change this for local testing against a dev app
WORLD_ID_ACTION_ID = "wid_5047fd9af3d4a665da9a44251270d6b2"

DEFAULT_TIMEOUT_SECONDS = 10


def get_action_id() -> str:
    return str(getattr(settings, "WORLD_ID_ACTION_ID", "") or WORLD_ID_ACTION_ID)


def get_verify_endpoint() -> str:
    return str(getattr(settings, "WORLD_ID_VERIFY_ENDPOINT", "") or VERIFY_ENDPOINT)


def get_transport_timeout() -> float:
    return float(getattr(settings, "STAMPS_HTTP_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))


class WorldIDProvider(Provider):
    """
    Checks a World ID zero-knowledge proof with the World ID verify API and
    records the nullifier hash when the API accepts it.
    """

    type = "WorldID"
    _options = {
        "address_resolver": get_address,
    }

    def verify_payload(self, payload: RequestPayload) -> VerifiedPayload:
        signal = self._resolve_signal(payload)
        if isinstance(signal, Invalid):
            return signal

        response = self._submit(payload, signal)
        if isinstance(response, Invalid):
            return response

        return self._interpret(payload, response)

    def _resolve_signal(self, payload: RequestPayload) -> Union[str, Invalid]:
        resolver: Callable[[RequestPayload], str] = self.options["address_resolver"]
        try:
            return resolver(payload)
        except Exception as exc:
            logger.warning(
                "stamps.worldid.signal_failed",
                extra={"stamp_type": self.type, "error": str(exc)},
            )
            return Invalid.from_exception(exc)

    def _submit(self, payload: RequestPayload, signal: str) -> Union[requests.Response, Invalid]:
        proofs = payload.proofs
        body = {
            "nullifier_hash": proofs.get("nullifier_hash"),
            "merkle_root": proofs.get("merkle_root"),
            "proof": proofs.get("proof"),
            "action_id": get_action_id(),
            "signal": signal,
        }
        try:
            return requests.post(
                get_verify_endpoint(),
                json=body,
                headers={"Accept": "application/json"},
                timeout=get_transport_timeout(),
            )
        except requests.RequestException as exc:
            logger.warning(
                "stamps.worldid.transport_error",
                extra={"stamp_type": self.type, "error": str(exc)},
            )
            return Invalid.from_exception(exc)

    def _interpret(self, payload: RequestPayload, response: requests.Response) -> VerifiedPayload:
        try:
            data = _read_body(response)
        except (ValueError, MalformedResponseError) as exc:
            logger.warning(
                "stamps.worldid.malformed_response",
                extra={"stamp_type": self.type, "status_code": response.status_code, "error": str(exc)},
            )
            # Error pages (gateway HTML, empty bodies) still reject by status
            if response.status_code != 200:
                return Invalid((str(response.status_code),))
            return Invalid.from_exception(exc)

        if response.status_code == 200 and data.get("success") is True:
            # Persist what the caller claimed, now backed by an accepted proof
            nullifier_hash = payload.proofs.get("nullifier_hash")
            if not isinstance(nullifier_hash, str) or not nullifier_hash:
                logger.warning("stamps.worldid.missing_nullifier", extra={"stamp_type": self.type})
                return Invalid(("nullifier_hash is required.",))
            logger.info("stamps.worldid.verified", extra={"stamp_type": self.type})
            return Valid({"nullifier_hash": nullifier_hash})

        detail = data.get("detail") or str(response.status_code)
        logger.info(
            "stamps.worldid.rejected",
            extra={"stamp_type": self.type, "status_code": response.status_code, "detail": detail},
        )
        return Invalid((str(detail),))


def _read_body(response: requests.Response) -> Dict[str, Any]:
    data = response.json()
    if not isinstance(data, dict):
        raise MalformedResponseError(f"Unexpected response body: {type(data).__name__}")
    return data
