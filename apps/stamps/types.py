from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

ProviderOptions = Dict[str, Any]


@dataclass(frozen=True)
class SignerChallenge:
    challenge: str
    signature: str


@dataclass(frozen=True)
class RequestPayload:
    """
    Caller-supplied proof payload. Scheme specific fields live in ``proofs``
    and are passed through to the provider without local validation.
    """

    type: str
    address: str = ""
    proofs: Mapping[str, Any] = field(default_factory=dict)
    version: str = "0.0.0"
    signer: Optional[SignerChallenge] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "proofs", MappingProxyType(dict(self.proofs or {})))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RequestPayload":
        signer = data.get("signer")
        if isinstance(signer, Mapping):
            signer = SignerChallenge(
                challenge=str(signer.get("challenge") or ""),
                signature=str(signer.get("signature") or ""),
            )
        else:
            signer = None
        proofs = data.get("proofs")
        return cls(
            type=str(data.get("type") or ""),
            address=str(data.get("address") or ""),
            proofs=proofs if isinstance(proofs, Mapping) else {},
            version=str(data.get("version") or "0.0.0"),
            signer=signer,
        )


@dataclass(frozen=True)
class Valid:
    record: Mapping[str, str]

    def __post_init__(self) -> None:
        if self.record is None:
            raise ValueError("Valid outcome requires a record.")
        record = dict(self.record)
        if not all(isinstance(key, str) and isinstance(value, str) for key, value in record.items()):
            raise ValueError("Valid record keys and values must be strings.")
        object.__setattr__(self, "record", MappingProxyType(record))

    @property
    def valid(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"valid": True, "record": dict(self.record)}


@dataclass(frozen=True)
class Invalid:
    errors: Tuple[str, ...]

    def __post_init__(self) -> None:
        errors = tuple(str(error) for error in (self.errors or ()))
        if not errors:
            raise ValueError("Invalid outcome requires at least one error.")
        object.__setattr__(self, "errors", errors)

    @property
    def valid(self) -> bool:
        return False

    @classmethod
    def from_exception(cls, exc: BaseException) -> "Invalid":
        # str() of some exceptions is empty; fall back to the class name
        return cls((str(exc) or exc.__class__.__name__,))

    def to_dict(self) -> dict[str, Any]:
        return {"valid": False, "error": list(self.errors)}


VerifiedPayload = Union[Valid, Invalid]
