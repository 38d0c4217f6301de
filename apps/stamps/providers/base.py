from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, Optional

from apps.stamps.types import Invalid, ProviderOptions, RequestPayload, Valid, VerifiedPayload

logger = logging.getLogger(__name__)


class Provider:
    """
    Verifier for a single credential type.

    Callers only rely on ``type`` and ``verify``. ``verify`` never raises:
    whatever happens inside ``verify_payload`` comes back as ``Valid`` or
    ``Invalid``.
    """

    type: ClassVar[str] = ""
    _options: ClassVar[Dict[str, Any]] = {}

    def __init__(self, options: Optional[ProviderOptions] = None) -> None:
        self.options: Dict[str, Any] = {**self._options, **(options or {})}

    def verify_payload(self, payload: RequestPayload) -> VerifiedPayload:
        raise NotImplementedError

    def verify(self, payload: RequestPayload) -> VerifiedPayload:
        try:
            outcome = self.verify_payload(payload)
        except Exception as exc:
            logger.exception("stamps.verify.unhandled_error", extra={"stamp_type": self.type})
            return Invalid.from_exception(exc)
        if not isinstance(outcome, (Valid, Invalid)):
            logger.error(
                "stamps.verify.bad_outcome",
                extra={"stamp_type": self.type, "outcome_type": type(outcome).__name__},
            )
            return Invalid((f"{self.type} provider returned no outcome",))
        return outcome

    def __repr__(self) -> str:  # pragma: no cover
        return f"<{self.__class__.__name__} type={self.type!r}>"
