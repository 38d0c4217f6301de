from __future__ import annotations

import logging
from collections.abc import Mapping

REDACTED_ATTRS = ("request", "request_body", "data", "body", "payload")
PROOF_FIELDS = frozenset({"proofs", "proof", "merkle_root", "signature", "signer"})


class StripRequestBodyFilter(logging.Filter):
    """
    Drop request bodies and proof material from log records. Stamp payloads
    carry signatures and ZK proofs that must never reach log storage.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        for attr in REDACTED_ATTRS:
            if hasattr(record, attr):
                setattr(record, attr, None)
        for attr in PROOF_FIELDS:
            if hasattr(record, attr):
                setattr(record, attr, "[redacted]")
        if isinstance(record.args, Mapping):
            record.args = {
                key: "[redacted]" if key in PROOF_FIELDS else value for key, value in record.args.items()
            }
        return True
