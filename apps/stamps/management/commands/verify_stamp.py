from __future__ import annotations

import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from apps.stamps.registry import get_registry
from apps.stamps.types import RequestPayload


class Command(BaseCommand):
    help = "Verify a stamp payload (JSON file) with the registered provider and print the outcome."

    def add_arguments(self, parser) -> None:
        parser.add_argument("payload", help="Path to a JSON request payload.")
        parser.add_argument("--type", dest="stamp_type", default="", help="Override the payload type.")

    def handle(self, *args, **options) -> None:
        path = Path(options["payload"])
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise CommandError(f"Unable to read payload: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CommandError(f"Payload is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise CommandError("Payload must be a JSON object.")
        if options["stamp_type"]:
            data["type"] = options["stamp_type"]

        payload = RequestPayload.from_dict(data)
        registry = get_registry()
        if payload.type not in registry:
            raise CommandError(f"Unknown stamp type: {payload.type or '<empty>'}")

        outcome = registry.verify(payload)
        self.stdout.write(json.dumps({"type": payload.type, **outcome.to_dict()}, sort_keys=True))
        if not outcome.valid:
            raise CommandError("verify_stamp failed: " + "; ".join(outcome.errors))
