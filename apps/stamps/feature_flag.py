from __future__ import annotations

from django.conf import settings


def stamps_enabled() -> bool:
    flags = getattr(settings, "FEATURE_FLAGS", {})
    return flags.get("stamps", False)


def provider_enabled(provider_type: str) -> bool:
    if not stamps_enabled():
        return False
    setting_name = f"STAMPS_PROVIDER_ENABLED_{provider_type.upper()}"
    return bool(getattr(settings, setting_name, True))
