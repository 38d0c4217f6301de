from .base import REST_FRAMEWORK
from .base import *  # noqa: F403

# Keep tests self-contained without external services.
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "stamps-test",
    }
}

FEATURE_FLAGS = {"stamps": True}
STAMPS_PROVIDERS = ["apps.stamps.providers.worldid.WorldIDProvider"]
STAMPS_PROVIDER_OPTIONS = {}
STAMPS_PROVIDER_ENABLED_WORLDID = True
WORLD_ID_VERIFY_ENDPOINT = "https://developer.worldcoin.org/api/v1/verify"
WORLD_ID_ACTION_ID = "wid_5047fd9af3d4a665da9a44251270d6b2"

REST_FRAMEWORK["DEFAULT_THROTTLE_CLASSES"] = ()
