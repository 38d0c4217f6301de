from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Iterable, List, Optional

from django.conf import settings
from django.utils.module_loading import import_string

from .exceptions import UnknownProviderError
from .providers.base import Provider
from .types import Invalid, RequestPayload, VerifiedPayload

logger = logging.getLogger(__name__)

DEFAULT_PROVIDERS = [
    "apps.stamps.providers.worldid.WorldIDProvider",
]


class ProviderRegistry:
    def __init__(self, providers: Optional[Iterable[Provider]] = None) -> None:
        self._providers: Dict[str, Provider] = {}
        for provider in providers or ():
            self.register(provider)

    def register(self, provider: Provider) -> None:
        provider_type = str(getattr(provider, "type", "") or "")
        if not provider_type:
            raise ValueError("Provider type is required.")
        if provider_type in self._providers:
            raise ValueError(f"Provider already registered for type: {provider_type}")
        self._providers[provider_type] = provider

    def unregister(self, provider_type: str) -> None:
        self._providers.pop(provider_type, None)

    def get(self, provider_type: str) -> Provider:
        try:
            return self._providers[provider_type]
        except KeyError:
            raise UnknownProviderError(provider_type) from None

    def types(self) -> List[str]:
        return sorted(self._providers)

    def __contains__(self, provider_type: object) -> bool:
        return provider_type in self._providers

    def __len__(self) -> int:
        return len(self._providers)

    def verify(self, payload: RequestPayload) -> VerifiedPayload:
        try:
            provider = self.get(payload.type)
        except UnknownProviderError as exc:
            logger.info("stamps.registry.unknown_type", extra={"stamp_type": payload.type})
            return Invalid((str(exc),))
        return provider.verify(payload)


def build_registry() -> ProviderRegistry:
    paths = getattr(settings, "STAMPS_PROVIDERS", None) or DEFAULT_PROVIDERS
    all_options = getattr(settings, "STAMPS_PROVIDER_OPTIONS", {}) or {}
    registry = ProviderRegistry()
    for path in paths:
        provider_cls = import_string(path)
        registry.register(provider_cls(all_options.get(provider_cls.type, {})))
    return registry


@lru_cache(maxsize=1)
def get_registry() -> ProviderRegistry:
    return build_registry()


def reset_registry() -> None:
    get_registry.cache_clear()
