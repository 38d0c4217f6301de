from __future__ import annotations


class StampError(Exception):
    """Base class for errors raised by the stamps app."""


class AddressResolutionError(StampError):
    pass


class MalformedResponseError(StampError):
    pass


class UnknownProviderError(StampError, KeyError):
    def __init__(self, provider_type: str) -> None:
        super().__init__(provider_type)
        self.provider_type = provider_type

    def __str__(self) -> str:
        return f"No provider registered for type: {self.provider_type}"
