from __future__ import annotations

from .base import Provider

__all__ = ["Provider"]
