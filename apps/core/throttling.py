from __future__ import annotations

from rest_framework.throttling import ScopedRateThrottle, SimpleRateThrottle


class IPRateThrottle(SimpleRateThrottle):
    """
    Global per-IP limit, applied on top of the user throttle.
    """

    scope = "ip"

    def get_cache_key(self, request, view) -> str | None:  # type: ignore[override]
        ident = self.get_ident(request)
        if ident is None:
            return None
        return self.cache_format % {"scope": self.scope, "ident": ident}


class _PrefixedScopeThrottle(ScopedRateThrottle):
    """
    Scoped throttle keyed as ``<prefix>:<view.throttle_scope>``.
    """

    prefix = ""

    def get_ident_for(self, request) -> str | None:
        raise NotImplementedError

    def get_cache_key(self, request, view) -> str | None:  # type: ignore[override]
        scope = getattr(view, "throttle_scope", None)
        if not scope:
            return None
        ident = self.get_ident_for(request)
        if ident is None:
            return None
        self.scope = f"{self.prefix}:{scope}"
        self.rate = self.get_rate()
        self.num_requests, self.duration = self.parse_rate(self.rate)
        return self.cache_format % {"scope": self.scope, "ident": ident}


class ScopedUserRateThrottle(_PrefixedScopeThrottle):
    prefix = "user"

    def get_ident_for(self, request) -> str | None:
        if not getattr(request.user, "is_authenticated", False):
            return None
        return str(request.user.pk)


class ScopedIPRateThrottle(_PrefixedScopeThrottle):
    prefix = "ip"

    def get_ident_for(self, request) -> str | None:
        return self.get_ident(request)
