"""
Per-client rate limiting built on DRF's ``SimpleRateThrottle``.

Rates accept an optional window multiplier so limits such as
``100/15m`` (100 requests per 15 minutes) can be configured in
``REST_FRAMEWORK["DEFAULT_THROTTLE_RATES"]``.  A rejected request raises
:class:`common.exceptions.RateLimitExceeded` with the scope's own code
and message instead of DRF's generic ``Throttled``.
"""
import re

from django.core.exceptions import ImproperlyConfigured
from rest_framework.throttling import SimpleRateThrottle

from .exceptions import RateLimitExceeded

RATE_RE = re.compile(r"^\s*(\d+)\s*/\s*(\d*)\s*([smhd])")
UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}


class WindowRateThrottle(SimpleRateThrottle):
    """Throttle keyed by client address with configurable window length."""
    error_code = "RATE_LIMIT_EXCEEDED"
    error_message = "Too many requests from this IP, please try again later."

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        match = RATE_RE.match(rate)
        if not match:
            raise ImproperlyConfigured(f"Invalid throttle rate {rate!r} for scope {self.scope!r}")
        num, multiplier, unit = match.groups()
        return int(num), UNIT_SECONDS[unit] * int(multiplier or 1)

    def get_cache_key(self, request, view):
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}

    def throttle_failure(self):
        raise RateLimitExceeded(wait=self.wait(), detail=self.error_message, code=self.error_code)


class GeneralRateThrottle(WindowRateThrottle):
    scope = "general"


class SubmissionRateThrottle(WindowRateThrottle):
    """Contact form, newsletter subscribe and the public counter endpoints."""
    scope = "submission"
    error_message = "Too many submissions from this IP, please try again later."


class DownloadRateThrottle(WindowRateThrottle):
    scope = "download"
    error_message = "Too many download requests. Please slow down."


class LoginRateThrottle(WindowRateThrottle):
    """
    Counts failed login attempts only.

    ``allow_request`` checks the history without appending to it; the
    login view calls :meth:`record_failure` when credentials are rejected,
    so successful logins never consume the budget.
    """
    scope = "login"
    error_code = "TOO_MANY_LOGIN_ATTEMPTS"
    error_message = "Too many login attempts. Please try again in 15 minutes."

    def _load_history(self, request, view):
        self.key = self.get_cache_key(request, view)
        self.history = self.cache.get(self.key, [])
        self.now = self.timer()
        while self.history and self.history[-1] <= self.now - self.duration:
            self.history.pop()

    def allow_request(self, request, view):
        if self.rate is None:
            return True
        self._load_history(request, view)
        if len(self.history) >= self.num_requests:
            return self.throttle_failure()
        return True

    @classmethod
    def record_failure(cls, request, view):
        throttle = cls()
        if throttle.rate is None:
            return
        throttle._load_history(request, view)
        throttle.history.insert(0, throttle.now)
        throttle.cache.set(throttle.key, throttle.history, throttle.duration)
