"""
Rate limiting for the register and login endpoints.

`AuthRateThrottle` is a DRF `SimpleRateThrottle` keyed by client IP, so
its history lives in the Django cache and is shared by every worker that
uses the same cache.  The rate comes from ``DEFAULT_THROTTLE_RATES["auth"]``
and is written as ``"<attempts>/<seconds>"`` so a 15 minute window can be
expressed; the usual ``"<n>/min"`` style still works.
"""
import logging

from rest_framework.throttling import SimpleRateThrottle

logger = logging.getLogger(__name__)


class AuthRateThrottle(SimpleRateThrottle):
    scope = "auth"

    def get_cache_key(self, request, view):
        return self.cache_format % {"scope": self.scope, "ident": self.get_ident(request)}

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        num, period = rate.split("/")
        if period.isdigit():
            return (int(num), int(period))
        return super().parse_rate(rate)

    def throttle_failure(self):
        logger.warning("Auth rate limit exceeded for %s", self.key)
        return super().throttle_failure()
