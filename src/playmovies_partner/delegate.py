"""Per-call observer and resilience policy.

A ``Delegate`` is consulted by a call builder at every intermediate step of
``execute()``. It decides whether transient failures are retried and how
long to wait first. The client itself never caps retries: a delegate that
always returns a delay will retry forever.

Example:
    class RetryTwice(Delegate):
        def __init__(self) -> None:
            self.attempts = 0

        def http_error(self, error: httpx.TransportError) -> float | None:
            self.attempts += 1
            return 1.0 if self.attempts <= 2 else None

    await hub.accounts().orders_get("A1", "O1").delegate(RetryTwice()).execute()
"""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass(frozen=True, slots=True)
class MethodInfo:
    """Identifies the API method a call builder is executing."""

    id: str  # e.g. "playmoviespartner.accounts.orders.get"
    http_method: str


class Delegate:
    """No-op delegate. Subclass and override only the hooks you need."""

    def begin(self, info: MethodInfo) -> None:
        """Called once when ``execute()`` starts."""

    def pre_request(self) -> None:
        """Called before every HTTP request, including retries."""

    def token(self, error: Exception) -> str | None:
        """Token provider failed. Return a replacement token, or None to give up."""
        return None

    def http_error(self, error: httpx.TransportError) -> float | None:
        """Transport failure. Return seconds to wait before retrying, or None."""
        return None

    def http_failure(
        self,
        response: httpx.Response,
        payload: Any,
    ) -> float | None:
        """Non-2xx response. ``payload`` is the decoded JSON body, or None.

        Return seconds to wait before retrying, or None.
        """
        return None

    def response_json_decode_error(self, body: str, error: Exception) -> None:
        """A 2xx body failed to decode. Never retried."""

    def finished(self, is_success: bool) -> None:
        """Called exactly once when ``execute()`` returns or raises."""


class DefaultDelegate(Delegate):
    """Delegate used when a call has none: no retries, no replacement token."""
