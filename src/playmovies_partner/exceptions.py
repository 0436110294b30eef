"""Typed exceptions for the Play Movies Partner client."""

from typing import Any

import httpx
from pydantic import ValidationError

from playmovies_partner.models.errors import ErrorResponse


class PlayMoviesError(Exception):
    """Base exception for all Play Movies Partner client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class FieldClashError(PlayMoviesError):
    """An additional query parameter collides with a parameter the call owns."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Additional parameter clashes with builder-owned field: {field}")


class CallReusedError(PlayMoviesError):
    """A call builder was executed more than once."""

    def __init__(self, method_id: str) -> None:
        self.method_id = method_id
        super().__init__(f"Call {method_id} has already been executed")


class MissingTokenError(PlayMoviesError):
    """The token provider failed and the delegate supplied no replacement."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Failed to obtain an access token: {cause}")


class HttpError(PlayMoviesError):
    """Transport-level failure (connection error, timeout, ...)."""

    def __init__(self, cause: httpx.TransportError) -> None:
        self.cause = cause
        super().__init__(f"HTTP transport error: {cause}")


class PlayMoviesAPIError(PlayMoviesError):
    """Non-2xx response from the API."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response: httpx.Response | None = None,
    ) -> None:
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class BadRequestError(PlayMoviesAPIError):
    """Non-2xx response whose body is JSON.

    ``payload`` holds the decoded body as is. ``error`` is the typed view of
    a Google API error (``{"error": {...}}``), or None for any other shape.
    """

    def __init__(
        self,
        payload: Any,
        *,
        status_code: int,
        response: httpx.Response | None = None,
    ) -> None:
        self.payload = payload
        self.error = _as_error_response(payload)
        message = f"API error: {status_code}"
        if self.error is not None and self.error.error.message:
            message = self.error.error.message
        super().__init__(message, status_code=status_code, response=response)

    @property
    def error_code(self) -> int | None:
        """Code reported inside the error payload."""
        return self.error.error.code if self.error is not None else None

    @property
    def reason(self) -> str | None:
        """Canonical status string, e.g. ``NOT_FOUND``."""
        return self.error.error.status if self.error is not None else None


def _as_error_response(payload: Any) -> ErrorResponse | None:
    if not isinstance(payload, dict):
        return None
    try:
        return ErrorResponse.model_validate(payload)
    except ValidationError:
        return None


class RequestFailedError(PlayMoviesAPIError):
    """Non-2xx response whose body is not JSON."""

    def __init__(self, *, status_code: int, response: httpx.Response | None = None) -> None:
        super().__init__(f"API error: {status_code}", status_code=status_code, response=response)

    @property
    def body(self) -> str:
        return self.response.text if self.response is not None else ""


class JsonDecodeError(PlayMoviesError):
    """A successful response body did not decode into the expected schema."""

    def __init__(self, body: str, cause: Exception) -> None:
        self.body = body
        self.cause = cause
        super().__init__(f"Failed to decode response body: {cause}")
