"""Google API error payload."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorStatus(BaseModel):
    """Body of the ``error`` object returned with non-2xx responses."""

    code: int | None = Field(default=None)
    message: str | None = Field(default=None)
    status: str | None = Field(default=None)  # e.g. NOT_FOUND, PERMISSION_DENIED
    errors: list[dict[str, Any]] | None = Field(default=None)
    details: list[dict[str, Any]] | None = Field(default=None)

    model_config = {"frozen": True}


class ErrorResponse(BaseModel):
    """Structured error response: ``{"error": {"code": ..., "message": ...}}``."""

    error: ErrorStatus

    model_config = {"frozen": True}
