"""Schemas shared by every route."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for every failed command."""

    error_code: str
    message: str
    details: Any | None = None
