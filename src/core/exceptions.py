"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the command bridge."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    ENTRY_NOT_FOUND = "ENTRY_NOT_FOUND"

    # Conflict errors (409)
    DUPLICATE_PROFILE = "DUPLICATE_PROFILE"
    ACTION_IN_PROGRESS = "ACTION_IN_PROGRESS"

    # Server errors (500/503)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """User input rejected before reaching the store."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details={"field": field},
        )
        self.field = field


class NotFoundError(AppException):
    """An operation referenced a missing id."""


class ProfileNotFoundError(NotFoundError):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {profile_id}",
            status_code=404,
            details={"profile_id": profile_id},
        )


class EntryNotFoundError(NotFoundError):
    """Volunteer entry not found."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ENTRY_NOT_FOUND,
            message=f"Entry not found: {entry_id}",
            status_code=404,
            details={"entry_id": entry_id},
        )


class ConflictError(AppException):
    """The request conflicts with the current state."""


class DuplicateProfileError(ConflictError):
    """A profile with this name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(
            error_code=ErrorCode.DUPLICATE_PROFILE,
            message=f"Profile '{name}' already exists",
            status_code=409,
            details={"name": name},
        )


class ActionInProgressError(ConflictError):
    """Another store mutation is still running."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.ACTION_IN_PROGRESS,
            message="Another action is still in progress",
            status_code=409,
        )


class StorageError(AppException):
    """The durable store failed; nothing was committed."""

    def __init__(self, message: str = "Storage operation failed") -> None:
        super().__init__(
            error_code=ErrorCode.STORAGE_ERROR,
            message=message,
            status_code=503,
        )
