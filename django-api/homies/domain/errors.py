"""Domain error codes for the homies module.

Expected outcomes such as "not found" or "not the organiser" are returned
as None/False by the service. These errors cover malformed input only.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_FORM = "INVALID_FORM"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )
        self.event_id = event_id


class FormValidationError(DomainError):
    """Raised when submitted form data is incomplete or malformed."""

    def __init__(self, errors: Mapping[str, str]) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FORM,
            message="Submitted form is invalid",
        )
        self.errors = dict(errors)

    def __str__(self) -> str:
        fields = ", ".join(sorted(self.errors))
        return f"{self.code.value}: {self.message} ({fields})"
