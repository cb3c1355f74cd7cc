"""Domain models representing persisted state and form input.

These are pure domain objects with no ORM behaviour.
Django ORM models are in homies/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from homies.domain.value_objects import (
    EVENT_DESCRIPTION_MAX_LENGTH,
    EVENT_NAME_MAX_LENGTH,
    EventId,
)


@dataclass(frozen=True)
class EventType:
    """Domain representation of an event Type."""

    id: int
    name: str


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    start: datetime
    end: datetime
    type_id: int
    organiser_id: str
    created_on: datetime


@dataclass(frozen=True)
class EventForm:
    """User-facing input for creating or editing an event.

    Every field is optional so that partially filled forms can be
    represented; `field_errors` reports what is missing.
    """

    name: str | None = None
    description: str | None = None
    start: datetime | None = None
    end: datetime | None = None
    type_id: int | None = None
    types: tuple[EventType, ...] = ()

    def field_errors(self) -> dict[str, str]:
        """Return field name -> message for every invalid field."""
        errors: dict[str, str] = {}

        if not self.name or not self.name.strip():
            errors["name"] = "Name is required"
        elif len(self.name) > EVENT_NAME_MAX_LENGTH:
            errors["name"] = f"Name cannot exceed {EVENT_NAME_MAX_LENGTH} characters"

        if not self.description or not self.description.strip():
            errors["description"] = "Description is required"
        elif len(self.description) > EVENT_DESCRIPTION_MAX_LENGTH:
            errors["description"] = (
                f"Description cannot exceed {EVENT_DESCRIPTION_MAX_LENGTH} characters"
            )

        if self.start is None:
            errors["start"] = "Start is required"
        elif _is_naive(self.start):
            errors["start"] = "Start must be timezone-aware"
        if self.end is None:
            errors["end"] = "End is required"
        elif _is_naive(self.end):
            errors["end"] = "End must be timezone-aware"
        if self.type_id is None:
            errors["type_id"] = "Type is required"

        return errors


@dataclass(frozen=True)
class EventSummary:
    """Listing row for an event."""

    id: EventId
    name: str
    start: datetime
    type_name: str
    organiser_id: str


@dataclass(frozen=True)
class EventDetails:
    """Read-only projection of an event for display."""

    id: EventId
    name: str
    description: str
    start: datetime
    end: datetime
    type_name: str
    organiser_id: str
    created_on: datetime


def _is_naive(value: datetime) -> bool:
    return value.tzinfo is None or value.utcoffset() is None
