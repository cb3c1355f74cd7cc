"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate ownership and form input before mutation
- Report expected failures (not found, not the organiser, duplicate join)
  as None/False rather than raising
- Let infrastructure errors from the store propagate
"""

import logging

from homies.domain import (
    Event,
    EventDetails,
    EventForm,
    EventId,
    EventSummary,
    EventType,
    FormValidationError,
    InvalidEventIdError,
    is_owner,
)
from homies.domain.value_objects import EVENT_TYPE_NAME_MAX_LENGTH, MAX_EVENT_ID
from homies.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for creating, browsing, joining and editing events."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def add_event(self, form: EventForm, organiser_id: str) -> Event:
        """Create an event organised by `organiser_id`.

        Raises:
            FormValidationError: If required fields are missing or invalid.
        """
        self._validate_form(form)
        event = self._store.add_event(form, organiser_id)
        logger.info("Event %s created by %s", event.id, organiser_id)
        return event

    def get_all_events(self) -> list[EventSummary]:
        """Return all events."""
        return self._store.list_events()

    def get_event_details(self, event_id: int | str) -> EventDetails | None:
        """Return the detail view of an event, or None if it does not exist.

        Raises:
            InvalidEventIdError: If the event_id is not an integer.
        """
        parsed_id = _parse_event_id(event_id)
        if parsed_id is None:
            return None
        return self._store.get_event_details(parsed_id)

    def get_event_for_edit(self, event_id: int | str) -> EventForm | None:
        """Return a form pre-filled from an event, or None if it does not exist."""
        event = self._get_event(event_id)
        if event is None:
            return None
        return EventForm(
            name=event.name,
            description=event.description,
            start=event.start,
            end=event.end,
            type_id=event.type_id,
            types=tuple(self._store.list_types()),
        )

    def get_event_form(self) -> EventForm:
        """Return an empty create form listing the available types."""
        return EventForm(types=tuple(self._store.list_types()))

    def get_event_organizer_id(self, event_id: int | str) -> str | None:
        """Return the organiser of an event, or None if it does not exist."""
        event = self._get_event(event_id)
        return event.organiser_id if event is not None else None

    def is_event_organiser(self, event_id: int | str, user_id: str) -> bool:
        """Return True when `user_id` organises the event."""
        event = self._get_event(event_id)
        return event is not None and is_owner(event, user_id)

    def join_event(self, event_id: int | str, user_id: str) -> bool:
        """Add `user_id` to the event's participants.

        Returns False when the event does not exist or the user already
        participates.
        """
        parsed_id = _parse_event_id(event_id)
        if parsed_id is None:
            return False
        joined = self._store.add_participant(parsed_id, user_id)
        if joined:
            logger.info("User %s joined event %s", user_id, parsed_id)
        else:
            logger.debug("User %s could not join event %s", user_id, parsed_id)
        return joined

    def leave_event(self, event_id: int | str, user_id: str) -> bool:
        """Remove `user_id` from the event's participants.

        Returns False when the user was not a participant.
        """
        parsed_id = _parse_event_id(event_id)
        if parsed_id is None:
            return False
        left = self._store.remove_participant(parsed_id, user_id)
        if left:
            logger.info("User %s left event %s", user_id, parsed_id)
        else:
            logger.debug("User %s is not a participant of event %s", user_id, parsed_id)
        return left

    def update_event(self, event_id: int | str, form: EventForm, caller_id: str) -> bool:
        """Overwrite an event's fields on behalf of its organiser.

        Returns False when the event does not exist or `caller_id` is not
        its organiser.

        Raises:
            FormValidationError: If the caller may edit the event but the
                form is missing required fields.
        """
        parsed_id = _parse_event_id(event_id)
        event = self._store.get_event(parsed_id) if parsed_id is not None else None
        if event is None:
            logger.debug("Update of missing event %s rejected", event_id)
            return False
        if not is_owner(event, caller_id):
            logger.debug("Update of event %s by non-organiser %s rejected", parsed_id, caller_id)
            return False

        self._validate_form(form)
        updated = self._store.update_event(parsed_id, form, caller_id)
        if updated:
            logger.info("Event %s updated by %s", parsed_id, caller_id)
        return updated

    def get_user_joined_events(self, user_id: str) -> list[EventSummary]:
        """Return the events `user_id` participates in."""
        return self._store.list_events_for_participant(user_id)

    def get_event_types(self) -> list[EventType]:
        """Return all event types."""
        return self._store.list_types()

    def add_event_type(self, name: str) -> EventType:
        """Create an event type.

        Raises:
            FormValidationError: If the name is blank or too long.
        """
        if not name or not name.strip():
            raise FormValidationError({"name": "Name is required"})
        if len(name) > EVENT_TYPE_NAME_MAX_LENGTH:
            raise FormValidationError(
                {"name": f"Name cannot exceed {EVENT_TYPE_NAME_MAX_LENGTH} characters"}
            )
        event_type = self._store.add_type(name)
        logger.info("Event type %s created", event_type.name)
        return event_type

    def _get_event(self, event_id: int | str) -> Event | None:
        parsed_id = _parse_event_id(event_id)
        if parsed_id is None:
            return None
        return self._store.get_event(parsed_id)

    def _validate_form(self, form: EventForm) -> None:
        errors = form.field_errors()
        if "type_id" not in errors and not self._store.type_exists(form.type_id):
            errors["type_id"] = "Type does not exist"
        if errors:
            raise FormValidationError(errors)


def _parse_event_id(event_id: int | str) -> EventId | None:
    """Return the EventId for `event_id`, or None when no row can have it.

    Integers outside the primary key range cannot match a row and map to
    None; anything that is not an integer raises InvalidEventIdError.
    """
    if isinstance(event_id, str):
        try:
            value = int(event_id.strip())
        except ValueError as exc:
            raise InvalidEventIdError(event_id) from exc
    elif isinstance(event_id, int) and not isinstance(event_id, bool):
        value = event_id
    else:
        raise InvalidEventIdError(event_id)

    if not 1 <= value <= MAX_EVENT_ID:
        return None
    return EventId(value)
