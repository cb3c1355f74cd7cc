"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from homies.domain import Event, EventDetails, EventForm, EventId, EventSummary, EventType


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[EventSummary]:
        """Return all events ordered by start ascending."""
        ...

    @abstractmethod
    def list_events_for_participant(self, helper_id: str) -> list[EventSummary]:
        """Return the events `helper_id` has joined, ordered by start ascending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_details(self, event_id: EventId) -> EventDetails | None:
        """Return the detail view of an event, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def add_event(self, form: EventForm, organiser_id: str) -> Event:
        """Persist a new event owned by `organiser_id`."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, form: EventForm, organiser_id: str) -> bool:
        """Overwrite an event owned by `organiser_id`.

        Returns False when no event with that ID is owned by `organiser_id`.
        """
        ...

    @abstractmethod
    def add_participant(self, event_id: EventId, helper_id: str) -> bool:
        """Insert a participant row unless one already exists.

        Returns False when the event is missing or the row already exists.
        """
        ...

    @abstractmethod
    def remove_participant(self, event_id: EventId, helper_id: str) -> bool:
        """Delete a participant row. Returns False when there was none."""
        ...

    @abstractmethod
    def list_types(self) -> list[EventType]:
        """Return all event types ordered by name."""
        ...

    @abstractmethod
    def type_exists(self, type_id: int) -> bool:
        """Check if an event type exists."""
        ...

    @abstractmethod
    def add_type(self, name: str) -> EventType:
        """Persist a new event type."""
        ...
