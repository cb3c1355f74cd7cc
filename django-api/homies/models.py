"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models
from django.utils import timezone

from homies.domain.value_objects import (
    EVENT_DESCRIPTION_MAX_LENGTH,
    EVENT_NAME_MAX_LENGTH,
    EVENT_TYPE_NAME_MAX_LENGTH,
    USER_ID_MAX_LENGTH,
)


class EventType(models.Model):
    """Persistence model for event types."""

    name = models.CharField(max_length=EVENT_TYPE_NAME_MAX_LENGTH)

    class Meta:
        db_table = "Types"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Event(models.Model):
    """Persistence model for events."""

    name = models.CharField(max_length=EVENT_NAME_MAX_LENGTH)
    description = models.CharField(max_length=EVENT_DESCRIPTION_MAX_LENGTH)
    organiser_id = models.CharField(max_length=USER_ID_MAX_LENGTH)
    created_on = models.DateTimeField(default=timezone.now)
    start = models.DateTimeField()
    end = models.DateTimeField()
    type = models.ForeignKey(EventType, on_delete=models.PROTECT, related_name="events")

    class Meta:
        db_table = "Events"
        ordering = ["start", "id"]
        indexes = [
            models.Index(fields=["organiser_id"]),
        ]

    def __str__(self) -> str:
        return self.name


class EventParticipant(models.Model):
    """Persistence model for a user taking part in an event."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="participants")
    helper_id = models.CharField(max_length=USER_ID_MAX_LENGTH)

    class Meta:
        db_table = "EventsParticipants"
        constraints = [
            models.UniqueConstraint(
                fields=["event", "helper_id"], name="uq_event_participant"
            ),
        ]
        indexes = [
            models.Index(fields=["helper_id"]),
        ]

    def __str__(self) -> str:
        return f"{self.helper_id} - {self.event.name}"
