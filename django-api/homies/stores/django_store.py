"""Django ORM implementation of the EventStore."""

import logging

from django.db import DEFAULT_DB_ALIAS, transaction

from homies import models
from homies.domain import Event, EventDetails, EventForm, EventId, EventSummary, EventType
from homies.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM.

    Every operation runs in its own atomic block on the configured
    database alias, so each call commits or rolls back as a unit.
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS) -> None:
        self._using = using

    def _events(self):
        return models.Event.objects.using(self._using)

    def _participants(self):
        return models.EventParticipant.objects.using(self._using)

    def _types(self):
        return models.EventType.objects.using(self._using)

    def list_events(self) -> list[EventSummary]:
        with transaction.atomic(using=self._using):
            rows = self._events().select_related("type")
            return [_to_summary(row) for row in rows]

    def list_events_for_participant(self, helper_id: str) -> list[EventSummary]:
        with transaction.atomic(using=self._using):
            rows = (
                self._events()
                .filter(participants__helper_id=helper_id)
                .select_related("type")
            )
            return [_to_summary(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        with transaction.atomic(using=self._using):
            row = self._events().filter(pk=event_id.value).first()
            return _to_event(row) if row is not None else None

    def get_event_details(self, event_id: EventId) -> EventDetails | None:
        with transaction.atomic(using=self._using):
            row = self._events().select_related("type").filter(pk=event_id.value).first()
            return _to_details(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        return self._events().filter(pk=event_id.value).exists()

    def add_event(self, form: EventForm, organiser_id: str) -> Event:
        with transaction.atomic(using=self._using):
            row = models.Event(
                name=form.name,
                description=form.description,
                start=form.start,
                end=form.end,
                type_id=form.type_id,
                organiser_id=organiser_id,
            )
            row.save(using=self._using)
        logger.debug("Inserted event row %s", row.pk)
        return _to_event(row)

    def update_event(self, event_id: EventId, form: EventForm, organiser_id: str) -> bool:
        with transaction.atomic(using=self._using):
            updated = (
                self._events()
                .filter(pk=event_id.value, organiser_id=organiser_id)
                .update(
                    name=form.name,
                    description=form.description,
                    start=form.start,
                    end=form.end,
                    type_id=form.type_id,
                )
            )
        return updated > 0

    def add_participant(self, event_id: EventId, helper_id: str) -> bool:
        with transaction.atomic(using=self._using):
            if not self.event_exists(event_id):
                return False
            # The unique constraint on (event, helper_id) makes this an
            # insert-if-absent: a concurrent insert surfaces as created=False.
            _, created = self._participants().get_or_create(
                event_id=event_id.value, helper_id=helper_id
            )
        return created

    def remove_participant(self, event_id: EventId, helper_id: str) -> bool:
        with transaction.atomic(using=self._using):
            deleted, _ = (
                self._participants()
                .filter(event_id=event_id.value, helper_id=helper_id)
                .delete()
            )
        return deleted > 0

    def list_types(self) -> list[EventType]:
        return [EventType(id=row.pk, name=row.name) for row in self._types()]

    def type_exists(self, type_id: int) -> bool:
        return self._types().filter(pk=type_id).exists()

    def add_type(self, name: str) -> EventType:
        with transaction.atomic(using=self._using):
            row = self._types().create(name=name)
        return EventType(id=row.pk, name=row.name)


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        name=row.name,
        description=row.description,
        start=row.start,
        end=row.end,
        type_id=row.type_id,
        organiser_id=row.organiser_id,
        created_on=row.created_on,
    )


def _to_summary(row: models.Event) -> EventSummary:
    return EventSummary(
        id=EventId(row.pk),
        name=row.name,
        start=row.start,
        type_name=row.type.name,
        organiser_id=row.organiser_id,
    )


def _to_details(row: models.Event) -> EventDetails:
    return EventDetails(
        id=EventId(row.pk),
        name=row.name,
        description=row.description,
        start=row.start,
        end=row.end,
        type_name=row.type.name,
        organiser_id=row.organiser_id,
        created_on=row.created_on,
    )
