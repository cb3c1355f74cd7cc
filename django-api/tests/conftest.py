"""Pytest configuration and shared fixtures."""

from datetime import timedelta
from unittest.mock import Mock

import pytest
from django.utils import timezone

from homies import models
from homies.domain import EventForm
from homies.services import EventService
from homies.stores import EventStore
from homies.stores.django_store import DjangoEventStore


@pytest.fixture
def store() -> DjangoEventStore:
    return DjangoEventStore()


@pytest.fixture
def event_service(store: DjangoEventStore) -> EventService:
    return EventService(store)


@pytest.fixture
def mock_store() -> Mock:
    return Mock(spec=EventStore)


@pytest.fixture
def event_type(db) -> models.EventType:
    return models.EventType.objects.create(name="TestType")


@pytest.fixture
def make_event(db, event_type):
    """Insert an Event row directly, bypassing the service."""

    def _make_event(**overrides) -> models.Event:
        start = timezone.now()
        fields = {
            "name": "First Test Event",
            "description": "First Test Description",
            "start": start,
            "end": start + timedelta(hours=2),
            "type": event_type,
            "organiser_id": "a-sample-user",
        }
        fields.update(overrides)
        return models.Event.objects.create(**fields)

    return _make_event


@pytest.fixture
def event_form(event_type) -> EventForm:
    start = timezone.now()
    return EventForm(
        name="Test Event",
        description="Test Description",
        start=start,
        end=start + timedelta(hours=2),
        type_id=event_type.pk,
    )
