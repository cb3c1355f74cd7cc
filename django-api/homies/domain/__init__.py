from homies.domain.errors import DomainError, ErrorCode, FormValidationError, InvalidEventIdError
from homies.domain.models import Event, EventDetails, EventForm, EventSummary, EventType
from homies.domain.policies import is_owner
from homies.domain.value_objects import EventId

__all__ = [
    "Event",
    "EventDetails",
    "EventForm",
    "EventSummary",
    "EventType",
    "EventId",
    "DomainError",
    "ErrorCode",
    "FormValidationError",
    "InvalidEventIdError",
    "is_owner",
]
