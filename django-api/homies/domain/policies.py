from homies.domain.models import Event


def is_owner(event: Event, caller_id: str | None) -> bool:
    """Return True when `caller_id` is the organiser of `event`."""
    if not caller_id:
        return False
    return event.organiser_id == caller_id
