from homies.services.event_service import EventService

__all__ = ["EventService"]
