from homies.stores.interfaces import EventStore

__all__ = ["EventStore"]
