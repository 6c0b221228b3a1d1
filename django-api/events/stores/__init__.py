from django.conf import settings
from django.utils.module_loading import import_string

from events.stores.interfaces import EventStore


def get_event_store() -> EventStore:
    """Instantiate the store configured by ``settings.EVENTS_STORE``."""
    return import_string(settings.EVENTS_STORE)()


__all__ = ["EventStore", "get_event_store"]
