from events.handlers.views import (
    EventDetailView,
    EventListView,
    EventRSVPListView,
    EventScheduleView,
    EventSearchView,
    UserRSVPListView,
)

__all__ = [
    "EventDetailView",
    "EventListView",
    "EventRSVPListView",
    "EventScheduleView",
    "EventSearchView",
    "UserRSVPListView",
]
