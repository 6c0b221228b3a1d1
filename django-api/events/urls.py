from django.urls import path

from events.handlers import (
    EventDetailView,
    EventListView,
    EventRSVPListView,
    EventScheduleView,
    EventSearchView,
    UserRSVPListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/schedule", EventScheduleView.as_view(), name="event-schedule"),
    path("events/search", EventSearchView.as_view(), name="event-search"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/rsvps",
        EventRSVPListView.as_view(),
        name="event-rsvp-list",
    ),
    path("users/<str:user_id>/rsvps", UserRSVPListView.as_view(), name="user-rsvp-list"),
]
