"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable

from events.domain.value_objects import GeoRadius


class EventScheduleType(str, Enum):
    """Temporal classification used to filter event listings."""

    ALL = "all"
    UPCOMING = "upcoming"
    PAST = "past"


@dataclass(frozen=True)
class RSVP:
    """A user's attendance response to an event."""

    user_id: str
    event_id: int | None = None
    accepted: bool | None = None
    comment: str | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    Every field is optional so that partial events built from request
    bodies can be checked against an operation's required fields.
    """

    id: int | None = None
    name: str | None = None
    emoji: str | None = None
    description: str | None = None
    host: str | None = None
    start_time: datetime | None = None
    location: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_public: int | None = None
    activities: tuple[int, ...] | None = None
    rsvps: tuple[RSVP, ...] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def missing_fields(self, required: Iterable[str]) -> list[str]:
        """Return the required field names that are unset, in the given order."""
        return [name for name in required if getattr(self, name) is None]


UPDATE_FIELDS = (
    "name",
    "emoji",
    "description",
    "host",
    "start_time",
    "location",
    "latitude",
    "longitude",
    "is_public",
)
CREATE_FIELDS = UPDATE_FIELDS + ("activities", "rsvps")
RSVP_FIELDS = ("id", "rsvps")


@dataclass(frozen=True)
class SearchCriteria:
    """Filters decoded from a search request body."""

    schedule_type: EventScheduleType | None = None
    radius: GeoRadius | None = None


class SearchSource(Enum):
    """Which filter last wrote the search result slot."""

    DEFAULT = "default"
    SCHEDULE = "schedule"
    LOCATION = "location"


@dataclass(frozen=True)
class SearchResult:
    """Result slot of a composite search, tagged with the filter that filled it."""

    source: SearchSource | None = None
    events: list[Event] | None = None
