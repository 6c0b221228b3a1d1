"""Request decoding: path, query and JSON body inputs to typed values.

Decoders raise domain errors; they never build responses.
"""

import logging
from typing import Any

from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.request import Request

from events.domain import RSVP, Event, EventScheduleType, GeoRadius, Pagination, SearchCriteria
from events.domain.errors import (
    InvalidBodyError,
    InvalidIdFilterError,
    InvalidPaginationError,
    InvalidScheduleTypeError,
    MissingPathParameterError,
)
from events.handlers.serializers import (
    EventBodySerializer,
    IdFilterSerializer,
    LocationFilterSerializer,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = "10"
DEFAULT_PAGE_NUMBER = "1"


def path_id(value: str | None) -> str:
    if not value:
        logger.error("id (path parameter) missing")
        raise MissingPathParameterError("id")
    return value


def pagination(request: Request) -> Pagination:
    page_size = request.query_params.get("page_size", DEFAULT_PAGE_SIZE)
    page_number = request.query_params.get("page_number", DEFAULT_PAGE_NUMBER)
    try:
        return Pagination.from_strings(page_size, page_number)
    except ValueError:
        logger.error("could not initialize page_size and page_number")
        raise InvalidPaginationError() from None


def schedule_type(value: str | None) -> EventScheduleType:
    try:
        return EventScheduleType(value)
    except ValueError:
        logger.error("could not initialize type from %r", value)
        raise InvalidScheduleTypeError() from None


def json_body(request: Request) -> dict[str, Any] | None:
    """Return the JSON object body, or None when there is none.

    Requests without content (the framework sees no stream), bodies that
    fail to parse and JSON values other than objects all count as no body.
    """
    if request.stream is None:
        return None
    try:
        data = request.data
    except (ParseError, UnsupportedMediaType):
        logger.warning("request body is not valid JSON")
        return None
    return data if isinstance(data, dict) else None


def require_json_body(request: Request) -> dict[str, Any]:
    body = json_body(request)
    if body is None:
        logger.error("body contains invalid JSON")
        raise InvalidBodyError()
    return body


def id_filter(request: Request) -> list[str]:
    body = json_body(request)
    serializer = IdFilterSerializer(data=body or {})
    if not serializer.is_valid():
        logger.error("json body is invalid; ensure id filter is present")
        raise InvalidIdFilterError()
    return serializer.validated_data["id"]


def _permissive_fields(body: dict[str, Any]) -> dict[str, Any]:
    """Validate an event body, dropping fields that fail conversion."""
    serializer = EventBodySerializer(data=body)
    if serializer.is_valid():
        return serializer.validated_data
    usable = {key: value for key, value in body.items() if key not in serializer.errors}
    serializer = EventBodySerializer(data=usable)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def _int_or_none(value: str | None) -> int | None:
    if value is None or not value.isascii():
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def rsvps(user_ids: list[str]) -> tuple[RSVP, ...]:
    return tuple(RSVP(user_id=user_id) for user_id in user_ids)


def event_for_create(body: dict[str, Any]) -> Event:
    fields = _permissive_fields(body)
    return Event(
        name=fields.get("name"),
        emoji=fields.get("emoji"),
        description=fields.get("description"),
        host=fields.get("host"),
        start_time=fields.get("start_time"),
        location=fields.get("location"),
        latitude=fields.get("latitude"),
        longitude=fields.get("longitude"),
        is_public=fields.get("is_public"),
        activities=tuple(fields.get("activities", ())),
        rsvps=rsvps(fields.get("rsvps", [])),
    )


def event_for_update(event_id: str, body: dict[str, Any]) -> Event:
    fields = _permissive_fields(body)
    return Event(
        id=_int_or_none(event_id),
        name=fields.get("name"),
        emoji=fields.get("emoji"),
        description=fields.get("description"),
        host=fields.get("host"),
        start_time=fields.get("start_time"),
        location=fields.get("location"),
        latitude=fields.get("latitude"),
        longitude=fields.get("longitude"),
        is_public=fields.get("is_public"),
    )


def event_for_rsvps(event_id: str, body: dict[str, Any]) -> Event:
    fields = _permissive_fields({"rsvps": body.get("rsvps", [])})
    return Event(id=_int_or_none(event_id), rsvps=rsvps(fields.get("rsvps", [])))


def search_criteria(request: Request) -> SearchCriteria | None:
    """Decode the optional filters of a search body.

    Unknown schedule types and incomplete locations are ignored.
    """
    body = json_body(request)
    if body is None:
        return None

    try:
        filter_type = EventScheduleType(body.get("type"))
    except ValueError:
        filter_type = None

    radius = None
    location = body.get("location")
    if isinstance(location, dict):
        serializer = LocationFilterSerializer(data=location)
        if serializer.is_valid():
            radius = GeoRadius(
                latitude=serializer.validated_data["from_latitude"],
                longitude=serializer.validated_data["from_longitude"],
                miles=serializer.validated_data["distance"],
            )

    return SearchCriteria(schedule_type=filter_type, radius=radius)
