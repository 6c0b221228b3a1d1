"""Django ORM implementation of the EventStore."""

import logging

from django.db import IntegrityError, transaction
from django.db.models import Q, QuerySet
from django.utils import timezone

from events import models
from events.domain import RSVP, Event, EventScheduleType, GeoRadius, Pagination
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

MAX_PRIMARY_KEY = 2**63 - 1
MAX_PRIMARY_KEY_DIGITS = len(str(MAX_PRIMARY_KEY))


def _primary_keys(ids: list[str]) -> list[int]:
    """Keep IDs that are ASCII decimal strings within the key column's range."""
    keys = []
    for value in ids:
        value = str(value)
        if not (value.isascii() and value.isdecimal()):
            continue
        if len(value) <= MAX_PRIMARY_KEY_DIGITS and int(value) <= MAX_PRIMARY_KEY:
            keys.append(int(value))
    return keys


def to_domain_rsvp(row: models.RSVP) -> RSVP:
    return RSVP(
        user_id=row.user_id,
        event_id=row.event_id,
        accepted=row.accepted,
        comment=row.comment,
    )


def to_domain_event(row: models.Event) -> Event:
    """Convert an ORM row (with prefetched RSVPs) to a domain Event."""
    return Event(
        id=row.id,
        name=row.name,
        emoji=row.emoji,
        description=row.description,
        host=row.host,
        start_time=row.start_time,
        location=row.location,
        latitude=row.latitude,
        longitude=row.longitude,
        is_public=row.is_public,
        activities=tuple(row.activities or ()),
        rsvps=tuple(to_domain_rsvp(rsvp) for rsvp in row.rsvps.all()),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _page(self, queryset: QuerySet, pagination: Pagination) -> list[Event] | None:
        end = pagination.offset + pagination.page_size
        rows = list(queryset.prefetch_related("rsvps")[pagination.offset : end])
        if not rows:
            return None
        return [to_domain_event(row) for row in rows]

    def get_events(self, ids: list[str], pagination: Pagination) -> list[Event] | None:
        queryset = models.Event.objects.filter(pk__in=_primary_keys(ids))
        return self._page(queryset, pagination)

    def get_events_on_schedule(
        self, schedule_type: EventScheduleType, pagination: Pagination
    ) -> list[Event] | None:
        queryset = models.Event.objects.all()
        now = timezone.now()
        if schedule_type is EventScheduleType.UPCOMING:
            queryset = queryset.filter(start_time__gte=now)
        elif schedule_type is EventScheduleType.PAST:
            queryset = queryset.filter(start_time__lt=now).order_by("-start_time", "-id")
        return self._page(queryset, pagination)

    def get_event_ids_near_location(
        self, radius: GeoRadius, pagination: Pagination
    ) -> list[str] | None:
        lat_range, lon_ranges = radius.bounding_box()
        candidates = models.Event.objects.filter(latitude__range=lat_range)
        if lon_ranges:
            lon_filter = Q()
            for lon_range in lon_ranges:
                lon_filter |= Q(longitude__range=lon_range)
            candidates = candidates.filter(lon_filter)

        nearby = []
        for pk, latitude, longitude in candidates.values_list("id", "latitude", "longitude"):
            distance = radius.distance_to(latitude, longitude)
            if distance <= radius.miles:
                nearby.append((distance, pk))
        nearby.sort()

        end = pagination.offset + pagination.page_size
        page = nearby[pagination.offset : end]
        if not page:
            return None
        return [str(pk) for _, pk in page]

    def create_event(self, event: Event) -> bool:
        try:
            with transaction.atomic():
                row = models.Event.objects.create(
                    name=event.name,
                    emoji=event.emoji,
                    description=event.description,
                    host=event.host,
                    start_time=event.start_time,
                    location=event.location,
                    latitude=event.latitude,
                    longitude=event.longitude,
                    is_public=event.is_public,
                    activities=list(event.activities or ()),
                )
                models.RSVP.objects.bulk_create(
                    models.RSVP(
                        event=row,
                        user_id=rsvp.user_id,
                        accepted=rsvp.accepted,
                        comment=rsvp.comment,
                    )
                    for rsvp in event.rsvps or ()
                )
        except IntegrityError:
            logger.warning("event %r was not created", event.name, exc_info=True)
            return False
        logger.info("created event %s", row.pk)
        return True

    def post_event_rsvps(self, event: Event) -> bool:
        pks = _primary_keys([str(event.id)]) if event.id is not None else []
        row = models.Event.objects.filter(pk=pks[0]).first() if pks else None
        if row is None:
            return False

        existing = set(row.rsvps.values_list("user_id", flat=True))
        new_rsvps = []
        for rsvp in event.rsvps or ():
            if rsvp.user_id in existing:
                continue
            existing.add(rsvp.user_id)
            new_rsvps.append(
                models.RSVP(
                    event=row,
                    user_id=rsvp.user_id,
                    accepted=rsvp.accepted,
                    comment=rsvp.comment,
                )
            )
        if not new_rsvps:
            return False

        models.RSVP.objects.bulk_create(new_rsvps)
        logger.info("added %d rsvps to event %s", len(new_rsvps), row.pk)
        return True

    def delete_event(self, event_id: str) -> bool:
        pks = _primary_keys([event_id])
        if not pks:
            return False
        deleted, _ = models.Event.objects.filter(pk=pks[0]).delete()
        return deleted > 0
