"""Serializers for transforming domain models to and from API payloads."""

from rest_framework import serializers

from events.domain import RSVP, Event

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _timestamp(**kwargs) -> serializers.DateTimeField:
    return serializers.DateTimeField(
        format=TIMESTAMP_FORMAT,
        input_formats=[TIMESTAMP_FORMAT],
        required=False,
        allow_null=True,
        **kwargs,
    )


class RSVPSerializer(serializers.Serializer):
    """Serializer for RSVP domain model."""

    user_id = serializers.CharField()
    event_id = serializers.IntegerField(required=False, allow_null=True)
    accepted = serializers.BooleanField(required=False, allow_null=True)
    comment = serializers.CharField(required=False, allow_null=True, allow_blank=True)

    def create(self, validated_data) -> RSVP:
        return RSVP(**validated_data)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model.

    ``save()`` on a bound serializer returns a domain Event.
    """

    id = serializers.IntegerField(required=False, allow_null=True)
    name = serializers.CharField(allow_null=True, allow_blank=True)
    emoji = serializers.CharField(allow_null=True, allow_blank=True)
    description = serializers.CharField(allow_null=True, allow_blank=True)
    host = serializers.CharField(allow_null=True, allow_blank=True)
    start_time = _timestamp()
    location = serializers.CharField(allow_null=True, allow_blank=True)
    latitude = serializers.FloatField(allow_null=True)
    longitude = serializers.FloatField(allow_null=True)
    is_public = serializers.IntegerField(allow_null=True)
    activities = serializers.ListField(child=serializers.IntegerField(), allow_null=True)
    rsvps = RSVPSerializer(many=True, allow_null=True)
    created_at = _timestamp()
    updated_at = _timestamp()

    def create(self, validated_data) -> Event:
        activities = validated_data.pop("activities", None)
        rsvps = validated_data.pop("rsvps", None)
        return Event(
            activities=tuple(activities) if activities is not None else None,
            rsvps=tuple(RSVP(**rsvp) for rsvp in rsvps) if rsvps is not None else None,
            **validated_data,
        )


class StrictCharField(serializers.CharField):
    """Accepts JSON strings only."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictFloatField(serializers.FloatField):
    """Accepts JSON numbers only."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictIntegerField(serializers.IntegerField):
    """Accepts JSON integers, or numbers with no fractional part."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail("invalid")
        if isinstance(data, float) and not data.is_integer():
            self.fail("invalid")
        return super().to_internal_value(int(data))


class EventBodySerializer(serializers.Serializer):
    """Request body accepted when creating or updating an event.

    Scalars must already have their JSON type. ``rsvps`` is a list of user
    IDs.
    """

    name = StrictCharField(required=False, allow_blank=True)
    emoji = StrictCharField(required=False, allow_blank=True)
    description = StrictCharField(required=False, allow_blank=True)
    host = StrictCharField(required=False, allow_blank=True)
    start_time = serializers.DateTimeField(required=False, input_formats=[TIMESTAMP_FORMAT])
    location = StrictCharField(required=False, allow_blank=True)
    latitude = StrictFloatField(required=False)
    longitude = StrictFloatField(required=False)
    is_public = StrictIntegerField(required=False)
    activities = serializers.ListField(child=serializers.IntegerField(), required=False)
    rsvps = serializers.ListField(child=serializers.CharField(), required=False)


class IdFilterSerializer(serializers.Serializer):
    id = serializers.ListField(child=serializers.CharField(), allow_empty=True)


class LocationFilterSerializer(serializers.Serializer):
    distance = StrictIntegerField(min_value=0)
    from_latitude = StrictFloatField()
    from_longitude = StrictFloatField()
