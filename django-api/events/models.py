"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    name = models.CharField(max_length=255)
    emoji = models.CharField(max_length=32)
    description = models.TextField()
    host = models.CharField(max_length=255)
    start_time = models.DateTimeField()
    location = models.CharField(max_length=255)
    latitude = models.FloatField()
    longitude = models.FloatField()
    is_public = models.PositiveSmallIntegerField(default=1)
    activities = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_time", "id"]
        indexes = [
            models.Index(fields=["start_time"], name="event_start_time_idx"),
            models.Index(fields=["latitude", "longitude"], name="event_lat_lon_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class RSVP(models.Model):
    """Persistence model for a user's response to an event."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="rsvps")
    user_id = models.CharField(max_length=255)
    accepted = models.BooleanField(null=True, blank=True)
    comment = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["event", "user_id"], name="unique_event_rsvp"),
        ]

    def __str__(self) -> str:
        return f"{self.user_id} - {self.event_id}"
