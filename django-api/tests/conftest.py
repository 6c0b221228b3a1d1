"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from unittest.mock import create_autospec

import pytest
from rest_framework.test import APIClient, APIRequestFactory

from events.domain import RSVP, Event
from events.handlers import views
from events.stores.interfaces import EventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def request_factory() -> APIRequestFactory:
    return APIRequestFactory()


@pytest.fixture
def store(monkeypatch):
    """A mock EventStore wired into the views."""
    store = create_autospec(EventStore, instance=True)
    monkeypatch.setattr(views, "get_event_store", lambda: store)
    return store


@pytest.fixture
def make_event():
    def _make(**overrides) -> Event:
        fields = {
            "id": 1,
            "name": "Board games",
            "emoji": "🎲",
            "description": "Weekly board game night",
            "host": "user-1",
            "start_time": datetime(2030, 5, 1, 18, 0, tzinfo=timezone.utc),
            "location": "Central Library",
            "latitude": 33.749,
            "longitude": -84.388,
            "is_public": 1,
            "activities": (3, 1, 2),
            "rsvps": (
                RSVP(user_id="user-2", event_id=1, accepted=True, comment="See you"),
                RSVP(user_id="user-3", event_id=1),
            ),
            "created_at": datetime(2030, 4, 1, 9, 30, tzinfo=timezone.utc),
            "updated_at": datetime(2030, 4, 2, 10, 0, tzinfo=timezone.utc),
        }
        fields.update(overrides)
        return Event(**fields)

    return _make
