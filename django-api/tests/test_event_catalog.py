"""HTTP tests for the events API.

The store is mocked for most tests; these cover request decoding and status
mapping. TestStoredEvents runs the same routes against the database store.
Run with: pytest tests/test_event_catalog.py -v
"""

import json
from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from events import models
from events.domain import RSVP, Event, EventScheduleType, GeoRadius, Pagination
from events.handlers.views import (
    EventDetailView,
    EventRSVPListView,
    UserRSVPListView,
)

EVENT_BODY = {
    "name": "Board games",
    "emoji": "🎲",
    "description": "Weekly board game night",
    "host": "user-1",
    "start_time": "2030-05-01 18:00:00",
    "location": "Central Library",
    "latitude": 33.749,
    "longitude": -84.388,
    "is_public": 1,
    "activities": [3, 1, 2],
    "rsvps": ["user-2", "user-3"],
}


def get_with_body(client: APIClient, path: str, body) -> object:
    return client.generic("GET", path, json.dumps(body), content_type="application/json")


class TestOptions:
    """Tests for OPTIONS on every route."""

    @pytest.mark.parametrize("path", ["/api/events", "/api/events/1", "/api/events/search"])
    def test_options_sets_cors_headers(self, api_client: APIClient, path):
        response = api_client.options(path)

        assert response.status_code == 200
        assert response["Access-Control-Allow-Headers"] == "accept, content-type"
        assert response["Access-Control-Allow-Methods"] == "GET,POST,DELETE,OPTIONS,PUT"


class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, store, make_event):
        store.get_events.return_value = [make_event(id=7)]

        response = api_client.get("/api/events/7")

        assert response.status_code == 200
        assert response.json()["id"] == 7
        assert response.json()["start_time"] == "2030-05-01 18:00:00"
        assert response.json()["rsvps"][0]["user_id"] == "user-2"
        store.get_events.assert_called_once_with(["7"], Pagination(1, 1))

    def test_get_event_not_found(self, api_client: APIClient, store):
        store.get_events.return_value = None

        response = api_client.get("/api/events/7")

        assert response.status_code == 404
        assert response.content == b""

    def test_missing_id_is_bad_request(self, request_factory, store):
        request = request_factory.get("/api/events/")

        response = EventDetailView.as_view()(request)

        assert response.status_code == 400
        assert response.data == {"message": "id (path parameter) missing"}
        store.get_events.assert_not_called()

    def test_store_failure_propagates(self, api_client: APIClient, store):
        store.get_events.side_effect = RuntimeError("database unavailable")

        with pytest.raises(RuntimeError):
            api_client.get("/api/events/7")


class TestEventList:
    """Tests for GET /api/events"""

    def test_list_by_ids_uses_default_pagination(self, api_client: APIClient, store, make_event):
        store.get_events.return_value = [make_event(id=1), make_event(id=2)]

        response = get_with_body(api_client, "/api/events", {"id": [1, "2"]})

        assert response.status_code == 200
        assert [event["id"] for event in response.json()] == [1, 2]
        store.get_events.assert_called_once_with(["1", "2"], Pagination(10, 1))

    def test_list_by_ids_with_pagination(self, api_client: APIClient, store):
        store.get_events.return_value = []

        response = get_with_body(
            api_client, "/api/events?page_size=5&page_number=3", {"id": ["4"]}
        )

        assert response.status_code == 200
        assert response.json() == []
        store.get_events.assert_called_once_with(["4"], Pagination(5, 3))

    def test_list_not_found(self, api_client: APIClient, store):
        store.get_events.return_value = None

        response = get_with_body(api_client, "/api/events", {"id": ["4"]})

        assert response.status_code == 404

    @pytest.mark.parametrize("query", ["page_size=ten", "page_number=1.5", "page_size=0"])
    def test_invalid_pagination_is_server_error(self, api_client: APIClient, store, query):
        response = get_with_body(api_client, f"/api/events?{query}", {"id": ["4"]})

        assert response.status_code == 500
        assert response.json() == {"message": "could not initialize page_size and page_number"}
        store.get_events.assert_not_called()

    @pytest.mark.parametrize("body", [{}, {"id": "4"}, {"ids": ["4"]}])
    def test_missing_id_filter_is_server_error(self, api_client: APIClient, store, body):
        response = get_with_body(api_client, "/api/events", body)

        assert response.status_code == 500
        assert response.json() == {
            "message": "json body is invalid; ensure id filter is present"
        }

    def test_no_body_is_server_error(self, api_client: APIClient, store):
        response = api_client.get("/api/events")

        assert response.status_code == 500


class TestEventSchedule:
    """Tests for schedule-type listing."""

    def test_type_query_parameter_selects_schedule(self, api_client: APIClient, store, make_event):
        store.get_events_on_schedule.return_value = [make_event()]

        response = api_client.get("/api/events?type=upcoming&page_size=3")

        assert response.status_code == 200
        store.get_events_on_schedule.assert_called_once_with(
            EventScheduleType.UPCOMING, Pagination(3, 1)
        )
        store.get_events.assert_not_called()

    def test_unknown_type_is_server_error(self, api_client: APIClient, store):
        response = api_client.get("/api/events?type=someday")

        assert response.status_code == 500
        assert response.json() == {"message": "could not initialize type"}

    def test_schedule_route_requires_type(self, api_client: APIClient, store):
        response = api_client.get("/api/events/schedule")

        assert response.status_code == 500
        assert response.json() == {"message": "could not initialize type"}

    def test_schedule_route(self, api_client: APIClient, store, make_event):
        store.get_events_on_schedule.return_value = None

        response = api_client.get("/api/events/schedule?type=past")

        assert response.status_code == 404
        store.get_events_on_schedule.assert_called_once_with(
            EventScheduleType.PAST, Pagination(10, 1)
        )


class TestEventSearch:
    """Tests for POST /api/events/search"""

    def test_no_body_lists_all(self, api_client: APIClient, store, make_event):
        store.get_events_on_schedule.return_value = [make_event()]

        response = api_client.post("/api/events/search?page_number=2")

        assert response.status_code == 200
        store.get_events_on_schedule.assert_called_once_with(
            EventScheduleType.ALL, Pagination(10, 2)
        )

    def test_location_wins_over_type(self, api_client: APIClient, store, make_event):
        store.get_events_on_schedule.return_value = [make_event(id=1)]
        store.get_event_ids_near_location.return_value = ["2"]
        store.get_events.return_value = [make_event(id=2)]

        response = api_client.post(
            "/api/events/search?page_number=4",
            {
                "type": "upcoming",
                "location": {"distance": 10, "from_latitude": 33.749, "from_longitude": -84.388},
            },
            format="json",
        )

        assert response.status_code == 200
        assert [event["id"] for event in response.json()] == [2]
        store.get_event_ids_near_location.assert_called_once_with(
            GeoRadius(latitude=33.749, longitude=-84.388, miles=10), Pagination(10, 4)
        )
        store.get_events.assert_called_once_with(["2"], Pagination(10, 1))

    def test_unknown_type_and_incomplete_location_are_ignored(self, api_client: APIClient, store):
        response = api_client.post(
            "/api/events/search",
            {"type": "someday", "location": {"distance": 10}},
            format="json",
        )

        assert response.status_code == 404
        store.get_events_on_schedule.assert_not_called()
        store.get_event_ids_near_location.assert_not_called()

    def test_type_only(self, api_client: APIClient, store):
        store.get_events_on_schedule.return_value = []

        response = api_client.post("/api/events/search", {"type": "past"}, format="json")

        assert response.status_code == 200
        assert response.json() == []
        store.get_events_on_schedule.assert_called_once_with(
            EventScheduleType.PAST, Pagination(10, 1)
        )


class TestCreateEvent:
    """Tests for POST /api/events"""

    def test_create_event(self, api_client: APIClient, store):
        store.create_event.return_value = True

        response = api_client.post("/api/events", EVENT_BODY, format="json")

        assert response.status_code == 201
        assert response.json() == {"message": "event created"}
        (event,), _ = store.create_event.call_args
        assert event.name == "Board games"
        assert event.start_time == datetime(2030, 5, 1, 18, 0, tzinfo=timezone.utc)
        assert event.activities == (3, 1, 2)
        assert event.rsvps == (RSVP(user_id="user-2"), RSVP(user_id="user-3"))

    def test_missing_fields_are_listed(self, api_client: APIClient, store):
        body = {key: value for key, value in EVENT_BODY.items() if key not in {"name", "host"}}

        response = api_client.post("/api/events", body, format="json")

        assert response.status_code == 400
        assert response.json() == {"message": "parameters missing name, host"}
        store.create_event.assert_not_called()

    def test_malformed_start_time_counts_as_missing(self, api_client: APIClient, store):
        body = {**EVENT_BODY, "start_time": "May 1st, 6pm"}

        response = api_client.post("/api/events", body, format="json")

        assert response.status_code == 400
        assert response.json() == {"message": "parameters missing start_time"}

    def test_wrongly_typed_fields_count_as_missing(self, api_client: APIClient, store):
        body = {**EVENT_BODY, "name": 123, "latitude": "33.749", "is_public": "1"}

        response = api_client.post("/api/events", body, format="json")

        assert response.status_code == 400
        assert response.json() == {"message": "parameters missing name, latitude, is_public"}
        store.create_event.assert_not_called()

    def test_absent_collections_default_to_empty(self, api_client: APIClient, store):
        store.create_event.return_value = True
        body = {key: value for key, value in EVENT_BODY.items() if key not in {"activities", "rsvps"}}

        response = api_client.post("/api/events", body, format="json")

        assert response.status_code == 201
        (event,), _ = store.create_event.call_args
        assert event.activities == ()
        assert event.rsvps == ()

    def test_store_noop_is_not_modified(self, api_client: APIClient, store):
        store.create_event.return_value = False

        response = api_client.post("/api/events", EVENT_BODY, format="json")

        assert response.status_code == 304

    def test_invalid_json_is_bad_request(self, api_client: APIClient, store):
        response = api_client.generic(
            "POST", "/api/events", "{not json", content_type="application/json"
        )

        assert response.status_code == 400
        assert response.json() == {"message": "body is missing JSON or JSON is invalid"}

    def test_missing_body_is_bad_request(self, api_client: APIClient, store):
        response = api_client.post("/api/events")

        assert response.status_code == 400


class TestEventRSVPs:
    """Tests for /api/events/{id}/rsvps"""

    def test_post_rsvps(self, api_client: APIClient, store):
        store.post_event_rsvps.return_value = True

        response = api_client.post(
            "/api/events/3/rsvps", {"rsvps": ["user-4", "user-5"]}, format="json"
        )

        assert response.status_code == 200
        assert response.json() == {"message": "rsvps sent"}
        store.post_event_rsvps.assert_called_once_with(
            Event(id=3, rsvps=(RSVP(user_id="user-4"), RSVP(user_id="user-5")))
        )

    def test_post_rsvps_noop_is_only_not_modified(self, api_client: APIClient, store):
        store.post_event_rsvps.return_value = False

        response = api_client.post("/api/events/3/rsvps", {"rsvps": ["user-4"]}, format="json")

        assert response.status_code == 304
        assert response.content == b""

    def test_non_numeric_id_is_missing_parameter(self, api_client: APIClient, store):
        response = api_client.post("/api/events/abc/rsvps", {"rsvps": ["user-4"]}, format="json")

        assert response.status_code == 400
        assert response.json() == {"message": "parameters missing id"}

    def test_missing_id_is_bad_request(self, request_factory, store):
        request = request_factory.post("/api/events//rsvps", {"rsvps": ["u"]}, format="json")

        response = EventRSVPListView.as_view()(request)

        assert response.status_code == 400
        assert response.data == {"message": "id (path parameter) missing"}

    def test_get_rsvps_not_implemented(self, api_client: APIClient, store):
        response = api_client.get("/api/events/3/rsvps")

        assert response.status_code == 501

    def test_put_rsvp_not_implemented(self, api_client: APIClient, store):
        response = api_client.put("/api/events/3/rsvps", {"accepted": True}, format="json")

        assert response.status_code == 501

    def test_user_rsvps_not_implemented(self, api_client: APIClient, store):
        response = api_client.get("/api/users/user-2/rsvps")

        assert response.status_code == 501

    def test_user_rsvps_missing_id(self, request_factory, store):
        response = UserRSVPListView.as_view()(request_factory.get("/api/users//rsvps"))

        assert response.status_code == 400


class TestUpdateEvent:
    """Tests for PUT /api/events/{id}"""

    def test_valid_update_is_not_implemented(self, api_client: APIClient, store):
        body = {key: value for key, value in EVENT_BODY.items() if key not in {"activities", "rsvps"}}

        response = api_client.put("/api/events/3", body, format="json")

        assert response.status_code == 501
        assert response.json() == {"message": "event update is not implemented"}

    def test_update_missing_fields(self, api_client: APIClient, store):
        response = api_client.put("/api/events/3", {"name": "Renamed"}, format="json")

        assert response.status_code == 400
        assert response.json()["message"].startswith("parameters missing emoji")


class TestDeleteEvent:
    """Tests for DELETE /api/events/{id}"""

    def test_delete_existing_event(self, api_client: APIClient, store):
        store.delete_event.return_value = True

        response = api_client.delete("/api/events/3")

        assert response.status_code == 204
        store.delete_event.assert_called_once_with("3")

    def test_delete_missing_event(self, api_client: APIClient, store):
        store.delete_event.return_value = False

        response = api_client.delete("/api/events/3")

        assert response.status_code == 304

    def test_delete_without_id(self, request_factory, store):
        response = EventDetailView.as_view()(request_factory.delete("/api/events/"))

        assert response.status_code == 400
        store.delete_event.assert_not_called()


@pytest.mark.django_db
class TestStoredEvents:
    """Routes backed by the database store."""

    @pytest.fixture
    def stored_event(self):
        return models.Event.objects.create(
            name="Night market",
            emoji="🏮",
            description="Stalls by the date line",
            host="user-1",
            start_time=datetime(2030, 5, 1, 18, 0, tzinfo=timezone.utc),
            location="Taveuni",
            latitude=0.0,
            longitude=-179.95,
            is_public=1,
        )

    @pytest.mark.parametrize(
        "path", ["/api/events/%C2%B2", "/api/events/%D9%A1", "/api/events/99999999999999999999999"]
    )
    def test_get_unusable_id_is_not_found(self, api_client: APIClient, stored_event, path):
        response = api_client.get(path)

        assert response.status_code == 404
        assert response.content == b""

    def test_list_of_unusable_ids_is_not_found(self, api_client: APIClient, stored_event):
        response = get_with_body(
            api_client, "/api/events", {"id": ["²", "99999999999999999999999"]}
        )

        assert response.status_code == 404

    @pytest.mark.parametrize("path", ["/api/events/%C2%B2", "/api/events/99999999999999999999999"])
    def test_delete_unusable_id_is_not_modified(self, api_client: APIClient, stored_event, path):
        response = api_client.delete(path)

        assert response.status_code == 304
        assert models.Event.objects.filter(pk=stored_event.pk).exists()

    def test_post_rsvps_to_id_beyond_key_range_is_not_modified(
        self, api_client: APIClient, stored_event
    ):
        response = api_client.post(
            "/api/events/99999999999999999999999/rsvps", {"rsvps": ["user-4"]}, format="json"
        )

        assert response.status_code == 304
        assert not models.RSVP.objects.exists()

    def test_post_rsvps_with_non_ascii_digits_is_missing_parameter(
        self, api_client: APIClient, stored_event
    ):
        response = api_client.post(
            "/api/events/%D9%A1/rsvps", {"rsvps": ["user-4"]}, format="json"
        )

        assert response.status_code == 400
        assert response.json() == {"message": "parameters missing id"}

    def test_search_across_antimeridian(self, api_client: APIClient, stored_event):
        response = api_client.post(
            "/api/events/search",
            {"location": {"distance": 50, "from_latitude": 0.0, "from_longitude": 179.95}},
            format="json",
        )

        assert response.status_code == 200
        assert [event["id"] for event in response.json()] == [stored_event.pk]
