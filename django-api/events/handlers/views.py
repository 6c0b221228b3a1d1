"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to handlers.exceptions
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers import decoders
from events.handlers.serializers import EventSerializer
from events.services.event_service import EventService
from events.stores import get_event_store

CORS_HEADERS = {
    "Access-Control-Allow-Headers": "accept, content-type",
    "Access-Control-Allow-Methods": "GET,POST,DELETE,OPTIONS,PUT",
}


def message(text: str, status_code: int) -> Response:
    return Response({"message": text}, status=status_code)


class EventsAPIView(APIView):
    """Base view: CORS preflight and service construction."""

    def options(self, request: Request, *args, **kwargs) -> Response:
        return Response(status=status.HTTP_200_OK, headers=CORS_HEADERS)

    def get_service(self) -> EventService:
        return EventService(get_event_store())


class EventListView(EventsAPIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        pagination = decoders.pagination(request)
        service = self.get_service()
        if "type" in request.query_params:
            schedule_type = decoders.schedule_type(request.query_params["type"])
            events = service.get_events_on_schedule(schedule_type, pagination)
        else:
            events = service.get_events(decoders.id_filter(request), pagination)
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        body = decoders.require_json_body(request)
        self.get_service().create_event(decoders.event_for_create(body))
        return message("event created", status.HTTP_201_CREATED)


class EventScheduleView(EventsAPIView):
    """Handler for GET /api/events/schedule?type=..."""

    def get(self, request: Request) -> Response:
        pagination = decoders.pagination(request)
        schedule_type = decoders.schedule_type(request.query_params.get("type"))
        events = self.get_service().get_events_on_schedule(schedule_type, pagination)
        return Response(EventSerializer(events, many=True).data)


class EventSearchView(EventsAPIView):
    """Handler for POST /api/events/search"""

    def post(self, request: Request) -> Response:
        pagination = decoders.pagination(request)
        criteria = decoders.search_criteria(request)
        events = self.get_service().search_events(criteria, pagination)
        return Response(EventSerializer(events, many=True).data)


class EventDetailView(EventsAPIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str | None = None) -> Response:
        event = self.get_service().get_single_event(decoders.path_id(event_id))
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str | None = None) -> Response:
        body = decoders.require_json_body(request)
        event = decoders.event_for_update(decoders.path_id(event_id), body)
        self.get_service().update_event(event)

    def delete(self, request: Request, event_id: str | None = None) -> Response:
        self.get_service().delete_event(decoders.path_id(event_id))
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventRSVPListView(EventsAPIView):
    """Handler for GET/POST/PUT /api/events/{event_id}/rsvps"""

    def get(self, request: Request, event_id: str | None = None) -> Response:
        self.get_service().get_rsvps_for_event(decoders.path_id(event_id))

    def post(self, request: Request, event_id: str | None = None) -> Response:
        body = decoders.require_json_body(request)
        event = decoders.event_for_rsvps(decoders.path_id(event_id), body)
        self.get_service().post_event_rsvps(event)
        return message("rsvps sent", status.HTTP_200_OK)

    def put(self, request: Request, event_id: str | None = None) -> Response:
        self.get_service().put_rsvp_for_event(decoders.path_id(event_id))


class UserRSVPListView(EventsAPIView):
    """Handler for GET /api/users/{user_id}/rsvps"""

    def get(self, request: Request, user_id: str | None = None) -> Response:
        self.get_service().get_rsvps_for_user(decoders.path_id(user_id))
