"""HTTP handlers for the JSON API.

Handlers never expose internal error details: error bodies carry only the
domain error code and its user-safe message.
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from band.content import SITE_CONTENT
from band.domain import Error
from band.domain.errors import ErrorCode
from band.handlers.dependencies import build_controller
from band.handlers.serializers import (
    ContactSubmissionSerializer,
    PageStateSerializer,
    SiteContentSerializer,
)
from band.services import PageController


def serialize_state(controller: PageController) -> dict:
    return PageStateSerializer(
        controller.state,
        context={"clears_in": controller.seconds_until_clear},
    ).data


class PageStateView(APIView):
    """Handler for GET /api/state"""

    def get(self, request: Request) -> Response:
        return Response(serialize_state(build_controller(request)))


class MenuToggleApiView(APIView):
    """Handler for POST /api/menu/toggle"""

    def post(self, request: Request) -> Response:
        controller = build_controller(request)
        controller.toggle_menu()
        return Response(serialize_state(controller))


class ContactApiView(APIView):
    """Handler for POST /api/contact"""

    def post(self, request: Request) -> Response:
        serializer = ContactSubmissionSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        controller = build_controller(request)
        outcome = controller.submit(serializer.to_submission())
        if isinstance(outcome, Error):
            return Response(
                {
                    "code": ErrorCode.SUBMISSION_DELIVERY_FAILED.value,
                    "message": outcome.message,
                    "state": serialize_state(controller),
                },
                status=status.HTTP_502_BAD_GATEWAY,
            )
        return Response(
            {
                "outcome": "success",
                "message": outcome.message,
                "state": serialize_state(controller),
            },
            status=status.HTTP_201_CREATED,
        )


class ContentView(APIView):
    """Handler for GET /api/content"""

    def get(self, request: Request) -> Response:
        return Response(SiteContentSerializer(SITE_CONTENT).data)
