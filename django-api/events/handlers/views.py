"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.conf import get_reminder_settings
from events.dependencies import build_registration_verifier, build_reminder_service
from events.domain.errors import NOT_FOUND_CODES, VALIDATION_CODES, ErrorCode
from events.handlers.serializers import (
    DispatchResultSerializer,
    SendRemindersQuerySerializer,
    VerificationResultSerializer,
    VerifyRegistrationSerializer,
)
from events.logging import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _status_for(code: ErrorCode | None) -> int:
    if code in VALIDATION_CODES:
        return status.HTTP_400_BAD_REQUEST
    if code in NOT_FOUND_CODES:
        return status.HTTP_404_NOT_FOUND
    if code is ErrorCode.INFRASTRUCTURE or code is None:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_409_CONFLICT


def _error_response(code: ErrorCode | None, error: str | None) -> Response:
    http_status = _status_for(code)
    if http_status == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Request failed", error=error)
        error = INTERNAL_ERROR_MESSAGE
    return Response({"error": error}, status=http_status)


class VerifyRegistrationView(APIView):
    """Handler for POST /api/events/{event_id}/registrations/{participant_id}/verify"""

    def post(self, request: Request, event_id: str, participant_id: str) -> Response:
        serializer = VerifyRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = build_registration_verifier().verify(
            event_id, participant_id, serializer.validated_data.get("verification_code")
        )
        if not result.success:
            return _error_response(result.code, result.error)
        return Response(VerificationResultSerializer(result).data, status=status.HTTP_200_OK)


class SendEventRemindersView(APIView):
    """Handler for POST /api/notifications/send-event-reminders"""

    def post(self, request: Request) -> Response:
        query = SendRemindersQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(
                {"error": "Invalid hoursAhead parameter. Must be a positive number."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        hours_ahead = query.validated_data.get(
            "hours_ahead", get_reminder_settings().default_hours_ahead
        )
        result = build_reminder_service().send_event_reminders(hours_ahead)
        if not result.success:
            return Response({"error": result.error}, status=status.HTTP_400_BAD_REQUEST)
        return Response(DispatchResultSerializer(result).data, status=status.HTTP_200_OK)
