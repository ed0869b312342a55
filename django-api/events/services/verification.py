"""Registration verification service.

Moves a pending registration to active once the participant submits the
code they were sent. The checks run in a fixed order and stop at the first
failure:

1. all fields present and well formed (no store access)
2. event exists
3. the participant is not already verified
4. a *pending* participant with that id exists
5. code matches after trimming surrounding whitespace
6. code is still inside the verification window
7. event is active and has a free seat
8. the store applies the update

A confirmation message is then sent on a best-effort basis.
"""

from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from events.domain import Event, EventId, Registration, RegistrationId
from events.domain.errors import (
    AlreadyVerifiedError,
    DomainError,
    EventFullError,
    EventInactiveError,
    EventNotFoundError,
    InvalidCodeFormatError,
    InvalidEventIdError,
    InvalidRegistrationIdError,
    InvalidVerificationCodeError,
    MissingFieldsError,
    PendingRegistrationNotFoundError,
    VerificationCodeExpiredError,
    VerificationNotAppliedError,
)
from events.domain.results import VerificationResult
from events.logging import get_logger
from events.notifiers.interfaces import Notifier
from events.services.messages import build_confirmation_message
from events.stores.interfaces import EventStore

logger = get_logger(__name__)

VERIFICATION_CODE_EXPIRY_HOURS = 24


class RegistrationVerifier:
    """Service for verifying pending registrations."""

    def __init__(
        self,
        store: EventStore,
        notifier: Notifier | None = None,
        clock: Callable[[], datetime] = timezone.now,
        expiry_hours: float = VERIFICATION_CODE_EXPIRY_HOURS,
        date_format: str = "%d/%m/%Y",
        time_format: str = "%H:%M",
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._clock = clock
        self._expiry_hours = expiry_hours
        self._date_format = date_format
        self._time_format = time_format

    def verify(
        self,
        event_id: str | None,
        participant_id: str | None,
        verification_code: str | None,
    ) -> VerificationResult:
        """Verify a registration. Never raises; failures are returned."""
        try:
            event, participant = self._verify(event_id, participant_id, verification_code)
        except DomainError as exc:
            logger.info(
                "Registration verification rejected",
                event_id=event_id,
                participant_id=participant_id,
                code=exc.code.value,
            )
            return VerificationResult.from_error(exc)
        except Exception as exc:
            logger.exception(
                "Registration verification failed",
                event_id=event_id,
                participant_id=participant_id,
            )
            return VerificationResult.from_exception(exc)

        logger.info(
            "Registration verified",
            event_id=str(event.id),
            participant_id=str(participant.id),
        )
        self._send_confirmation(event, participant)
        return VerificationResult.verified()

    def _verify(
        self,
        event_id: str | None,
        participant_id: str | None,
        verification_code: str | None,
    ) -> tuple[Event, Registration]:
        if not event_id or not participant_id or not verification_code:
            raise MissingFieldsError()
        if not isinstance(verification_code, str):
            raise InvalidCodeFormatError()
        if not verification_code.strip():
            raise MissingFieldsError()

        parsed_event_id = _parse_event_id(event_id)
        parsed_participant_id = _parse_registration_id(participant_id)

        event = self._store.find_event_by_id(parsed_event_id)
        if event is None:
            raise EventNotFoundError(event_id)

        participant = event.find_participant(parsed_participant_id)
        # A verified registration is one-shot; repeats report the duplicate
        # rather than a missing pending registration.
        if participant is not None and participant.verified:
            raise AlreadyVerifiedError()
        if participant is None or not participant.is_pending:
            raise PendingRegistrationNotFoundError(participant_id)

        if participant.verification_code != verification_code.strip():
            raise InvalidVerificationCodeError()

        if participant.hours_since_registration(self._clock()) > self._expiry_hours:
            raise VerificationCodeExpiredError()

        if not event.is_active:
            raise EventInactiveError()

        if not event.has_available_slots():
            raise EventFullError()

        if not self._store.mark_participant_verified_and_active(parsed_event_id, parsed_participant_id):
            raise VerificationNotAppliedError()

        return event, participant

    def _send_confirmation(self, event: Event, participant: Registration) -> None:
        if self._notifier is None or not participant.phone:
            return

        message = build_confirmation_message(
            event, participant, self._date_format, self._time_format
        )
        try:
            result = self._notifier.send(participant.phone, message)
        except Exception as exc:
            logger.warning(
                "Failed to send registration confirmation",
                participant_id=str(participant.id),
                error=str(exc),
            )
            return

        if result.success:
            logger.info("Registration confirmation sent", participant_id=str(participant.id))
        else:
            logger.warning(
                "Failed to send registration confirmation",
                participant_id=str(participant.id),
                error=result.error,
            )


def _parse_event_id(value: str) -> EventId:
    try:
        return EventId.from_string(value)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def _parse_registration_id(value: str) -> RegistrationId:
    try:
        return RegistrationId.from_string(value)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidRegistrationIdError() from exc
