"""Structured outcomes returned by the reminder and verification services.

Services never let exceptions escape to their callers; every public
operation returns one of these instead.
"""

from dataclasses import dataclass, field

from events.domain.errors import DomainError, ErrorCode
from events.domain.models import Event, UpcomingEvent
from events.domain.value_objects import EventId


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a single registration verification."""

    success: bool
    message: str | None = None
    error: str | None = None
    code: ErrorCode | None = None

    @classmethod
    def verified(cls) -> "VerificationResult":
        return cls(success=True, message="Registration verified successfully")

    @classmethod
    def from_error(cls, error: DomainError) -> "VerificationResult":
        return cls(success=False, error=error.message, code=error.code)

    @classmethod
    def from_exception(cls, exc: Exception) -> "VerificationResult":
        return cls(success=False, error=str(exc), code=ErrorCode.INFRASTRUCTURE)


@dataclass(frozen=True)
class UpcomingEventsResult:
    """Outcome of an upcoming-event selection."""

    success: bool
    events: tuple[Event | UpcomingEvent, ...] = ()
    error: str | None = None
    code: ErrorCode | None = None


@dataclass(frozen=True)
class EventDispatchDetail:
    """Per-event record of a reminder dispatch."""

    event_id: EventId
    event_title: str
    participants_count: int
    messages_sent: int = 0
    messages_failed: int = 0


@dataclass(frozen=True)
class DispatchResult:
    """Aggregate outcome of one reminder dispatch run."""

    success: bool
    message: str | None = None
    error: str | None = None
    code: ErrorCode | None = None
    events_processed: int = 0
    messages_sent: int = 0
    messages_failed: int = 0
    details: tuple[EventDispatchDetail, ...] = field(default_factory=tuple)

    @classmethod
    def failure(cls, error: str, code: ErrorCode = ErrorCode.INFRASTRUCTURE) -> "DispatchResult":
        return cls(success=False, error=error, code=code)

    @classmethod
    def empty(cls) -> "DispatchResult":
        return cls(success=True, message="No upcoming events found")

    @classmethod
    def from_details(cls, details: list[EventDispatchDetail]) -> "DispatchResult":
        return cls(
            success=True,
            message=f"Reminders sent for {len(details)} event(s)",
            events_processed=len(details),
            messages_sent=sum(detail.messages_sent for detail in details),
            messages_failed=sum(detail.messages_failed for detail in details),
            details=tuple(details),
        )
