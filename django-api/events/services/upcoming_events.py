"""Selection of events that need a reminder within a time window."""

import math
from collections.abc import Callable
from datetime import datetime, timedelta
from numbers import Real

from django.utils import timezone

from events.domain.errors import ErrorCode, InvalidHoursAheadError
from events.domain.models import UpcomingEvent
from events.domain.results import UpcomingEventsResult
from events.logging import get_logger
from events.stores.interfaces import EventStore

logger = get_logger(__name__)


def validate_hours_ahead(hours_ahead: object) -> float:
    """Return hours_ahead as a float.

    Raises:
        InvalidHoursAheadError: If the value is not a finite, non-negative number.
    """
    if isinstance(hours_ahead, bool) or not isinstance(hours_ahead, Real):
        raise InvalidHoursAheadError()
    value = float(hours_ahead)
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise InvalidHoursAheadError()
    return value


class UpcomingEventSelector:
    """Read-only queries for events starting inside a reminder window."""

    def __init__(
        self,
        store: EventStore,
        clock: Callable[[], datetime] = timezone.now,
        window: timedelta = timedelta(hours=1),
    ) -> None:
        self._store = store
        self._clock = clock
        self._window = window

    def select_reminder_window(self, hours_ahead: float = 24) -> UpcomingEventsResult:
        """Return active events starting in [now + hours_ahead, now + hours_ahead + window)."""
        try:
            offset = validate_hours_ahead(hours_ahead)
        except InvalidHoursAheadError as exc:
            return UpcomingEventsResult(success=False, error=exc.message, code=exc.code)

        window_start = self._clock() + timedelta(hours=offset)
        window_end = window_start + self._window

        try:
            events = self._store.find_events_in_window(window_start, window_end)
        except Exception as exc:
            logger.error("Failed to load events in reminder window", error=str(exc))
            return UpcomingEventsResult(success=False, error=str(exc), code=ErrorCode.INFRASTRUCTURE)

        selected = tuple(
            event
            for event in events
            if event.is_active and window_start <= event.date_time < window_end
        )
        logger.debug(
            "Selected events in reminder window",
            window_start=window_start.isoformat(),
            window_end=window_end.isoformat(),
            count=len(selected),
        )
        return UpcomingEventsResult(success=True, events=selected)

    def select_next_hour(self) -> UpcomingEventsResult:
        """Return projections of active events starting within the next window."""
        now = self._clock()
        window_end = now + self._window

        try:
            events = self._store.find_all_events()
        except Exception as exc:
            logger.error("Failed to load upcoming events", error=str(exc))
            return UpcomingEventsResult(success=False, error=str(exc), code=ErrorCode.INFRASTRUCTURE)

        upcoming = tuple(
            UpcomingEvent.from_event(event)
            for event in events
            if event.is_active and now <= event.date_time <= window_end
        )
        return UpcomingEventsResult(success=True, events=upcoming)
