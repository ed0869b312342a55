"""Reminder dispatch: one bulk notifier call per event, aggregated results."""

from collections.abc import Iterable
from dataclasses import replace

from events.domain import Event, UpcomingEvent
from events.domain.errors import ErrorCode
from events.domain.results import DispatchResult, EventDispatchDetail
from events.logging import get_logger
from events.notifiers.interfaces import Notifier, OutboundMessage
from events.services.messages import build_reminder_message
from events.services.upcoming_events import UpcomingEventSelector
from events.stores.interfaces import EventStore

logger = get_logger(__name__)


class ReminderDispatcher:
    """Builds per-participant reminders and submits them per event."""

    def __init__(
        self,
        notifier: Notifier,
        date_format: str = "%d/%m/%Y",
        time_format: str = "%H:%M",
    ) -> None:
        self._notifier = notifier
        self._date_format = date_format
        self._time_format = time_format

    def dispatch(self, events: Iterable[Event | UpcomingEvent]) -> DispatchResult:
        """Send reminders for each event in turn.

        Partial send failures are counted, never raised.
        """
        details = [self._dispatch_event(event) for event in events]
        result = DispatchResult.from_details(details)
        logger.info(
            "Reminder dispatch finished",
            events_processed=result.events_processed,
            sent=result.messages_sent,
            failed=result.messages_failed,
        )
        return result

    def _dispatch_event(self, event: Event | UpcomingEvent) -> EventDispatchDetail:
        detail = EventDispatchDetail(
            event_id=event.id,
            event_title=event.title,
            participants_count=len(event.participants),
        )
        recipients = [
            OutboundMessage(
                phone_number=participant.phone,
                message=build_reminder_message(
                    event, participant, self._date_format, self._time_format
                ),
            )
            for participant in event.participants
        ]
        if not recipients:
            logger.info("No participants to remind for event", event_id=str(event.id))
            return detail

        try:
            sent = self._notifier.send_bulk(recipients)
        except Exception as exc:
            logger.error(
                "Bulk reminder send failed",
                event_id=str(event.id),
                recipients=len(recipients),
                error=str(exc),
            )
            return replace(detail, messages_failed=len(recipients))

        logger.info(
            "Reminders sent for event",
            event_id=str(event.id),
            sent=sent.successful,
            failed=sent.failed,
        )
        return replace(detail, messages_sent=sent.successful, messages_failed=sent.failed)


class ReminderService:
    """Selector + dispatcher pipelines exposed to handlers, commands and the scheduler."""

    def __init__(
        self,
        store: EventStore,
        selector: UpcomingEventSelector,
        dispatcher: ReminderDispatcher,
    ) -> None:
        self._store = store
        self._selector = selector
        self._dispatcher = dispatcher

    def send_event_reminders(self, hours_ahead: float = 24) -> DispatchResult:
        """Remind participants of events starting hours_ahead from now."""
        selection = self._selector.select_reminder_window(hours_ahead)
        if not selection.success:
            return DispatchResult.failure(selection.error, selection.code or ErrorCode.INFRASTRUCTURE)
        if not selection.events:
            return DispatchResult.empty()

        try:
            events = [
                replace(event, participants=tuple(self._store.find_registrations_by_event_id(event.id)))
                for event in selection.events
            ]
        except Exception as exc:
            logger.error("Failed to load event registrations", error=str(exc))
            return DispatchResult.failure(str(exc))

        return self._dispatcher.dispatch(events)

    def send_next_hour_reminders(self) -> DispatchResult:
        """Remind participants of events starting within the next hour."""
        selection = self._selector.select_next_hour()
        if not selection.success:
            return DispatchResult.failure(selection.error, selection.code or ErrorCode.INFRASTRUCTURE)
        if not selection.events:
            return DispatchResult.empty()
        return self._dispatcher.dispatch(selection.events)
