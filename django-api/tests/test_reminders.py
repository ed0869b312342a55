"""Unit tests for ReminderDispatcher and ReminderService.

Run with: pytest tests/test_reminders.py -v
"""

from datetime import timedelta

import pytest

from conftest import NOW, RecordingNotifier, make_event, make_registration
from events.domain.errors import ErrorCode
from events.services.reminders import ReminderDispatcher, ReminderService
from events.services.upcoming_events import UpcomingEventSelector


def _event_with(names_and_phones, **kwargs):
    event = make_event(**kwargs)
    participants = [make_registration(event.id, name=name, phone=phone) for name, phone in names_and_phones]
    return make_event(event_id=event.id, participants=participants, **kwargs)


class TestReminderDispatcher:
    def test_one_bulk_call_per_event(self, notifier):
        events = [
            _event_with([("John Doe", "11987654321"), ("Jane Smith", "11987654322")], title="First"),
            _event_with([("Bob Johnson", "11987654323")], title="Second"),
        ]

        result = ReminderDispatcher(notifier).dispatch(events)

        assert result.success
        assert result.events_processed == 2
        assert result.messages_sent == 3
        assert result.messages_failed == 0
        assert [len(call) for call in notifier.bulk_calls] == [2, 1]
        assert [detail.event_title for detail in result.details] == ["First", "Second"]

    def test_event_without_participants_issues_no_bulk_call(self, notifier):
        result = ReminderDispatcher(notifier).dispatch([make_event()])

        assert notifier.bulk_calls == []
        assert result.events_processed == 1
        (detail,) = result.details
        assert detail.participants_count == 0
        assert detail.messages_sent == 0
        assert detail.messages_failed == 0

    def test_participants_without_phone_count_as_failed(self, notifier):
        event = _event_with([("John Doe", "11987654321"), ("No Phone", "")])

        result = ReminderDispatcher(notifier).dispatch([event])

        assert [len(call) for call in notifier.bulk_calls] == [2]
        assert result.messages_sent == 1
        assert result.messages_failed == 1
        assert result.details[0].participants_count == 2

    def test_event_whose_participants_all_lack_phones_is_still_sent(self, notifier):
        event = _event_with([("No Phone", ""), ("Also None", "")])

        result = ReminderDispatcher(notifier).dispatch([event])

        assert len(notifier.bulk_calls) == 1
        assert (result.messages_sent, result.messages_failed) == (0, 2)

    def test_partial_failures_are_aggregated(self):
        notifier = RecordingNotifier(failing_numbers={"11987654322", "11987654324"})
        events = [
            _event_with([("A", "11987654321"), ("B", "11987654322")]),
            _event_with([("C", "11987654323"), ("D", "11987654324"), ("E", "11987654325")]),
        ]

        result = ReminderDispatcher(notifier).dispatch(events)

        assert result.success
        assert result.messages_sent == 3
        assert result.messages_failed == 2
        assert [(d.messages_sent, d.messages_failed) for d in result.details] == [(1, 1), (2, 1)]

    def test_bulk_call_that_raises_counts_all_as_failed(self, notifier, monkeypatch):
        def _boom(messages):
            raise RuntimeError("transport down")

        monkeypatch.setattr(notifier, "send_bulk", _boom)
        event = _event_with([("A", "11987654321"), ("B", "11987654322")])

        result = ReminderDispatcher(notifier).dispatch([event])

        assert result.success
        assert result.messages_failed == 2

    def test_no_events(self, notifier):
        result = ReminderDispatcher(notifier).dispatch([])

        assert result.success
        assert result.events_processed == 0

    def test_message_includes_event_details(self, notifier):
        event = _event_with([("John Doe", "11987654321")], date_time=NOW + timedelta(days=1))

        ReminderDispatcher(notifier).dispatch([event])

        message = notifier.bulk_calls[0][0].message
        assert "John Doe" in message
        assert "Test Event" in message
        assert "Test Description" in message
        assert "11/03/2026" in message
        assert "12:00" in message


@pytest.fixture
def service(store, notifier, clock) -> ReminderService:
    selector = UpcomingEventSelector(store, clock=clock)
    return ReminderService(store, selector, ReminderDispatcher(notifier))


class TestReminderService:
    def test_no_upcoming_events(self, service):
        result = service.send_event_reminders()

        assert result.success
        assert result.message == "No upcoming events found"
        assert result.events_processed == 0
        assert result.messages_sent == 0

    def test_sends_reminders_for_default_window(self, service, store, notifier):
        store.add(_event_with([("John Doe", "11987654321")], date_time=NOW + timedelta(hours=24, minutes=30)))
        store.add(_event_with([("Jane Smith", "11987654322")], date_time=NOW + timedelta(hours=3)))

        result = service.send_event_reminders()

        assert result.message == "Reminders sent for 1 event(s)"
        assert result.messages_sent == 1
        assert store.calls.count("find_registrations_by_event_id") == 1

    def test_invalid_hours_ahead(self, service, store):
        result = service.send_event_reminders(-2)

        assert not result.success
        assert result.code is ErrorCode.INVALID_HOURS_AHEAD
        assert store.calls == []

    def test_store_error_is_total_failure(self, service, store):
        store.fail_with = RuntimeError("Database error")

        result = service.send_event_reminders()

        assert not result.success
        assert result.error == "Database error"

    def test_next_hour_pipeline(self, service, store, notifier):
        store.add(_event_with([("John Doe", "11987654321")], date_time=NOW + timedelta(minutes=45)))
        store.add(_event_with([("Jane Smith", "11987654322")], date_time=NOW + timedelta(hours=5)))

        result = service.send_next_hour_reminders()

        assert result.events_processed == 1
        assert notifier.bulk_calls[0][0].phone_number == "11987654321"

    def test_next_hour_store_error(self, service, store):
        store.fail_with = RuntimeError("Database error")

        result = service.send_next_hour_reminders()

        assert not result.success
        assert result.error == "Database error"
