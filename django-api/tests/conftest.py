"""Pytest configuration and shared fixtures."""

import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events.domain import (
    Capacity,
    Event,
    EventId,
    Registration,
    RegistrationId,
    RegistrationStatus,
)
from events.notifiers.interfaces import Notifier, SendResult
from events.stores.interfaces import EventStore

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime = NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class InMemoryEventStore(EventStore):
    """Event store holding domain events in a dict, keyed by id."""

    def __init__(self, events: list[Event] | None = None):
        self.events: dict[EventId, Event] = {event.id: event for event in events or []}
        self.calls: list[str] = []
        self.fail_with: Exception | None = None
        self.apply_updates = True

    def add(self, event: Event) -> Event:
        self.events[event.id] = event
        return event

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def find_event_by_id(self, event_id):
        self._record("find_event_by_id")
        return self.events.get(event_id)

    def find_all_events(self):
        self._record("find_all_events")
        return sorted(self.events.values(), key=lambda event: event.date_time)

    def find_events_in_window(self, start, end):
        self._record("find_events_in_window")
        return [
            event
            for event in sorted(self.events.values(), key=lambda event: event.date_time)
            if event.is_active and start <= event.date_time < end
        ]

    def mark_participant_verified_and_active(self, event_id, participant_id):
        self._record("mark_participant_verified_and_active")
        event = self.events.get(event_id)
        if event is None or not self.apply_updates:
            return False
        if not event.has_available_slots():
            return False
        participants = []
        applied = False
        for participant in event.participants:
            if participant.id == participant_id and participant.is_pending and not participant.verified:
                participant = replace(participant, status=RegistrationStatus.ACTIVE, verified=True)
                applied = True
            participants.append(participant)
        self.events[event_id] = replace(event, participants=tuple(participants))
        return applied

    def find_registrations_by_event_id(self, event_id):
        self._record("find_registrations_by_event_id")
        event = self.events.get(event_id)
        return list(event.participants) if event else []


class RecordingNotifier(Notifier):
    """Notifier that records messages and fails for configured numbers."""

    def __init__(self, failing_numbers: set[str] | None = None, raise_on_send: Exception | None = None):
        self.sent: list[tuple[str, str]] = []
        self.bulk_calls: list[list] = []
        self.failing_numbers = failing_numbers or set()
        self.raise_on_send = raise_on_send

    def send(self, phone_number, text):
        if self.raise_on_send is not None:
            raise self.raise_on_send
        self.sent.append((phone_number, text))
        if not phone_number:
            return SendResult(success=False, error="missing phone number")
        if phone_number in self.failing_numbers:
            return SendResult(success=False, error="undeliverable")
        return SendResult(success=True, message_id=f"msg-{len(self.sent)}")

    def send_bulk(self, messages):
        messages = list(messages)
        self.bulk_calls.append(messages)
        return super().send_bulk(messages)


def make_registration(
    event_id: EventId,
    name: str = "John Doe",
    phone: str = "11987654321",
    status: RegistrationStatus = RegistrationStatus.PENDING,
    verified: bool = False,
    code: str = "123456",
    registered_at: datetime = NOW,
    registration_id: RegistrationId | None = None,
) -> Registration:
    return Registration(
        id=registration_id or RegistrationId(uuid.uuid4()),
        event_id=event_id,
        name=name,
        email=f"{name.split()[0].lower()}@example.com",
        phone=phone,
        status=status,
        verified=verified,
        verification_code=code,
        registered_at=registered_at,
    )


def make_event(
    title: str = "Test Event",
    date_time: datetime = NOW + timedelta(days=7),
    total_slots: int = 10,
    is_active: bool = True,
    participants: list | None = None,
    event_id: EventId | None = None,
) -> Event:
    return Event(
        id=event_id or EventId(uuid.uuid4()),
        title=title,
        description="Test Description",
        local="Test Location",
        date_time=date_time,
        total_slots=Capacity(total_slots),
        is_active=is_active,
        created_at=NOW - timedelta(days=30),
        participants=tuple(participants or ()),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def utc_time_zone(settings):
    settings.TIME_ZONE = "UTC"
