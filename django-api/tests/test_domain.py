"""Unit tests for domain primitives and models.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid
from datetime import timedelta

import pytest

from conftest import NOW, make_event, make_registration
from events.domain import Capacity, EventId, RegistrationId, RegistrationStatus
from events.domain.errors import EventNotFoundError, ErrorCode


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        assert Capacity(5).value == 5

    def test_capacity_rejects_zero(self):
        with pytest.raises(ValueError):
            Capacity(0)

    def test_capacity_rejects_negative_value(self):
        with pytest.raises(ValueError):
            Capacity(-1)


class TestIdentifiers:
    """Tests for EventId and RegistrationId value objects."""

    def test_from_string_valid_uuid(self):
        raw = str(uuid.uuid4())
        assert str(EventId.from_string(raw)) == raw
        assert str(RegistrationId.from_string(raw)) == raw

    def test_from_string_invalid_uuid(self):
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestEvent:
    def test_active_participant_count_ignores_pending_and_cancelled(self):
        event = make_event()
        event = make_event(
            event_id=event.id,
            participants=[
                make_registration(event.id, status=RegistrationStatus.ACTIVE, verified=True),
                make_registration(event.id, status=RegistrationStatus.PENDING),
                make_registration(event.id, status=RegistrationStatus.CANCELLED),
            ],
        )
        assert event.active_participant_count() == 1

    def test_has_available_slots_false_when_active_reaches_total(self):
        event = make_event(total_slots=1)
        event = make_event(
            event_id=event.id,
            total_slots=1,
            participants=[make_registration(event.id, status=RegistrationStatus.ACTIVE, verified=True)],
        )
        assert not event.has_available_slots()

    def test_find_participant_by_id(self):
        event_id = EventId(uuid.uuid4())
        first, second = make_registration(event_id), make_registration(event_id)
        event = make_event(event_id=event_id, participants=[first, second])
        assert event.find_participant(second.id) is second
        assert event.find_participant(RegistrationId(uuid.uuid4())) is None


class TestRegistration:
    def test_hours_since_registration(self):
        registration = make_registration(EventId(uuid.uuid4()), registered_at=NOW - timedelta(hours=25))
        assert registration.hours_since_registration(NOW) == pytest.approx(25)


class TestDomainErrors:
    def test_error_carries_code_and_message(self):
        error = EventNotFoundError("abc")
        assert error.code is ErrorCode.EVENT_NOT_FOUND
        assert error.message == "Event not found"
        assert error.event_id == "abc"
        assert str(error) == "EVENT_NOT_FOUND: Event not found"
