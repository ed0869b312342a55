"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import Capacity, EventId, RegistrationId, RegistrationStatus


@dataclass(frozen=True)
class Registration:
    """Domain representation of an event participant.

    ``event_id`` is a lookup reference only; the owning Event holds the
    authoritative participant list.
    """

    id: RegistrationId
    event_id: EventId
    name: str
    email: str
    phone: str
    status: RegistrationStatus
    verified: bool
    verification_code: str
    registered_at: datetime

    @property
    def is_pending(self) -> bool:
        return self.status is RegistrationStatus.PENDING

    @property
    def is_active(self) -> bool:
        return self.status is RegistrationStatus.ACTIVE

    def hours_since_registration(self, now: datetime) -> float:
        return (now - self.registered_at).total_seconds() / 3600


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event with its embedded participants."""

    id: EventId
    title: str
    description: str
    local: str
    date_time: datetime
    total_slots: Capacity
    is_active: bool
    created_at: datetime
    participants: tuple[Registration, ...] = ()

    def active_participant_count(self) -> int:
        return sum(1 for participant in self.participants if participant.is_active)

    def has_available_slots(self) -> bool:
        return self.active_participant_count() < self.total_slots.value

    def find_participant(self, participant_id: RegistrationId) -> Registration | None:
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        return None


@dataclass(frozen=True)
class UpcomingEvent:
    """Reduced projection of an Event used for near-term reminders."""

    id: EventId
    title: str
    description: str
    local: str
    date_time: datetime
    participants: tuple[Registration, ...] = ()

    @classmethod
    def from_event(cls, event: Event) -> "UpcomingEvent":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            local=event.local,
            date_time=event.date_time,
            participants=event.participants,
        )
