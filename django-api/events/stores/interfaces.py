"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from events.domain import Event, EventId, Registration, RegistrationId


class EventStore(ABC):
    """Interface for event and registration persistence operations."""

    @abstractmethod
    def find_event_by_id(self, event_id: EventId) -> Event | None:
        """Return an event with its participants, or None if not found."""
        ...

    @abstractmethod
    def find_all_events(self) -> list[Event]:
        """Return all events ordered by date_time ascending."""
        ...

    @abstractmethod
    def find_events_in_window(self, start: datetime, end: datetime) -> list[Event]:
        """Return active events with start <= date_time < end."""
        ...

    @abstractmethod
    def mark_participant_verified_and_active(
        self, event_id: EventId, participant_id: RegistrationId
    ) -> bool:
        """Atomically activate a pending, unverified participant.

        Returns True only if the update applied.
        """
        ...

    @abstractmethod
    def find_registrations_by_event_id(self, event_id: EventId) -> list[Registration]:
        """Return the registrations of an event in registration order."""
        ...
