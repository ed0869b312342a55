"""Django ORM implementation of the EventStore."""

from datetime import datetime

from django.db import transaction
from django.db.models import Prefetch

from events import models
from events.domain import (
    Capacity,
    Event,
    EventId,
    Registration,
    RegistrationId,
    RegistrationStatus,
)
from events.logging import get_logger
from events.stores.interfaces import EventStore

logger = get_logger(__name__)


def _to_registration(row: models.Registration) -> Registration:
    return Registration(
        id=RegistrationId(row.id),
        event_id=EventId(row.event_id),
        name=row.name,
        email=row.email,
        phone=row.phone,
        status=RegistrationStatus(row.status),
        verified=row.verified,
        verification_code=row.verification_code,
        registered_at=row.registered_at,
    )


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        local=row.local,
        date_time=row.date_time,
        total_slots=Capacity(row.total_slots),
        is_active=row.is_active,
        created_at=row.created_at,
        participants=tuple(_to_registration(p) for p in row.participants.all()),
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def _events(self):
        return models.Event.objects.prefetch_related(
            Prefetch("participants", queryset=models.Registration.objects.order_by("registered_at"))
        )

    def find_event_by_id(self, event_id: EventId) -> Event | None:
        row = self._events().filter(pk=event_id.value).first()
        return _to_event(row) if row is not None else None

    def find_all_events(self) -> list[Event]:
        return [_to_event(row) for row in self._events().order_by("date_time")]

    def find_events_in_window(self, start: datetime, end: datetime) -> list[Event]:
        rows = self._events().filter(
            is_active=True, date_time__gte=start, date_time__lt=end
        ).order_by("date_time")
        return [_to_event(row) for row in rows]

    def mark_participant_verified_and_active(
        self, event_id: EventId, participant_id: RegistrationId
    ) -> bool:
        # The event row lock serialises concurrent verifications of the same
        # event, so the seat count and the update form one unit.
        with transaction.atomic():
            event = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
            if event is None:
                return False

            active = event.participants.filter(status=models.Registration.Status.ACTIVE).count()
            if active >= event.total_slots:
                logger.warning(
                    "Verification rejected at store, event full",
                    event_id=str(event_id),
                    participant_id=str(participant_id),
                )
                return False

            updated = models.Registration.objects.filter(
                pk=participant_id.value,
                event_id=event_id.value,
                status=models.Registration.Status.PENDING,
                verified=False,
            ).update(status=models.Registration.Status.ACTIVE, verified=True)
            return updated == 1

    def find_registrations_by_event_id(self, event_id: EventId) -> list[Registration]:
        rows = models.Registration.objects.filter(event_id=event_id.value).order_by("registered_at")
        return [_to_registration(row) for row in rows]
