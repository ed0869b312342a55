from events.domain.models import Event, Registration, UpcomingEvent
from events.domain.value_objects import Capacity, EventId, RegistrationId, RegistrationStatus

__all__ = [
    "Event",
    "Registration",
    "UpcomingEvent",
    "EventId",
    "RegistrationId",
    "RegistrationStatus",
    "Capacity",
]
