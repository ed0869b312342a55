"""Message text for reminders and registration confirmations."""

from datetime import datetime

from django.utils import timezone

from events.domain import Event, Registration, UpcomingEvent

LOCATION_FALLBACK = "To be announced"


def format_event_date(value: datetime, date_format: str = "%d/%m/%Y") -> str:
    return timezone.localtime(value).strftime(date_format)


def format_event_time(value: datetime, time_format: str = "%H:%M") -> str:
    return timezone.localtime(value).strftime(time_format)


def build_reminder_message(
    event: Event | UpcomingEvent,
    participant: Registration,
    date_format: str = "%d/%m/%Y",
    time_format: str = "%H:%M",
) -> str:
    return (
        f"Hello {participant.name}! 👋\n\n"
        f'Reminder: the event "{event.title}" is coming up!\n\n'
        f"📝 {event.description}\n"
        f"📅 Date: {format_event_date(event.date_time, date_format)}\n"
        f"⏰ Time: {format_event_time(event.date_time, time_format)}\n"
        f"📍 Location: {event.local or LOCATION_FALLBACK}\n\n"
        "See you there! 🎉"
    )


def build_confirmation_message(
    event: Event,
    participant: Registration,
    date_format: str = "%d/%m/%Y",
    time_format: str = "%H:%M",
) -> str:
    return (
        "✅ *Registration confirmed!*\n\n"
        f"Hello {participant.name}! 👋\n\n"
        "Your registration was confirmed successfully.\n\n"
        f"📌 *{event.title}*\n"
        f"📝 {event.description}\n"
        f"📅 Date: {format_event_date(event.date_time, date_format)}\n"
        f"⏰ Time: {format_event_time(event.date_time, time_format)}\n"
        f"📍 Location: {event.local or LOCATION_FALLBACK}\n\n"
        "We look forward to seeing you! 🎉"
    )
