"""Typed access to the ``REMINDERS`` and ``TWILIO`` Django settings."""

from dataclasses import dataclass
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULTS: dict[str, Any] = {
    "VERIFICATION_WINDOW_HOURS": 24,
    "DEFAULT_HOURS_AHEAD": 24,
    "REMINDER_WINDOW_MINUTES": 60,
    "SCHEDULER_INTERVAL_SECONDS": 3600,
    "SCHEDULER_POLL_SECONDS": 60,
    "SCHEDULER_MAX_CONCURRENCY": 2,
    "SCHEDULER_RUN_ON_START": False,
    "DATE_FORMAT": "%d/%m/%Y",
    "TIME_FORMAT": "%H:%M",
    "DEFAULT_COUNTRY_CODE": "55",
}


@dataclass(frozen=True)
class ReminderSettings:
    verification_window_hours: float
    default_hours_ahead: float
    reminder_window_minutes: int
    scheduler_interval_seconds: int
    scheduler_poll_seconds: int
    scheduler_max_concurrency: int
    scheduler_run_on_start: bool
    date_format: str
    time_format: str
    default_country_code: str


@dataclass(frozen=True)
class TwilioSettings:
    account_sid: str | None
    auth_token: str | None
    whatsapp_from: str | None

    @property
    def configured(self) -> bool:
        return bool(self.account_sid and self.auth_token and self.whatsapp_from)


def get_reminder_settings() -> ReminderSettings:
    """
    Merge ``settings.REMINDERS`` over the defaults.

    Raises:
        ImproperlyConfigured: If a window, interval or concurrency value is not positive.
    """
    payload = {**DEFAULTS, **getattr(settings, "REMINDERS", {})}

    reminder_settings = ReminderSettings(
        verification_window_hours=float(payload["VERIFICATION_WINDOW_HOURS"]),
        default_hours_ahead=float(payload["DEFAULT_HOURS_AHEAD"]),
        reminder_window_minutes=int(payload["REMINDER_WINDOW_MINUTES"]),
        scheduler_interval_seconds=int(payload["SCHEDULER_INTERVAL_SECONDS"]),
        scheduler_poll_seconds=int(payload["SCHEDULER_POLL_SECONDS"]),
        scheduler_max_concurrency=int(payload["SCHEDULER_MAX_CONCURRENCY"]),
        scheduler_run_on_start=bool(payload["SCHEDULER_RUN_ON_START"]),
        date_format=payload["DATE_FORMAT"],
        time_format=payload["TIME_FORMAT"],
        default_country_code=str(payload["DEFAULT_COUNTRY_CODE"]),
    )

    for name in (
        "verification_window_hours",
        "reminder_window_minutes",
        "scheduler_interval_seconds",
        "scheduler_poll_seconds",
        "scheduler_max_concurrency",
    ):
        if getattr(reminder_settings, name) <= 0:
            raise ImproperlyConfigured(f"REMINDERS setting {name.upper()} must be positive")
    if reminder_settings.default_hours_ahead < 0:
        raise ImproperlyConfigured("REMINDERS setting DEFAULT_HOURS_AHEAD cannot be negative")

    return reminder_settings


def get_twilio_settings() -> TwilioSettings:
    payload = getattr(settings, "TWILIO", {})
    return TwilioSettings(
        account_sid=payload.get("ACCOUNT_SID"),
        auth_token=payload.get("AUTH_TOKEN"),
        whatsapp_from=payload.get("WHATSAPP_FROM"),
    )
