"""Construction of stores, notifiers and services from Django settings."""

from datetime import timedelta

from events.conf import get_reminder_settings, get_twilio_settings
from events.logging import get_logger
from events.notifiers.interfaces import Notifier
from events.notifiers.twilio_notifier import TwilioWhatsAppNotifier
from events.scheduling.scheduler import ReminderScheduler
from events.services.reminders import ReminderDispatcher, ReminderService
from events.services.upcoming_events import UpcomingEventSelector
from events.services.verification import RegistrationVerifier
from events.stores.django_store import DjangoEventStore
from events.stores.interfaces import EventStore

logger = get_logger(__name__)


def get_event_store() -> EventStore:
    return DjangoEventStore()


def get_notifier() -> Notifier:
    twilio = get_twilio_settings()
    if not twilio.configured:
        logger.warning("Twilio credentials missing, WhatsApp notifier running in mock mode")
    return TwilioWhatsAppNotifier(
        account_sid=twilio.account_sid,
        auth_token=twilio.auth_token,
        from_number=twilio.whatsapp_from,
        default_country_code=get_reminder_settings().default_country_code,
    )


def build_registration_verifier(
    store: EventStore | None = None, notifier: Notifier | None = None
) -> RegistrationVerifier:
    config = get_reminder_settings()
    return RegistrationVerifier(
        store=store or get_event_store(),
        notifier=notifier or get_notifier(),
        expiry_hours=config.verification_window_hours,
        date_format=config.date_format,
        time_format=config.time_format,
    )


def build_reminder_service(
    store: EventStore | None = None, notifier: Notifier | None = None
) -> ReminderService:
    config = get_reminder_settings()
    store = store or get_event_store()
    selector = UpcomingEventSelector(
        store, window=timedelta(minutes=config.reminder_window_minutes)
    )
    dispatcher = ReminderDispatcher(
        notifier or get_notifier(),
        date_format=config.date_format,
        time_format=config.time_format,
    )
    return ReminderService(store, selector, dispatcher)


def build_reminder_scheduler(service: ReminderService | None = None) -> ReminderScheduler:
    config = get_reminder_settings()
    service = service or build_reminder_service()
    return ReminderScheduler(
        job=service.send_next_hour_reminders,
        interval=config.scheduler_interval_seconds,
        poll_interval=config.scheduler_poll_seconds,
        max_concurrency=config.scheduler_max_concurrency,
        run_on_start=config.scheduler_run_on_start,
    )
