"""Manual trigger for reminder dispatch, independent of the scheduler."""

import json

from django.core.management.base import BaseCommand, CommandError

from events.conf import get_reminder_settings
from events.dependencies import build_reminder_service


class Command(BaseCommand):
    help = "Send reminders to participants of events starting HOURS_AHEAD hours from now."

    def add_arguments(self, parser):
        parser.add_argument(
            "--hours-ahead",
            type=float,
            default=None,
            help="Look-ahead in hours (default: REMINDERS['DEFAULT_HOURS_AHEAD']).",
        )

    def handle(self, *args, **options):
        hours_ahead = options["hours_ahead"]
        if hours_ahead is None:
            hours_ahead = get_reminder_settings().default_hours_ahead

        result = build_reminder_service().send_event_reminders(hours_ahead)
        if not result.success:
            raise CommandError(result.error)

        self.stdout.write(
            json.dumps(
                {
                    "message": result.message,
                    "eventsProcessed": result.events_processed,
                    "messagesSent": result.messages_sent,
                    "messagesFailed": result.messages_failed,
                }
            )
        )
