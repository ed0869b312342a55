"""Run the hourly reminder scheduler in the foreground until interrupted."""

import signal
import threading

from django.core.management.base import BaseCommand

from events.dependencies import build_reminder_scheduler
from events.logging import get_logger

logger = get_logger(__name__)


class Command(BaseCommand):
    help = "Start the recurring event reminder scheduler."

    def handle(self, *args, **options):
        scheduler = build_reminder_scheduler()
        shutdown = threading.Event()

        def _request_shutdown(signum, frame):
            logger.info("Shutdown requested", signal=signal.Signals(signum).name)
            shutdown.set()

        signal.signal(signal.SIGINT, _request_shutdown)
        signal.signal(signal.SIGTERM, _request_shutdown)

        scheduler.start()
        try:
            shutdown.wait()
        finally:
            scheduler.stop(wait=True)
