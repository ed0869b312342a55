"""WhatsApp notifier backed by the Twilio messaging API."""

import re
import time

import requests
from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from events.logging import get_logger
from events.notifiers.interfaces import Notifier, SendResult

logger = get_logger(__name__)

_NON_DIGITS = re.compile(r"\D")


class InvalidPhoneNumberError(ValueError):
    """Raised when a phone number cannot be normalised."""


class TwilioWhatsAppNotifier(Notifier):
    """High level helper around the Twilio client for WhatsApp messages.

    Without credentials the notifier runs in mock mode: messages are logged
    and reported as sent.
    """

    def __init__(
        self,
        account_sid: str | None,
        auth_token: str | None,
        from_number: str | None,
        default_country_code: str = "55",
        client: Client | None = None,
    ) -> None:
        self.from_number = from_number
        self.default_country_code = default_country_code
        self.client = client
        if self.client is None and account_sid and auth_token and from_number:
            self.client = Client(account_sid, auth_token)

    @property
    def is_mock(self) -> bool:
        return self.client is None

    def format_phone_number(self, phone: str) -> str:
        """Return the number as digits with a country code prefix."""
        cleaned = _NON_DIGITS.sub("", phone or "")
        if len(cleaned) < 10:
            raise InvalidPhoneNumberError(f"Invalid phone number: {phone} (too short)")
        if not cleaned.startswith(self.default_country_code) and len(cleaned) <= 11:
            cleaned = self.default_country_code + cleaned
        if not 12 <= len(cleaned) <= 13:
            raise InvalidPhoneNumberError(f"Invalid phone number format: {phone}")
        return cleaned

    def send(self, phone_number: str, text: str) -> SendResult:
        try:
            formatted = self.format_phone_number(phone_number)
        except InvalidPhoneNumberError as exc:
            logger.warning("Skipping message to invalid phone number", error=str(exc))
            return SendResult(success=False, error=str(exc))

        if self.is_mock:
            logger.info("WhatsApp mock send", to=formatted, body=text)
            return SendResult(success=True, message_id=f"mock-{int(time.time() * 1000)}")

        try:
            message = self.client.messages.create(
                body=text,
                from_=f"whatsapp:{self.from_number}",
                to=f"whatsapp:+{formatted}",
            )
        except (TwilioException, requests.RequestException) as exc:
            logger.error("WhatsApp message failed", to=formatted, error=str(exc))
            return SendResult(success=False, error=str(exc))

        logger.info("WhatsApp message sent", to=formatted, message_sid=message.sid)
        return SendResult(success=True, message_id=message.sid)
