"""Tests for the Notifier bulk contract and the Twilio WhatsApp adapter."""

from unittest.mock import MagicMock

import pytest
import requests
from twilio.base.exceptions import TwilioRestException

from events.notifiers.interfaces import Notifier, OutboundMessage, SendResult
from events.notifiers.twilio_notifier import InvalidPhoneNumberError, TwilioWhatsAppNotifier


class FlakyNotifier(Notifier):
    def send(self, phone_number, text):
        if phone_number == "raise":
            raise ConnectionError("connection reset")
        return SendResult(success=phone_number != "fail")


class TestSendBulk:
    def test_counts_successes_and_failures(self):
        result = FlakyNotifier().send_bulk(
            [
                OutboundMessage("ok", "hi"),
                OutboundMessage("fail", "hi"),
                OutboundMessage("raise", "hi"),
                OutboundMessage("ok", "hi"),
            ]
        )

        assert result.successful == 2
        assert result.failed == 2
        assert result.total == 4
        assert result.results[2].error == "connection reset"

    def test_empty_batch(self):
        result = FlakyNotifier().send_bulk([])

        assert (result.successful, result.failed) == (0, 0)


@pytest.fixture
def client() -> MagicMock:
    client = MagicMock()
    client.messages.create.return_value = MagicMock(sid="SM123")
    return client


class TestTwilioWhatsAppNotifier:
    def test_sends_through_twilio_client(self, client):
        notifier = TwilioWhatsAppNotifier("AC1", "token", "+14155238886", client=client)

        result = notifier.send("(11) 98765-4321", "hello")

        assert result == SendResult(success=True, message_id="SM123")
        client.messages.create.assert_called_once_with(
            body="hello",
            from_="whatsapp:+14155238886",
            to="whatsapp:+5511987654321",
        )

    def test_twilio_error_is_a_failed_send(self, client):
        client.messages.create.side_effect = TwilioRestException(400, "/Messages", "Invalid 'To'")
        notifier = TwilioWhatsAppNotifier("AC1", "token", "+14155238886", client=client)

        result = notifier.send("5511987654321", "hello")

        assert not result.success
        assert "Invalid 'To'" in result.error

    def test_transport_error_is_a_failed_send(self, client):
        client.messages.create.side_effect = requests.ConnectionError("connection reset")
        notifier = TwilioWhatsAppNotifier("AC1", "token", "+14155238886", client=client)

        result = notifier.send("5511987654321", "hello")

        assert not result.success
        assert "connection reset" in result.error

    def test_invalid_phone_is_a_failed_send(self, client):
        notifier = TwilioWhatsAppNotifier("AC1", "token", "+14155238886", client=client)

        result = notifier.send("12345", "hello")

        assert not result.success
        client.messages.create.assert_not_called()

    def test_mock_mode_without_credentials(self):
        notifier = TwilioWhatsAppNotifier(None, None, None)

        result = notifier.send("11987654321", "hello")

        assert notifier.is_mock
        assert result.success
        assert result.message_id.startswith("mock-")

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("11987654321", "5511987654321"),
            ("1187654321", "551187654321"),
            ("+55 11 98765-4321", "5511987654321"),
            ("441234567890", "441234567890"),
        ],
    )
    def test_format_phone_number(self, raw, expected):
        assert TwilioWhatsAppNotifier(None, None, None).format_phone_number(raw) == expected

    def test_format_phone_number_too_short(self):
        with pytest.raises(InvalidPhoneNumberError):
            TwilioWhatsAppNotifier(None, None, None).format_phone_number("123")

    @pytest.mark.parametrize("raw", ["55119876543210", "+1 234 5678 901 234"])
    def test_format_phone_number_too_long(self, raw):
        with pytest.raises(InvalidPhoneNumberError, match="Invalid phone number format"):
            TwilioWhatsAppNotifier(None, None, None).format_phone_number(raw)

    def test_overlong_phone_is_a_failed_send(self, client):
        notifier = TwilioWhatsAppNotifier("AC1", "token", "+14155238886", client=client)

        result = notifier.send("55119876543210", "hello")

        assert not result.success
        client.messages.create.assert_not_called()
