"""Notifier interface for outbound text messages."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from events.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class OutboundMessage:
    phone_number: str
    message: str


@dataclass(frozen=True)
class SendResult:
    """Outcome of a single message send."""

    success: bool
    message_id: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class BulkSendResult:
    """Per-batch counts of a bulk send."""

    successful: int
    failed: int
    results: tuple[SendResult, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return self.successful + self.failed


class Notifier(ABC):
    """Sends text messages to phone numbers."""

    @abstractmethod
    def send(self, phone_number: str, text: str) -> SendResult:
        """Send one message. Implementations report failures in the result."""
        ...

    def send_bulk(self, messages: Iterable[OutboundMessage]) -> BulkSendResult:
        """Send many independent messages and count the outcomes.

        A message whose send raises is recorded as failed; the rest of the
        batch is still sent.
        """
        results: list[SendResult] = []
        for outbound in messages:
            try:
                result = self.send(outbound.phone_number, outbound.message)
            except Exception as exc:
                logger.error(
                    "Message send raised", phone_number=outbound.phone_number, error=str(exc)
                )
                result = SendResult(success=False, error=str(exc))
            results.append(result)

        successful = sum(1 for result in results if result.success)
        return BulkSendResult(
            successful=successful,
            failed=len(results) - successful,
            results=tuple(results),
        )
