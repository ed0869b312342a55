from events.notifiers.interfaces import BulkSendResult, Notifier, OutboundMessage, SendResult

__all__ = ["Notifier", "OutboundMessage", "SendResult", "BulkSendResult"]
