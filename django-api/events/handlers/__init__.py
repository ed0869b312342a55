from events.handlers.views import SendEventRemindersView, VerifyRegistrationView

__all__ = ["SendEventRemindersView", "VerifyRegistrationView"]
