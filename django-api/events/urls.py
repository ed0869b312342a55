from django.urls import path

from events.handlers import SendEventRemindersView, VerifyRegistrationView

urlpatterns = [
    path(
        "events/<str:event_id>/registrations/<str:participant_id>/verify",
        VerifyRegistrationView.as_view(),
        name="registration-verify",
    ),
    path(
        "notifications/send-event-reminders",
        SendEventRemindersView.as_view(),
        name="send-event-reminders",
    ),
]
