"""Serializers for request input and service results."""

from rest_framework import serializers


class VerifyRegistrationSerializer(serializers.Serializer):
    """Body of a verification request."""

    verificationCode = serializers.CharField(
        source="verification_code",
        trim_whitespace=False,
        allow_blank=True,
        allow_null=True,
        required=False,
    )


class SendRemindersQuerySerializer(serializers.Serializer):
    """Query string of a manual reminder dispatch."""

    hoursAhead = serializers.FloatField(source="hours_ahead", min_value=0, required=False)


class VerificationResultSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField(required=False)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        return {key: value for key, value in data.items() if value is not None}


class EventDispatchDetailSerializer(serializers.Serializer):
    eventId = serializers.CharField(source="event_id")
    eventTitle = serializers.CharField(source="event_title")
    participantsCount = serializers.IntegerField(source="participants_count")
    messagesSent = serializers.IntegerField(source="messages_sent")
    messagesFailed = serializers.IntegerField(source="messages_failed")


class DispatchResultSerializer(serializers.Serializer):
    """Serializer for the aggregate of a reminder dispatch."""

    success = serializers.BooleanField()
    message = serializers.CharField()
    data = serializers.SerializerMethodField()

    def get_data(self, instance) -> dict:
        return {
            "eventsProcessed": instance.events_processed,
            "messagesSent": instance.messages_sent,
            "messagesFailed": instance.messages_failed,
            "details": EventDispatchDetailSerializer(instance.details, many=True).data,
        }
