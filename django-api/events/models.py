"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.core.validators import MinValueValidator
from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    local = models.CharField(max_length=255, blank=True)
    date_time = models.DateTimeField()
    total_slots = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["date_time"]
        indexes = [
            models.Index(fields=["is_active", "date_time"], name="events_even_is_acti_3c1f0e_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(total_slots__gte=1), name="event_total_slots_positive"),
        ]

    def __str__(self) -> str:
        return self.title


class Registration(models.Model):
    """Persistence model for event participants."""

    class Status(models.TextChoices):
        PENDING = "pending"
        ACTIVE = "active"
        CANCELLED = "cancelled"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="participants")
    name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=32, blank=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    verified = models.BooleanField(default=False)
    verification_code = models.CharField(max_length=32)
    registered_at = models.DateTimeField()

    class Meta:
        ordering = ["registered_at"]
        indexes = [
            models.Index(fields=["event", "status"], name="events_regi_event_i_8a2d4b_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.event.title}"
