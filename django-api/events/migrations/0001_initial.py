import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("local", models.CharField(blank=True, max_length=255)),
                ("date_time", models.DateTimeField()),
                (
                    "total_slots",
                    models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["date_time"],
                "indexes": [models.Index(fields=["is_active", "date_time"], name="events_even_is_acti_3c1f0e_idx")],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(total_slots__gte=1), name="event_total_slots_positive"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(blank=True, max_length=32)),
                (
                    "status",
                    models.CharField(
                        choices=[("pending", "Pending"), ("active", "Active"), ("cancelled", "Cancelled")],
                        default="pending",
                        max_length=16,
                    ),
                ),
                ("verified", models.BooleanField(default=False)),
                ("verification_code", models.CharField(max_length=32)),
                ("registered_at", models.DateTimeField()),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="participants",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "ordering": ["registered_at"],
                "indexes": [models.Index(fields=["event", "status"], name="events_regi_event_i_8a2d4b_idx")],
            },
        ),
    ]
