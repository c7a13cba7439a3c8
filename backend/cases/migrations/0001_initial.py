import uuid

import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("officers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Case",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("case_number", models.CharField(max_length=100, verbose_name="Case Number")),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("description", models.TextField(blank=True, default="", verbose_name="Description")),
                ("status", models.CharField(choices=[("open", "Open"), ("under_investigation", "Under Investigation"), ("pending", "Pending"), ("closed", "Closed")], db_index=True, default="open", max_length=30, verbose_name="Status")),
                ("priority", models.CharField(choices=[("low", "Low"), ("medium", "Medium"), ("high", "High"), ("critical", "Critical")], default="medium", max_length=20, verbose_name="Priority")),
                ("date_opened", models.DateField(default=django.utils.timezone.localdate, verbose_name="Date Opened")),
                ("date_closed", models.DateField(blank=True, null=True, verbose_name="Date Closed")),
                ("location", models.CharField(blank=True, default="", max_length=255, verbose_name="Location")),
                ("lead_officer", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="led_cases", to="officers.officer", verbose_name="Lead Officer")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(class)s_records", to=settings.AUTH_USER_MODEL, verbose_name="Owning Account")),
            ],
            options={
                "verbose_name": "Case",
                "verbose_name_plural": "Cases",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("status__in", ["open", "under_investigation", "pending", "closed"])), name="case_status_valid"),
                    models.CheckConstraint(condition=models.Q(("priority__in", ["low", "medium", "high", "critical"])), name="case_priority_valid"),
                    models.CheckConstraint(condition=models.Q(("date_closed__isnull", True), ("date_closed__gte", models.F("date_opened")), _connector="OR"), name="case_closed_after_opened"),
                ],
            },
        ),
    ]
