import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("cases", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Suspect",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, verbose_name="Name")),
                ("age", models.PositiveSmallIntegerField(blank=True, null=True, verbose_name="Age")),
                ("gender", models.CharField(blank=True, default="", max_length=30, verbose_name="Gender")),
                ("address", models.CharField(blank=True, default="", max_length=500, verbose_name="Address")),
                ("phone", models.CharField(blank=True, default="", max_length=50, verbose_name="Phone")),
                ("description", models.TextField(blank=True, default="", verbose_name="Description")),
                ("status", models.CharField(choices=[("suspect", "Suspect"), ("person_of_interest", "Person of Interest"), ("cleared", "Cleared"), ("arrested", "Arrested")], db_index=True, default="suspect", max_length=30, verbose_name="Status")),
                ("case", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="suspects", to="cases.case", verbose_name="Case")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(class)s_records", to=settings.AUTH_USER_MODEL, verbose_name="Owning Account")),
            ],
            options={
                "verbose_name": "Suspect",
                "verbose_name_plural": "Suspects",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("status__in", ["suspect", "person_of_interest", "cleared", "arrested"])), name="suspect_status_valid"),
                    models.CheckConstraint(condition=models.Q(("age__isnull", True), models.Q(("age__gte", 0), ("age__lte", 150)), _connector="OR"), name="suspect_age_range"),
                ],
            },
        ),
    ]
