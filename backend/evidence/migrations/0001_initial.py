import uuid

import django.db.models.deletion
import django.utils.timezone
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
            name="Evidence",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("evidence_number", models.CharField(max_length=100, verbose_name="Evidence Number")),
                ("description", models.TextField(verbose_name="Description")),
                ("type", models.CharField(choices=[("physical", "Physical"), ("digital", "Digital"), ("documentary", "Documentary"), ("testimonial", "Testimonial"), ("biological", "Biological"), ("trace", "Trace")], db_index=True, max_length=20, verbose_name="Type")),
                ("location_found", models.CharField(blank=True, default="", max_length=255, verbose_name="Location Found")),
                ("date_collected", models.DateField(default=django.utils.timezone.localdate, verbose_name="Date Collected")),
                ("collected_by", models.CharField(blank=True, default="", max_length=255, verbose_name="Collected By")),
                ("chain_of_custody", models.TextField(blank=True, default="", verbose_name="Chain of Custody")),
                ("storage_location", models.CharField(blank=True, default="", max_length=255, verbose_name="Storage Location")),
                ("status", models.CharField(choices=[("in_storage", "In Storage"), ("in_lab", "In Lab"), ("released", "Released"), ("disposed", "Disposed")], default="in_storage", max_length=20, verbose_name="Status")),
                ("case", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="evidence", to="cases.case", verbose_name="Case")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(class)s_records", to=settings.AUTH_USER_MODEL, verbose_name="Owning Account")),
            ],
            options={
                "verbose_name": "Evidence",
                "verbose_name_plural": "Evidence",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("type__in", ["physical", "digital", "documentary", "testimonial", "biological", "trace"])), name="evidence_type_valid"),
                    models.CheckConstraint(condition=models.Q(("status__in", ["in_storage", "in_lab", "released", "disposed"])), name="evidence_status_valid"),
                ],
            },
        ),
        migrations.CreateModel(
            name="LabReport",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("report_number", models.CharField(max_length=100, verbose_name="Report Number")),
                ("analysis_type", models.CharField(max_length=100, verbose_name="Analysis Type")),
                ("analysis_result", models.TextField(verbose_name="Analysis Result")),
                ("lab_tech_name", models.CharField(max_length=255, verbose_name="Lab Technician")),
                ("lab_name", models.CharField(blank=True, default="", max_length=255, verbose_name="Laboratory")),
                ("date_submitted", models.DateField(default=django.utils.timezone.localdate, verbose_name="Date Submitted")),
                ("date_completed", models.DateField(blank=True, null=True, verbose_name="Date Completed")),
                ("status", models.CharField(choices=[("pending", "Pending"), ("in_progress", "In Progress"), ("completed", "Completed"), ("inconclusive", "Inconclusive")], db_index=True, default="pending", max_length=20, verbose_name="Status")),
                ("notes", models.TextField(blank=True, default="", verbose_name="Notes")),
                ("evidence", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="lab_reports", to="evidence.evidence", verbose_name="Evidence")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="%(class)s_records", to=settings.AUTH_USER_MODEL, verbose_name="Owning Account")),
            ],
            options={
                "verbose_name": "Lab Report",
                "verbose_name_plural": "Lab Reports",
                "ordering": ["-created_at"],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("status__in", ["pending", "in_progress", "completed", "inconclusive"])), name="labreport_status_valid"),
                    models.CheckConstraint(condition=models.Q(("date_completed__isnull", True), ("date_completed__gte", models.F("date_submitted")), _connector="OR"), name="labreport_completed_after_submitted"),
                ],
            },
        ),
    ]
