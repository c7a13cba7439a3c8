"""
Evidence app models.

``Evidence`` items are collected for a case and removed with it.
``LabReport`` rows record a laboratory analysis of one evidence item and
are removed with that item, so deleting a case reaches them too.
"""

from django.db import models
from django.utils import timezone

from core.models import OwnedRecord


# ────────────────────────────────────────────────────────────────────
# Choice enumerations
# ────────────────────────────────────────────────────────────────────

class EvidenceType(models.TextChoices):
    PHYSICAL = "physical", "Physical"
    DIGITAL = "digital", "Digital"
    DOCUMENTARY = "documentary", "Documentary"
    TESTIMONIAL = "testimonial", "Testimonial"
    BIOLOGICAL = "biological", "Biological"
    TRACE = "trace", "Trace"


class EvidenceStatus(models.TextChoices):
    IN_STORAGE = "in_storage", "In Storage"
    IN_LAB = "in_lab", "In Lab"
    RELEASED = "released", "Released"
    DISPOSED = "disposed", "Disposed"


class LabReportStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    IN_PROGRESS = "in_progress", "In Progress"
    COMPLETED = "completed", "Completed"
    INCONCLUSIVE = "inconclusive", "Inconclusive"


# ────────────────────────────────────────────────────────────────────
# Evidence
# ────────────────────────────────────────────────────────────────────

class Evidence(OwnedRecord):
    """
    An item collected for a case.

    ``chain_of_custody`` is a free-text log kept by investigators.
    """

    case = models.ForeignKey(
        "cases.Case",
        on_delete=models.CASCADE,
        related_name="evidence",
        verbose_name="Case",
    )
    evidence_number = models.CharField(
        max_length=100,
        verbose_name="Evidence Number",
    )
    description = models.TextField(
        verbose_name="Description",
    )
    type = models.CharField(
        max_length=20,
        choices=EvidenceType.choices,
        db_index=True,
        verbose_name="Type",
    )
    location_found = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Location Found",
    )
    date_collected = models.DateField(
        default=timezone.localdate,
        verbose_name="Date Collected",
    )
    collected_by = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Collected By",
    )
    chain_of_custody = models.TextField(
        blank=True,
        default="",
        verbose_name="Chain of Custody",
    )
    storage_location = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Storage Location",
    )
    status = models.CharField(
        max_length=20,
        choices=EvidenceStatus.choices,
        default=EvidenceStatus.IN_STORAGE,
        verbose_name="Status",
    )

    class Meta:
        verbose_name = "Evidence"
        verbose_name_plural = "Evidence"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(type__in=EvidenceType.values),
                name="evidence_type_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(status__in=EvidenceStatus.values),
                name="evidence_status_valid",
            ),
        ]

    def __str__(self):
        return f"{self.evidence_number} ({self.get_type_display()})"


# ────────────────────────────────────────────────────────────────────
# Lab report
# ────────────────────────────────────────────────────────────────────

class LabReport(OwnedRecord):
    """Result of a laboratory analysis performed on one evidence item."""

    evidence = models.ForeignKey(
        Evidence,
        on_delete=models.CASCADE,
        related_name="lab_reports",
        verbose_name="Evidence",
    )
    report_number = models.CharField(
        max_length=100,
        verbose_name="Report Number",
    )
    analysis_type = models.CharField(
        max_length=100,
        verbose_name="Analysis Type",
    )
    analysis_result = models.TextField(
        verbose_name="Analysis Result",
    )
    lab_tech_name = models.CharField(
        max_length=255,
        verbose_name="Lab Technician",
    )
    lab_name = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Laboratory",
    )
    date_submitted = models.DateField(
        default=timezone.localdate,
        verbose_name="Date Submitted",
    )
    date_completed = models.DateField(
        null=True,
        blank=True,
        verbose_name="Date Completed",
    )
    status = models.CharField(
        max_length=20,
        choices=LabReportStatus.choices,
        default=LabReportStatus.PENDING,
        db_index=True,
        verbose_name="Status",
    )
    notes = models.TextField(
        blank=True,
        default="",
        verbose_name="Notes",
    )

    class Meta:
        verbose_name = "Lab Report"
        verbose_name_plural = "Lab Reports"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=LabReportStatus.values),
                name="labreport_status_valid",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(date_completed__isnull=True)
                    | models.Q(date_completed__gte=models.F("date_submitted"))
                ),
                name="labreport_completed_after_submitted",
            ),
        ]

    def __str__(self):
        return f"{self.report_number}: {self.analysis_type}"
