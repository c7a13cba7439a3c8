"""
Cases app models.

A ``Case`` is the root record of an investigation.  Evidence and
suspects hang off it and are removed with it; the lead officer is an
optional roster reference that is cleared if the officer is deleted.

Enumerated columns are guarded by database check constraints, so a value
outside its domain is rejected by the store whichever path wrote it.
"""

from django.db import models
from django.utils import timezone

from core.models import OwnedRecord


# ────────────────────────────────────────────────────────────────────
# Choice enumerations
# ────────────────────────────────────────────────────────────────────

class CaseStatus(models.TextChoices):
    OPEN = "open", "Open"
    UNDER_INVESTIGATION = "under_investigation", "Under Investigation"
    PENDING = "pending", "Pending"
    CLOSED = "closed", "Closed"


class CasePriority(models.TextChoices):
    LOW = "low", "Low"
    MEDIUM = "medium", "Medium"
    HIGH = "high", "High"
    CRITICAL = "critical", "Critical"


# ────────────────────────────────────────────────────────────────────
# Case
# ────────────────────────────────────────────────────────────────────

class Case(OwnedRecord):
    """
    An investigation file.

    ``date_opened`` defaults to the current local date; ``date_closed``
    may be left empty and, when set, may not precede ``date_opened``.
    """

    case_number = models.CharField(
        max_length=100,
        verbose_name="Case Number",
    )
    title = models.CharField(
        max_length=255,
        verbose_name="Title",
    )
    description = models.TextField(
        blank=True,
        default="",
        verbose_name="Description",
    )
    status = models.CharField(
        max_length=30,
        choices=CaseStatus.choices,
        default=CaseStatus.OPEN,
        db_index=True,
        verbose_name="Status",
    )
    priority = models.CharField(
        max_length=20,
        choices=CasePriority.choices,
        default=CasePriority.MEDIUM,
        verbose_name="Priority",
    )
    date_opened = models.DateField(
        default=timezone.localdate,
        verbose_name="Date Opened",
    )
    date_closed = models.DateField(
        null=True,
        blank=True,
        verbose_name="Date Closed",
    )
    location = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Location",
    )
    lead_officer = models.ForeignKey(
        "officers.Officer",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="led_cases",
        verbose_name="Lead Officer",
    )

    class Meta:
        verbose_name = "Case"
        verbose_name_plural = "Cases"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=CaseStatus.values),
                name="case_status_valid",
            ),
            models.CheckConstraint(
                condition=models.Q(priority__in=CasePriority.values),
                name="case_priority_valid",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(date_closed__isnull=True)
                    | models.Q(date_closed__gte=models.F("date_opened"))
                ),
                name="case_closed_after_opened",
            ),
        ]

    def __str__(self):
        return f"{self.case_number}: {self.title}"
