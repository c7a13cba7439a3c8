"""
Suspects app models.

A ``Suspect`` is a person named in exactly one case and is removed with
that case.
"""

from django.db import models

from core.models import OwnedRecord


class SuspectStatus(models.TextChoices):
    SUSPECT = "suspect", "Suspect"
    PERSON_OF_INTEREST = "person_of_interest", "Person of Interest"
    CLEARED = "cleared", "Cleared"
    ARRESTED = "arrested", "Arrested"


MIN_AGE = 0
MAX_AGE = 150


class Suspect(OwnedRecord):
    """A person of interest attached to a case."""

    case = models.ForeignKey(
        "cases.Case",
        on_delete=models.CASCADE,
        related_name="suspects",
        verbose_name="Case",
    )
    name = models.CharField(
        max_length=255,
        verbose_name="Name",
    )
    age = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        verbose_name="Age",
    )
    gender = models.CharField(
        max_length=30,
        blank=True,
        default="",
        verbose_name="Gender",
    )
    address = models.CharField(
        max_length=500,
        blank=True,
        default="",
        verbose_name="Address",
    )
    phone = models.CharField(
        max_length=50,
        blank=True,
        default="",
        verbose_name="Phone",
    )
    description = models.TextField(
        blank=True,
        default="",
        verbose_name="Description",
    )
    status = models.CharField(
        max_length=30,
        choices=SuspectStatus.choices,
        default=SuspectStatus.SUSPECT,
        db_index=True,
        verbose_name="Status",
    )

    class Meta:
        verbose_name = "Suspect"
        verbose_name_plural = "Suspects"
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(status__in=SuspectStatus.values),
                name="suspect_status_valid",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(age__isnull=True)
                    | models.Q(age__gte=MIN_AGE, age__lte=MAX_AGE)
                ),
                name="suspect_age_range",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.get_status_display()})"
