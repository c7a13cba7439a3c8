"""
Officers app models.

An ``Officer`` is a roster entry that cases may name as their lead
officer.  Badge numbers are informational and not unique.
"""

from django.db import models

from core.models import OwnedRecord


class Officer(OwnedRecord):
    """A police officer or forensic staff member on the workspace roster."""

    name = models.CharField(
        max_length=255,
        verbose_name="Name",
    )
    rank = models.CharField(
        max_length=100,
        verbose_name="Rank",
    )
    badge_number = models.CharField(
        max_length=50,
        blank=True,
        default="",
        verbose_name="Badge Number",
    )
    contact = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Contact",
    )

    class Meta:
        verbose_name = "Officer"
        verbose_name_plural = "Officers"
        ordering = ["name"]

    def __str__(self):
        return f"{self.rank} {self.name}"
