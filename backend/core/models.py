"""
Core app models.

Provides the abstract base models shared by every record table.
"""

import uuid

from django.conf import settings
from django.db import models


class TimeStampedModel(models.Model):
    """
    Abstract base model that provides self-updating ``created_at`` and
    ``updated_at`` timestamp fields for every concrete child model.
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name="Created At",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Updated At",
    )

    class Meta:
        abstract = True


class OwnedRecord(TimeStampedModel):
    """
    Abstract base for every workspace record (officers, cases, suspects,
    evidence, lab reports).

    ``user`` is the *owning account*: the identity that created the row
    and the only one allowed to modify or delete it.  Read access is
    governed by ``core.domain.access``.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="%(class)s_records",
        verbose_name="Owning Account",
    )

    class Meta:
        abstract = True
        ordering = ["-created_at"]
