"""
Accounts app models.

Defines the custom ``User`` (the authenticated account) and its
one-to-one ``Profile``.  The profile is provisioned by
``ProfileProvisioningService`` as an explicit step of registration; the
``OneToOneField`` makes a second profile for the same account impossible.
"""

import uuid

from django.conf import settings
from django.contrib.auth.models import AbstractUser
from django.db import models

from core.models import TimeStampedModel

DEFAULT_PROFILE_ROLE = "investigator"


class User(AbstractUser):
    """
    Custom user model — the authenticated account that owns records.

    Login is supported via either ``username`` or ``email`` together with
    the password (see ``accounts.backends.MultiFieldAuthBackend``).
    """

    email = models.EmailField(
        unique=True,
        verbose_name="Email Address",
    )

    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return self.username


class Profile(TimeStampedModel):
    """
    Display information for an account.

    Visible only to its own account; every other record type is shared
    across the workspace.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
        verbose_name="Account",
    )
    full_name = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Full Name",
    )
    role = models.CharField(
        max_length=50,
        default=DEFAULT_PROFILE_ROLE,
        verbose_name="Role",
    )

    class Meta:
        verbose_name = "Profile"
        verbose_name_plural = "Profiles"
        ordering = ["-created_at"]

    def __str__(self):
        return self.full_name or f"Profile of {self.user}"
