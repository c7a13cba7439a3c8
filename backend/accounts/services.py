"""
Accounts Service Layer.

This module is the **single source of truth** for all business logic
within the ``accounts`` app.  Views must remain *thin*: they validate
input through serializers, call a service function / method, and
return the result wrapped in a DRF ``Response``.

Architecture
------------
- ``UserRegistrationService``     — account creation + profile provisioning.
- ``ProfileProvisioningService``  — the explicit post-registration step
                                    that creates the account's profile.
- ``AuthenticationService``       — username/email login + JWT issuance.
- ``ProfileService``              — owner-scoped profile reads and updates.
"""

from __future__ import annotations

import logging
from typing import Any

from django.contrib.auth import authenticate as django_authenticate
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
from django.db.models import QuerySet
from rest_framework_simplejwt.tokens import RefreshToken

from core.domain.access import Operation, authorize, scope_visible
from core.domain.exceptions import Conflict, NotFound
from core.domain.transactions import apply_changes

from .models import DEFAULT_PROFILE_ROLE, Profile

User = get_user_model()

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Profile Provisioning
# ═══════════════════════════════════════════════════════════════════


class ProfileProvisioningService:
    """
    Creates the single ``Profile`` row that belongs to a new account.

    Called explicitly by ``UserRegistrationService`` right after the
    account is inserted.  There is no signal or trigger: the side effect
    is visible at the call site.
    """

    @staticmethod
    def provision(
        user: User,
        *,
        full_name: str = "",
        role: str = DEFAULT_PROFILE_ROLE,
    ) -> Profile:
        """
        Insert the profile for ``user``.

        Raises
        ------
        core.domain.exceptions.Conflict
            If the account already has a profile.  The unique constraint
            on ``Profile.user`` is the guard against double provisioning
            (e.g. a retried signup).
        """
        try:
            with transaction.atomic():
                profile = Profile.objects.create(
                    user=user,
                    full_name=full_name or "",
                    role=role or DEFAULT_PROFILE_ROLE,
                )
        except IntegrityError:
            logger.warning("Duplicate profile provisioning for user %s", user.pk)
            raise Conflict("A profile already exists for this account.")

        logger.info("Profile %s provisioned for user %s", profile.pk, user.pk)
        return profile


# ═══════════════════════════════════════════════════════════════════
#  Registration Service
# ═══════════════════════════════════════════════════════════════════


class UserRegistrationService:
    """Encapsulates the sign-up flow."""

    @staticmethod
    def register_user(validated_data: dict[str, Any]) -> User:
        """
        Create a new account and provision its profile.

        Parameters
        ----------
        validated_data : dict
            Cleaned data from ``RegisterRequestSerializer`` containing
            ``username``, ``email``, ``password`` and optionally
            ``full_name``.  ``password_confirm`` has already been consumed
            during serializer validation.

        Returns
        -------
        User
            The newly created account; ``user.profile`` is populated.

        Raises
        ------
        core.domain.exceptions.Conflict
            If the username or email is already taken, or the profile
            cannot be provisioned.  Nothing is persisted in that case.
        """
        validated_data.pop("password_confirm", None)
        password = validated_data.pop("password")
        full_name = validated_data.pop("full_name", "")

        conflicts = []
        if User.objects.filter(username=validated_data.get("username")).exists():
            conflicts.append("username")
        if User.objects.filter(email__iexact=validated_data.get("email")).exists():
            conflicts.append("email")
        if conflicts:
            raise Conflict(
                f"The following field(s) already exist: {', '.join(conflicts)}."
            )

        try:
            with transaction.atomic():
                user = User.objects.create_user(password=password, **validated_data)
                ProfileProvisioningService.provision(user, full_name=full_name)
        except IntegrityError:
            raise Conflict(
                "A user with one of the provided unique fields already exists."
            )

        logger.info("User %s registered", user.pk)
        return user


# ═══════════════════════════════════════════════════════════════════
#  Authentication Service
# ═══════════════════════════════════════════════════════════════════


class AuthenticationService:
    """Handles username/email login and JWT token generation."""

    @staticmethod
    def authenticate(identifier: str, password: str) -> User | None:
        """
        Validate credentials and return the user if successful.

        Delegates to ``MultiFieldAuthBackend`` through Django's
        ``authenticate()``; returns ``None`` for unknown identifiers,
        wrong passwords and inactive accounts alike.
        """
        return django_authenticate(identifier=identifier, password=password)

    @staticmethod
    def generate_tokens(user: User) -> dict[str, str]:
        """Issue a refresh/access JWT pair carrying profile claims."""
        refresh = RefreshToken.for_user(user)
        profile = getattr(user, "profile", None)
        refresh["full_name"] = profile.full_name if profile else ""
        refresh["role"] = profile.role if profile else None
        return {
            "access": str(refresh.access_token),
            "refresh": str(refresh),
        }


# ═══════════════════════════════════════════════════════════════════
#  Profile Service
# ═══════════════════════════════════════════════════════════════════


class ProfileService:
    """Profile reads and updates, restricted to the owning account."""

    @staticmethod
    def get_visible_queryset(requesting_user: Any) -> QuerySet[Profile]:
        """Profiles the requester may read — only their own."""
        return scope_visible(
            Profile.objects.select_related("user"),
            requesting_user,
        )

    @staticmethod
    def get_profile(pk: Any, requesting_user: Any) -> Profile:
        """
        Retrieve a profile by PK.

        Other accounts' profiles are not visible and raise ``NotFound``
        exactly like a missing row.
        """
        try:
            return ProfileService.get_visible_queryset(requesting_user).get(pk=pk)
        except (Profile.DoesNotExist, DjangoValidationError):
            raise NotFound(f"Profile with id {pk} not found.")

    @staticmethod
    def get_own_profile(requesting_user: Any) -> Profile:
        """Return the requester's profile."""
        try:
            return ProfileService.get_visible_queryset(requesting_user).get(
                user=requesting_user,
            )
        except Profile.DoesNotExist:
            raise NotFound("No profile exists for this account.")

    @staticmethod
    def update_profile(
        profile: Profile,
        validated_data: dict[str, Any],
        requesting_user: Any,
    ) -> Profile:
        """Apply a partial update after the owner check."""
        authorize(requesting_user, Operation.UPDATE, profile)
        profile = apply_changes(profile, validated_data)
        logger.info(
            "Profile %s updated by user %s (fields: %s)",
            profile.pk,
            requesting_user.pk,
            ", ".join(validated_data),
        )
        return profile
