"""
Accounts app serializers.

Contains all Request and Response serializers for the accounts API.
Serializers handle field definitions, read/write constraints, and
basic validation.  **No business logic** lives here — all domain
rules are delegated to ``services.py``.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .models import Profile

User = get_user_model()


# ═══════════════════════════════════════════════════════════════════
#  Authentication Serializers
# ═══════════════════════════════════════════════════════════════════


class RegisterRequestSerializer(serializers.ModelSerializer):
    """
    Validates new-account registration data.

    Required fields: username, email, password, password_confirm.
    ``full_name`` is optional metadata copied onto the provisioned
    profile.
    """

    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={"input_type": "password"},
        help_text="Minimum 8 characters.",
    )
    password_confirm = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
        help_text="Must match 'password'.",
    )
    full_name = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=255,
        help_text="Display name stored on the account profile.",
    )

    class Meta:
        model = User
        fields = [
            "username",
            "email",
            "password",
            "password_confirm",
            "full_name",
        ]
        extra_kwargs = {
            "email": {"required": True},
        }

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        """Ensure the passwords match and satisfy the configured validators."""
        if attrs["password"] != attrs["password_confirm"]:
            raise serializers.ValidationError(
                {"password_confirm": "Passwords do not match."}
            )

        candidate = User(username=attrs.get("username"), email=attrs.get("email"))
        try:
            validate_password(attrs["password"], user=candidate)
        except DjangoValidationError as exc:
            raise serializers.ValidationError({"password": list(exc.messages)})

        attrs.pop("password_confirm")
        return attrs


class LoginRequestSerializer(serializers.Serializer):
    """
    Accepts login credentials.

    ``identifier`` may be a username or an email address.
    """

    identifier = serializers.CharField(
        help_text="Username or email.",
    )
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
        help_text="Account password.",
    )


# ═══════════════════════════════════════════════════════════════════
#  Profile / User Serializers
# ═══════════════════════════════════════════════════════════════════


class ProfileSerializer(serializers.ModelSerializer):
    """Read representation of a ``Profile``."""

    class Meta:
        model = Profile
        fields = [
            "id",
            "user",
            "full_name",
            "role",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.ModelSerializer):
    """Fields the owner may change on their profile."""

    class Meta:
        model = Profile
        fields = ["full_name", "role"]
        extra_kwargs = {
            "full_name": {"required": False},
            "role": {"required": False},
        }


class UserDetailSerializer(serializers.ModelSerializer):
    """The authenticated account together with its profile."""

    profile = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "is_active",
            "date_joined",
            "profile",
        ]
        read_only_fields = fields

    def get_profile(self, obj: User) -> dict[str, Any] | None:
        """Return the nested profile, or ``None`` if never provisioned."""
        profile = getattr(obj, "profile", None)
        if profile is None:
            return None
        return ProfileSerializer(profile).data


class TokenResponseSerializer(serializers.Serializer):
    """Shape of the login response (documentation only)."""

    access = serializers.CharField()
    refresh = serializers.CharField()
    user = UserDetailSerializer()
