"""
Officers app serializers.

Field definitions and validation only; ownership is stamped by
``OfficerRecordService`` and is never writable through the API.
"""

from __future__ import annotations

from rest_framework import serializers

from .models import Officer


class OfficerFilterSerializer(serializers.Serializer):
    """Query parameters for ``GET /api/officers/``."""

    rank = serializers.CharField(required=False, max_length=100)
    search = serializers.CharField(
        required=False,
        max_length=255,
        help_text="Matches name, rank or badge number.",
    )


class OfficerSerializer(serializers.ModelSerializer):
    """Read representation used by list and detail responses."""

    class Meta:
        model = Officer
        fields = [
            "id",
            "user",
            "name",
            "rank",
            "badge_number",
            "contact",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class OfficerSummarySerializer(serializers.ModelSerializer):
    """Compact officer embedded in case responses."""

    class Meta:
        model = Officer
        fields = ["id", "name", "rank", "badge_number"]
        read_only_fields = fields


class OfficerWriteSerializer(serializers.ModelSerializer):
    """Create and partial-update payload."""

    class Meta:
        model = Officer
        fields = ["name", "rank", "badge_number", "contact"]
