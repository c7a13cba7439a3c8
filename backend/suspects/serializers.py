"""
Suspects app serializers.

Structure
---------
1. Filter / query-param serializer
2. Read serializer (embeds a parent case summary)
3. Write serializer
"""

from __future__ import annotations

from rest_framework import serializers

from cases.models import Case
from cases.serializers import CaseSummarySerializer

from .models import MAX_AGE, MIN_AGE, Suspect, SuspectStatus


class SuspectFilterSerializer(serializers.Serializer):
    """Query parameters for ``GET /api/suspects/``."""

    status = serializers.ChoiceField(choices=SuspectStatus.choices, required=False)
    case = serializers.UUIDField(required=False)
    search = serializers.CharField(
        required=False,
        max_length=255,
        help_text="Matches name, parent case number or address.",
    )


class SuspectSerializer(serializers.ModelSerializer):
    """Read representation; ``case_detail`` carries case number and title."""

    status_display = serializers.CharField(source="get_status_display", read_only=True)
    case_detail = CaseSummarySerializer(source="case", read_only=True)

    class Meta:
        model = Suspect
        fields = [
            "id",
            "user",
            "case",
            "case_detail",
            "name",
            "age",
            "gender",
            "address",
            "phone",
            "description",
            "status",
            "status_display",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class SuspectWriteSerializer(serializers.ModelSerializer):
    """Create and partial-update payload.  ``case`` and ``name`` are required on create."""

    case = serializers.PrimaryKeyRelatedField(queryset=Case.objects.all())
    age = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=MIN_AGE,
        max_value=MAX_AGE,
    )

    class Meta:
        model = Suspect
        fields = [
            "case",
            "name",
            "age",
            "gender",
            "address",
            "phone",
            "description",
            "status",
        ]
