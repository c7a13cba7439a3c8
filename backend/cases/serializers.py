"""
Cases app serializers.

Contains the Request and Response serializers for the Cases API.
Field definitions and validation only; ownership and persistence live
in ``services.py``.

Structure
---------
1. Filter / query-param serializers
2. Case read serializers (list, detail, summary)
3. Case write serializer
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from officers.models import Officer
from officers.serializers import OfficerSummarySerializer

from .models import Case, CasePriority, CaseStatus


# ═══════════════════════════════════════════════════════════════════
#  1. Filter / Query-Parameter Serializers
# ═══════════════════════════════════════════════════════════════════


class CaseFilterSerializer(serializers.Serializer):
    """
    Validates query-parameter filters for ``GET /api/cases/``.

    Query Parameters
    ----------------
    ``status``        : str   — one of ``CaseStatus`` values
    ``priority``      : str   — one of ``CasePriority`` values
    ``lead_officer``  : uuid  — PK of the lead officer
    ``search``        : str   — case number, title or location
    """

    status = serializers.ChoiceField(choices=CaseStatus.choices, required=False)
    priority = serializers.ChoiceField(choices=CasePriority.choices, required=False)
    lead_officer = serializers.UUIDField(required=False)
    search = serializers.CharField(required=False, max_length=255)


# ═══════════════════════════════════════════════════════════════════
#  2. Case Read Serializers
# ═══════════════════════════════════════════════════════════════════


class CaseSummarySerializer(serializers.ModelSerializer):
    """Parent-case summary embedded in evidence and suspect rows."""

    class Meta:
        model = Case
        fields = ["id", "case_number", "title"]
        read_only_fields = fields


class CaseListSerializer(serializers.ModelSerializer):
    """Compact representation for the list endpoint."""

    status_display = serializers.CharField(source="get_status_display", read_only=True)
    priority_display = serializers.CharField(source="get_priority_display", read_only=True)
    lead_officer_detail = OfficerSummarySerializer(source="lead_officer", read_only=True)

    class Meta:
        model = Case
        fields = [
            "id",
            "user",
            "case_number",
            "title",
            "status",
            "status_display",
            "priority",
            "priority_display",
            "date_opened",
            "date_closed",
            "location",
            "lead_officer",
            "lead_officer_detail",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CaseDetailSerializer(CaseListSerializer):
    """Full case with description and child-record counts."""

    evidence_count = serializers.SerializerMethodField()
    suspect_count = serializers.SerializerMethodField()

    class Meta(CaseListSerializer.Meta):
        fields = CaseListSerializer.Meta.fields + [
            "description",
            "evidence_count",
            "suspect_count",
        ]
        read_only_fields = fields

    def get_evidence_count(self, obj: Case) -> int:
        return obj.evidence.count()

    def get_suspect_count(self, obj: Case) -> int:
        return obj.suspects.count()


# ═══════════════════════════════════════════════════════════════════
#  3. Case Write Serializer
# ═══════════════════════════════════════════════════════════════════


class CaseWriteSerializer(serializers.ModelSerializer):
    """
    Create and partial-update payload.

    ``status`` and ``priority`` are optional on create and default to
    ``open`` / ``medium``; ``date_opened`` defaults to today.
    """

    lead_officer = serializers.PrimaryKeyRelatedField(
        queryset=Officer.objects.all(),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Case
        fields = [
            "case_number",
            "title",
            "description",
            "status",
            "priority",
            "date_opened",
            "date_closed",
            "location",
            "lead_officer",
        ]

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        """Reject a closing date earlier than the opening date."""
        instance = self.instance
        date_opened = attrs.get("date_opened", getattr(instance, "date_opened", None))
        date_closed = attrs.get("date_closed", getattr(instance, "date_closed", None))
        if date_opened and date_closed and date_closed < date_opened:
            raise serializers.ValidationError(
                {"date_closed": "The closing date cannot be earlier than the opening date."}
            )
        return attrs
