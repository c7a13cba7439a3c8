"""
Evidence app serializers.

Contains all Request and Response serializers for the Evidence and Lab
Report APIs.  Field definitions and validation only; ownership and
persistence belong in ``services.py``.

Structure
---------
1. Filter / query-param serializers
2. Evidence read / write serializers
3. Lab report read / write serializers
"""

from __future__ import annotations

from typing import Any

from rest_framework import serializers

from cases.models import Case
from cases.serializers import CaseSummarySerializer

from .models import (
    Evidence,
    EvidenceStatus,
    EvidenceType,
    LabReport,
    LabReportStatus,
)


# ═══════════════════════════════════════════════════════════════════
#  1. Filter / Query-Parameter Serializers
# ═══════════════════════════════════════════════════════════════════


class EvidenceFilterSerializer(serializers.Serializer):
    """
    Validates query-parameter filters for ``GET /api/evidence/``.

    Query Parameters
    ----------------
    ``type``              : str   — one of ``EvidenceType`` values
    ``status``            : str   — one of ``EvidenceStatus`` values
    ``case``              : uuid  — PK of the parent case
    ``collected_after``   : date  — ISO 8601, inclusive
    ``collected_before``  : date  — ISO 8601, inclusive
    ``search``            : str   — evidence number, description, case number
    """

    type = serializers.ChoiceField(choices=EvidenceType.choices, required=False)
    status = serializers.ChoiceField(choices=EvidenceStatus.choices, required=False)
    case = serializers.UUIDField(required=False)
    collected_after = serializers.DateField(required=False)
    collected_before = serializers.DateField(required=False)
    search = serializers.CharField(required=False, max_length=255)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        collected_after = attrs.get("collected_after")
        collected_before = attrs.get("collected_before")
        if collected_after and collected_before and collected_after > collected_before:
            raise serializers.ValidationError(
                "collected_after must be earlier than collected_before."
            )
        return attrs


class LabReportFilterSerializer(serializers.Serializer):
    """Query parameters for ``GET /api/lab-reports/``."""

    status = serializers.ChoiceField(choices=LabReportStatus.choices, required=False)
    evidence = serializers.UUIDField(required=False)
    search = serializers.CharField(
        required=False,
        max_length=255,
        help_text="Matches report number, analysis type, technician or evidence number.",
    )


# ═══════════════════════════════════════════════════════════════════
#  2. Evidence Serializers
# ═══════════════════════════════════════════════════════════════════


class EvidenceSummarySerializer(serializers.ModelSerializer):
    """Parent-evidence summary embedded in lab report rows."""

    class Meta:
        model = Evidence
        fields = ["id", "evidence_number", "description"]
        read_only_fields = fields


class EvidenceSerializer(serializers.ModelSerializer):
    """Read representation; ``case_detail`` carries case number and title."""

    type_display = serializers.CharField(source="get_type_display", read_only=True)
    status_display = serializers.CharField(source="get_status_display", read_only=True)
    case_detail = CaseSummarySerializer(source="case", read_only=True)

    class Meta:
        model = Evidence
        fields = [
            "id",
            "user",
            "case",
            "case_detail",
            "evidence_number",
            "description",
            "type",
            "type_display",
            "location_found",
            "date_collected",
            "collected_by",
            "chain_of_custody",
            "storage_location",
            "status",
            "status_display",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class EvidenceWriteSerializer(serializers.ModelSerializer):
    """
    Create and partial-update payload.

    Required on create: ``case``, ``evidence_number``, ``description``
    and ``type``.  ``status`` defaults to ``in_storage`` and
    ``date_collected`` to today.
    """

    case = serializers.PrimaryKeyRelatedField(queryset=Case.objects.all())

    class Meta:
        model = Evidence
        fields = [
            "case",
            "evidence_number",
            "description",
            "type",
            "location_found",
            "date_collected",
            "collected_by",
            "chain_of_custody",
            "storage_location",
            "status",
        ]


# ═══════════════════════════════════════════════════════════════════
#  3. Lab Report Serializers
# ═══════════════════════════════════════════════════════════════════


class LabReportSerializer(serializers.ModelSerializer):
    """Read representation; ``evidence_detail`` carries number and description."""

    status_display = serializers.CharField(source="get_status_display", read_only=True)
    evidence_detail = EvidenceSummarySerializer(source="evidence", read_only=True)

    class Meta:
        model = LabReport
        fields = [
            "id",
            "user",
            "evidence",
            "evidence_detail",
            "report_number",
            "analysis_type",
            "analysis_result",
            "lab_tech_name",
            "lab_name",
            "date_submitted",
            "date_completed",
            "status",
            "status_display",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class LabReportWriteSerializer(serializers.ModelSerializer):
    """
    Create and partial-update payload.

    ``analysis_type`` is free text; clients may offer the suggestions
    from ``GET /api/core/constants/``.
    """

    evidence = serializers.PrimaryKeyRelatedField(queryset=Evidence.objects.all())

    class Meta:
        model = LabReport
        fields = [
            "evidence",
            "report_number",
            "analysis_type",
            "analysis_result",
            "lab_tech_name",
            "lab_name",
            "date_submitted",
            "date_completed",
            "status",
            "notes",
        ]

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:
        """Reject a completion date earlier than the submission date."""
        instance = self.instance
        submitted = attrs.get("date_submitted", getattr(instance, "date_submitted", None))
        completed = attrs.get("date_completed", getattr(instance, "date_completed", None))
        if submitted and completed and completed < submitted:
            raise serializers.ValidationError(
                {"date_completed": "The completion date cannot be earlier than the submission date."}
            )
        return attrs
