"""
Evidence app Service Layer.

This module is the **single source of truth** for all business logic
in the ``evidence`` app.  Views must remain thin: validate input via
serializers, call a service method, and return the result wrapped in
a DRF ``Response``.

Architecture
------------
- ``EvidenceQueryService``    — visible evidence, filters, search, retrieval.
- ``EvidenceRecordService``   — evidence create, update, delete.
- ``LabReportQueryService``   — visible lab reports, filters, search, retrieval.
- ``LabReportRecordService``  — lab report create, update, delete.

Evidence and lab reports may be attached to any visible parent record;
the child row is owned by the account that created it.
"""

from __future__ import annotations

import logging
from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q, QuerySet

from cases.models import Case
from core.domain.access import Operation, assign_owner, authorize, scope_visible
from core.domain.exceptions import NotFound
from core.domain.transactions import apply_changes, atomic_write

from .models import Evidence, LabReport

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Evidence Query Service
# ═══════════════════════════════════════════════════════════════════


class EvidenceQueryService:
    """
    Constructs filtered querysets for listing evidence.

    Rows come back newest first with the parent case joined in so the
    list can embed the case number and title.
    """

    @staticmethod
    def get_filtered_queryset(
        requesting_user: Any,
        filters: dict[str, Any],
    ) -> QuerySet[Evidence]:
        """
        Supported filter keys: ``type``, ``status``, ``case``,
        ``collected_after``, ``collected_before`` and ``search``
        (evidence number, description or parent case number).
        """
        qs = scope_visible(Evidence.objects.all(), requesting_user)

        evidence_type = filters.get("type")
        if evidence_type:
            qs = qs.filter(type=evidence_type)

        status = filters.get("status")
        if status:
            qs = qs.filter(status=status)

        case_id = filters.get("case")
        if case_id is not None:
            qs = qs.filter(case_id=case_id)

        collected_after = filters.get("collected_after")
        if collected_after is not None:
            qs = qs.filter(date_collected__gte=collected_after)

        collected_before = filters.get("collected_before")
        if collected_before is not None:
            qs = qs.filter(date_collected__lte=collected_before)

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(evidence_number__icontains=search)
                | Q(description__icontains=search)
                | Q(case__case_number__icontains=search)
            )

        return qs.select_related("case").order_by("-created_at")

    @staticmethod
    def get_evidence_for_case(case: Case, requesting_user: Any) -> QuerySet[Evidence]:
        return EvidenceQueryService.get_filtered_queryset(
            requesting_user, {"case": case.pk}
        )

    @staticmethod
    def get_evidence_detail(pk: Any, requesting_user: Any) -> Evidence:
        """Raises ``NotFound`` if no visible evidence has this PK."""
        try:
            return (
                scope_visible(Evidence.objects.all(), requesting_user)
                .select_related("case")
                .get(pk=pk)
            )
        except (Evidence.DoesNotExist, DjangoValidationError):
            raise NotFound(f"Evidence with id {pk} not found.")


# ═══════════════════════════════════════════════════════════════════
#  Evidence Record Service
# ═══════════════════════════════════════════════════════════════════


class EvidenceRecordService:

    @staticmethod
    def create_evidence(validated_data: dict[str, Any], requesting_user: Any) -> Evidence:
        """
        Insert an evidence item owned by ``requesting_user``.

        The parent case must already exist; the serializer rejects
        unknown case IDs and the foreign key rejects any that slip past.
        """
        data = assign_owner(dict(validated_data), requesting_user, entity=Evidence)
        with atomic_write("Evidence"):
            evidence = Evidence.objects.create(**data)

        logger.info(
            "Evidence %s (%s) registered on case %s by user %s",
            evidence.pk,
            evidence.evidence_number,
            evidence.case_id,
            requesting_user.pk,
        )
        return evidence

    @staticmethod
    def update_evidence(
        evidence: Evidence,
        validated_data: dict[str, Any],
        requesting_user: Any,
    ) -> Evidence:
        authorize(requesting_user, Operation.UPDATE, evidence)
        evidence = apply_changes(evidence, validated_data)
        logger.info(
            "Evidence %s updated by user %s (fields: %s)",
            evidence.pk,
            requesting_user.pk,
            ", ".join(validated_data),
        )
        return evidence

    @staticmethod
    def delete_evidence(evidence: Evidence, requesting_user: Any) -> None:
        """Delete the evidence item and its lab reports."""
        authorize(requesting_user, Operation.DELETE, evidence)
        evidence_pk = evidence.pk
        with atomic_write("Evidence"):
            _total, removed = evidence.delete()
        logger.info(
            "Evidence %s deleted by user %s (removed: %s)",
            evidence_pk,
            requesting_user.pk,
            removed,
        )


# ═══════════════════════════════════════════════════════════════════
#  Lab Report Query Service
# ═══════════════════════════════════════════════════════════════════


class LabReportQueryService:

    @staticmethod
    def get_filtered_queryset(
        requesting_user: Any,
        filters: dict[str, Any],
    ) -> QuerySet[LabReport]:
        """
        Supported filter keys: ``status``, ``evidence`` and ``search``
        (report number, analysis type, technician or evidence number).
        """
        qs = scope_visible(LabReport.objects.all(), requesting_user)

        status = filters.get("status")
        if status:
            qs = qs.filter(status=status)

        evidence_id = filters.get("evidence")
        if evidence_id is not None:
            qs = qs.filter(evidence_id=evidence_id)

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(report_number__icontains=search)
                | Q(analysis_type__icontains=search)
                | Q(lab_tech_name__icontains=search)
                | Q(evidence__evidence_number__icontains=search)
            )

        return qs.select_related("evidence").order_by("-created_at")

    @staticmethod
    def get_reports_for_evidence(evidence: Evidence, requesting_user: Any) -> QuerySet[LabReport]:
        return LabReportQueryService.get_filtered_queryset(
            requesting_user, {"evidence": evidence.pk}
        )

    @staticmethod
    def get_report(pk: Any, requesting_user: Any) -> LabReport:
        try:
            return (
                scope_visible(LabReport.objects.all(), requesting_user)
                .select_related("evidence")
                .get(pk=pk)
            )
        except (LabReport.DoesNotExist, DjangoValidationError):
            raise NotFound(f"Lab report with id {pk} not found.")


# ═══════════════════════════════════════════════════════════════════
#  Lab Report Record Service
# ═══════════════════════════════════════════════════════════════════


class LabReportRecordService:

    @staticmethod
    def create_report(validated_data: dict[str, Any], requesting_user: Any) -> LabReport:
        data = assign_owner(dict(validated_data), requesting_user, entity=LabReport)
        with atomic_write("LabReport"):
            report = LabReport.objects.create(**data)

        logger.info(
            "Lab report %s filed for evidence %s by user %s",
            report.pk,
            report.evidence_id,
            requesting_user.pk,
        )
        return report

    @staticmethod
    def update_report(
        report: LabReport,
        validated_data: dict[str, Any],
        requesting_user: Any,
    ) -> LabReport:
        authorize(requesting_user, Operation.UPDATE, report)
        report = apply_changes(report, validated_data)
        logger.info("Lab report %s updated by user %s", report.pk, requesting_user.pk)
        return report

    @staticmethod
    def delete_report(report: LabReport, requesting_user: Any) -> None:
        authorize(requesting_user, Operation.DELETE, report)
        report_pk = report.pk
        with atomic_write("LabReport"):
            report.delete()
        logger.info("Lab report %s deleted by user %s", report_pk, requesting_user.pk)
