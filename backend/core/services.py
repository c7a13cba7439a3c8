"""
Core app services — **Service Layer**.

Contains the cross-app aggregation behind the dashboard and the
constants endpoint.  Views delegate all logic to the classes defined
here.

Cross-app imports
-----------------
The core app is the only app that reads models from every other app.
To keep module loading free of import cycles, models are resolved
lazily inside methods with ``django.apps.apps.get_model`` and choice
classes are imported inside the method that needs them.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from django.apps import apps
from django.db.models import Count, Q

from core.constants import (
    ANALYSIS_TYPE_SUGGESTIONS,
    DASHBOARD_RECENT_CASES_LIMIT,
    GENDER_SUGGESTIONS,
    OFFICER_RANK_SUGGESTIONS,
)
from core.domain.access import scope_visible

if TYPE_CHECKING:
    from accounts.models import User


# ════════════════════════════════════════════════════════════════════
#  Dashboard Aggregation Service
# ════════════════════════════════════════════════════════════════════

class DashboardAggregationService:
    """
    Produces the statistics dict consumed by ``DashboardStatsSerializer``.

    Counts run over the rows visible to the requesting account, which
    for workspace records means the whole workspace.
    """

    def __init__(self, user: User) -> None:
        self.user = user

    # ── Public API ──────────────────────────────────────────────────

    def get_stats(self) -> dict[str, Any]:
        """Return the full dashboard statistics dictionary."""
        from cases.models import CaseStatus
        from evidence.models import LabReportStatus

        Case = apps.get_model("cases", "Case")
        Evidence = apps.get_model("evidence", "Evidence")
        LabReport = apps.get_model("evidence", "LabReport")
        Officer = apps.get_model("officers", "Officer")
        Suspect = apps.get_model("suspects", "Suspect")

        case_qs = self._visible(Case)
        case_aggregates = case_qs.aggregate(
            total_cases=Count("id"),
            active_cases=Count("id", filter=~Q(status=CaseStatus.CLOSED)),
        )
        report_aggregates = self._visible(LabReport).aggregate(
            total_lab_reports=Count("id"),
            pending_lab_reports=Count("id", filter=Q(status=LabReportStatus.PENDING)),
        )

        return {
            "total_cases": case_aggregates["total_cases"],
            "active_cases": case_aggregates["active_cases"],
            "total_evidence": self._visible(Evidence).count(),
            "total_suspects": self._visible(Suspect).count(),
            "total_officers": self._visible(Officer).count(),
            "total_lab_reports": report_aggregates["total_lab_reports"],
            "pending_lab_reports": report_aggregates["pending_lab_reports"],
            "cases_by_status": self._get_cases_by_status(case_qs),
            "recent_cases": self._get_recent_cases(case_qs),
        }

    # ── Private helpers ─────────────────────────────────────────────

    def _visible(self, model):
        return scope_visible(model.objects.all(), self.user)

    def _get_cases_by_status(self, case_qs) -> list[dict[str, Any]]:
        """Group ``case_qs`` by status, including statuses with no cases."""
        from cases.models import CaseStatus

        counts = dict(
            case_qs.order_by()
            .values_list("status")
            .annotate(count=Count("id"))
        )
        return [
            {"status": value, "label": str(label), "count": counts.get(value, 0)}
            for value, label in CaseStatus.choices
        ]

    def _get_recent_cases(self, case_qs) -> list[dict[str, Any]]:
        return list(
            case_qs.order_by("-created_at")
            .values("id", "case_number", "title", "status", "created_at")[
                :DASHBOARD_RECENT_CASES_LIMIT
            ]
        )


# ════════════════════════════════════════════════════════════════════
#  System Constants Service
# ════════════════════════════════════════════════════════════════════

class SystemConstantsService:
    """
    Gathers all choice enumerations and free-text suggestions into a
    single dict for clients.

    This service is **stateless**; it does not depend on the requesting
    user.
    """

    @staticmethod
    def get_constants() -> dict[str, Any]:
        """Return all system constants as a dict."""
        from cases.models import CasePriority, CaseStatus
        from evidence.models import EvidenceStatus, EvidenceType, LabReportStatus
        from suspects.models import SuspectStatus

        to_list = SystemConstantsService._choices_to_list

        return {
            "case_statuses": to_list(CaseStatus),
            "case_priorities": to_list(CasePriority),
            "suspect_statuses": to_list(SuspectStatus),
            "evidence_types": to_list(EvidenceType),
            "evidence_statuses": to_list(EvidenceStatus),
            "lab_report_statuses": to_list(LabReportStatus),
            "gender_options": [
                {"value": value, "label": label} for value, label in GENDER_SUGGESTIONS
            ],
            "officer_ranks": list(OFFICER_RANK_SUGGESTIONS),
            "analysis_types": list(ANALYSIS_TYPE_SUGGESTIONS),
        }

    @staticmethod
    def _choices_to_list(
        choices_class: type,
    ) -> list[dict[str, str]]:
        """
        Convert a Django ``TextChoices`` class to a list of
        ``{"value": ..., "label": ...}`` dicts.
        """
        return [
            {"value": str(value), "label": str(label)}
            for value, label in choices_class.choices
        ]
