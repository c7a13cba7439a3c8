"""
Core app serializers.

**Response-only** serializers for the aggregated endpoints served by the
core app.  They work exclusively with plain Python dicts / lists
produced by the service layer, keeping the core app decoupled from the
concrete models in the other apps.
"""

from __future__ import annotations

from rest_framework import serializers


# ════════════════════════════════════════════════════════════════════
#  Dashboard Statistics
# ════════════════════════════════════════════════════════════════════

class CasesByStatusSerializer(serializers.Serializer):
    """
    Breakdown of case counts grouped by status.

    Example::

        {"status": "open", "label": "Open", "count": 12}
    """

    status = serializers.CharField()
    label = serializers.CharField()
    count = serializers.IntegerField()


class RecentCaseSerializer(serializers.Serializer):
    """One of the newest cases listed on the dashboard."""

    id = serializers.UUIDField()
    case_number = serializers.CharField()
    title = serializers.CharField()
    status = serializers.CharField()
    created_at = serializers.DateTimeField()


class DashboardStatsSerializer(serializers.Serializer):
    """Top-level dashboard payload."""

    total_cases = serializers.IntegerField()
    active_cases = serializers.IntegerField(
        help_text="Cases whose status is anything other than 'closed'.",
    )
    total_evidence = serializers.IntegerField()
    total_suspects = serializers.IntegerField()
    total_officers = serializers.IntegerField()
    total_lab_reports = serializers.IntegerField()
    pending_lab_reports = serializers.IntegerField()
    cases_by_status = CasesByStatusSerializer(many=True)
    recent_cases = RecentCaseSerializer(many=True)


# ════════════════════════════════════════════════════════════════════
#  System Constants
# ════════════════════════════════════════════════════════════════════

class ChoiceItemSerializer(serializers.Serializer):
    """A single ``{"value": ..., "label": ...}`` pair."""

    value = serializers.CharField()
    label = serializers.CharField()


class SystemConstantsSerializer(serializers.Serializer):
    """
    Every enumeration the API enforces, plus suggestion lists for the
    free-text officer rank and lab analysis type fields.
    """

    case_statuses = ChoiceItemSerializer(many=True)
    case_priorities = ChoiceItemSerializer(many=True)
    suspect_statuses = ChoiceItemSerializer(many=True)
    evidence_types = ChoiceItemSerializer(many=True)
    evidence_statuses = ChoiceItemSerializer(many=True)
    lab_report_statuses = ChoiceItemSerializer(many=True)
    gender_options = ChoiceItemSerializer(many=True)
    officer_ranks = serializers.ListField(child=serializers.CharField())
    analysis_types = serializers.ListField(child=serializers.CharField())
