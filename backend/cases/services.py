"""
Cases app Service Layer.

This module is the **single source of truth** for all business logic
in the ``cases`` app.  Views stay thin: they validate input through
serializers, call a service method, and wrap the result in a DRF
``Response``.

Architecture
------------
- ``CaseQueryService``   — visible queryset, filters, search, retrieval.
- ``CaseRecordService``  — create, update and delete under the ownership
                           policy.

Deleting a case cascades in the database to its evidence and suspects,
and from evidence to lab reports, whoever owns those child rows.
"""

from __future__ import annotations

import logging
from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q, QuerySet

from core.domain.access import Operation, assign_owner, authorize, scope_visible
from core.domain.exceptions import NotFound
from core.domain.transactions import apply_changes, atomic_write

from .models import Case

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Case Query Service
# ═══════════════════════════════════════════════════════════════════


class CaseQueryService:
    """
    Builds filtered querysets for listing cases.

    Every authenticated account sees every case; the lead officer is
    joined in so list rows can embed an officer summary.
    """

    @staticmethod
    def get_filtered_queryset(
        requesting_user: Any,
        filters: dict[str, Any],
    ) -> QuerySet[Case]:
        """
        Apply the visibility policy and the explicit filters.

        Supported filter keys: ``status``, ``priority``, ``lead_officer``
        and ``search`` (case number, title or location).
        """
        qs = scope_visible(Case.objects.all(), requesting_user)

        status = filters.get("status")
        if status:
            qs = qs.filter(status=status)

        priority = filters.get("priority")
        if priority:
            qs = qs.filter(priority=priority)

        lead_officer = filters.get("lead_officer")
        if lead_officer is not None:
            qs = qs.filter(lead_officer_id=lead_officer)

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(case_number__icontains=search)
                | Q(title__icontains=search)
                | Q(location__icontains=search)
            )

        return qs.select_related("lead_officer").order_by("-created_at")

    @staticmethod
    def get_case(pk: Any, requesting_user: Any) -> Case:
        """
        Retrieve a single visible case.

        Raises ``NotFound`` for unknown or malformed IDs.
        """
        try:
            return (
                scope_visible(Case.objects.all(), requesting_user)
                .select_related("lead_officer")
                .get(pk=pk)
            )
        except (Case.DoesNotExist, DjangoValidationError):
            raise NotFound(f"Case with id {pk} not found.")


# ═══════════════════════════════════════════════════════════════════
#  Case Record Service
# ═══════════════════════════════════════════════════════════════════


class CaseRecordService:
    """Create, update and delete cases.  Each call is one atomic write."""

    @staticmethod
    def create_case(validated_data: dict[str, Any], requesting_user: Any) -> Case:
        """
        Insert a case owned by ``requesting_user``.

        Any owner supplied by the caller is replaced.  Omitted status,
        priority and opening date fall back to the column defaults.
        """
        data = assign_owner(dict(validated_data), requesting_user, entity=Case)
        with atomic_write("Case"):
            case = Case.objects.create(**data)

        logger.info(
            "Case %s (%s) created by user %s",
            case.pk,
            case.case_number,
            requesting_user.pk,
        )
        return case

    @staticmethod
    def update_case(
        case: Case,
        validated_data: dict[str, Any],
        requesting_user: Any,
    ) -> Case:
        authorize(requesting_user, Operation.UPDATE, case)
        case = apply_changes(case, validated_data)
        logger.info(
            "Case %s updated by user %s (fields: %s)",
            case.pk,
            requesting_user.pk,
            ", ".join(validated_data),
        )
        return case

    @staticmethod
    def delete_case(case: Case, requesting_user: Any) -> None:
        """Delete the case together with its evidence, suspects and lab reports."""
        authorize(requesting_user, Operation.DELETE, case)
        case_pk = case.pk
        with atomic_write("Case"):
            _total, removed = case.delete()

        logger.info(
            "Case %s deleted by user %s (removed: %s)",
            case_pk,
            requesting_user.pk,
            removed,
        )
