"""
Suspects app Service Layer.

Architecture
------------
- ``SuspectQueryService``   — visible queryset, filters, search, retrieval,
                              and the per-case listing.
- ``SuspectRecordService``  — create, update and delete under the
                              ownership policy.

A suspect may be attached to any visible case, including one owned by
another account; ownership of the suspect row stays with its creator.
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

from .models import Suspect

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Suspect Query Service
# ═══════════════════════════════════════════════════════════════════


class SuspectQueryService:

    @staticmethod
    def get_filtered_queryset(
        requesting_user: Any,
        filters: dict[str, Any],
    ) -> QuerySet[Suspect]:
        """
        Visible suspects, newest first, with the parent case joined in.

        Supported filter keys: ``status``, ``case`` and ``search`` (name,
        parent case number or address).
        """
        qs = scope_visible(Suspect.objects.all(), requesting_user)

        status = filters.get("status")
        if status:
            qs = qs.filter(status=status)

        case_id = filters.get("case")
        if case_id is not None:
            qs = qs.filter(case_id=case_id)

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(name__icontains=search)
                | Q(case__case_number__icontains=search)
                | Q(address__icontains=search)
            )

        return qs.select_related("case").order_by("-created_at")

    @staticmethod
    def get_suspects_for_case(case: Case, requesting_user: Any) -> QuerySet[Suspect]:
        return SuspectQueryService.get_filtered_queryset(
            requesting_user, {"case": case.pk}
        )

    @staticmethod
    def get_suspect(pk: Any, requesting_user: Any) -> Suspect:
        try:
            return (
                scope_visible(Suspect.objects.all(), requesting_user)
                .select_related("case")
                .get(pk=pk)
            )
        except (Suspect.DoesNotExist, DjangoValidationError):
            raise NotFound(f"Suspect with id {pk} not found.")


# ═══════════════════════════════════════════════════════════════════
#  Suspect Record Service
# ═══════════════════════════════════════════════════════════════════


class SuspectRecordService:

    @staticmethod
    def create_suspect(validated_data: dict[str, Any], requesting_user: Any) -> Suspect:
        data = assign_owner(dict(validated_data), requesting_user, entity=Suspect)
        with atomic_write("Suspect"):
            suspect = Suspect.objects.create(**data)

        logger.info(
            "Suspect %s added to case %s by user %s",
            suspect.pk,
            suspect.case_id,
            requesting_user.pk,
        )
        return suspect

    @staticmethod
    def update_suspect(
        suspect: Suspect,
        validated_data: dict[str, Any],
        requesting_user: Any,
    ) -> Suspect:
        authorize(requesting_user, Operation.UPDATE, suspect)
        suspect = apply_changes(suspect, validated_data)
        logger.info("Suspect %s updated by user %s", suspect.pk, requesting_user.pk)
        return suspect

    @staticmethod
    def delete_suspect(suspect: Suspect, requesting_user: Any) -> None:
        authorize(requesting_user, Operation.DELETE, suspect)
        suspect_pk = suspect.pk
        with atomic_write("Suspect"):
            suspect.delete()
        logger.info("Suspect %s deleted by user %s", suspect_pk, requesting_user.pk)
