"""
Officers app Service Layer.

Architecture
------------
- ``OfficerQueryService``   — visible roster queryset, search & retrieval.
- ``OfficerRecordService``  — create, update, delete under the ownership
                              policy.

Deleting an officer leaves their cases in place; the database clears
``Case.lead_officer`` on those rows.
"""

from __future__ import annotations

import logging
from typing import Any

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Q, QuerySet

from core.domain.access import Operation, assign_owner, authorize, scope_visible
from core.domain.exceptions import NotFound
from core.domain.transactions import apply_changes, atomic_write

from .models import Officer

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  Officer Query Service
# ═══════════════════════════════════════════════════════════════════


class OfficerQueryService:
    """Read access to the officer roster, ordered by name."""

    @staticmethod
    def get_filtered_queryset(
        requesting_user: Any,
        filters: dict[str, Any],
    ) -> QuerySet[Officer]:
        qs = scope_visible(Officer.objects.all(), requesting_user)

        rank = filters.get("rank")
        if rank:
            qs = qs.filter(rank__iexact=rank)

        search = filters.get("search")
        if search:
            qs = qs.filter(
                Q(name__icontains=search)
                | Q(rank__icontains=search)
                | Q(badge_number__icontains=search)
            )

        return qs.order_by("name")

    @staticmethod
    def get_officer(pk: Any, requesting_user: Any) -> Officer:
        """Raises ``NotFound`` if no visible officer has this PK."""
        try:
            return scope_visible(Officer.objects.all(), requesting_user).get(pk=pk)
        except (Officer.DoesNotExist, DjangoValidationError):
            raise NotFound(f"Officer with id {pk} not found.")


# ═══════════════════════════════════════════════════════════════════
#  Officer Record Service
# ═══════════════════════════════════════════════════════════════════


class OfficerRecordService:
    """Mutations on officers.  Each method is one atomic write."""

    @staticmethod
    def create_officer(validated_data: dict[str, Any], requesting_user: Any) -> Officer:
        data = assign_owner(dict(validated_data), requesting_user, entity=Officer)
        with atomic_write("Officer"):
            officer = Officer.objects.create(**data)

        logger.info("Officer %s created by user %s", officer.pk, requesting_user.pk)
        return officer

    @staticmethod
    def update_officer(
        officer: Officer,
        validated_data: dict[str, Any],
        requesting_user: Any,
    ) -> Officer:
        authorize(requesting_user, Operation.UPDATE, officer)
        officer = apply_changes(officer, validated_data)
        logger.info("Officer %s updated by user %s", officer.pk, requesting_user.pk)
        return officer

    @staticmethod
    def delete_officer(officer: Officer, requesting_user: Any) -> None:
        authorize(requesting_user, Operation.DELETE, officer)
        officer_pk = officer.pk
        with atomic_write("Officer"):
            officer.delete()
        logger.info("Officer %s deleted by user %s", officer_pk, requesting_user.pk)
