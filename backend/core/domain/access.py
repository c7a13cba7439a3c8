"""
core.domain.access — Row-level ownership / visibility policy.

Every service method calls into this module **before** it touches the
database.  The check is a capability test keyed on::

    (entity, operation, requesting account, row owner)

Policy
------
┌────────────────────┬──────────────────────┬───────────────────────────┐
│ Operation          │ Workspace records    │ Account profile           │
├────────────────────┼──────────────────────┼───────────────────────────┤
│ select             │ any authenticated    │ owner only                │
│ insert             │ owner == requester   │ owner == requester        │
│ update / delete    │ owner == requester   │ owner == requester        │
└────────────────────┴──────────────────────┴───────────────────────────┘

Reads are shared across the whole workspace so investigators can see
each other's records; writes stay with the account that created the row.
Anonymous requesters are refused everything.

Usage in an app's service layer::

    from core.domain.access import Operation, authorize, scope_visible

    class CaseQueryService:
        @staticmethod
        def get_visible_queryset(user):
            return scope_visible(Case.objects.all(), user)

    class CaseRecordService:
        @staticmethod
        def delete_case(case, requesting_user):
            authorize(requesting_user, Operation.DELETE, case)
            case.delete()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NamedTuple

from django.db import models
from django.db.models import QuerySet

from core.domain.exceptions import PermissionDenied

if TYPE_CHECKING:
    from accounts.models import User

logger = logging.getLogger(__name__)


class Operation:
    """Data-access operations the policy distinguishes."""

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"

    ALL = (SELECT, INSERT, UPDATE, DELETE)


class ReadScope:
    """Who may read rows of an entity."""

    WORKSPACE = "workspace"
    OWNER = "owner"


class AccessPolicy(NamedTuple):
    """Per-entity policy: read scope plus the name of the owner FK."""

    read_scope: str = ReadScope.WORKSPACE
    owner_field: str = "user"


# Keyed on ``Model._meta.label_lower``.  Entities missing here are denied.
ACCESS_POLICIES: dict[str, AccessPolicy] = {
    "accounts.profile": AccessPolicy(read_scope=ReadScope.OWNER),
    "officers.officer": AccessPolicy(),
    "cases.case": AccessPolicy(),
    "suspects.suspect": AccessPolicy(),
    "evidence.evidence": AccessPolicy(),
    "evidence.labreport": AccessPolicy(),
}


def _entity_label(entity: str | type[models.Model] | models.Model) -> str:
    if isinstance(entity, str):
        return entity.lower()
    return entity._meta.label_lower


def get_policy(entity: str | type[models.Model] | models.Model) -> AccessPolicy | None:
    """Return the policy registered for ``entity``, or ``None``."""
    return ACCESS_POLICIES.get(_entity_label(entity))


def _is_authenticated(user: Any) -> bool:
    return user is not None and bool(getattr(user, "is_authenticated", False))


def is_allowed(
    user: User | None,
    operation: str,
    *,
    entity: str | type[models.Model] | models.Model,
    owner_id: Any,
) -> bool:
    """
    Evaluate the policy without raising.

    Args:
        user:       The requesting account (may be anonymous / ``None``).
        operation:  One of ``Operation.ALL``.
        entity:     Model class, instance or ``"app_label.model"`` label.
        owner_id:   PK of the row's owning account (for inserts: the
                    owner value about to be written).

    Returns:
        ``True`` when the operation is permitted.
    """
    if operation not in Operation.ALL:
        raise ValueError(f"Unknown operation: {operation!r}")

    policy = get_policy(entity)
    if policy is None or not _is_authenticated(user):
        return False

    is_owner = owner_id is not None and str(owner_id) == str(user.pk)

    if operation == Operation.SELECT:
        return policy.read_scope == ReadScope.WORKSPACE or is_owner
    return is_owner


def authorize(
    user: User | None,
    operation: str,
    instance: models.Model,
) -> None:
    """
    Guard that raises ``PermissionDenied`` unless ``user`` may perform
    ``operation`` on ``instance``.

    The error message is generic on purpose; callers never learn which
    rule rejected them.
    """
    policy = get_policy(instance)
    owner_field = policy.owner_field if policy else "user"
    owner_id = getattr(instance, f"{owner_field}_id", None)

    if not is_allowed(user, operation, entity=instance, owner_id=owner_id):
        logger.warning(
            "Access denied: %s %s pk=%s requested by %s (owner=%s)",
            operation,
            _entity_label(instance),
            instance.pk,
            getattr(user, "pk", None),
            owner_id,
        )
        raise PermissionDenied()


def scope_visible(queryset: QuerySet, user: User | None) -> QuerySet:
    """
    Narrow ``queryset`` to the rows ``user`` may read.

    Workspace entities are returned unfiltered for any authenticated
    account; owner-scoped entities are filtered on the owner FK.
    Anonymous users and unregistered entities get an empty queryset.
    """
    policy = get_policy(queryset.model)
    if policy is None or not _is_authenticated(user):
        return queryset.none()
    if policy.read_scope == ReadScope.OWNER:
        return queryset.filter(**{policy.owner_field: user})
    return queryset


def assign_owner(
    data: dict[str, Any],
    user: User | None,
    *,
    entity: str | type[models.Model],
) -> dict[str, Any]:
    """
    Stamp the requester as owner of a row about to be inserted, then
    check the insert policy.

    Any owner value supplied by the caller is discarded.

    Returns:
        The same ``data`` dict with the owner field set.

    Raises:
        PermissionDenied: If the requester is anonymous or the entity has
            no registered policy.
    """
    policy = get_policy(entity)
    owner_field = policy.owner_field if policy else "user"

    data.pop(owner_field, None)
    data.pop(f"{owner_field}_id", None)

    if not is_allowed(user, Operation.INSERT, entity=entity, owner_id=getattr(user, "pk", None)):
        logger.warning(
            "Access denied: insert %s requested by %s",
            _entity_label(entity),
            getattr(user, "pk", None),
        )
        raise PermissionDenied()

    data[owner_field] = user
    return data
