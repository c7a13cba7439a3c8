"""
core.domain.transactions — Helpers for atomic writes.

Every user action (save, delete) is a single atomic write.  These helpers
wrap ``transaction.atomic`` and translate database integrity errors
(check constraints, foreign keys, unique indexes) into the opaque domain
``ConstraintViolation`` so the rejected statement leaves no partial state
and no database internals reach the client.

Usage::

    from core.domain.transactions import apply_changes, atomic_write

    with atomic_write("Case"):
        case = Case.objects.create(**data)

    # Partial update of an existing row:
    case = apply_changes(case, {"status": "closed"})
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, TypeVar

from django.db import IntegrityError, models, transaction

from core.domain.exceptions import ConstraintViolation

M = TypeVar("M", bound=models.Model)

logger = logging.getLogger(__name__)


@contextmanager
def atomic_write(label: str = "record") -> Iterator[None]:
    """
    Run the enclosed block inside ``transaction.atomic()``.

    An ``IntegrityError`` rolls the block back and is re-raised as
    ``ConstraintViolation``; the original error is logged.

    Args:
        label: Human-readable name of the entity being written, used in
               the log line only.
    """
    try:
        with transaction.atomic():
            yield
    except IntegrityError as exc:
        logger.warning("Write to %s rejected by the data store: %s", label, exc)
        raise ConstraintViolation() from exc


def apply_changes(instance: M, validated_data: dict[str, Any]) -> M:
    """
    Copy ``validated_data`` onto ``instance`` and persist only the
    changed columns plus ``updated_at`` in one atomic statement.

    Args:
        instance:        The model instance to update.
        validated_data:  Field name → new value, already validated.

    Returns:
        The same instance, saved.

    Raises:
        ConstraintViolation: If the database rejects the update; the
            row in the database is left unchanged.
    """
    update_fields = []
    for key, value in validated_data.items():
        setattr(instance, key, value)
        update_fields.append(key)

    if not update_fields:
        return instance

    update_fields.append("updated_at")
    with atomic_write(type(instance).__name__):
        instance.save(update_fields=update_fields)
    return instance
