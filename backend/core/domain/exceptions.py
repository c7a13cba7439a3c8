"""
core.domain.exceptions — Domain-specific exception hierarchy.

These exceptions represent rule violations raised inside service layers.
They are deliberately **not** DRF exceptions so that the domain layer stays
framework-agnostic.  The global handler in
``core.domain.exception_handler`` maps them to HTTP responses.

Mapping cheatsheet
------------------
┌──────────────────────┬──────────────────────────────┬──────┐
│ Domain Exception     │ Meaning                      │ Code │
├──────────────────────┼──────────────────────────────┼──────┤
│ DomainError          │ generic rule violation       │ 400  │
│ ConstraintViolation  │ check / FK / unique rejected │ 400  │
│ PermissionDenied     │ access policy rejected       │ 403  │
│ NotFound             │ missing or not visible       │ 404  │
│ Conflict             │ duplicate / state conflict   │ 409  │
└──────────────────────┴──────────────────────────────┴──────┘

Recommended usage inside a service::

    from core.domain.exceptions import NotFound

    try:
        return Case.objects.get(pk=pk)
    except Case.DoesNotExist:
        raise NotFound(f"Case with id {pk} not found.")
"""

from __future__ import annotations


class DomainError(Exception):
    """
    Base class for all domain / business-rule errors.

    Catch this at the view boundary and convert to a 400 Bad Request.
    """

    def __init__(self, message: str = "A business rule was violated.") -> None:
        self.message = message
        super().__init__(self.message)


class ConstraintViolation(DomainError):
    """
    The data store rejected a write (check constraint, foreign key or
    uniqueness).  The message is intentionally opaque; the underlying
    database error is logged, not returned.

    Maps to HTTP 400.
    """

    def __init__(self, message: str = "The record violates a data constraint and was not saved.") -> None:
        super().__init__(message)


class PermissionDenied(DomainError):
    """
    The requesting account is not allowed to perform this operation on
    this row (it is not the owning account, or it is anonymous).

    Maps to HTTP 403.
    """

    def __init__(self, message: str = "You do not have permission to perform this action.") -> None:
        super().__init__(message)


class NotFound(DomainError):
    """
    The requested resource does not exist (or is not visible to the
    requesting account under the read policy).

    Maps to HTTP 404.
    """

    def __init__(self, message: str = "The requested resource was not found.") -> None:
        super().__init__(message)


class Conflict(DomainError):
    """
    The operation conflicts with the current state of the resource.

    Typical usage: duplicate account registration, a second profile for
    the same account.  Maps to HTTP 409.
    """

    def __init__(self, message: str = "The operation conflicts with the current state.") -> None:
        super().__init__(message)
