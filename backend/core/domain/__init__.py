"""
core.domain — Shared domain utilities for cross-app service layers.

Modules
-------
exceptions         Domain-specific exceptions that map cleanly to HTTP responses.
exception_handler  Global DRF handler for those exceptions.
transactions       Atomic write helpers translating integrity errors.
access             Row-level ownership / visibility policy.

Usage from any app::

    from core.domain.exceptions import DomainError, NotFound
    from core.domain.transactions import atomic_write, apply_changes
    from core.domain.access import Operation, authorize, scope_visible
"""
