"""
Smoke tests — verify that Django boots, URL routing resolves, and
the core domain modules are importable.

These tests require a DB (they use ``@pytest.mark.django_db`` where
needed) but do NOT require real data — they just prove the plumbing
works.
"""

from __future__ import annotations

import pytest
from django.urls import resolve, reverse


# ════════════════════════════════════════════════════════════════════
#  URL Routing Smoke Tests
# ════════════════════════════════════════════════════════════════════

class TestURLRouting:
    """Ensure all top-level app URL names resolve."""

    EXPECTED_URLS = [
        # (url_name, expected_path_prefix)
        ("accounts:register",     "/api/accounts/auth/register/"),
        ("accounts:login",        "/api/accounts/auth/login/"),
        ("accounts:me",           "/api/accounts/me/"),
        ("accounts:profile-list", "/api/accounts/profiles/"),
        ("officer-list",          "/api/officers/"),
        ("case-list",             "/api/cases/"),
        ("suspect-list",          "/api/suspects/"),
        ("evidence-list",         "/api/evidence/"),
        ("lab-report-list",       "/api/lab-reports/"),
        ("core:dashboard-stats",  "/api/core/dashboard/"),
        ("core:system-constants", "/api/core/constants/"),
        ("schema",                "/api/schema/"),
    ]

    @pytest.mark.parametrize("url_name,expected_prefix", EXPECTED_URLS)
    def test_url_resolves(self, url_name: str, expected_prefix: str):
        """Named URL reverses to the expected path prefix."""
        url = reverse(url_name)
        assert url.startswith(expected_prefix), (
            f"{url_name} resolved to {url}, expected prefix {expected_prefix}"
        )

    @pytest.mark.parametrize("url_name,expected_prefix", EXPECTED_URLS)
    def test_url_resolve_matches_view(self, url_name: str, expected_prefix: str):
        """Path resolves to a view function (not a 404)."""
        match = resolve(expected_prefix)
        assert match.func is not None

    def test_nested_child_routes(self):
        case_id = "11111111-1111-1111-1111-111111111111"
        evidence_id = "22222222-2222-2222-2222-222222222222"

        assert reverse("case-evidence-list", kwargs={"case_pk": case_id}) == (
            f"/api/cases/{case_id}/evidence/"
        )
        assert reverse("case-suspect-list", kwargs={"case_pk": case_id}) == (
            f"/api/cases/{case_id}/suspects/"
        )
        assert reverse("evidence-lab-report-list", kwargs={"evidence_pk": evidence_id}) == (
            f"/api/evidence/{evidence_id}/lab-reports/"
        )


@pytest.mark.django_db
def test_schema_endpoint_renders(api_client):
    response = api_client.get(reverse("schema"))
    assert response.status_code == 200


# ════════════════════════════════════════════════════════════════════
#  Core Domain Module Import Tests
# ════════════════════════════════════════════════════════════════════

class TestCoreDomainImports:
    """Verify that shared domain utility modules are importable."""

    def test_import_exceptions(self):
        from core.domain.exceptions import (
            Conflict,
            ConstraintViolation,
            DomainError,
            NotFound,
            PermissionDenied,
        )
        # Ensure they form an inheritance chain
        assert issubclass(ConstraintViolation, DomainError)
        assert issubclass(Conflict, DomainError)
        assert issubclass(PermissionDenied, DomainError)
        assert issubclass(NotFound, DomainError)

    def test_import_transactions(self):
        from core.domain.transactions import apply_changes, atomic_write
        assert callable(apply_changes)
        assert callable(atomic_write)

    def test_import_access(self):
        from core.domain.access import (
            assign_owner,
            authorize,
            is_allowed,
            scope_visible,
        )
        assert callable(assign_owner)
        assert callable(authorize)
        assert callable(is_allowed)
        assert callable(scope_visible)


class TestDomainExceptions:

    def test_domain_error_message(self):
        from core.domain.exceptions import DomainError
        err = DomainError("test message")
        assert str(err) == "test message"

    def test_default_messages_are_generic(self):
        from core.domain.exceptions import ConstraintViolation, PermissionDenied

        assert str(PermissionDenied()) == "You do not have permission to perform this action."
        assert "constraint" in str(ConstraintViolation())
