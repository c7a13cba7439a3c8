"""
Integration tests — evidence items.

Endpoints under test:
  /api/evidence/, /api/evidence/{id}/ and /api/cases/{case_pk}/evidence/
"""

from __future__ import annotations

import datetime

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from cases.models import Case
from evidence.models import Evidence, EvidenceStatus, EvidenceType


pytestmark = pytest.mark.django_db

UNKNOWN_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture()
def alice(create_user):
    return create_user(username="alice")


@pytest.fixture()
def bob(create_user):
    return create_user(username="bob")


@pytest.fixture()
def case(alice):
    return Case.objects.create(user=alice, case_number="CASE-2024-001", title="Burglary")


def _evidence(owner, case, **overrides) -> Evidence:
    fields = {
        "evidence_number": "EV-1",
        "description": "Crowbar",
        "type": EvidenceType.PHYSICAL,
    }
    fields.update(overrides)
    return Evidence.objects.create(user=owner, case=case, **fields)


class TestEvidenceCreate:

    def test_create_applies_defaults(self, auth_client, alice, case):
        response = auth_client(alice).post(
            reverse("evidence-list"),
            {
                "case": str(case.pk),
                "evidence_number": "EV-001",
                "description": "Fingerprint on window frame",
                "type": "trace",
            },
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED, response.data
        evidence = Evidence.objects.get(pk=response.data["id"])
        assert evidence.status == EvidenceStatus.IN_STORAGE
        assert evidence.date_collected == timezone.localdate()
        assert evidence.user_id == alice.pk
        assert response.data["case_detail"]["case_number"] == "CASE-2024-001"

    def test_unknown_case_is_rejected_without_a_row(self, auth_client, alice):
        response = auth_client(alice).post(
            reverse("evidence-list"),
            {
                "case": UNKNOWN_ID,
                "evidence_number": "EV-404",
                "description": "Orphan",
                "type": "physical",
            },
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "case" in response.data
        assert not Evidence.objects.exists()

    @pytest.mark.parametrize("field", ["evidence_number", "description", "type"])
    def test_required_fields(self, auth_client, alice, case, field):
        payload = {
            "case": str(case.pk),
            "evidence_number": "EV-2",
            "description": "Glove",
            "type": "biological",
        }
        payload.pop(field)

        response = auth_client(alice).post(reverse("evidence-list"), payload, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert field in response.data

    def test_unknown_type_is_rejected(self, auth_client, alice, case):
        response = auth_client(alice).post(
            reverse("evidence-list"),
            {"case": str(case.pk), "evidence_number": "E", "description": "D", "type": "magical"},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "type" in response.data


class TestEvidenceList:

    def test_filters_by_type_and_status(self, auth_client, alice, case):
        _evidence(alice, case, evidence_number="EV-A", type=EvidenceType.DIGITAL)
        _evidence(alice, case, evidence_number="EV-B", status=EvidenceStatus.IN_LAB)

        client = auth_client(alice)
        by_type = client.get(reverse("evidence-list"), {"type": "digital"})
        by_status = client.get(reverse("evidence-list"), {"status": "in_lab"})

        assert [row["evidence_number"] for row in by_type.data] == ["EV-A"]
        assert [row["evidence_number"] for row in by_status.data] == ["EV-B"]

    def test_collection_date_range(self, auth_client, alice, case):
        _evidence(alice, case, evidence_number="OLD", date_collected=datetime.date(2023, 1, 5))
        _evidence(alice, case, evidence_number="NEW", date_collected=datetime.date(2024, 6, 1))

        response = auth_client(alice).get(
            reverse("evidence-list"),
            {"collected_after": "2024-01-01", "collected_before": "2024-12-31"},
        )

        assert [row["evidence_number"] for row in response.data] == ["NEW"]

    def test_inverted_date_range_returns_400(self, auth_client, alice):
        response = auth_client(alice).get(
            reverse("evidence-list"),
            {"collected_after": "2024-12-31", "collected_before": "2024-01-01"},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_search_matches_description(self, auth_client, alice, case):
        _evidence(alice, case, evidence_number="EV-1", description="Muddy boot print")
        _evidence(alice, case, evidence_number="EV-2", description="Laptop")

        response = auth_client(alice).get(reverse("evidence-list"), {"search": "boot"})

        assert [row["evidence_number"] for row in response.data] == ["EV-1"]

    def test_case_evidence_lists_only_that_case(self, auth_client, alice, bob, case):
        other = Case.objects.create(user=bob, case_number="C-2", title="Other")
        _evidence(bob, case, evidence_number="HERE")
        _evidence(alice, other, evidence_number="THERE")

        response = auth_client(alice).get(
            reverse("case-evidence-list", kwargs={"case_pk": case.pk})
        )

        assert response.status_code == status.HTTP_200_OK
        assert [row["evidence_number"] for row in response.data] == ["HERE"]


class TestEvidenceOwnership:

    def test_non_owner_update_is_rejected(self, auth_client, alice, bob, case):
        evidence = _evidence(alice, case)

        response = auth_client(bob).patch(
            reverse("evidence-detail", args=[evidence.pk]),
            {"status": "disposed"},
            format="json",
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        evidence.refresh_from_db()
        assert evidence.status == EvidenceStatus.IN_STORAGE

    def test_owner_moves_item_to_lab(self, auth_client, alice, case):
        evidence = _evidence(alice, case)

        response = auth_client(alice).patch(
            reverse("evidence-detail", args=[evidence.pk]),
            {"status": "in_lab", "chain_of_custody": "Handed to lab by J. Doe"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["status_display"] == "In Lab"

    def test_non_owner_delete_is_rejected(self, auth_client, alice, bob, case):
        evidence = _evidence(alice, case)

        response = auth_client(bob).delete(reverse("evidence-detail", args=[evidence.pk]))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Evidence.objects.filter(pk=evidence.pk).exists()
