"""
Deletion cascades across the record hierarchy:

    Case ──► Evidence ──► LabReport
      └───► Suspect
    Officer ──(set null)──► Case.lead_officer
"""

from __future__ import annotations

import pytest
from django.urls import reverse
from rest_framework import status

from cases.models import Case
from evidence.models import Evidence, EvidenceType, LabReport
from officers.models import Officer
from suspects.models import Suspect


pytestmark = pytest.mark.django_db


@pytest.fixture()
def alice(create_user):
    return create_user(username="alice")


@pytest.fixture()
def bob(create_user):
    return create_user(username="bob")


@pytest.fixture()
def populated_case(alice, bob):
    """A case owned by alice whose children were partly recorded by bob."""
    case = Case.objects.create(user=alice, case_number="CASE-9", title="Robbery")
    evidence = Evidence.objects.create(
        user=bob, case=case, evidence_number="EV-9",
        description="CCTV footage", type=EvidenceType.DIGITAL,
    )
    LabReport.objects.create(
        user=bob, evidence=evidence, report_number="LR-9",
        analysis_type="Digital Forensics", analysis_result="Enhanced", lab_tech_name="Kim",
    )
    Suspect.objects.create(user=bob, case=case, name="Masked person")
    return case


def test_case_delete_removes_children_of_every_owner(auth_client, alice, populated_case):
    response = auth_client(alice).delete(reverse("case-detail", args=[populated_case.pk]))

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert not Case.objects.exists()
    assert not Evidence.objects.exists()
    assert not LabReport.objects.exists()
    assert not Suspect.objects.exists()


def test_refused_case_delete_keeps_children(auth_client, bob, populated_case):
    response = auth_client(bob).delete(reverse("case-detail", args=[populated_case.pk]))

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert Evidence.objects.count() == 1
    assert LabReport.objects.count() == 1
    assert Suspect.objects.count() == 1


def test_evidence_delete_removes_its_lab_reports(auth_client, bob, populated_case):
    evidence = Evidence.objects.get(case=populated_case)

    response = auth_client(bob).delete(reverse("evidence-detail", args=[evidence.pk]))

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert not LabReport.objects.exists()
    assert Case.objects.filter(pk=populated_case.pk).exists()


def test_officer_delete_clears_lead_officer(auth_client, alice, bob, populated_case):
    officer = Officer.objects.create(user=bob, name="Lead", rank="Captain")
    populated_case.lead_officer = officer
    populated_case.save(update_fields=["lead_officer"])

    response = auth_client(bob).delete(reverse("officer-detail", args=[officer.pk]))

    assert response.status_code == status.HTTP_204_NO_CONTENT
    populated_case.refresh_from_db()
    assert populated_case.lead_officer is None


def test_account_delete_removes_owned_rows(alice, populated_case):
    alice.delete()

    assert not Case.objects.exists()
    assert not Suspect.objects.exists()
