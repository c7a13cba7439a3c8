"""
Database-level guards: check constraints reject rows that bypass the
serializers, and ``atomic_write`` turns the rejection into a
``ConstraintViolation`` with nothing persisted.
"""

from __future__ import annotations

import datetime

import pytest
from django.db import IntegrityError, transaction

from cases.models import Case
from core.domain.exceptions import ConstraintViolation
from core.domain.transactions import apply_changes, atomic_write
from evidence.models import Evidence, EvidenceType, LabReport
from suspects.models import Suspect


pytestmark = pytest.mark.django_db


@pytest.fixture()
def owner(create_user):
    return create_user(username="owner")


@pytest.fixture()
def case(owner):
    return Case.objects.create(user=owner, case_number="C-1", title="Check")


@pytest.fixture()
def evidence(owner, case):
    return Evidence.objects.create(
        user=owner, case=case, evidence_number="E-1",
        description="Knife", type=EvidenceType.PHYSICAL,
    )


def _assert_rejected(model, **fields):
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            model.objects.create(**fields)


class TestCheckConstraints:

    def test_case_status(self, owner):
        _assert_rejected(Case, user=owner, case_number="X", title="X", status="archived")

    def test_case_priority(self, owner):
        _assert_rejected(Case, user=owner, case_number="X", title="X", priority="urgent")

    def test_case_closed_before_opened(self, owner):
        _assert_rejected(
            Case, user=owner, case_number="X", title="X",
            date_opened=datetime.date(2024, 5, 2), date_closed=datetime.date(2024, 5, 1),
        )

    def test_suspect_status(self, owner, case):
        _assert_rejected(Suspect, user=owner, case=case, name="S", status="convicted")

    def test_suspect_age(self, owner, case):
        _assert_rejected(Suspect, user=owner, case=case, name="S", age=151)

    def test_evidence_type(self, owner, case):
        _assert_rejected(
            Evidence, user=owner, case=case, evidence_number="E", description="D", type="magical",
        )

    def test_evidence_status(self, owner, case):
        _assert_rejected(
            Evidence, user=owner, case=case, evidence_number="E", description="D",
            type=EvidenceType.DIGITAL, status="lost",
        )

    def test_lab_report_status(self, owner, evidence):
        _assert_rejected(
            LabReport, user=owner, evidence=evidence, report_number="R",
            analysis_type="A", analysis_result="R", lab_tech_name="T", status="done",
        )

    def test_lab_report_completed_before_submitted(self, owner, evidence):
        _assert_rejected(
            LabReport, user=owner, evidence=evidence, report_number="R",
            analysis_type="A", analysis_result="R", lab_tech_name="T",
            date_submitted=datetime.date(2024, 5, 2), date_completed=datetime.date(2024, 5, 1),
        )


class TestAtomicWrite:

    def test_rejected_insert_raises_constraint_violation(self, owner):
        with pytest.raises(ConstraintViolation):
            with atomic_write("Case"):
                Case.objects.create(user=owner, case_number="X", title="X", status="archived")

        assert not Case.objects.exists()

    def test_rejected_update_leaves_row_unchanged(self, case):
        with pytest.raises(ConstraintViolation):
            apply_changes(case, {"priority": "urgent"})

        case.refresh_from_db()
        assert case.priority == "medium"

    def test_apply_changes_without_fields_is_a_no_op(self, case):
        before = case.updated_at
        assert apply_changes(case, {}) is case
        case.refresh_from_db()
        assert case.updated_at == before
