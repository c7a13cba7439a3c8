"""
Integration tests — suspects attached to cases.

Endpoints under test:
  /api/suspects/, /api/suspects/{id}/ and /api/cases/{case_pk}/suspects/
"""

from __future__ import annotations

import pytest
from django.urls import reverse
from rest_framework import status

from cases.models import Case
from suspects.models import Suspect, SuspectStatus


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


class TestSuspectCreate:

    def test_create_embeds_case_summary(self, auth_client, alice, case):
        response = auth_client(alice).post(
            reverse("suspect-list"),
            {"case": str(case.pk), "name": "John Smith", "age": 35, "gender": "male"},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED, response.data
        assert response.data["status"] == SuspectStatus.SUSPECT
        assert response.data["case_detail"] == {
            "id": str(case.pk),
            "case_number": "CASE-2024-001",
            "title": "Burglary",
        }
        assert response.data["user"] == alice.pk

    def test_may_attach_to_another_accounts_case(self, auth_client, bob, case):
        response = auth_client(bob).post(
            reverse("suspect-list"), {"case": str(case.pk), "name": "Eve"}, format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert Suspect.objects.get(pk=response.data["id"]).user_id == bob.pk

    def test_unknown_case_is_rejected(self, auth_client, alice):
        response = auth_client(alice).post(
            reverse("suspect-list"), {"case": UNKNOWN_ID, "name": "Ghost"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "case" in response.data
        assert not Suspect.objects.exists()

    @pytest.mark.parametrize("age", [-1, 151])
    def test_age_out_of_range_is_rejected(self, auth_client, alice, case, age):
        response = auth_client(alice).post(
            reverse("suspect-list"),
            {"case": str(case.pk), "name": "Old Timer", "age": age},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "age" in response.data

    @pytest.mark.parametrize("age", [0, 150, None])
    def test_age_bounds_are_inclusive(self, auth_client, alice, case, age):
        response = auth_client(alice).post(
            reverse("suspect-list"),
            {"case": str(case.pk), "name": "Edge", "age": age},
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED

    def test_invalid_status_is_rejected(self, auth_client, alice, case):
        response = auth_client(alice).post(
            reverse("suspect-list"),
            {"case": str(case.pk), "name": "X", "status": "convicted"},
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestSuspectReadAndSearch:

    def test_search_by_parent_case_number(self, auth_client, alice, bob, case):
        other = Case.objects.create(user=bob, case_number="CASE-2024-002", title="Fraud")
        Suspect.objects.create(user=alice, case=case, name="First")
        Suspect.objects.create(user=bob, case=other, name="Second")

        response = auth_client(alice).get(reverse("suspect-list"), {"search": "2024-002"})

        assert [row["name"] for row in response.data] == ["Second"]

    def test_filter_by_status(self, auth_client, alice, case):
        Suspect.objects.create(user=alice, case=case, name="Held", status=SuspectStatus.ARRESTED)
        Suspect.objects.create(user=alice, case=case, name="Free", status=SuspectStatus.CLEARED)

        response = auth_client(alice).get(reverse("suspect-list"), {"status": "arrested"})

        assert [row["name"] for row in response.data] == ["Held"]

    def test_case_suspects_lists_only_that_case(self, auth_client, alice, bob, case):
        other = Case.objects.create(user=alice, case_number="C-2", title="Other")
        Suspect.objects.create(user=bob, case=case, name="Mine")
        Suspect.objects.create(user=alice, case=other, name="Elsewhere")

        response = auth_client(alice).get(
            reverse("case-suspect-list", kwargs={"case_pk": case.pk})
        )

        assert response.status_code == status.HTTP_200_OK
        assert [row["name"] for row in response.data] == ["Mine"]

    def test_case_suspects_for_unknown_case_returns_404(self, auth_client, alice):
        response = auth_client(alice).get(
            reverse("case-suspect-list", kwargs={"case_pk": UNKNOWN_ID})
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSuspectOwnership:

    def test_non_owner_delete_is_rejected_and_row_still_visible(self, auth_client, alice, bob, case):
        suspect = Suspect.objects.create(user=alice, case=case, name="John Smith")
        bob_client = auth_client(bob)

        response = bob_client.delete(reverse("suspect-detail", args=[suspect.pk]))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        follow_up = bob_client.get(reverse("suspect-detail", args=[suspect.pk]))
        assert follow_up.status_code == status.HTTP_200_OK
        assert follow_up.data["name"] == "John Smith"

    def test_non_owner_update_is_rejected(self, auth_client, alice, bob, case):
        suspect = Suspect.objects.create(user=alice, case=case, name="John Smith")

        response = auth_client(bob).patch(
            reverse("suspect-detail", args=[suspect.pk]), {"status": "cleared"}, format="json"
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        suspect.refresh_from_db()
        assert suspect.status == SuspectStatus.SUSPECT

    def test_owner_update_and_delete(self, auth_client, alice, case):
        suspect = Suspect.objects.create(user=alice, case=case, name="John Smith")
        client = auth_client(alice)
        url = reverse("suspect-detail", args=[suspect.pk])

        response = client.patch(url, {"status": "arrested", "age": 41}, format="json")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == "arrested"
        assert response.data["age"] == 41

        response = client.delete(url)
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Suspect.objects.filter(pk=suspect.pk).exists()
