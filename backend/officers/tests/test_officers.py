"""
Integration tests — officer roster CRUD under the ownership policy.

Endpoints under test:  /api/officers/ and /api/officers/{id}/
"""

from __future__ import annotations

import pytest
from django.urls import reverse
from rest_framework import status

from officers.models import Officer


pytestmark = pytest.mark.django_db


@pytest.fixture()
def alice(create_user):
    return create_user(username="alice")


@pytest.fixture()
def bob(create_user):
    return create_user(username="bob")


def _officer(owner, **overrides) -> Officer:
    fields = {"name": "Jane Marple", "rank": "Detective", "badge_number": "D-100"}
    fields.update(overrides)
    return Officer.objects.create(user=owner, **fields)


class TestOfficerCreate:

    def test_create_stamps_requester_as_owner(self, auth_client, alice, bob):
        client = auth_client(alice)
        response = client.post(
            reverse("officer-list"),
            {"name": "Sam Spade", "rank": "Sergeant", "user": bob.pk},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED, response.data
        officer = Officer.objects.get(pk=response.data["id"])
        assert officer.user_id == alice.pk
        assert response.data["user"] == alice.pk

    def test_rank_is_required(self, auth_client, alice):
        response = auth_client(alice).post(
            reverse("officer-list"), {"name": "No Rank"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "rank" in response.data
        assert not Officer.objects.exists()

    def test_badge_number_need_not_be_unique(self, auth_client, alice):
        _officer(alice, badge_number="B-1")
        response = auth_client(alice).post(
            reverse("officer-list"),
            {"name": "Twin", "rank": "Officer", "badge_number": "B-1"},
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED

    def test_anonymous_create_is_rejected(self, api_client):
        response = api_client.post(
            reverse("officer-list"), {"name": "X", "rank": "Officer"}, format="json"
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestOfficerRead:

    def test_list_is_workspace_wide_and_ordered_by_name(self, auth_client, alice, bob):
        _officer(alice, name="Zed")
        _officer(bob, name="Amy")

        response = auth_client(alice).get(reverse("officer-list"))

        assert response.status_code == status.HTTP_200_OK
        assert [row["name"] for row in response.data] == ["Amy", "Zed"]

    def test_search_matches_badge_number(self, auth_client, alice):
        _officer(alice, name="One", badge_number="X-77")
        _officer(alice, name="Two", badge_number="Y-12")

        response = auth_client(alice).get(reverse("officer-list"), {"search": "x-7"})

        assert [row["name"] for row in response.data] == ["One"]

    def test_retrieve_unknown_id_returns_404(self, auth_client, alice):
        url = reverse("officer-detail", args=["00000000-0000-0000-0000-000000000000"])
        assert auth_client(alice).get(url).status_code == status.HTTP_404_NOT_FOUND


class TestOfficerOwnership:

    def test_owner_can_update(self, auth_client, alice):
        officer = _officer(alice)
        response = auth_client(alice).patch(
            reverse("officer-detail", args=[officer.pk]), {"rank": "Lieutenant"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        officer.refresh_from_db()
        assert officer.rank == "Lieutenant"

    def test_non_owner_update_is_rejected_and_row_unchanged(self, auth_client, alice, bob):
        officer = _officer(alice)
        before = officer.updated_at

        response = auth_client(bob).patch(
            reverse("officer-detail", args=[officer.pk]), {"rank": "Chief"}, format="json"
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        officer.refresh_from_db()
        assert officer.rank == "Detective"
        assert officer.updated_at == before

    def test_non_owner_delete_is_rejected(self, auth_client, alice, bob):
        officer = _officer(alice)
        response = auth_client(bob).delete(reverse("officer-detail", args=[officer.pk]))

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Officer.objects.filter(pk=officer.pk).exists()

    def test_owner_can_delete(self, auth_client, alice):
        officer = _officer(alice)
        response = auth_client(alice).delete(reverse("officer-detail", args=[officer.pk]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Officer.objects.filter(pk=officer.pk).exists()
