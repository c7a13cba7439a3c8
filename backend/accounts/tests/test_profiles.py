"""
Integration tests — owner-only profile visibility.

Endpoints under test:  /api/accounts/profiles/ and /api/accounts/profiles/{id}/

Unlike every other record, a profile is readable only by its own
account: another account's profile answers 404, never 403, so its
existence is not disclosed.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from accounts.models import Profile
from accounts.services import ProfileProvisioningService

User = get_user_model()


def _account(username: str, full_name: str):
    user = User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password="Str0ng!Pass99",
    )
    profile = ProfileProvisioningService.provision(user, full_name=full_name)
    return user, profile


class TestProfileVisibility(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.alice, cls.alice_profile = _account("alice", "Alice Adams")
        cls.bob, cls.bob_profile = _account("bob", "Bob Brown")

    def setUp(self):
        self.client = APIClient()
        token = AccessToken.for_user(self.alice)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    def test_list_contains_only_own_profile(self):
        response = self.client.get(reverse("accounts:profile-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["full_name"], "Alice Adams")

    def test_retrieve_own_profile(self):
        url = reverse("accounts:profile-detail", args=[self.alice_profile.pk])
        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["full_name"], "Alice Adams")

    def test_other_accounts_profile_is_not_found(self):
        url = reverse("accounts:profile-detail", args=[self.bob_profile.pk])
        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_malformed_profile_id_is_not_found(self):
        response = self.client.get("/api/accounts/profiles/not-a-uuid/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_own_profile(self):
        url = reverse("accounts:profile-detail", args=[self.alice_profile.pk])
        response = self.client.patch(url, {"role": "lead_investigator"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.alice_profile.refresh_from_db()
        self.assertEqual(self.alice_profile.role, "lead_investigator")

    def test_update_other_accounts_profile_leaves_it_unchanged(self):
        url = reverse("accounts:profile-detail", args=[self.bob_profile.pk])
        response = self.client.patch(url, {"full_name": "Hijacked"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(Profile.objects.get(pk=self.bob_profile.pk).full_name, "Bob Brown")

    def test_anonymous_request_is_rejected(self):
        self.client.credentials()
        response = self.client.get(reverse("accounts:profile-list"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
