"""
Integration tests — the current account ("Me") endpoint.

Endpoint under test:  GET   /api/accounts/me/   (named URL: accounts:me)
                      PATCH /api/accounts/me/
Access:               Authenticated only.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from accounts.models import Profile
from accounts.services import ProfileProvisioningService

User = get_user_model()

_PASSWORD = "Str0ng!Pass77"


class TestAuthMe(TestCase):

    @classmethod
    def setUpTestData(cls):
        cls.user = User.objects.create_user(
            username="me_test_user",
            email="me_test_user@example.com",
            password=_PASSWORD,
        )
        ProfileProvisioningService.provision(cls.user, full_name="Me Tester")

    def setUp(self):
        self.client = APIClient()
        self.me_url = reverse("accounts:me")

    def _authenticate(self):
        response = self.client.post(
            reverse("accounts:login"),
            {"identifier": "me_test_user", "password": _PASSWORD},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")

    def test_me_requires_authentication(self):
        response = self.client.get(self.me_url)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_returns_current_account(self):
        self._authenticate()
        response = self.client.get(self.me_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], self.user.pk)
        self.assertEqual(response.data["email"], "me_test_user@example.com")
        self.assertEqual(response.data["profile"]["full_name"], "Me Tester")

    def test_patch_me_updates_profile(self):
        self._authenticate()
        response = self.client.patch(self.me_url, {"full_name": "Renamed"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["profile"]["full_name"], "Renamed")
        self.assertEqual(Profile.objects.get(user=self.user).full_name, "Renamed")

    def test_patch_me_without_profile_returns_404(self):
        User.objects.create_user(
            username="no_profile", email="no_profile@example.com", password=_PASSWORD,
        )
        response = self.client.post(
            reverse("accounts:login"),
            {"identifier": "no_profile", "password": _PASSWORD},
            format="json",
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")

        response = self.client.patch(self.me_url, {"full_name": "X"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
