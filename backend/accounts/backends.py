"""
Login backend for casefile accounts.

``LoginView`` sends a single ``identifier`` field.  It matches an account
whose username equals it exactly or whose email equals it ignoring case,
since emails are stored as typed at registration.  Usernames may
themselves contain ``@``, so both columns are always consulted.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from django.db.models import Q

User = get_user_model()


class MultiFieldAuthBackend(ModelBackend):
    """Resolve an account from a username or an email, then check the password."""

    def authenticate(self, request, identifier=None, password=None, **kwargs):
        if not identifier or password is None:
            return None

        identifier = identifier.strip()
        matches = Q(username=identifier) | Q(email__iexact=identifier)

        try:
            user = User.objects.get(matches)
        except User.DoesNotExist:
            # Hash anyway so unknown identifiers take as long as wrong passwords
            User().set_password(password)
            return None
        except User.MultipleObjectsReturned:
            # Identifier is one account's username and another's email.
            return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        return None
