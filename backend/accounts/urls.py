"""
Accounts app URL configuration.

All routes are namespaced under ``accounts`` and included in the
project-level ``urls.py`` as::

    path('api/accounts/', include('accounts.urls')),

Endpoint Map
------------
Authentication
    POST   /auth/register/              → RegisterView
    POST   /auth/login/                 → LoginView
    POST   /auth/token/refresh/         → TokenRefreshView (SimpleJWT)

Current Account ("Me")
    GET    /me/                         → MeView  (retrieve)
    PATCH  /me/                         → MeView  (profile partial update)

Profiles (owner-only visibility)
    GET    /profiles/                   → ProfileViewSet.list
    GET    /profiles/{id}/              → ProfileViewSet.retrieve
    PATCH  /profiles/{id}/              → ProfileViewSet.partial_update
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from .views import LoginView, MeView, ProfileViewSet, RegisterView

app_name = "accounts"

router = DefaultRouter()
router.register(r"profiles", ProfileViewSet, basename="profile")

urlpatterns = [
    # ── Authentication ───────────────────────────────────────────────
    path("auth/register/", RegisterView.as_view(), name="register"),
    path("auth/login/", LoginView.as_view(), name="login"),
    path(
        "auth/token/refresh/",
        TokenRefreshView.as_view(),
        name="token-refresh",
    ),

    # ── Current Account (Me) ─────────────────────────────────────────
    path("me/", MeView.as_view(), name="me"),

    # ── Router-registered viewsets (profiles/) ───────────────────────
    path("", include(router.urls)),
]
