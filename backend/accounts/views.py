"""
Accounts app views.

All views follow the **Thin View** pattern: validate input via
serializers, delegate to the service layer, and return the result
wrapped in a DRF ``Response``.  **No business logic** resides here.

View Map
--------
- ``RegisterView``    — POST /auth/register/
- ``LoginView``       — POST /auth/login/
- ``MeView``          — GET / PATCH /me/
- ``ProfileViewSet``  — /profiles/ (list, retrieve, partial_update)
"""

from __future__ import annotations

from rest_framework import generics, status, viewsets
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import OpenApiResponse, extend_schema

from .models import Profile
from .serializers import (
    LoginRequestSerializer,
    ProfileSerializer,
    ProfileUpdateSerializer,
    RegisterRequestSerializer,
    TokenResponseSerializer,
    UserDetailSerializer,
)
from .services import (
    AuthenticationService,
    ProfileService,
    UserRegistrationService,
)


# ═══════════════════════════════════════════════════════════════════
#  Authentication Views
# ═══════════════════════════════════════════════════════════════════


class RegisterView(generics.CreateAPIView):
    """
    POST /api/accounts/auth/register/

    Public endpoint.  Creates a new account and its profile.

    Request body  → ``RegisterRequestSerializer``
    Response body → ``UserDetailSerializer`` (201 Created)
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = RegisterRequestSerializer

    @extend_schema(
        summary="Register an account",
        responses={
            201: OpenApiResponse(response=UserDetailSerializer, description="Account created."),
            400: OpenApiResponse(description="Validation error."),
            409: OpenApiResponse(description="Username or email already taken."),
        },
        tags=["Accounts"],
    )
    def create(self, request: Request, *args, **kwargs) -> Response:
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserRegistrationService.register_user(serializer.validated_data)
        response_serializer = UserDetailSerializer(user)
        return Response(response_serializer.data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """
    POST /api/accounts/auth/login/

    Public endpoint.  Authenticates via username or email plus password
    and returns a JWT pair with the account payload.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Log in",
        request=LoginRequestSerializer,
        responses={
            200: OpenApiResponse(response=TokenResponseSerializer, description="Tokens issued."),
            401: OpenApiResponse(description="Invalid credentials."),
        },
        tags=["Accounts"],
    )
    def post(self, request: Request) -> Response:
        serializer = LoginRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = AuthenticationService.authenticate(
            identifier=serializer.validated_data["identifier"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            return Response(
                {"detail": "Invalid credentials."},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        payload = AuthenticationService.generate_tokens(user)
        payload["user"] = UserDetailSerializer(user).data
        return Response(payload, status=status.HTTP_200_OK)


# ═══════════════════════════════════════════════════════════════════
#  Current User ("Me") View
# ═══════════════════════════════════════════════════════════════════


class MeView(APIView):
    """
    GET   /api/accounts/me/ → the authenticated account with its profile.
    PATCH /api/accounts/me/ → update own profile fields.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Current account",
        responses={200: OpenApiResponse(response=UserDetailSerializer, description="Current account.")},
        tags=["Accounts"],
    )
    def get(self, request: Request) -> Response:
        serializer = UserDetailSerializer(request.user)
        return Response(serializer.data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Update own profile",
        request=ProfileUpdateSerializer,
        responses={
            200: OpenApiResponse(response=UserDetailSerializer, description="Profile updated."),
            404: OpenApiResponse(description="No profile exists for this account."),
        },
        tags=["Accounts"],
    )
    def patch(self, request: Request) -> Response:
        profile = ProfileService.get_own_profile(request.user)
        serializer = ProfileUpdateSerializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        ProfileService.update_profile(profile, serializer.validated_data, request.user)
        return Response(UserDetailSerializer(request.user).data, status=status.HTTP_200_OK)


# ═══════════════════════════════════════════════════════════════════
#  Profile ViewSet
# ═══════════════════════════════════════════════════════════════════


class ProfileViewSet(viewsets.ViewSet):
    """
    /api/accounts/profiles/

    Profiles are readable only by their own account, so the list holds
    at most one row and other accounts' profiles answer 404.
    """

    permission_classes = [IsAuthenticated]
    queryset = Profile.objects.none()

    @extend_schema(
        summary="List visible profiles",
        responses={200: OpenApiResponse(response=ProfileSerializer(many=True), description="Own profile.")},
        tags=["Accounts"],
    )
    def list(self, request: Request) -> Response:
        queryset = ProfileService.get_visible_queryset(request.user)
        serializer = ProfileSerializer(queryset, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Retrieve a profile",
        responses={200: OpenApiResponse(response=ProfileSerializer, description="Profile.")},
        tags=["Accounts"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        profile = ProfileService.get_profile(pk, request.user)
        return Response(ProfileSerializer(profile).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Update a profile",
        request=ProfileUpdateSerializer,
        responses={200: OpenApiResponse(response=ProfileSerializer, description="Profile updated.")},
        tags=["Accounts"],
    )
    def partial_update(self, request: Request, pk: str = None) -> Response:
        profile = ProfileService.get_profile(pk, request.user)
        serializer = ProfileUpdateSerializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        updated = ProfileService.update_profile(profile, serializer.validated_data, request.user)
        return Response(ProfileSerializer(updated).data, status=status.HTTP_200_OK)
