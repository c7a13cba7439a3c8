"""
Suspects app ViewSets.

- ``SuspectViewSet``      — /api/suspects/ CRUD.
- ``CaseSuspectViewSet``  — /api/cases/{case_pk}/suspects/ read-only list.

Views are thin; ownership is enforced by ``SuspectRecordService``.
"""

from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema

from cases.services import CaseQueryService

from .models import Suspect
from .serializers import (
    SuspectFilterSerializer,
    SuspectSerializer,
    SuspectWriteSerializer,
)
from .services import SuspectQueryService, SuspectRecordService


class SuspectViewSet(viewsets.ViewSet):
    """/api/suspects/"""

    permission_classes = [IsAuthenticated]
    queryset = Suspect.objects.none()

    @extend_schema(
        summary="List suspects",
        parameters=[
            OpenApiParameter(name="status", type=str, required=False, description="Filter by suspect status."),
            OpenApiParameter(name="case", type=str, required=False, description="Filter by case ID."),
            OpenApiParameter(name="search", type=str, required=False, description="Search name, case number or address."),
        ],
        responses={200: OpenApiResponse(response=SuspectSerializer(many=True), description="Suspect list.")},
        tags=["Suspects"],
    )
    def list(self, request: Request) -> Response:
        filter_serializer = SuspectFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        queryset = SuspectQueryService.get_filtered_queryset(
            request.user, filter_serializer.validated_data
        )
        return Response(SuspectSerializer(queryset, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Add a suspect to a case",
        request=SuspectWriteSerializer,
        responses={
            201: OpenApiResponse(response=SuspectSerializer, description="Suspect created."),
            400: OpenApiResponse(description="Validation error, e.g. unknown case."),
        },
        tags=["Suspects"],
    )
    def create(self, request: Request) -> Response:
        serializer = SuspectWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        suspect = SuspectRecordService.create_suspect(serializer.validated_data, request.user)
        return Response(SuspectSerializer(suspect).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Retrieve a suspect",
        responses={200: OpenApiResponse(response=SuspectSerializer, description="Suspect detail.")},
        tags=["Suspects"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        suspect = SuspectQueryService.get_suspect(pk, request.user)
        return Response(SuspectSerializer(suspect).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Update a suspect",
        request=SuspectWriteSerializer,
        responses={
            200: OpenApiResponse(response=SuspectSerializer, description="Suspect updated."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Suspects"],
    )
    def partial_update(self, request: Request, pk: str = None) -> Response:
        suspect = SuspectQueryService.get_suspect(pk, request.user)
        serializer = SuspectWriteSerializer(suspect, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        updated = SuspectRecordService.update_suspect(suspect, serializer.validated_data, request.user)
        return Response(SuspectSerializer(updated).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Delete a suspect",
        responses={
            204: OpenApiResponse(description="Deleted."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Suspects"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        suspect = SuspectQueryService.get_suspect(pk, request.user)
        SuspectRecordService.delete_suspect(suspect, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CaseSuspectViewSet(viewsets.ViewSet):
    """GET /api/cases/{case_pk}/suspects/ — suspects named in one case."""

    permission_classes = [IsAuthenticated]
    queryset = Suspect.objects.none()

    @extend_schema(
        summary="List a case's suspects",
        responses={
            200: OpenApiResponse(response=SuspectSerializer(many=True), description="Suspects of the case."),
            404: OpenApiResponse(description="Case not found."),
        },
        tags=["Suspects"],
    )
    def list(self, request: Request, case_pk: str = None) -> Response:
        case = CaseQueryService.get_case(case_pk, request.user)
        queryset = SuspectQueryService.get_suspects_for_case(case, request.user)
        return Response(SuspectSerializer(queryset, many=True).data, status=status.HTTP_200_OK)
