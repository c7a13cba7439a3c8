"""
Cases app ViewSets.

Architecture: views are intentionally thin.  Every action follows the
same three steps:

    1. Parse / validate input via a serializer.
    2. Delegate to ``CaseQueryService`` or ``CaseRecordService``.
    3. Serialize the result and return a DRF ``Response``.

Ownership checks happen inside the service layer, never here.
"""

from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema

from .models import Case
from .serializers import (
    CaseDetailSerializer,
    CaseFilterSerializer,
    CaseListSerializer,
    CaseWriteSerializer,
)
from .services import CaseQueryService, CaseRecordService


class CaseViewSet(viewsets.ViewSet):
    """
    /api/cases/

    Uses ``viewsets.ViewSet`` so every exposed action is spelled out.
    ``PUT`` is not offered; updates are partial.
    """

    permission_classes = [IsAuthenticated]
    # Allows drf-spectacular to infer path-parameter types automatically.
    queryset = Case.objects.none()

    @extend_schema(
        summary="List cases",
        description="Newest first.  Filter by status or priority, or search by case number, title and location.",
        parameters=[
            OpenApiParameter(name="status", type=str, required=False, description="Filter by case status."),
            OpenApiParameter(name="priority", type=str, required=False, description="Filter by priority."),
            OpenApiParameter(name="lead_officer", type=str, required=False, description="Filter by lead officer ID."),
            OpenApiParameter(name="search", type=str, required=False, description="Free-text search."),
        ],
        responses={200: OpenApiResponse(response=CaseListSerializer(many=True), description="Case list.")},
        tags=["Cases"],
    )
    def list(self, request: Request) -> Response:
        """GET /api/cases/"""
        filter_serializer = CaseFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        queryset = CaseQueryService.get_filtered_queryset(
            request.user, filter_serializer.validated_data
        )
        serializer = CaseListSerializer(queryset, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Open a case",
        request=CaseWriteSerializer,
        responses={
            201: OpenApiResponse(response=CaseDetailSerializer, description="Case created."),
            400: OpenApiResponse(description="Validation error or constraint violation."),
        },
        tags=["Cases"],
    )
    def create(self, request: Request) -> Response:
        """POST /api/cases/"""
        serializer = CaseWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        case = CaseRecordService.create_case(serializer.validated_data, request.user)
        return Response(CaseDetailSerializer(case).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Retrieve a case",
        responses={
            200: OpenApiResponse(response=CaseDetailSerializer, description="Case detail."),
            404: OpenApiResponse(description="Not found."),
        },
        tags=["Cases"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        """GET /api/cases/{id}/"""
        case = CaseQueryService.get_case(pk, request.user)
        return Response(CaseDetailSerializer(case).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Update a case",
        request=CaseWriteSerializer,
        responses={
            200: OpenApiResponse(response=CaseDetailSerializer, description="Case updated."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Cases"],
    )
    def partial_update(self, request: Request, pk: str = None) -> Response:
        """PATCH /api/cases/{id}/"""
        case = CaseQueryService.get_case(pk, request.user)
        serializer = CaseWriteSerializer(case, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        updated = CaseRecordService.update_case(case, serializer.validated_data, request.user)
        return Response(CaseDetailSerializer(updated).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Delete a case",
        description="Also removes the case's evidence, suspects and the lab reports on that evidence.",
        responses={
            204: OpenApiResponse(description="Deleted."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Cases"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        """DELETE /api/cases/{id}/"""
        case = CaseQueryService.get_case(pk, request.user)
        CaseRecordService.delete_case(case, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
