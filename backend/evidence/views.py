"""
Evidence app ViewSets.

Architecture: views are intentionally thin.
Every view follows the strict three-step pattern:

    1. Parse / validate input via a serializer.
    2. Delegate all business logic to the appropriate service class.
    3. Serialize the result and return a DRF ``Response``.

ViewSets
--------
- ``EvidenceViewSet``           — /api/evidence/ CRUD.
- ``CaseEvidenceViewSet``       — /api/cases/{case_pk}/evidence/ list.
- ``LabReportViewSet``          — /api/lab-reports/ CRUD.
- ``EvidenceLabReportViewSet``  — /api/evidence/{evidence_pk}/lab-reports/ list.
"""

from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
)

from cases.services import CaseQueryService

from .models import Evidence, LabReport
from .serializers import (
    EvidenceFilterSerializer,
    EvidenceSerializer,
    EvidenceWriteSerializer,
    LabReportFilterSerializer,
    LabReportSerializer,
    LabReportWriteSerializer,
)
from .services import (
    EvidenceQueryService,
    EvidenceRecordService,
    LabReportQueryService,
    LabReportRecordService,
)


# ═══════════════════════════════════════════════════════════════════
#  Evidence
# ═══════════════════════════════════════════════════════════════════


class EvidenceViewSet(viewsets.ViewSet):
    """
    Central ViewSet for evidence items.

    Uses ``viewsets.ViewSet`` (not ``ModelViewSet``) so every action is
    explicitly defined.  The base permission is ``IsAuthenticated``;
    ownership checks are enforced inside the service layer.
    """

    permission_classes = [IsAuthenticated]
    # Allows drf-spectacular to infer path-parameter types automatically.
    queryset = Evidence.objects.none()

    @extend_schema(
        summary="List evidence items",
        description="Newest first, with optional filters (type, status, case, collection date range, search).",
        parameters=[
            OpenApiParameter(name="type", type=str, required=False, description="Filter by evidence type."),
            OpenApiParameter(name="status", type=str, required=False, description="Filter by storage status."),
            OpenApiParameter(name="case", type=str, required=False, description="Filter by parent case ID."),
            OpenApiParameter(name="collected_after", type=str, required=False, description="ISO date, collected on or after."),
            OpenApiParameter(name="collected_before", type=str, required=False, description="ISO date, collected on or before."),
            OpenApiParameter(name="search", type=str, required=False, description="Free-text search."),
        ],
        responses={200: OpenApiResponse(response=EvidenceSerializer(many=True), description="Evidence list.")},
        tags=["Evidence"],
    )
    def list(self, request: Request) -> Response:
        """GET /api/evidence/ — List evidence with optional filters."""
        filter_serializer = EvidenceFilterSerializer(data=request.query_params)
        if not filter_serializer.is_valid():
            return Response(filter_serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        queryset = EvidenceQueryService.get_filtered_queryset(
            request.user, filter_serializer.validated_data
        )
        serializer = EvidenceSerializer(queryset, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Register evidence",
        request=EvidenceWriteSerializer,
        responses={
            201: OpenApiResponse(response=EvidenceSerializer, description="Evidence created."),
            400: OpenApiResponse(description="Validation error, e.g. unknown case."),
        },
        tags=["Evidence"],
    )
    def create(self, request: Request) -> Response:
        """POST /api/evidence/"""
        serializer = EvidenceWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        evidence = EvidenceRecordService.create_evidence(
            serializer.validated_data, request.user
        )
        return Response(EvidenceSerializer(evidence).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Retrieve evidence detail",
        responses={200: OpenApiResponse(response=EvidenceSerializer, description="Evidence detail.")},
        tags=["Evidence"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        """GET /api/evidence/{id}/"""
        evidence = EvidenceQueryService.get_evidence_detail(pk, request.user)
        return Response(EvidenceSerializer(evidence).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Partial update evidence",
        request=EvidenceWriteSerializer,
        responses={
            200: OpenApiResponse(response=EvidenceSerializer, description="Evidence updated."),
            400: OpenApiResponse(description="Validation error."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Evidence"],
    )
    def partial_update(self, request: Request, pk: str = None) -> Response:
        """PATCH /api/evidence/{id}/"""
        evidence = EvidenceQueryService.get_evidence_detail(pk, request.user)
        serializer = EvidenceWriteSerializer(evidence, data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        updated = EvidenceRecordService.update_evidence(
            evidence, serializer.validated_data, request.user
        )
        return Response(EvidenceSerializer(updated).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Delete evidence",
        description="Also removes the lab reports filed for this item.",
        responses={
            204: OpenApiResponse(description="Deleted."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Evidence"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        """DELETE /api/evidence/{id}/"""
        evidence = EvidenceQueryService.get_evidence_detail(pk, request.user)
        EvidenceRecordService.delete_evidence(evidence, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class CaseEvidenceViewSet(viewsets.ViewSet):
    """GET /api/cases/{case_pk}/evidence/ — evidence collected for one case."""

    permission_classes = [IsAuthenticated]
    queryset = Evidence.objects.none()

    @extend_schema(
        summary="List a case's evidence",
        responses={
            200: OpenApiResponse(response=EvidenceSerializer(many=True), description="Evidence of the case."),
            404: OpenApiResponse(description="Case not found."),
        },
        tags=["Evidence"],
    )
    def list(self, request: Request, case_pk: str = None) -> Response:
        case = CaseQueryService.get_case(case_pk, request.user)
        queryset = EvidenceQueryService.get_evidence_for_case(case, request.user)
        return Response(EvidenceSerializer(queryset, many=True).data, status=status.HTTP_200_OK)


# ═══════════════════════════════════════════════════════════════════
#  Lab Reports
# ═══════════════════════════════════════════════════════════════════


class LabReportViewSet(viewsets.ViewSet):
    """/api/lab-reports/"""

    permission_classes = [IsAuthenticated]
    queryset = LabReport.objects.none()

    @extend_schema(
        summary="List lab reports",
        parameters=[
            OpenApiParameter(name="status", type=str, required=False, description="Filter by report status."),
            OpenApiParameter(name="evidence", type=str, required=False, description="Filter by evidence ID."),
            OpenApiParameter(name="search", type=str, required=False, description="Free-text search."),
        ],
        responses={200: OpenApiResponse(response=LabReportSerializer(many=True), description="Lab report list.")},
        tags=["Lab Reports"],
    )
    def list(self, request: Request) -> Response:
        filter_serializer = LabReportFilterSerializer(data=request.query_params)
        if not filter_serializer.is_valid():
            return Response(filter_serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        queryset = LabReportQueryService.get_filtered_queryset(
            request.user, filter_serializer.validated_data
        )
        return Response(LabReportSerializer(queryset, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="File a lab report",
        request=LabReportWriteSerializer,
        responses={
            201: OpenApiResponse(response=LabReportSerializer, description="Lab report created."),
            400: OpenApiResponse(description="Validation error, e.g. unknown evidence."),
        },
        tags=["Lab Reports"],
    )
    def create(self, request: Request) -> Response:
        serializer = LabReportWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        report = LabReportRecordService.create_report(serializer.validated_data, request.user)
        return Response(LabReportSerializer(report).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Retrieve a lab report",
        responses={200: OpenApiResponse(response=LabReportSerializer, description="Lab report detail.")},
        tags=["Lab Reports"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        report = LabReportQueryService.get_report(pk, request.user)
        return Response(LabReportSerializer(report).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Update a lab report",
        request=LabReportWriteSerializer,
        responses={
            200: OpenApiResponse(response=LabReportSerializer, description="Lab report updated."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Lab Reports"],
    )
    def partial_update(self, request: Request, pk: str = None) -> Response:
        report = LabReportQueryService.get_report(pk, request.user)
        serializer = LabReportWriteSerializer(report, data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        updated = LabReportRecordService.update_report(report, serializer.validated_data, request.user)
        return Response(LabReportSerializer(updated).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Delete a lab report",
        responses={
            204: OpenApiResponse(description="Deleted."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Lab Reports"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        report = LabReportQueryService.get_report(pk, request.user)
        LabReportRecordService.delete_report(report, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EvidenceLabReportViewSet(viewsets.ViewSet):
    """GET /api/evidence/{evidence_pk}/lab-reports/ — reports filed for one item."""

    permission_classes = [IsAuthenticated]
    queryset = LabReport.objects.none()

    @extend_schema(
        summary="List an evidence item's lab reports",
        responses={
            200: OpenApiResponse(response=LabReportSerializer(many=True), description="Lab reports of the item."),
            404: OpenApiResponse(description="Evidence not found."),
        },
        tags=["Lab Reports"],
    )
    def list(self, request: Request, evidence_pk: str = None) -> Response:
        evidence = EvidenceQueryService.get_evidence_detail(evidence_pk, request.user)
        queryset = LabReportQueryService.get_reports_for_evidence(evidence, request.user)
        return Response(LabReportSerializer(queryset, many=True).data, status=status.HTTP_200_OK)
