"""
Core app views — **Thin Views**.

Each view delegates all logic to the corresponding service in
``core.services`` and only serialises the result.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import OpenApiResponse, extend_schema

from .serializers import DashboardStatsSerializer, SystemConstantsSerializer
from .services import DashboardAggregationService, SystemConstantsService


class DashboardStatsView(APIView):
    """
    **GET /api/core/dashboard/**

    Totals per record type, active cases, pending lab reports and the
    five most recent cases.

    **Authentication**: Required (``IsAuthenticated``).

    **Error Responses**:
        - ``401 Unauthorized``: Missing or invalid credentials.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Dashboard statistics",
        responses={200: OpenApiResponse(response=DashboardStatsSerializer, description="Dashboard stats.")},
        tags=["Dashboard"],
    )
    def get(self, request: Request) -> Response:
        service = DashboardAggregationService(user=request.user)
        serializer = DashboardStatsSerializer(service.get_stats())
        return Response(serializer.data, status=status.HTTP_200_OK)


class SystemConstantsView(APIView):
    """
    **GET /api/core/constants/**

    Choice enumerations and suggestion lists for client dropdowns.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="System constants",
        responses={200: OpenApiResponse(response=SystemConstantsSerializer, description="Constants.")},
        tags=["Constants"],
    )
    def get(self, request: Request) -> Response:
        serializer = SystemConstantsSerializer(SystemConstantsService.get_constants())
        return Response(serializer.data, status=status.HTTP_200_OK)
