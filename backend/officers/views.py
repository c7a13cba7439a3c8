"""
Officers app ViewSets.

Thin views: validate with a serializer, delegate to the service layer,
serialize the result.  Ownership checks happen in the services.
"""

from __future__ import annotations

from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema

from .models import Officer
from .serializers import (
    OfficerFilterSerializer,
    OfficerSerializer,
    OfficerWriteSerializer,
)
from .services import OfficerQueryService, OfficerRecordService


class OfficerViewSet(viewsets.ViewSet):
    """
    /api/officers/

    Every authenticated account sees the whole roster; only the account
    that added an officer may edit or remove it.
    """

    permission_classes = [IsAuthenticated]
    queryset = Officer.objects.none()

    @extend_schema(
        summary="List officers",
        parameters=[
            OpenApiParameter(name="rank", type=str, required=False, description="Filter by rank (case-insensitive)."),
            OpenApiParameter(name="search", type=str, required=False, description="Search name, rank or badge number."),
        ],
        responses={200: OpenApiResponse(response=OfficerSerializer(many=True), description="Officer list.")},
        tags=["Officers"],
    )
    def list(self, request: Request) -> Response:
        filter_serializer = OfficerFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        queryset = OfficerQueryService.get_filtered_queryset(
            request.user, filter_serializer.validated_data
        )
        return Response(OfficerSerializer(queryset, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Add an officer",
        request=OfficerWriteSerializer,
        responses={
            201: OpenApiResponse(response=OfficerSerializer, description="Officer created."),
            400: OpenApiResponse(description="Validation error."),
        },
        tags=["Officers"],
    )
    def create(self, request: Request) -> Response:
        serializer = OfficerWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        officer = OfficerRecordService.create_officer(serializer.validated_data, request.user)
        return Response(OfficerSerializer(officer).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Retrieve an officer",
        responses={200: OpenApiResponse(response=OfficerSerializer, description="Officer detail.")},
        tags=["Officers"],
    )
    def retrieve(self, request: Request, pk: str = None) -> Response:
        officer = OfficerQueryService.get_officer(pk, request.user)
        return Response(OfficerSerializer(officer).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Update an officer",
        request=OfficerWriteSerializer,
        responses={
            200: OpenApiResponse(response=OfficerSerializer, description="Officer updated."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Officers"],
    )
    def partial_update(self, request: Request, pk: str = None) -> Response:
        officer = OfficerQueryService.get_officer(pk, request.user)
        serializer = OfficerWriteSerializer(officer, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        updated = OfficerRecordService.update_officer(officer, serializer.validated_data, request.user)
        return Response(OfficerSerializer(updated).data, status=status.HTTP_200_OK)

    @extend_schema(
        summary="Remove an officer",
        description="Cases led by this officer keep existing with no lead officer.",
        responses={
            204: OpenApiResponse(description="Deleted."),
            403: OpenApiResponse(description="Not the owning account."),
        },
        tags=["Officers"],
    )
    def destroy(self, request: Request, pk: str = None) -> Response:
        officer = OfficerQueryService.get_officer(pk, request.user)
        OfficerRecordService.delete_officer(officer, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)
