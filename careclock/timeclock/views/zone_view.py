# -*- coding: utf-8 -*-
from __future__ import annotations

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import OpenApiExample, extend_schema, extend_schema_view

from timeclock.permissions import IsManager
from timeclock.serializers.zone_serializer import WorkerTypeReadSerializer, ZoneWriteSerializer
from timeclock.services.staff_service import get_me
from timeclock.services.zone_service import list_staff_locations, upsert_zone, worker_type_for_staff
from timeclock.views.utils import client_ip, path_str, std_errors, subject_of


@extend_schema_view(
    get=extend_schema(
        tags=["Zones"],
        summary="Role, label and work zone of the caller",
        responses={200: WorkerTypeReadSerializer, **std_errors()},
    ),
)
class MyZoneView(APIView):
    def get(self, request):
        staff = get_me(subject_of(request))
        return Response(WorkerTypeReadSerializer(worker_type_for_staff(staff)).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Zones"],
        summary="Every role with its work zone (manager)",
        responses={200: WorkerTypeReadSerializer(many=True), **std_errors()},
    ),
)
class ZoneListView(APIView):
    permission_classes = [IsAuthenticated, IsManager]

    def get(self, request):
        return Response(WorkerTypeReadSerializer(list_staff_locations(), many=True).data)


@extend_schema_view(
    put=extend_schema(
        tags=["Zones"],
        summary="Create or update the work zone of a role (manager)",
        parameters=[path_str("role", "Role code, e.g. NURSE")],
        request=ZoneWriteSerializer,
        responses={200: WorkerTypeReadSerializer, **std_errors()},
        examples=[
            OpenApiExample("Meters", value={"lat": 51.5072, "lng": -0.1276, "radius_m": 250}, request_only=True),
            OpenApiExample("Kilometers", value={"lat": 51.5072, "lng": -0.1276, "radius_km": 1.5}, request_only=True),
        ],
    ),
)
class ZoneUpsertView(APIView):
    permission_classes = [IsAuthenticated, IsManager]

    def put(self, request, role: str):
        s = ZoneWriteSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        wt = upsert_zone(
            role=role.upper(),
            actor=subject_of(request),
            ip=client_ip(request),
            **s.validated_data,
        )
        return Response(WorkerTypeReadSerializer(wt).data)
