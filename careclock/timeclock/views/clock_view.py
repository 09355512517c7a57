# -*- coding: utf-8 -*-
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import OpenApiExample, OpenApiResponse, extend_schema, extend_schema_view

from timeclock.serializers.shift_serializer import (
    ClockRequestSerializer,
    ClockStateSerializer,
    ShiftReadSerializer,
)
from timeclock.services.clock_service import attempt_clock_in, attempt_clock_out, current_state
from timeclock.views.utils import ErrorSerializer, std_errors, subject_of

CLOCK_EXAMPLE = OpenApiExample(
    "Position",
    value={"lat": 51.5072, "lng": -0.1276, "note": "Ward 3 handover"},
    request_only=True,
)


@extend_schema_view(
    post=extend_schema(
        tags=["Clock"],
        summary="Clock in at the current position",
        description="Opens a shift when the position is inside the zone configured for the caller's role.",
        request=ClockRequestSerializer,
        responses={
            201: ShiftReadSerializer,
            **std_errors({409: OpenApiResponse(ErrorSerializer, description="Already clocked in / zone not configured")}),
        },
        examples=[CLOCK_EXAMPLE],
    ),
)
class ClockInView(APIView):
    def post(self, request):
        s = ClockRequestSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        shift = attempt_clock_in(subject_of(request), s.to_position(), note=s.validated_data.get("note"))
        return Response(ShiftReadSerializer(shift).data, status=status.HTTP_201_CREATED)


@extend_schema_view(
    post=extend_schema(
        tags=["Clock"],
        summary="Clock out of the active shift",
        request=ClockRequestSerializer,
        responses={
            200: ShiftReadSerializer,
            **std_errors({409: OpenApiResponse(ErrorSerializer, description="No active shift")}),
        },
        examples=[CLOCK_EXAMPLE],
    ),
)
class ClockOutView(APIView):
    def post(self, request):
        s = ClockRequestSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        shift = attempt_clock_out(subject_of(request), s.to_position(), note=s.validated_data.get("note"))
        return Response(ShiftReadSerializer(shift).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Clock"],
        summary="Current clock state of the caller",
        responses={200: ClockStateSerializer, **std_errors()},
    ),
)
class ClockStateView(APIView):
    def get(self, request):
        state, shift = current_state(subject_of(request))
        return Response(ClockStateSerializer({"state": state.value, "shift": shift}).data)
