# -*- coding: utf-8 -*-
from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import OpenApiExample, extend_schema, extend_schema_view

from timeclock.serializers.staff_serializer import (
    CurrentStaffSerializer,
    RegistrationResultSerializer,
    StaffReadSerializer,
    StaffRegisterSerializer,
    StaffUpdateSerializer,
)
from timeclock.services.staff_service import get_current_staff, get_me, register_staff, update_staff
from timeclock.views.utils import std_errors, subject_of


@extend_schema_view(
    post=extend_schema(
        tags=["Staff"],
        summary="Register the caller as a staff member",
        description=(
            "Creates the staff record for the authenticated identity with the chosen role. "
            "Calling it again returns the existing record with is_new_user=false."
        ),
        request=StaffRegisterSerializer,
        responses={200: RegistrationResultSerializer, 201: RegistrationResultSerializer, **std_errors()},
        examples=[OpenApiExample("Register", value={"name": "Dana Reyes", "role": "NURSE"}, request_only=True)],
    ),
)
class StaffRegisterView(APIView):
    def post(self, request):
        s = StaffRegisterSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        result = register_staff(request.user, role=s.validated_data["role"], name=s.validated_data.get("name"))
        return Response(
            RegistrationResultSerializer(result).data,
            status=status.HTTP_201_CREATED if result.is_new else status.HTTP_200_OK,
        )


@extend_schema_view(
    get=extend_schema(
        tags=["Staff"],
        summary="The caller's staff record",
        responses={200: StaffReadSerializer, **std_errors()},
    ),
    patch=extend_schema(
        tags=["Staff"],
        summary="Update name / additional data (role is fixed)",
        request=StaffUpdateSerializer,
        responses={200: StaffReadSerializer, **std_errors()},
    ),
)
class StaffMeView(APIView):
    def get(self, request):
        return Response(StaffReadSerializer(get_me(subject_of(request))).data)

    def patch(self, request):
        s = StaffUpdateSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        staff = update_staff(subject_of(request), **s.validated_data)
        return Response(StaffReadSerializer(staff).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Staff"],
        summary="The caller's staff record, or user=null when not registered yet",
        responses={200: CurrentStaffSerializer, **std_errors()},
    ),
)
class CurrentStaffView(APIView):
    def get(self, request):
        staff = get_current_staff(subject_of(request))
        return Response(CurrentStaffSerializer({"user": staff}).data)
