# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import timedelta

from django.utils import timezone
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema, extend_schema_view

from timeclock.permissions import IsManager
from timeclock.serializers.analytics_serializer import (
    DashboardSummarySerializer,
    DateQuerySerializer,
    DateRangeQuerySerializer,
    HoursPerDaySerializer,
    MyTodaySerializer,
    StaffTotalSerializer,
)
from timeclock.services import analytics_service
from timeclock.services.clock_service import ClockState, current_state
from timeclock.services.staff_service import get_me
from timeclock.views.utils import q_date, std_errors, subject_of

DEFAULT_RANGE_DAYS = 7


def _range(request, default_days=None):
    s = DateRangeQuerySerializer(data=request.query_params.dict())
    s.is_valid(raise_exception=True)
    date_from = s.validated_data.get("date_from")
    date_to = s.validated_data.get("date_to")
    if default_days:
        date_to = date_to or timezone.localdate()
        date_from = date_from or date_to - timedelta(days=default_days - 1)
    return date_from, date_to


@extend_schema_view(
    get=extend_schema(
        tags=["Analytics"],
        summary="Manager dashboard numbers for a day",
        parameters=[q_date("date", "Day (YYYY-MM-DD), default today")],
        responses={200: DashboardSummarySerializer, **std_errors()},
    ),
)
class DashboardSummaryView(APIView):
    permission_classes = [IsAuthenticated, IsManager]

    def get(self, request):
        s = DateQuerySerializer(data=request.query_params.dict())
        s.is_valid(raise_exception=True)
        summary = analytics_service.dashboard_summary(day=s.validated_data.get("date"))
        return Response(DashboardSummarySerializer(summary).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Analytics"],
        summary="Closed hours per day (default: last 7 days)",
        parameters=[q_date("date_from", "First day"), q_date("date_to", "Last day")],
        responses={200: HoursPerDaySerializer(many=True), **std_errors()},
    ),
)
class HoursPerDayView(APIView):
    permission_classes = [IsAuthenticated, IsManager]

    def get(self, request):
        date_from, date_to = _range(request, default_days=DEFAULT_RANGE_DAYS)
        try:
            rows = analytics_service.hours_per_day(date_from, date_to)
        except ValueError as ex:
            raise ValidationError({"detail": str(ex)})
        return Response(HoursPerDaySerializer(rows, many=True).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Analytics"],
        summary="Shift count and closed hours per staff member",
        parameters=[q_date("date_from", "First day"), q_date("date_to", "Last day")],
        responses={200: StaffTotalSerializer(many=True), **std_errors()},
    ),
)
class StaffTotalsView(APIView):
    permission_classes = [IsAuthenticated, IsManager]

    def get(self, request):
        date_from, date_to = _range(request)
        try:
            rows = analytics_service.staff_totals(date_from, date_to)
        except ValueError as ex:
            raise ValidationError({"detail": str(ex)})
        return Response(StaffTotalSerializer(rows, many=True).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Analytics"],
        summary="Hours the caller has clocked today",
        responses={200: MyTodaySerializer, **std_errors()},
    ),
)
class MyTodayView(APIView):
    def get(self, request):
        subject = subject_of(request)
        staff = get_me(subject)
        now = timezone.now()
        state, _ = current_state(subject)
        return Response(MyTodaySerializer({
            "date": timezone.localdate(now),
            "hours": analytics_service.staff_hours_today(staff, now=now),
            "is_clocked_in": state == ClockState.CLOCKED_IN,
        }).data)
