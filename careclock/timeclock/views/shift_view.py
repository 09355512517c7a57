# -*- coding: utf-8 -*-
from __future__ import annotations

from django.utils import timezone
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema, extend_schema_view

from timeclock.permissions import IsManager
from timeclock.selectors.shift_selector import filter_shifts, list_my_shifts
from timeclock.serializers.shift_serializer import ShiftFilterSerializer, ShiftReadSerializer
from timeclock.services.staff_service import get_me
from timeclock.utils.pagination import DefaultPagination
from timeclock.views.utils import q_bool, q_date, q_int, std_errors, subject_of

PAGE_PARAMS = [
    q_int("page", "Page number"),
    q_int("page_size", "Items per page (max 200)"),
]


class _PaginatedShiftView(APIView):
    pagination_class = DefaultPagination

    def paginate(self, request, qs):
        paginator = self.pagination_class()
        page = paginator.paginate_queryset(qs, request, view=self)
        data = ShiftReadSerializer(page, many=True, context={"now": timezone.now()}).data
        return paginator.get_paginated_response(data)


@extend_schema_view(
    get=extend_schema(
        tags=["Shifts"],
        summary="My shifts, newest first",
        parameters=PAGE_PARAMS,
        responses={200: ShiftReadSerializer(many=True), **std_errors()},
    ),
)
class MyShiftsView(_PaginatedShiftView):
    def get(self, request):
        staff = get_me(subject_of(request))
        return self.paginate(request, list_my_shifts(staff.id))


@extend_schema_view(
    get=extend_schema(
        tags=["Shifts"],
        summary="All shifts (manager)",
        parameters=[
            q_bool("active", "true = open shifts only, false = closed only"),
            q_int("staff_id", "Filter by staff member"),
            q_date("date_from", "Clock-in date from (YYYY-MM-DD)"),
            q_date("date_to", "Clock-in date to (YYYY-MM-DD)"),
            *PAGE_PARAMS,
        ],
        responses={200: ShiftReadSerializer(many=True), **std_errors()},
    ),
)
class ShiftListView(_PaginatedShiftView):
    permission_classes = [IsAuthenticated, IsManager]

    def get(self, request):
        # plain dict: a QueryDict makes a missing boolean read as False
        f = ShiftFilterSerializer(data=request.query_params.dict())
        f.is_valid(raise_exception=True)
        return self.paginate(request, filter_shifts(**f.validated_data))
