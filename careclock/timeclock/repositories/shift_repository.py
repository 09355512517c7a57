# -*- coding: utf-8 -*-
"""
Repository layer for Shift (DB only, no business rules).
"""
from __future__ import annotations
from datetime import date, datetime
from typing import Optional, Dict, Any

from django.db import transaction
from django.db.models import QuerySet

from timeclock.models import Shift
from timeclock.utils.db import for_update


# ============================
# Queries
# ============================
def base_qs() -> QuerySet[Shift]:
    return Shift.objects.select_related("staff")

def get_open_for_staff(staff_id: int, lock: bool = False) -> Optional[Shift]:
    qs = Shift.objects.filter(staff_id=staff_id, clock_out_at__isnull=True)
    if lock:
        qs = for_update(qs)
    return qs.first()

def list_for_staff(staff_id: int) -> QuerySet[Shift]:
    return base_qs().filter(staff_id=staff_id).order_by("-clock_in_at")

def list_shifts(
    active: Optional[bool] = None,
    staff_id: Optional[int] = None,
    clock_in_from: Optional[date] = None,
    clock_in_to: Optional[date] = None,
) -> QuerySet[Shift]:
    qs = base_qs()
    if active is True:
        qs = qs.filter(clock_out_at__isnull=True)
    elif active is False:
        qs = qs.filter(clock_out_at__isnull=False)
    if staff_id:
        qs = qs.filter(staff_id=staff_id)
    if clock_in_from:
        qs = qs.filter(clock_in_at__date__gte=clock_in_from)
    if clock_in_to:
        qs = qs.filter(clock_in_at__date__lte=clock_in_to)
    return qs.order_by("-clock_in_at")


# ============================
# Mutations
# ============================
@transaction.atomic
def create(data: Dict[str, Any]) -> Shift:
    return Shift.objects.create(**data)

def close_if_open(
    shift_id: int,
    *,
    clock_out_at: datetime,
    clock_out_lat: float,
    clock_out_lng: float,
    clock_out_note: Optional[str] = None,
) -> int:
    """
    Conditional UPDATE ... WHERE clock_out_at IS NULL.
    Returns the number of rows changed (0 when another request closed it first).
    """
    return Shift.objects.filter(pk=shift_id, clock_out_at__isnull=True).update(
        clock_out_at=clock_out_at,
        clock_out_lat=clock_out_lat,
        clock_out_lng=clock_out_lng,
        clock_out_note=clock_out_note,
        updated_at=clock_out_at,
    )
