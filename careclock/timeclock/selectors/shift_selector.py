# -*- coding: utf-8 -*-
from __future__ import annotations
from datetime import date
from typing import Optional
from django.db.models import QuerySet

from timeclock.models import Shift
from timeclock.repositories import shift_repository as repo

# ============================
# Selector (input normalization + delegate to repo)
# ============================
def list_my_shifts(staff_id: int) -> QuerySet[Shift]:
    return repo.list_for_staff(staff_id)

def filter_shifts(
    active: Optional[bool] = None,
    staff_id: Optional[int] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
) -> QuerySet[Shift]:
    return repo.list_shifts(active=active, staff_id=staff_id, clock_in_from=date_from, clock_in_to=date_to)
