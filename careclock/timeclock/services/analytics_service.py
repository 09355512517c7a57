# -*- coding: utf-8 -*-
"""
Derived attendance numbers for the manager and worker dashboards.

Durations are hours (float). An open shift counts up to `now` where the
dashboard shows live numbers (average hours today, a worker's hours today);
totals only count closed shifts.
"""
from __future__ import annotations
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from math import floor
from typing import Dict, List, Optional

from django.db.models import QuerySet
from django.utils import timezone

from timeclock.models import Shift, StaffMember
from timeclock.repositories import shift_repository as shift_repo
from timeclock.repositories import staff_repository as staff_repo

MAX_RANGE_DAYS = 366


@dataclass(frozen=True)
class DashboardSummary:
    date: date
    active_workers: int
    todays_check_ins: int
    avg_hours_today: float
    total_hours: float


def _local_date(dt: datetime) -> date:
    return timezone.localtime(dt).date() if timezone.is_aware(dt) else dt.date()

def _closed_hours(shifts) -> float:
    return sum(s.duration_hours() for s in shifts if not s.is_open)

def active_workers() -> QuerySet[Shift]:
    return shift_repo.list_shifts(active=True)

def dashboard_summary(day: Optional[date] = None, now: Optional[datetime] = None) -> DashboardSummary:
    now = now or timezone.now()
    day = day or _local_date(now)

    today = list(shift_repo.list_shifts(clock_in_from=day, clock_in_to=day))
    avg = sum(s.duration_hours(now) for s in today) / len(today) if today else 0.0

    return DashboardSummary(
        date=day,
        active_workers=active_workers().count(),
        todays_check_ins=len(today),
        avg_hours_today=round(avg, 2),
        total_hours=round(_closed_hours(shift_repo.list_shifts(active=False)), 2),
    )

def validate_range(date_from: date, date_to: date) -> None:
    if date_from > date_to:
        raise ValueError("date_from must be on or before date_to")
    if (date_to - date_from).days + 1 > MAX_RANGE_DAYS:
        raise ValueError(f"date range may span at most {MAX_RANGE_DAYS} days")

def hours_per_day(date_from: date, date_to: date) -> List[Dict]:
    """One row per calendar day in [date_from, date_to], empty days included."""
    validate_range(date_from, date_to)

    buckets: Dict[date, Dict] = {}
    d = date_from
    while d <= date_to:
        buckets[d] = {"date": d, "hours": 0.0, "shifts": 0}
        d += timedelta(days=1)

    for s in shift_repo.list_shifts(active=False, clock_in_from=date_from, clock_in_to=date_to):
        row = buckets.get(_local_date(s.clock_in_at))
        if row is None:
            continue
        row["hours"] += s.duration_hours()
        row["shifts"] += 1

    out = list(buckets.values())
    for row in out:
        row["hours"] = round(row["hours"], 2)
    return out

def staff_totals(date_from: Optional[date] = None, date_to: Optional[date] = None) -> List[Dict]:
    """Shift count and closed hours per staff member (staff without shifts included)."""
    if date_from and date_to:
        validate_range(date_from, date_to)

    counts: Dict[int, int] = defaultdict(int)
    hours: Dict[int, float] = defaultdict(float)
    for s in shift_repo.list_shifts(clock_in_from=date_from, clock_in_to=date_to):
        counts[s.staff_id] += 1
        if not s.is_open:
            hours[s.staff_id] += s.duration_hours()

    return [
        {
            "staff_id": st.id,
            "name": st.name,
            "role": st.role,
            "shift_count": counts[st.id],
            "total_hours": round(hours[st.id], 2),
        }
        for st in staff_repo.list_all()
    ]

def staff_hours_today(staff: StaffMember, now: Optional[datetime] = None) -> float:
    """Hours clocked today, open shift included, rounded down to 0.1h."""
    now = now or timezone.now()
    day = _local_date(now)
    shifts = shift_repo.list_shifts(staff_id=staff.id, clock_in_from=day, clock_in_to=day)
    total = sum(s.duration_hours(now) for s in shifts)
    return floor(round(total * 10, 6)) / 10
