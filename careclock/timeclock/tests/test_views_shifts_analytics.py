from datetime import timedelta

import pytest
from django.utils import timezone

from timeclock.models import Shift


def _closed(staff, hours, days_ago=0):
    start = timezone.now() - timedelta(days=days_ago, hours=hours + 1)
    return Shift.objects.create(
        staff=staff, clock_in_at=start, clock_in_lat=0, clock_in_lng=0,
        clock_out_at=start + timedelta(hours=hours), clock_out_lat=0, clock_out_lng=0,
    )


@pytest.mark.django_db
def test_my_shifts_paginated(client, staff):
    for i in range(3):
        _closed(staff, 1, days_ago=i)
    r = client.get("/api/shifts/me/?page_size=2")
    assert r.status_code == 200
    body = r.json()
    assert body["count"] == 3
    assert len(body["results"]) == 2
    assert body["results"][0]["staff_name"] == "Dana Reyes"

@pytest.mark.django_db
def test_manager_shift_filters(manager_client, client, staff, zone):
    _closed(staff, 2, days_ago=3)
    client.post("/api/clock/in/", {"lat": 0, "lng": 0}, format="json")

    assert manager_client.get("/api/shifts/").json()["count"] == 2
    active = manager_client.get("/api/shifts/?active=true").json()
    assert active["count"] == 1
    assert active["results"][0]["is_open"] is True
    assert manager_client.get("/api/shifts/?active=false").json()["count"] == 1
    assert manager_client.get(f"/api/shifts/?staff_id={staff.id + 100}").json()["count"] == 0

@pytest.mark.django_db
def test_hours_per_day_defaults_to_last_week(manager_client, staff):
    r = manager_client.get("/api/analytics/hours-per-day/")
    assert r.status_code == 200
    assert len(r.json()) == 7
    assert r.json()[-1]["date"] == timezone.localdate().isoformat()

@pytest.mark.django_db
def test_hours_per_day_bad_range_is_400(manager_client):
    r = manager_client.get("/api/analytics/hours-per-day/?date_from=2025-03-05&date_to=2025-03-01")
    assert r.status_code == 400
    r = manager_client.get("/api/analytics/hours-per-day/?date_from=2020-01-01&date_to=2025-03-01")
    assert r.status_code == 400

@pytest.mark.django_db
def test_summary_and_totals(manager_client, staff):
    _closed(staff, 2, days_ago=2)
    summary = manager_client.get("/api/analytics/summary/").json()
    assert summary["active_workers"] == 0
    assert summary["total_hours"] == 2.0

    totals = manager_client.get("/api/analytics/staff-totals/").json()
    assert totals == [{"staff_id": staff.id, "name": "Dana Reyes", "role": "NURSE", "shift_count": 1, "total_hours": 2.0}]

@pytest.mark.django_db
def test_my_today(client, staff, zone):
    client.post("/api/clock/in/", {"lat": 0, "lng": 0}, format="json")
    r = client.get("/api/analytics/me/today/")
    assert r.status_code == 200
    assert r.json()["is_clocked_in"] is True
    assert r.json()["hours"] == 0.0
