import pytest

from timeclock.exceptions import (
    AlreadyClockedIn,
    NoActiveShift,
    NotRegistered,
    OutsidePerimeter,
    Unauthenticated,
    ZoneNotConfigured,
)
from timeclock.geo import Position
from timeclock.models import Shift
from timeclock.services.clock_service import (
    ClockState,
    attempt_clock_in,
    attempt_clock_out,
    current_state,
)

SUB = "auth0|nurse-1"


@pytest.mark.django_db
def test_clock_in_opens_shift(staff, zone):
    shift = attempt_clock_in(SUB, Position(0.0, 0.0), note="  start  ")
    assert shift.is_open
    assert shift.staff_id == staff.id
    assert shift.clock_in_note == "start"
    assert current_state(SUB) == (ClockState.CLOCKED_IN, shift)

@pytest.mark.django_db
def test_second_clock_in_is_rejected(staff, zone):
    attempt_clock_in(SUB, Position(0.0, 0.0))
    with pytest.raises(AlreadyClockedIn):
        attempt_clock_in(SUB, Position(0.0, 0.0))
    assert Shift.objects.filter(staff=staff, clock_out_at__isnull=True).count() == 1

@pytest.mark.django_db
def test_clock_out_without_open_shift(staff, zone):
    with pytest.raises(NoActiveShift):
        attempt_clock_out(SUB, Position(0.0, 0.0))

@pytest.mark.django_db
def test_clock_in_outside_perimeter(staff, zone):
    with pytest.raises(OutsidePerimeter) as ei:
        attempt_clock_in(SUB, Position(10.0, 10.0))
    assert ei.value.radius_m == 1000.0
    assert ei.value.distance_m > 1_000_000
    assert "1 km" in str(ei.value.detail)
    assert not Shift.objects.exists()

@pytest.mark.django_db
def test_round_trip_positions(staff, zone):
    zone.lat, zone.lng, zone.radius_m = 1.0, 1.0, 500.0
    zone.save()

    opened = attempt_clock_in(SUB, Position(1.0, 1.0))
    closed = attempt_clock_out(SUB, Position(2.0, 2.0), note="done")

    assert closed.id == opened.id
    assert (closed.clock_in_lat, closed.clock_in_lng) == (1.0, 1.0)
    assert (closed.clock_out_lat, closed.clock_out_lng) == (2.0, 2.0)
    assert closed.clock_out_at >= closed.clock_in_at
    assert closed.clock_out_note == "done"
    assert current_state(SUB) == (ClockState.CLOCKED_OUT, None)

@pytest.mark.django_db
def test_clock_out_far_away_allowed_by_default(staff, zone):
    attempt_clock_in(SUB, Position(0.0, 0.0))
    shift = attempt_clock_out(SUB, Position(45.0, 90.0))
    assert not shift.is_open

@pytest.mark.django_db
def test_clock_out_perimeter_when_enforced(settings, staff, zone):
    settings.TIMECLOCK_ENFORCE_CLOCK_OUT_PERIMETER = True
    attempt_clock_in(SUB, Position(0.0, 0.0))
    with pytest.raises(OutsidePerimeter):
        attempt_clock_out(SUB, Position(45.0, 90.0))
    assert Shift.objects.get(staff=staff).is_open

@pytest.mark.django_db
def test_zone_not_configured(staff):
    with pytest.raises(ZoneNotConfigured) as ei:
        attempt_clock_in(SUB, Position(0.0, 0.0))
    assert ei.value.role == "NURSE"

@pytest.mark.django_db
def test_unauthenticated():
    with pytest.raises(Unauthenticated):
        attempt_clock_in(None, Position(0.0, 0.0))
    with pytest.raises(Unauthenticated):
        attempt_clock_out("", Position(0.0, 0.0))

@pytest.mark.django_db
def test_not_registered(zone):
    with pytest.raises(NotRegistered):
        attempt_clock_in("auth0|stranger", Position(0.0, 0.0))
    with pytest.raises(NotRegistered):
        current_state("auth0|stranger")

@pytest.mark.django_db
def test_at_most_one_open_shift_over_many_cycles(staff, zone):
    for _ in range(3):
        attempt_clock_in(SUB, Position(0.0, 0.0))
        with pytest.raises(AlreadyClockedIn):
            attempt_clock_in(SUB, Position(0.0, 0.0))
        attempt_clock_out(SUB, Position(0.0, 0.0))
    assert Shift.objects.filter(staff=staff).count() == 3
    assert Shift.objects.filter(staff=staff, clock_out_at__isnull=True).count() == 0

@pytest.mark.django_db
def test_integrity_error_maps_to_already_clocked_in(staff, zone, monkeypatch):
    from django.db import IntegrityError
    from timeclock.repositories import shift_repository

    def boom(data):
        raise IntegrityError("uniq_open_shift_per_staff")
    monkeypatch.setattr(shift_repository, "create", boom)
    with pytest.raises(AlreadyClockedIn):
        attempt_clock_in(SUB, Position(0.0, 0.0))

@pytest.mark.django_db
def test_clock_out_outside_perimeter_is_logged(settings, staff, zone):
    from unittest.mock import patch
    from timeclock.services import clock_service

    settings.TIMECLOCK_ENFORCE_CLOCK_OUT_PERIMETER = True
    attempt_clock_in(SUB, Position(0.0, 0.0))
    with patch.object(clock_service.logger, "warning") as warn:
        with pytest.raises(OutsidePerimeter):
            attempt_clock_out(SUB, Position(45.0, 90.0))
    warn.assert_called_once()
    assert "clock-out rejected" in warn.call_args[0][0]
