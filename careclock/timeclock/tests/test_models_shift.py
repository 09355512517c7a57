from datetime import timedelta

import pytest
from django.db import IntegrityError, transaction
from django.utils import timezone

from timeclock.models import Shift


def _open_shift(staff, at):
    return Shift.objects.create(staff=staff, clock_in_at=at, clock_in_lat=0, clock_in_lng=0)


@pytest.mark.django_db
def test_second_open_shift_violates_unique_constraint(staff):
    now = timezone.now()
    _open_shift(staff, now - timedelta(hours=2))
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            _open_shift(staff, now)
    assert Shift.objects.filter(staff=staff, clock_out_at__isnull=True).count() == 1

@pytest.mark.django_db
def test_closed_shifts_do_not_count_as_open(staff):
    now = timezone.now()
    first = _open_shift(staff, now - timedelta(hours=3))
    first.clock_out_at = now - timedelta(hours=2)
    first.save()
    _open_shift(staff, now)
    assert Shift.objects.filter(staff=staff).count() == 2

@pytest.mark.django_db
def test_clock_out_before_clock_in_violates_check_constraint(staff):
    now = timezone.now()
    with pytest.raises(IntegrityError):
        with transaction.atomic():
            Shift.objects.create(
                staff=staff, clock_in_at=now, clock_in_lat=0, clock_in_lng=0,
                clock_out_at=now - timedelta(hours=1), clock_out_lat=0, clock_out_lng=0,
            )
    assert not Shift.objects.exists()
