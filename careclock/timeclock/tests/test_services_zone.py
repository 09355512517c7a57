import pytest
from rest_framework.exceptions import ValidationError

from timeclock.models import AuditLog, Role, WorkerType, WorkerZone
from timeclock.services.zone_service import list_staff_locations, upsert_zone, zone_for_role, zone_for_staff


@pytest.mark.django_db
def test_upsert_creates_then_updates_with_audit():
    wt = upsert_zone(role="NURSE", lat=51.5, lng=-0.12, radius_m=300, actor="auth0|boss-1", ip="10.0.0.1")
    assert wt.zone.radius_m == 300

    upsert_zone(role="NURSE", lat=51.6, lng=-0.12, radius_m=1500, actor="auth0|boss-1")
    assert WorkerZone.objects.count() == 1
    assert zone_for_role("NURSE").radius_m == 1500

    logs = list(AuditLog.objects.order_by("id"))
    assert [l.action for l in logs] == ["zone.create", "zone.update"]
    assert logs[0].before is None
    assert logs[0].ip == "10.0.0.1"
    assert logs[1].before["radius_m"] == 300
    assert logs[1].after == {"lat": 51.6, "lng": -0.12, "radius_m": 1500.0}
    assert logs[1].actor == "auth0|boss-1"

@pytest.mark.django_db
@pytest.mark.parametrize("radius", [0, -5])
def test_upsert_rejects_non_positive_radius(radius):
    with pytest.raises(ValidationError):
        upsert_zone(role="NURSE", lat=0, lng=0, radius_m=radius)
    assert not WorkerZone.objects.exists()
    assert not AuditLog.objects.exists()

@pytest.mark.django_db
def test_upsert_rejects_unknown_role_and_bad_position():
    with pytest.raises(ValidationError):
        upsert_zone(role="PILOT", lat=0, lng=0, radius_m=100)
    with pytest.raises(ValidationError):
        upsert_zone(role="NURSE", lat=95, lng=0, radius_m=100)

@pytest.mark.django_db
def test_staff_locations_lists_every_role(zone):
    rows = list_staff_locations()
    assert [r.role for r in rows] == sorted(Role.values)
    assert WorkerType.objects.count() == len(Role.values)
    nurse = next(r for r in rows if r.role == "NURSE")
    assert nurse.zone.id == zone.id

@pytest.mark.django_db
def test_zone_for_staff(staff, zone):
    assert zone_for_staff(staff).id == zone.id
    staff.role = Role.DOCTOR
    assert zone_for_staff(staff) is None
