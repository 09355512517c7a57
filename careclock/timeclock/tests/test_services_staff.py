import pytest

from timeclock.authentication import IdentityPrincipal
from timeclock.exceptions import NotRegistered, Unauthenticated
from timeclock.models import Role, StaffMember
from timeclock.services.staff_service import get_current_staff, get_me, register_staff, update_staff


@pytest.mark.django_db
def test_register_creates_staff(principal):
    res = register_staff(principal, role="DOCTOR", name="Dr. Dana Reyes")
    assert res.is_new is True
    assert res.message == "User registered successfully"
    assert res.staff.role == Role.DOCTOR
    assert res.staff.name == "Dr. Dana Reyes"
    assert res.staff.email == "dana@example.org"

@pytest.mark.django_db
def test_register_is_idempotent(principal):
    first = register_staff(principal, role="NURSE")
    again = register_staff(principal, role="DOCTOR", name="Other")
    assert again.is_new is False
    assert again.message == "User already registered"
    assert again.staff.id == first.staff.id
    assert again.staff.role == Role.NURSE
    assert StaffMember.objects.count() == 1

@pytest.mark.django_db
def test_register_name_falls_back_to_idp_profile():
    p = IdentityPrincipal(subject="auth0|x", email="x@example.org")
    assert register_staff(p, role="HCA", name="  ").staff.name == "x@example.org"

@pytest.mark.django_db
def test_update_changes_only_editable_fields(staff):
    updated = update_staff(staff.auth_subject, name="Dana R.", additional_data="night shifts")
    assert updated.name == "Dana R."
    assert updated.additional_data == "night shifts"
    assert updated.role == Role.NURSE

    again = update_staff(staff.auth_subject, additional_data="")
    assert again.name == "Dana R."
    assert again.additional_data == ""

@pytest.mark.django_db
def test_current_and_me():
    assert get_current_staff("auth0|nobody") is None
    with pytest.raises(NotRegistered):
        get_me("auth0|nobody")
    with pytest.raises(Unauthenticated):
        get_current_staff(None)
