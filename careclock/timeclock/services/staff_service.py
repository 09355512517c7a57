# -*- coding: utf-8 -*-
"""
Service layer for StaffMember: registration on first authenticated access
and profile edits. The job role is chosen once at registration.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from django.db import IntegrityError

from timeclock.authentication import IdentityPrincipal
from timeclock.exceptions import NotRegistered, Unauthenticated
from timeclock.models import Role, StaffMember
from timeclock.repositories import staff_repository as repo

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = {"name", "additional_data"}


@dataclass(frozen=True)
class RegistrationResult:
    staff: StaffMember
    is_new: bool
    message: str


def get_current_staff(subject: Optional[str]) -> Optional[StaffMember]:
    if not subject:
        raise Unauthenticated()
    return repo.get_by_subject(subject)

def get_me(subject: Optional[str]) -> StaffMember:
    staff = get_current_staff(subject)
    if staff is None:
        raise NotRegistered()
    return staff

def register_staff(principal: IdentityPrincipal, *, role: str, name: Optional[str] = None) -> RegistrationResult:
    if principal is None or not principal.subject:
        raise Unauthenticated()

    existing = repo.get_by_subject(principal.subject)
    if existing is not None:
        return RegistrationResult(staff=existing, is_new=False, message="User already registered")

    data = {
        "auth_subject": principal.subject,
        "name": (name or "").strip() or principal.name or principal.email or principal.subject,
        "email": principal.email or "",
        "picture": principal.picture or "",
        "role": Role(role).value,
    }
    try:
        staff = repo.create(data)
    except IntegrityError:
        # a concurrent registration for the same subject got there first
        staff = repo.get_by_subject(principal.subject)
        if staff is None:
            raise
        return RegistrationResult(staff=staff, is_new=False, message="User already registered")

    logger.info("[staff] registered %s as %s (staff=%s)", principal.subject, staff.role, staff.id)
    return RegistrationResult(staff=staff, is_new=True, message="User registered successfully")

def update_staff(subject: Optional[str], *, name: Optional[str] = None, additional_data: Optional[str] = None) -> StaffMember:
    staff = get_me(subject)
    patch = {}
    if name:
        patch["name"] = name.strip()
    if additional_data is not None:
        patch["additional_data"] = additional_data
    return repo.save_fields(staff, patch, allowed=EDITABLE_FIELDS)
