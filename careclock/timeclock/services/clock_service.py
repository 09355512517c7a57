# -*- coding: utf-8 -*-
"""
Attendance state machine: CLOCKED_OUT -> CLOCKED_IN -> CLOCKED_OUT ...

Every operation takes the caller identity (IdP subject) and position as
explicit arguments. "At most one open shift per staff member" is enforced by
the database: the staff row is locked for the check-then-insert and the
conditional unique constraint `uniq_open_shift_per_staff` rejects any insert
that slips past it.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple
import logging

from django.conf import settings
from django.db import transaction, IntegrityError
from django.utils import timezone

from timeclock.exceptions import (
    AlreadyClockedIn,
    NoActiveShift,
    NotRegistered,
    OutsidePerimeter,
    Unauthenticated,
    ZoneNotConfigured,
)
from timeclock.geo import Position, distance_m
from timeclock.models import Shift, StaffMember, WorkerZone
from timeclock.repositories import shift_repository as shift_repo
from timeclock.repositories import staff_repository as staff_repo
from timeclock.repositories import zone_repository as zone_repo

logger = logging.getLogger(__name__)


class ClockState(str, Enum):
    CLOCKED_OUT = "CLOCKED_OUT"
    CLOCKED_IN = "CLOCKED_IN"


# ========= helpers =========
def _resolve_staff(subject: Optional[str], lock: bool = False) -> StaffMember:
    if not subject:
        raise Unauthenticated()
    staff = staff_repo.get_by_subject(subject, lock=lock)
    if staff is None:
        raise NotRegistered()
    return staff

def _clean_note(note: Optional[str]) -> Optional[str]:
    if note is None:
        return None
    note = note.strip()
    return note or None

def check_perimeter(zone: WorkerZone, position: Position) -> float:
    """Distance (m) from the zone center; raises OutsidePerimeter beyond radius_m."""
    dist = distance_m(position, Position(zone.lat, zone.lng))
    if dist > zone.radius_m:
        raise OutsidePerimeter(radius_m=zone.radius_m, distance_m=dist)
    return dist

def _enforce_clock_out_perimeter() -> bool:
    return bool(getattr(settings, "TIMECLOCK_ENFORCE_CLOCK_OUT_PERIMETER", False))


# ========= state =========
def current_state(subject: Optional[str]) -> Tuple[ClockState, Optional[Shift]]:
    staff = _resolve_staff(subject)
    shift = shift_repo.get_open_for_staff(staff.id)
    return (ClockState.CLOCKED_IN if shift else ClockState.CLOCKED_OUT), shift


# ========= transitions =========
def attempt_clock_in(subject: Optional[str], position: Position, note: Optional[str] = None) -> Shift:
    if not subject:
        raise Unauthenticated()
    try:
        with transaction.atomic():
            staff = _resolve_staff(subject, lock=True)

            zone = zone_repo.get_zone_for_role(staff.role)
            if zone is None:
                logger.warning("[clock] clock-in rejected for staff=%s: no zone for role %s", staff.id, staff.role)
                raise ZoneNotConfigured(role=staff.role)

            if shift_repo.get_open_for_staff(staff.id) is not None:
                logger.warning("[clock] clock-in rejected for staff=%s: already clocked in", staff.id)
                raise AlreadyClockedIn()

            try:
                dist = check_perimeter(zone, position)
            except OutsidePerimeter as ex:
                logger.warning(
                    "[clock] clock-in rejected for staff=%s: %.0fm from zone center (allowed %.0fm)",
                    staff.id, ex.distance_m, ex.radius_m,
                )
                raise

            shift = shift_repo.create({
                "staff": staff,
                "clock_in_at": timezone.now(),
                "clock_in_lat": position.lat,
                "clock_in_lng": position.lng,
                "clock_in_note": _clean_note(note),
            })
    except IntegrityError:
        # concurrent clock-in for the same staff won the unique constraint
        logger.warning("[clock] clock-in for %s hit uniq_open_shift_per_staff", subject)
        raise AlreadyClockedIn()

    logger.info("[clock] staff=%s clocked in (shift=%s, %.0fm from center)", shift.staff_id, shift.id, dist)
    return shift


def attempt_clock_out(subject: Optional[str], position: Position, note: Optional[str] = None) -> Shift:
    staff = _resolve_staff(subject)
    with transaction.atomic():
        shift = shift_repo.get_open_for_staff(staff.id, lock=True)
        if shift is None:
            logger.warning("[clock] clock-out rejected for staff=%s: no active shift", staff.id)
            raise NoActiveShift()

        if _enforce_clock_out_perimeter():
            zone = zone_repo.get_zone_for_role(staff.role)
            if zone is not None:
                try:
                    check_perimeter(zone, position)
                except OutsidePerimeter as ex:
                    logger.warning(
                        "[clock] clock-out rejected for staff=%s: %.0fm from zone center (allowed %.0fm)",
                        staff.id, ex.distance_m, ex.radius_m,
                    )
                    raise

        # never earlier than clock-in, even with a skewed clock
        now = max(timezone.now(), shift.clock_in_at)
        updated = shift_repo.close_if_open(
            shift.id,
            clock_out_at=now,
            clock_out_lat=position.lat,
            clock_out_lng=position.lng,
            clock_out_note=_clean_note(note),
        )
        if not updated:
            logger.warning("[clock] clock-out for staff=%s lost race on shift=%s", staff.id, shift.id)
            raise NoActiveShift()

    shift.refresh_from_db()
    logger.info("[clock] staff=%s clocked out (shift=%s, %.2fh)", staff.id, shift.id, shift.duration_hours())
    return shift
