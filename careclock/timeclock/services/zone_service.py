# -*- coding: utf-8 -*-
"""
Service layer for per-role work zones (geofences).
Radius is always meters here; km conversion happens in the serializers.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

from django.db import transaction
from rest_framework.exceptions import ValidationError

from timeclock.geo import Position
from timeclock.models import Role, StaffMember, WorkerType, WorkerZone
from timeclock.repositories import zone_repository as repo
from timeclock.services.audit_service import log_action

logger = logging.getLogger(__name__)

ZONE_FIELDS = ["lat", "lng", "radius_m"]


def _snapshot(zone: Optional[WorkerZone]) -> Optional[Dict[str, Any]]:
    if zone is None:
        return None
    return {f: getattr(zone, f) for f in ZONE_FIELDS}

def list_staff_locations() -> List[WorkerType]:
    repo.ensure_worker_types()
    return list(repo.list_worker_types())

def zone_for_role(role: str) -> Optional[WorkerZone]:
    return repo.get_zone_for_role(role)

def zone_for_staff(staff: StaffMember) -> Optional[WorkerZone]:
    return repo.get_zone_for_role(staff.role)

def worker_type_for_staff(staff: StaffMember) -> WorkerType:
    return repo.get_or_create_worker_type(staff.role)

def upsert_zone(
    *,
    role: str,
    lat: float,
    lng: float,
    radius_m: float,
    label: Optional[str] = None,
    actor: Optional[str] = None,
    ip: Optional[str] = None,
) -> WorkerType:
    if role not in Role.values:
        raise ValidationError({"role": f"Unknown role: {role}"})
    try:
        Position(lat, lng)
    except ValueError as ex:
        raise ValidationError({"detail": str(ex)})
    if radius_m is None or float(radius_m) <= 0:
        raise ValidationError({"radius_m": "Radius must be greater than 0."})

    with transaction.atomic():
        wt = repo.get_or_create_worker_type(role, label=label)
        if label is not None and label != wt.label:
            repo.save_fields(wt, {"label": label})

        zone = repo.get_zone_for_role(role)
        before = _snapshot(zone)
        patch = {"lat": float(lat), "lng": float(lng), "radius_m": float(radius_m)}
        if zone is None:
            zone = repo.create_zone({"worker_type": wt, **patch})
            action = "zone.create"
        else:
            zone = repo.save_fields(zone, patch)
            action = "zone.update"

        log_action(
            actor=actor, action=action, object_type="WorkerZone", object_id=zone.id,
            before=before, after=_snapshot(zone), ip=ip,
        )

    logger.info("[zone] %s for %s by %s: %s", action, role, actor or "-", _snapshot(zone))
    wt.refresh_from_db()
    return wt
