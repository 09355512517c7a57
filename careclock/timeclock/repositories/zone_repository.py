# -*- coding: utf-8 -*-
"""
Repository layer for WorkerType / WorkerZone (DB only).
"""
from __future__ import annotations
from typing import Optional, Dict, Any, List
from django.db import transaction
from django.db.models import QuerySet

from timeclock.models import Role, WorkerType, WorkerZone

# ============== Queries ==============
def get_worker_type(role: str) -> Optional[WorkerType]:
    return WorkerType.objects.filter(role=role).first()

def get_zone_for_role(role: str) -> Optional[WorkerZone]:
    return WorkerZone.objects.select_related("worker_type").filter(worker_type__role=role).first()

def list_worker_types() -> QuerySet[WorkerType]:
    return WorkerType.objects.select_related("zone").order_by("role")

# ============== Mutations ==============
@transaction.atomic
def ensure_worker_types() -> None:
    """One WorkerType row per Role value."""
    existing = set(WorkerType.objects.values_list("role", flat=True))
    missing = [WorkerType(role=r.value, label=r.label) for r in Role if r.value not in existing]
    if missing:
        WorkerType.objects.bulk_create(missing, ignore_conflicts=True)

@transaction.atomic
def get_or_create_worker_type(role: str, label: Optional[str] = None) -> WorkerType:
    defaults = {"label": label if label is not None else Role(role).label}
    wt, _ = WorkerType.objects.get_or_create(role=role, defaults=defaults)
    return wt

@transaction.atomic
def create_zone(data: Dict[str, Any]) -> WorkerZone:
    return WorkerZone.objects.create(**data)

@transaction.atomic
def save_fields(obj, patch: Dict[str, Any]):
    fields: List[str] = []
    for k, v in patch.items():
        setattr(obj, k, v); fields.append(k)
    if fields:
        obj.save(update_fields=fields + ["updated_at"])
    return obj
