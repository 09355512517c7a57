# -*- coding: utf-8 -*-
"""
Repository layer for StaffMember (DB only).
"""
from __future__ import annotations
from typing import Optional, Dict, Any, List
from django.db import transaction
from django.db.models import QuerySet

from timeclock.models import StaffMember
from timeclock.utils.db import for_update

# ============== Queries ==============
def get_by_subject(subject: str, lock: bool = False) -> Optional[StaffMember]:
    qs = StaffMember.objects.filter(auth_subject=subject)
    if lock:
        qs = for_update(qs)
    return qs.first()

def list_all() -> QuerySet[StaffMember]:
    return StaffMember.objects.all().order_by("name", "id")

# ============== Mutations ==============
@transaction.atomic
def create(data: Dict[str, Any]) -> StaffMember:
    return StaffMember.objects.create(**data)

@transaction.atomic
def save_fields(obj: StaffMember, patch: Dict[str, Any], allowed: Optional[set] = None) -> StaffMember:
    fields: List[str] = []
    for k, v in patch.items():
        if (allowed is None) or (k in allowed):
            setattr(obj, k, v); fields.append(k)
    if fields:
        obj.save(update_fields=fields + ["updated_at"])
    return obj
