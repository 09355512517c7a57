# Load all models into the timeclock.models namespace
from .mixins import TimeStampedModel

from .staff import Role, StaffMember
from .zone import WorkerType, WorkerZone
from .shift import Shift
from .audit import AuditLog

__all__ = [
    "TimeStampedModel",
    "Role", "StaffMember",
    "WorkerType", "WorkerZone",
    "Shift",
    "AuditLog",
]
