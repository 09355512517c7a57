from django.conf import settings
from rest_framework.permissions import BasePermission


def is_manager(principal) -> bool:
    """True when any IdP role of the principal is a manager role (case-insensitive)."""
    roles = getattr(principal, "roles", None) or ()
    manager_roles = {r.strip().lower() for r in getattr(settings, "TIMECLOCK_MANAGER_ROLES", ["manager", "admin"])}
    return any(str(r).strip().lower() in manager_roles for r in roles)


class IsManager(BasePermission):
    message = "Manager privilege required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and is_manager(user))
