# -*- coding: utf-8 -*-
"""
Typed outcomes of the clocking operations.

Every error is a DRF APIException, so services raise them and views let them
propagate; `exception_handler` (wired in REST_FRAMEWORK.EXCEPTION_HANDLER)
renders {"detail", "code", ...extra} bodies.
"""
from __future__ import annotations
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.exceptions import APIException, NotAuthenticated
from rest_framework.views import exception_handler as drf_exception_handler

from timeclock.geo import m_to_km


class ClockingError(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Clocking request rejected."
    default_code = "clocking_error"

    def extra(self) -> Dict[str, Any]:
        return {}


class Unauthenticated(ClockingError, NotAuthenticated):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Not authenticated."
    default_code = "unauthenticated"


class NotRegistered(ClockingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "User is not registered. Register with a role first."
    default_code = "not_registered"


class ZoneNotConfigured(ClockingError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "No work zone is configured for your role."
    default_code = "zone_not_configured"

    def __init__(self, role: Optional[str] = None):
        self.role = role
        detail = f"No work zone is configured for role {role}." if role else None
        super().__init__(detail=detail)

    def extra(self):
        return {"role": self.role} if self.role else {}


class AlreadyClockedIn(ClockingError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "You are already clocked in."
    default_code = "already_clocked_in"


class NoActiveShift(ClockingError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "You have no active shift to clock out of."
    default_code = "no_active_shift"


class OutsidePerimeter(ClockingError):
    status_code = status.HTTP_403_FORBIDDEN
    default_code = "outside_perimeter"

    def __init__(self, radius_m: float, distance_m: Optional[float] = None):
        self.radius_m = float(radius_m)
        self.distance_m = None if distance_m is None else float(distance_m)
        super().__init__(detail=f"You are outside the allowed area. Move within {format_radius(self.radius_m)} of the workplace.")

    def extra(self):
        return {
            "radius_m": self.radius_m,
            "radius_km": m_to_km(self.radius_m),
            "distance_m": None if self.distance_m is None else round(self.distance_m, 1),
        }


def format_radius(radius_m: float) -> str:
    if radius_m >= 1000:
        return f"{m_to_km(radius_m):g} km"
    return f"{radius_m:.0f} m"


def exception_handler(exc, context):
    response = drf_exception_handler(exc, context)
    if response is None or not isinstance(exc, ClockingError):
        return response
    code = getattr(exc.detail, "code", None) or exc.default_code
    response.data = {"detail": str(exc.detail), "code": code, **exc.extra()}
    return response
