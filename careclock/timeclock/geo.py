# -*- coding: utf-8 -*-
"""
Great-circle helpers for the clock-in perimeter check.

Distances and radii are in meters everywhere inside the app; kilometers only
appear at the API boundary through km_to_m / m_to_km.
"""
from __future__ import annotations
from dataclasses import dataclass
from math import radians, cos, sin, asin, sqrt

EARTH_RADIUS_M = 6371000.0


@dataclass(frozen=True)
class Position:
    lat: float
    lng: float

    def __post_init__(self):
        if self.lat is None or self.lng is None:
            raise ValueError("lat and lng are required")
        if not -90.0 <= float(self.lat) <= 90.0:
            raise ValueError(f"lat out of range: {self.lat}")
        if not -180.0 <= float(self.lng) <= 180.0:
            raise ValueError(f"lng out of range: {self.lng}")


def haversine_m(lat1, lng1, lat2, lng2) -> float:
    dlat = radians(float(lat2) - float(lat1))
    dlng = radians(float(lng2) - float(lng1))
    a = sin(dlat / 2) ** 2 + cos(radians(float(lat1))) * cos(radians(float(lat2))) * sin(dlng / 2) ** 2
    c = 2 * asin(min(1.0, sqrt(a)))
    return EARTH_RADIUS_M * c


def distance_m(a: Position, b: Position) -> float:
    return haversine_m(a.lat, a.lng, b.lat, b.lng)


def within_radius(point: Position, center: Position, radius_m: float) -> bool:
    return distance_m(point, center) <= float(radius_m)


def km_to_m(km) -> float:
    return float(km) * 1000.0


def m_to_km(m) -> float:
    return float(m) / 1000.0
