# views/utils.py
"""
Shared tooling for drf-spectacular docs on APIView classes, plus small
request helpers used by several views.
"""
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, inline_serializer
from drf_spectacular.types import OpenApiTypes
from django.core.exceptions import ValidationError
from django.core.validators import validate_ipv46_address
from rest_framework import serializers

# ---- Reusable error schema
ErrorSerializer = inline_serializer(
    name="Error",
    fields={
        "detail": serializers.CharField(),
        "code": serializers.CharField(required=False),
    }
)

# ---- Param helpers

def path_str(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.PATH, description=description)

def q_int(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.QUERY, required=required, description=description)

def q_bool(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.BOOL, OpenApiParameter.QUERY, required=required, description=description)

def q_date(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.DATE, OpenApiParameter.QUERY, required=required, description=description)

# ---- Convenience for common responses

def std_errors(extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    errs = {
        400: OpenApiResponse(ErrorSerializer, description="Bad Request"),
        401: OpenApiResponse(ErrorSerializer, description="Unauthorized"),
        403: OpenApiResponse(ErrorSerializer, description="Forbidden"),
        404: OpenApiResponse(ErrorSerializer, description="Not Found"),
    }
    if extra:
        errs.update(extra)
    return errs

# ---- Request helpers

def subject_of(request):
    """IdP subject of the caller, or None for anonymous requests."""
    return getattr(request.user, "subject", None)

def client_ip(request):
    """First X-Forwarded-For hop, else REMOTE_ADDR; None unless it is a valid IP."""
    xff = request.META.get("HTTP_X_FORWARDED_FOR")
    if xff:
        ip = xff.split(",")[0].strip()
    else:
        ip = request.META.get("REMOTE_ADDR") or ""
        if ip.startswith("::ffff:"):
            ip = ip.replace("::ffff:", "")
    try:
        validate_ipv46_address(ip)
    except ValidationError:
        return None
    return ip
