# -*- coding: utf-8 -*-
"""
Identity-provider boundary.

The app never checks credentials: it only verifies bearer JWTs issued by the
IdP and turns the claims into an IdentityPrincipal. Verification key is one
of (in order): JWKS endpoint, PEM public key, shared HMAC secret.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, Tuple
import logging

import jwt
from django.conf import settings
from rest_framework import authentication
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentityPrincipal:
    subject: str
    name: str = ""
    email: str = ""
    picture: str = ""
    roles: Tuple[str, ...] = field(default_factory=tuple)

    # DRF / Django treat request.user as a user object
    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def is_anonymous(self) -> bool:
        return False

    @property
    def pk(self) -> str:
        return self.subject

    def __str__(self):
        return self.subject


@lru_cache(maxsize=4)
def _jwks_client(url: str) -> jwt.PyJWKClient:
    return jwt.PyJWKClient(url)


def _verification_key(token: str):
    jwks_url = getattr(settings, "TIMECLOCK_IDP_JWKS_URL", "")
    if jwks_url:
        try:
            return _jwks_client(jwks_url).get_signing_key_from_jwt(token).key
        except jwt.PyJWKClientError as ex:
            logger.warning("[auth] JWKS lookup failed: %s", ex)
            raise AuthenticationFailed("Unable to resolve signing key.")
    public_key = getattr(settings, "TIMECLOCK_IDP_PUBLIC_KEY", "")
    if public_key:
        return public_key
    secret = getattr(settings, "TIMECLOCK_IDP_SECRET", "")
    if not secret:
        logger.error("[auth] no IdP verification key configured")
        raise AuthenticationFailed("Identity provider is not configured.")
    return secret


def decode_identity_token(token: str) -> Dict[str, Any]:
    """
    Verify signature, expiry, audience and issuer; return the claims.
    Raises AuthenticationFailed on any problem.
    """
    if not token:
        raise AuthenticationFailed("Missing token.")
    try:
        return jwt.decode(
            token,
            _verification_key(token),
            algorithms=list(getattr(settings, "TIMECLOCK_IDP_ALGORITHMS", ["HS256"])),
            audience=getattr(settings, "TIMECLOCK_IDP_AUDIENCE", None),
            issuer=getattr(settings, "TIMECLOCK_IDP_ISSUER", None),
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationFailed("Token expired.")
    except jwt.InvalidTokenError as ex:
        logger.info("[auth] rejected token: %s", ex)
        raise AuthenticationFailed("Invalid token.")


def principal_from_claims(claims: Dict[str, Any]) -> IdentityPrincipal:
    roles_claim = getattr(settings, "TIMECLOCK_IDP_ROLES_CLAIM", "roles")
    raw_roles = claims.get(roles_claim) or ()
    if isinstance(raw_roles, str):
        raw_roles = [raw_roles]
    return IdentityPrincipal(
        subject=str(claims["sub"]),
        name=str(claims.get("name") or claims.get("nickname") or ""),
        email=str(claims.get("email") or ""),
        picture=str(claims.get("picture") or ""),
        roles=tuple(str(r) for r in raw_roles),
    )


class IdentityProviderAuthentication(authentication.BaseAuthentication):
    """
    `Authorization: Bearer <jwt>`.
    No header -> anonymous (permission classes answer 401).
    """
    keyword = "Bearer"

    def authenticate(self, request):
        auth = authentication.get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth) != 2:
            raise AuthenticationFailed("Invalid bearer header.")
        try:
            token = auth[1].decode()
        except UnicodeError:
            raise AuthenticationFailed("Invalid bearer header.")

        claims = decode_identity_token(token)
        return principal_from_claims(claims), token

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'
