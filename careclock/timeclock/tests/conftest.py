import time

import jwt
import pytest
from rest_framework.test import APIClient

from timeclock.authentication import IdentityPrincipal
from timeclock.models import Role, StaffMember, WorkerType, WorkerZone

TEST_SECRET = "test-secret-for-hs256-signing-0123456789"


@pytest.fixture
def idp_settings(settings):
    settings.TIMECLOCK_IDP_SECRET = TEST_SECRET
    settings.TIMECLOCK_IDP_PUBLIC_KEY = ""
    settings.TIMECLOCK_IDP_JWKS_URL = ""
    settings.TIMECLOCK_IDP_ALGORITHMS = ["HS256"]
    settings.TIMECLOCK_IDP_AUDIENCE = None
    settings.TIMECLOCK_IDP_ISSUER = None
    settings.TIMECLOCK_MANAGER_ROLES = ["manager", "admin"]
    return settings

@pytest.fixture
def make_token(idp_settings):
    def _make(sub="auth0|nurse-1", exp_in=3600, secret=TEST_SECRET, **claims):
        payload = {"sub": sub, "exp": int(time.time()) + exp_in, **claims}
        return jwt.encode(payload, secret, algorithm="HS256")
    return _make

@pytest.fixture
def principal():
    return IdentityPrincipal(subject="auth0|nurse-1", name="Dana Reyes", email="dana@example.org")

@pytest.fixture
def manager_principal():
    return IdentityPrincipal(subject="auth0|boss-1", name="Sam Okafor", email="sam@example.org", roles=("manager",))

@pytest.fixture
def staff(db, principal):
    return StaffMember.objects.create(
        auth_subject=principal.subject, name=principal.name, email=principal.email, role=Role.NURSE,
    )

@pytest.fixture
def zone(db):
    wt = WorkerType.objects.create(role=Role.NURSE, label="Nurse")
    return WorkerZone.objects.create(worker_type=wt, lat=0.0, lng=0.0, radius_m=1000.0)

@pytest.fixture
def client(principal):
    c = APIClient()
    c.force_authenticate(user=principal)
    return c

@pytest.fixture
def manager_client(manager_principal):
    c = APIClient()
    c.force_authenticate(user=manager_principal)
    return c
