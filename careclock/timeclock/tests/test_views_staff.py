import pytest


@pytest.mark.django_db
def test_register_then_me(client):
    assert client.get("/api/staff/current/").json() == {"user": None}
    assert client.get("/api/staff/me/").status_code == 404

    r = client.post("/api/staff/register/", {"role": "PARAMEDIC"}, format="json")
    assert r.status_code == 201, r.content
    assert r.json()["is_new_user"] is True
    assert r.json()["user"]["name"] == "Dana Reyes"

    again = client.post("/api/staff/register/", {"role": "DOCTOR"}, format="json")
    assert again.status_code == 200
    assert again.json()["message"] == "User already registered"
    assert again.json()["user"]["role"] == "PARAMEDIC"

    me = client.get("/api/staff/me/")
    assert me.status_code == 200
    assert me.json()["role_display"] == "Paramedic"

@pytest.mark.django_db
def test_register_rejects_unknown_role(client):
    r = client.post("/api/staff/register/", {"role": "PILOT"}, format="json")
    assert r.status_code == 400

@pytest.mark.django_db
def test_patch_me_cannot_change_role(client, staff):
    r = client.patch("/api/staff/me/", {"role": "DOCTOR"}, format="json")
    assert r.status_code == 400

    r = client.patch("/api/staff/me/", {"name": "Dana R."}, format="json")
    assert r.status_code == 200
    assert r.json()["name"] == "Dana R."
    assert r.json()["role"] == "NURSE"
