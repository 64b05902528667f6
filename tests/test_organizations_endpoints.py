import re

from app.models.organization import Organization, generate_invite_code
from app.models.user import UserRole
from tests.conftest import build_answers


def test_generate_invite_code_uses_initials():
    code = generate_invite_code("Grace Community Church of the Valley")
    assert re.fullmatch(r"GCC\d{4}", code)
    assert re.fullmatch(r"NL\d{4}", generate_invite_code("new life!"))


def test_lookup_invite_code(client, organization):
    r = client.get("/organizations/invite/grace100")
    assert r.status_code == 200
    assert r.json()["id"] == organization.id
    assert r.json()["name"] == "Grace Church"


def test_lookup_unknown_invite_code(client, organization):
    assert client.get("/organizations/invite/NOPE0000").status_code == 404


def test_join_with_valid_code(client, make_user, login, organization):
    newcomer = make_user(None, UserRole.CHURCH_MEMBER, "Nia")
    headers = login(newcomer)
    r = client.post("/organizations/join", json={"invite_code": " grace100 "}, headers=headers)
    assert r.status_code == 200, r.text
    assert r.json()["organization"]["id"] == organization.id

    # membership now unlocks the assessment
    r = client.post("/assessments/submit", json={"answers": build_answers()}, headers=headers)
    assert r.status_code == 200
    assert r.json()["organization_id"] == organization.id


def test_join_with_invalid_code(client, make_user, login, organization):
    newcomer = make_user(None, UserRole.CHURCH_MEMBER, "Nia")
    r = client.post("/organizations/join", json={"invite_code": "WRONG1"}, headers=login(newcomer))
    assert r.status_code == 400
    assert "Invalid church code" in r.json()["detail"]


def test_join_when_already_member(client, member_user, login, organization):
    r = client.post("/organizations/join", json={"invite_code": "GRACE100"}, headers=login(member_user))
    assert r.status_code == 400
    assert "already a member" in r.json()["detail"]


def test_join_other_church_when_already_member(client, member_user, login, other_organization):
    r = client.post("/organizations/join", json={"invite_code": "HOPE100"}, headers=login(member_user))
    assert r.status_code == 400
    assert member_user.organization_id != other_organization.id


def test_join_requires_authentication(client, organization):
    r = client.post("/organizations/join", json={"invite_code": "GRACE100"})
    assert r.status_code in (401, 403)


def test_organization_gets_generated_invite_code(db_session):
    org = Organization(name="Cornerstone Bible Fellowship")
    db_session.add(org)
    db_session.commit()
    assert re.fullmatch(r"CBF\d{4}", org.invite_code)
