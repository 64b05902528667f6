from datetime import datetime, timedelta, UTC

from app.models.ministry_opportunity import OpportunityStatus
from app.models.user import UserRole


def test_member_matches_ranked_with_reasons(client, member_user, login, add_result, add_opportunity, organization):
    add_result(member_user, ["TEACHING", "MERCY", "FAITH"], abilities=["ARTS_GUITAR"])
    add_opportunity(organization, "Bible Study Leader", required_gifts=["TEACHING"], preferred_gifts=["WISDOM_INSIGHT"])
    add_opportunity(organization, "Worship Guitar", required_abilities=["ARTS_GUITAR"], preferred_gifts=["FAITH"])
    add_opportunity(organization, "Finance Team", required_abilities=["SKILL_FINANCIAL"])

    r = client.get("/matching/opportunities", headers=login(member_user))
    assert r.status_code == 200, r.text
    body = r.json()
    assert set(body["attributes"]) == {"TEACHING", "MERCY", "FAITH", "ARTS_GUITAR"}
    titles = [m["opportunity"]["title"] for m in body["matches"]]
    scores = [m["match_score"] for m in body["matches"]]
    assert titles == ["Worship Guitar", "Bible Study Leader", "Finance Team"]
    assert scores == [100, 67, 0]
    assert body["matches"][0]["reasons"] == ["Required ability: Guitar", "Preferred gift: Faith & Intercession"]
    assert body["matches"][2]["reasons"] == []


def test_member_matches_min_score_and_limit(client, member_user, login, add_result, add_opportunity, organization):
    add_result(member_user, ["TEACHING", "MERCY", "FAITH"])
    add_opportunity(organization, "A", required_gifts=["TEACHING"])
    add_opportunity(organization, "B", required_gifts=["MERCY"])
    add_opportunity(organization, "C", required_gifts=["GIVING"])
    headers = login(member_user)

    r = client.get("/matching/opportunities?min_score=50", headers=headers)
    assert [m["opportunity"]["title"] for m in r.json()["matches"]] == ["A", "B"]

    r = client.get("/matching/opportunities?limit=1", headers=headers)
    assert [m["opportunity"]["title"] for m in r.json()["matches"]] == ["A"]

    r = client.get("/matching/opportunities?min_score=101", headers=headers)
    assert r.status_code == 422


def test_member_matches_only_open_in_own_org(client, member_user, login, add_result, add_opportunity,
                                              organization, other_organization):
    add_result(member_user, ["TEACHING", "MERCY", "FAITH"])
    add_opportunity(organization, "Open Role", required_gifts=["TEACHING"])
    add_opportunity(organization, "Closed Role", required_gifts=["TEACHING"], status=OpportunityStatus.CLOSED)
    add_opportunity(organization, "Filled Role", required_gifts=["TEACHING"], status=OpportunityStatus.FILLED)
    add_opportunity(other_organization, "Elsewhere", required_gifts=["TEACHING"])
    r = client.get("/matching/opportunities", headers=login(member_user))
    assert [m["opportunity"]["title"] for m in r.json()["matches"]] == ["Open Role"]


def test_member_matches_require_result(client, member_user, login):
    r = client.get("/matching/opportunities", headers=login(member_user))
    assert r.status_code == 404


def test_member_matches_ignore_expired_result(client, member_user, login, add_result, add_opportunity, organization):
    add_result(member_user, ["TEACHING", "MERCY", "FAITH"], expires_in_days=-5)
    add_opportunity(organization, "A", required_gifts=["TEACHING"])
    r = client.get("/matching/opportunities", headers=login(member_user))
    assert r.status_code == 404


def test_empty_opportunity_scores_zero_for_everyone(client, member_user, login, add_result, add_opportunity,
                                                    organization):
    add_result(member_user, ["TEACHING", "MERCY", "FAITH"], abilities=["ARTS_GUITAR"])
    add_opportunity(organization, "General Volunteer")
    r = client.get("/matching/opportunities", headers=login(member_user))
    assert r.json()["matches"][0]["match_score"] == 0


def test_candidates_ranked_for_opportunity(client, admin_user, make_user, login, add_result, add_opportunity,
                                           organization, other_organization):
    nurse = make_user(organization, UserRole.CHURCH_MEMBER, "Nora")
    helper = make_user(organization, UserRole.VOLUNTEER, "Hank")
    unassessed = make_user(organization, UserRole.CHURCH_MEMBER, "Una")
    outsider = make_user(other_organization, UserRole.CHURCH_MEMBER, "Otto")
    add_result(nurse, ["MERCY", "SHEPHERDING", "FAITH"], abilities=["SKILL_MEDICAL"])
    add_result(helper, ["MERCY", "GIVING", "TEACHING"])
    add_result(outsider, ["MERCY", "SHEPHERDING", "FAITH"], abilities=["SKILL_MEDICAL"])
    opp = add_opportunity(organization, "Hospital Visits", required_gifts=["MERCY"], preferred_abilities=["SKILL_MEDICAL"])

    r = client.get(f"/admin/ministry-opportunities/{opp.id}/candidates", headers=login(admin_user))
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["opportunity_id"] == opp.id
    names = [c["name"] for c in body["candidates"]]
    assert names == ["Nora Tester", "Hank Tester"]
    assert [c["match_score"] for c in body["candidates"]] == [100, 67]
    assert body["candidates"][0]["top_gifts"] == ["MERCY", "SHEPHERDING", "FAITH"]
    assert unassessed.id not in {c["user_id"] for c in body["candidates"]}


def test_candidates_use_latest_result_per_member(client, admin_user, make_user, login, add_result,
                                                 add_opportunity, organization):
    member = make_user(organization, UserRole.CHURCH_MEMBER, "Remy")
    now = datetime.now(UTC).replace(tzinfo=None)
    add_result(member, ["GIVING", "FAITH", "MERCY"], created_at=now - timedelta(days=10))
    add_result(member, ["TEACHING", "FAITH", "MERCY"], created_at=now)
    opp = add_opportunity(organization, "Teacher", required_gifts=["TEACHING"])

    r = client.get(f"/admin/ministry-opportunities/{opp.id}/candidates", headers=login(admin_user))
    candidates = r.json()["candidates"]
    assert len(candidates) == 1
    assert candidates[0]["match_score"] == 100


def test_candidates_min_score(client, admin_user, make_user, login, add_result, add_opportunity, organization):
    a = make_user(organization, UserRole.CHURCH_MEMBER, "Ann")
    b = make_user(organization, UserRole.CHURCH_MEMBER, "Ben")
    add_result(a, ["TEACHING", "FAITH", "MERCY"])
    add_result(b, ["GIVING", "FAITH", "MERCY"])
    opp = add_opportunity(organization, "Teacher", required_gifts=["TEACHING"])
    r = client.get(f"/admin/ministry-opportunities/{opp.id}/candidates?min_score=1", headers=login(admin_user))
    assert [c["name"] for c in r.json()["candidates"]] == ["Ann Tester"]


def test_candidates_forbidden_for_members(client, member_user, login, add_opportunity, organization):
    opp = add_opportunity(organization, "Teacher", required_gifts=["TEACHING"])
    r = client.get(f"/admin/ministry-opportunities/{opp.id}/candidates", headers=login(member_user))
    assert r.status_code == 403


def test_candidates_ignore_results_from_previous_church(client, admin_user, make_user, login, add_result,
                                                         add_opportunity, organization, other_organization,
                                                         db_session):
    mover = make_user(organization, UserRole.CHURCH_MEMBER, "Milo")
    result = add_result(mover, ["TEACHING", "FAITH", "MERCY"])
    result.organization_id = other_organization.id
    db_session.commit()
    opp = add_opportunity(organization, "Teacher", required_gifts=["TEACHING"])

    r = client.get(f"/admin/ministry-opportunities/{opp.id}/candidates", headers=login(admin_user))
    assert r.json()["candidates"] == []


def test_member_matches_ignore_result_from_previous_church(client, member_user, login, add_result,
                                                            add_opportunity, organization, other_organization,
                                                            db_session):
    result = add_result(member_user, ["TEACHING", "FAITH", "MERCY"])
    result.organization_id = other_organization.id
    db_session.commit()
    add_opportunity(organization, "Teacher", required_gifts=["TEACHING"])
    r = client.get("/matching/opportunities", headers=login(member_user))
    assert r.status_code == 404
