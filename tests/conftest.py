import os

os.environ["ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import uuid
import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db import Base, get_db
from app.models.organization import Organization, OrganizationStatus
from app.models.user import User, UserRole
from app.models.assessment_result import AssessmentResult
from app.models.ministry_opportunity import MinistryOpportunity
from app.services.auth import get_current_user
from app.core.gift_questions import QUESTION_ITEMS

# Use SQLite in-memory for test DB
TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"
# For in-memory SQLite we must use a StaticPool so multiple connections share the
# same in-memory database during the test run (TestClient requests vs fixtures).
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency override
def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_test_db():
    # recreate schema for each test to ensure isolation
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


def _make_org(db, name):
    org = Organization(
        id=str(uuid.uuid4()),
        name=name,
        subdomain=name.lower().replace(" ", ""),
        invite_code=f"{name.split()[0].upper()}100",
        status=OrganizationStatus.ACTIVE,
    )
    db.add(org)
    db.commit()
    return org


def _make_user(db, organization, role, first_name):
    user = User(
        id=str(uuid.uuid4()),
        organization_id=organization.id if organization else None,
        email=f"{first_name.lower()}+{uuid.uuid4().hex[:8]}@example.com",
        first_name=first_name,
        last_name="Tester",
        role=role,
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def organization(db_session):
    return _make_org(db_session, "Grace Church")


@pytest.fixture
def other_organization(db_session):
    return _make_org(db_session, "Hope Church")


@pytest.fixture
def make_user(db_session):
    def _make(organization, role=UserRole.CHURCH_MEMBER, first_name="Member"):
        return _make_user(db_session, organization, role, first_name)
    return _make


@pytest.fixture
def member_user(make_user, organization):
    return make_user(organization, UserRole.CHURCH_MEMBER, "Mary")


@pytest.fixture
def admin_user(make_user, organization):
    return make_user(organization, UserRole.CHURCH_SUPER_ADMIN, "Paul")


@pytest.fixture
def login():
    """Make FastAPI resolve ``get_current_user`` to the given user."""
    def _login(user):
        user_id = user.id

        def _current_user():
            db = TestingSessionLocal()
            try:
                found = db.query(User).filter(User.id == user_id).first()
                db.expunge(found)
                return found
            finally:
                db.close()
        app.dependency_overrides[get_current_user] = _current_user
        return {"Authorization": f"Bearer mock-{user_id}"}
    return _login


def build_answers(default=3, overrides=None):
    """Full answer set: every question at ``default``, with per-gift overrides."""
    overrides = overrides or {}
    return {code: overrides.get(gift, default) for code, gift, _ in QUESTION_ITEMS}


@pytest.fixture
def add_result(db_session):
    """Persist an assessment result directly, bypassing scoring."""
    def _add(user, top_gifts, abilities=(), expires_in_days=90, created_at=None):
        created = created_at or datetime.now(UTC).replace(tzinfo=None)
        result = AssessmentResult(
            id=str(uuid.uuid4()),
            user_id=user.id,
            organization_id=user.organization_id,
            answers={},
            scores={"version": 1, "totals": {}, "ranked": [], "top3": list(top_gifts)},
            top1_gift_key=top_gifts[0],
            top2_gift_key=top_gifts[1],
            top3_gift_key=top_gifts[2],
            natural_abilities=list(abilities),
            created_at=created,
            expires_at=created + timedelta(days=expires_in_days),
        )
        db_session.add(result)
        db_session.commit()
        return result
    return _add


@pytest.fixture
def add_opportunity(db_session):
    def _add(organization, title, **kwargs):
        opp = MinistryOpportunity(id=str(uuid.uuid4()), organization_id=organization.id, title=title, **kwargs)
        db_session.add(opp)
        db_session.commit()
        return opp
    return _add
