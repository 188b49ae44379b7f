"""
Shared pytest fixtures for the dojo backend tests.

- in-memory SQLite engine substituted for the postgres pool
- test Settings with a known JWT secret
- two dojo owners (tenants) and their auth headers
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dojo_api.core.config import Settings, get_settings
from dojo_api.core.security import create_access_token, hash_password
from dojo_api.db.base import Base
from dojo_api.db.session import get_db
from dojo_api.main import app
from dojo_api.models import User
from dojo_api.services.auth_service import build_session_claims

OWNER_EMAIL = "owner@dojo.com"
OWNER_PASSWORD = "hunter2"


@pytest.fixture
def test_settings():
    return Settings(JWT_SECRET="test-secret", ENV="test")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def owner(db):
    user = User(
        id=1,
        email=OWNER_EMAIL,
        password_hash=hash_password(OWNER_PASSWORD),
        role="admin",
        dojo_name="Dojo Central",
        logo_url="https://cdn.example.com/logo.png",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def other_owner(db):
    user = User(
        id=2,
        email="sensei@outro-dojo.com",
        password_hash=hash_password("outra-senha"),
        role="admin",
        dojo_name="Outro Dojo",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def client(session_factory, test_settings):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_headers(test_settings):
    def _make(user):
        token = create_access_token(build_session_claims(user), test_settings)
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def owner_headers(owner, make_headers):
    return make_headers(owner)


@pytest.fixture
def other_headers(other_owner, make_headers):
    return make_headers(other_owner)
