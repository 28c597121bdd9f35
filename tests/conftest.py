import os

# Settings are read at import time, so the environment must be in place first.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("TRAINING_DATA_PATH", "tests/does-not-exist.csv")
os.environ.setdefault("ENABLE_SCHEDULER", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from campus_wellness.main import app
from campus_wellness.db.session import Base, get_db
from campus_wellness.db.models.user import User
from campus_wellness.core.security import get_current_user, hash_password
from campus_wellness.api.chat import responder

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


def make_user(db, email, role="user"):
    user = User(
        email=email,
        name=email.split("@")[0].title(),
        hashed_password=hash_password("correct-horse-battery"),
        role=role,
        campus="Main",
        office_or_dept="Counseling",
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def user(db):
    return make_user(db, "student@campus.edu")


@pytest.fixture
def other_user(db):
    return make_user(db, "other@campus.edu")


@pytest.fixture
def admin_user(db):
    return make_user(db, "admin@campus.edu", role="admin")


@pytest.fixture
def empty_corpus(monkeypatch):
    """A loaded generator with no corpus rows, so replies come from templates or the fallback table."""
    generator = responder.ResponseGenerator(csv_path="tests/does-not-exist.csv")
    generator.load()
    monkeypatch.setattr(responder, "response_generator", generator)
    return generator


@pytest.fixture
def anonymous_client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client_for(anonymous_client):
    """Build a client authenticated as the given user."""
    def _client_for(current_user):
        app.dependency_overrides[get_current_user] = lambda: current_user
        return anonymous_client
    return _client_for


@pytest.fixture
def client(client_for, user, empty_corpus):
    return client_for(user)
