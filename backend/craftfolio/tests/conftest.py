"""
Shared fixtures: an isolated in-memory database per test.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from craftfolio.main import app
from craftfolio.db.base import Base
from craftfolio.db.session import get_db, init_db


@pytest.fixture
def client():
    """TestClient bound to a fresh SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    init_db(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


def register(client, username, password="testpassword123", email=None):
    params = {"username": username, "password": password}
    if email:
        params["email"] = email
    return client.post("/api/auth/register", params=params)


def login(client, username, password="testpassword123"):
    return client.post("/api/auth/login", params={"username": username, "password": password})


@pytest.fixture
def make_user(client):
    """Register and log in a user; returns bearer headers."""
    def _make_user(username, email=None):
        assert register(client, username, email=email).status_code == 200
        token = login(client, username).text
        return {"Authorization": f"Bearer {token}"}
    return _make_user


@pytest.fixture
def auth_headers(make_user):
    return make_user("testuser", email="test@example.com")
