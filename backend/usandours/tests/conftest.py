"""
Shared fixtures: in-memory database and API clients.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from usandours.main import app
from usandours.db.base import Base
from usandours.db.session import get_db
import usandours.models  # noqa: F401
from usandours.core.security import get_password_hash
from usandours.models.user import User

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh tables for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_client():
    """Each client keeps its own session cookie, i.e. one client per user."""
    def _make() -> TestClient:
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def register(make_client):
    """Register a user on a fresh client. Returns (client, response)."""
    def _register(name, email, action="create", secret_code=None, password="testpassword123"):
        c = make_client()
        body = {"name": name, "email": email, "password": password, "action": action}
        if secret_code is not None:
            body["secretCode"] = secret_code
        response = c.post("/auth/register", json=body)
        return c, response
    return _register


@pytest.fixture
def couple_clients(register):
    """A paired couple: (alice_client, bob_client, secret_code)."""
    alice, response = register("Alice", "alice@example.com", "create")
    assert response.status_code == 201
    code = response.json()["secretCode"]
    bob, response = register("Bob", "bob@example.com", "join", secret_code=code)
    assert response.status_code == 201
    return alice, bob, code


@pytest.fixture
def solo_client(db, make_client):
    """A signed-in user who has not created or joined a room."""
    db.add(User(name="Solo", email="solo@example.com", hashed_password=get_password_hash("testpassword123")))
    db.commit()

    c = make_client()
    response = c.post("/auth/login", json={"email": "solo@example.com", "password": "testpassword123"})
    assert response.status_code == 200
    return c
