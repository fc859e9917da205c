import os

# Point the application at a throwaway database before any app module loads.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.sessions import enable_sqlite_foreign_keys, get_db
from app.main import app
from app.models import User

PASSWORD = "password123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_client(session_factory):
    """Build TestClients that share one database but keep separate cookie jars."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    clients = []

    def _make():
        client = TestClient(app)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()


def register(client, username, email=None, password=PASSWORD):
    email = email or f"{username}@example.com"
    response = client.post(
        "/user/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def login(client, email, password=PASSWORD):
    return client.post("/auth/login", json={"email": email, "password": password})


@pytest.fixture
def alice(client):
    """A registered, logged-in client for alice."""
    user = register(client, "alice")
    assert login(client, user["email"]).status_code == 201
    client.user = user
    return client


@pytest.fixture
def bob(make_client):
    client = make_client()
    user = register(client, "bob")
    assert login(client, user["email"]).status_code == 201
    client.user = user
    return client


@pytest.fixture
def owner(db):
    """A user row created directly, for service-level tests."""
    user = User(username="owner", email="owner@example.com", password_hash="not-a-real-hash")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def stranger(db):
    user = User(username="stranger", email="stranger@example.com", password_hash="not-a-real-hash")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
