"""
Shared fixtures: an in-memory database per test and an authenticated client.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db, init_db
from app.main import app

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


@pytest.fixture(autouse=True)
def database():
    """Fresh tables for every test."""
    init_db(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


def register_and_login(client, email="alice@example.com", name="Alice", password="secret123"):
    """Register a user and return bearer headers for them."""
    client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client)


@pytest.fixture
def trip(client, auth_headers):
    """A trip from 2025-07-01 to 2025-07-05 in EUR."""
    response = client.post(
        "/api/trips",
        json={
            "name": "Asturias",
            "destination": "Oviedo",
            "startDate": "2025-07-01",
            "endDate": "2025-07-05",
            "currency": "eur",
        },
        headers=auth_headers,
    )
    return response.json()


@pytest.fixture
def add_participant(client, auth_headers):
    def _add(trip_id, name):
        response = client.post(
            f"/api/trips/{trip_id}/participants",
            json={"name": name},
            headers=auth_headers,
        )
        return response.json()
    return _add


@pytest.fixture
def add_expense(client, auth_headers):
    def _add(trip_id, payer_id, amount, date="2025-07-02", description=None):
        payload = {"amount": amount, "date": date, "payerId": payer_id}
        if description:
            payload["description"] = description
        return client.post(
            f"/api/trips/{trip_id}/expenses",
            json=payload,
            headers=auth_headers,
        )
    return _add
