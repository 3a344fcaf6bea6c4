import os

# must be set before the app modules read settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.main import app

DEFAULT_PASSWORD = "password123"


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def create_vendor(client):
    """Register a vendor over HTTP and return (vendor data, token)."""

    def _create(email="vendor1@example.com", name="Vendor 1", password=DEFAULT_PASSWORD, **extra):
        payload = {"name": name, "email": email, "password": password, **extra}
        response = client.post("/api/vendors", json=payload)
        assert response.status_code == 201, response.text
        auth = client.post("/api/vendors/auth", json={"email": email, "password": password})
        assert auth.status_code == 200, auth.text
        return response.json()["data"], auth.json()["data"]["token"]

    return _create


@pytest.fixture
def create_customer(client):
    """Register a customer over HTTP and return (customer data, token)."""

    def _create(email="jane@example.com", first_name="Jane", last_name="Doe", password=DEFAULT_PASSWORD):
        payload = {
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "password": password,
        }
        response = client.post("/api/customers", json=payload)
        assert response.status_code == 201, response.text
        auth = client.post("/api/customers/auth", json={"email": email, "password": password})
        assert auth.status_code == 200, auth.text
        return response.json()["data"], auth.json()["data"]["token"]

    return _create
