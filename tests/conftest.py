"""
Shared fixtures: in-memory database, API client, registered users
"""
import os

# Must be set before the app and its settings are imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["SMS_PROVIDER"] = "console"
os.environ["LOG_FILE"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import roomnest.models  # noqa: F401
from roomnest.core.database import Base, get_db
from roomnest.main import app

DEFAULT_PASSWORD = "Secret@123"


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
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client):
    """Register through the API and return the response data (includes token)"""
    def _register(name="Asha Rao", email="asha@example.com", phone="9876543210",
                  password=DEFAULT_PASSWORD, role="user"):
        response = client.post("/auth/register", json={
            "name": name,
            "email": email,
            "phone": phone,
            "password": password,
            "role": role,
        })
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _register


@pytest.fixture
def owner(register_user):
    return register_user(name="Ravi Kumar", email="ravi@example.com", phone="9123456780", role="owner")


@pytest.fixture
def guest(register_user):
    return register_user(name="Meera Shah", email="meera@example.com", phone="8123456789")


@pytest.fixture
def create_property(client):
    def _create(owner_data, **overrides):
        body = {
            "title": "Sunrise PG",
            "type": "PG",
            "gender": "Any",
            "address": "12 MG Road",
            "city": "Bengaluru",
            "pricePerMonth": 9000,
            "availableBeds": 1,
        }
        body.update(overrides)
        response = client.post("/properties", json=body, headers=auth_header(owner_data["token"]))
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _create
