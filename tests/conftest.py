# File: tests/conftest.py

import os

# must be in place before authapi reads its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from authapi.db.session import SessionLocal, engine
from authapi.main import app
from authapi.models.base import Base


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def registered_user(client):
    payload = {"name": "Test", "email": "test@email.com", "password": "password"}
    resp = client.post("/api/register", json=payload)
    assert resp.status_code == 201
    return payload
