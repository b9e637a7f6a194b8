"""Shared fixtures: every test gets its own database file and content directories."""

import pytest
from fastapi.testclient import TestClient

from rentx.core.config import Settings
from rentx.db.session import create_db_engine
from rentx.db.store import Store
from rentx.main import create_app
from rentx.services.image_store import ImageStore


@pytest.fixture
def settings(tmp_path):
    """Settings pointing the store and content directories at tmp_path."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'rentx.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        STATIC_DIR=str(tmp_path / "dist"),
        MAX_UPLOAD_SIZE_MB=1,
    )


@pytest.fixture
def store(settings):
    """An initialized store on an empty database."""
    store = Store(create_db_engine(settings.DATABASE_URL))
    store.initialize()
    yield store
    store.engine.dispose()


@pytest.fixture
def image_store(settings):
    return ImageStore(settings.UPLOAD_DIR)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the application lifespan (schema creation) running."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def registered_user(client):
    """Sign up a user through the API and return (email, password, user id)."""
    email, password = "ana@example.com", "s3cret"
    response = client.post(
        "/api/signup",
        data={"name": "Ana", "email": email, "password": password},
    )
    assert response.status_code == 200
    response = client.post("/api/signin", data={"email": email, "password": password})
    user_id = int(response.text.rsplit(":", 1)[1])
    return email, password, user_id
