# tests/test_api/conftest.py
import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from api.main import app
from api.dependencies import get_blob_store
from core.sa.database import get_db
from core.storage import BlobStore

@pytest.fixture
def client(database, storage_dir):
    """Test client running against the test database and a temporary storage directory"""
    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    def override_get_blob_store(db: Session = Depends(get_db)):
        return BlobStore(db, base_dir=storage_dir)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = override_get_blob_store
    yield TestClient(app)
    app.dependency_overrides.clear()

def sign_up(client, email, password="long enough", name=None):
    response = client.post("/auth/signup", json={"email": email, "password": password, "name": name})
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['access_token']}"}

@pytest.fixture
def auth_headers(client):
    return sign_up(client, "elise@example.com", name="Elise")

@pytest.fixture
def other_headers(client):
    return sign_up(client, "visitor@example.com")
