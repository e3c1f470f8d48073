from __future__ import annotations
from pathlib import Path

import bcrypt
import pytest
import yaml
from fastapi.testclient import TestClient

from cms.config import Settings
from cms.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    credentials = tmp_path / "users.yml"
    admin_hash = bcrypt.hashpw(b"secret", bcrypt.gensalt(rounds=4)).decode("utf-8")
    credentials.write_text(yaml.safe_dump({"admin": admin_hash}), encoding="utf-8")
    return Settings(
        data_dir=tmp_path / "data",
        images_dir=tmp_path / "uploads",
        credentials_file=credentials,
        session_secret="test-secret",
        bcrypt_rounds=4,
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings), follow_redirects=False)


@pytest.fixture
def admin_client(client: TestClient) -> TestClient:
    resp = client.post("/users/signin", data={"username": "admin", "password": "secret"})
    assert resp.status_code == 302
    # consume the "Welcome!" flash so tests only see their own messages
    client.get("/")
    return client


@pytest.fixture
def create_document(settings: Settings):
    def _create(name: str, content: str = "") -> Path:
        base = Path(settings.data_dir)
        base.mkdir(parents=True, exist_ok=True)
        path = base / name
        path.write_text(content, encoding="utf-8")
        return path
    return _create


def follow(client: TestClient, response) -> str:
    """Follows a redirect and returns the body of the landing page."""
    assert response.status_code == 302
    return client.get(response.headers["location"]).text
