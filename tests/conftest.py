import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        SECRET_KEY=SECRET,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        VIDEOS_DIR=str(tmp_path / "videos"),
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


def register(client, email="a@x.com", password="p", username="a"):
    r = client.post(
        "/register",
        json={"email": email, "password": password, "username": username},
    )
    assert r.status_code == 200, r.text
    return r.json()["token"]


def auth(token):
    return {"Authorization": f"Bearer {token}"}


def upload(client, token, caption="hola", path="/videos", content=b"\x00fake-mp4"):
    r = client.post(
        path,
        headers=auth(token),
        files={"video": ("clip.mp4", content, "video/mp4")},
        data={"caption": caption},
    )
    assert r.status_code == 200, r.text
    return r.json()


@pytest.fixture
def token(client):
    return register(client)
