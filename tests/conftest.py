"""Pytest configuration and fixtures for files_manager tests."""

import base64
import io
import time
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from files_manager.core.config import Settings
from files_manager.main import create_app
from files_manager.models.database import create_session_factory


class MemoryCache:
    """In-memory stand-in for RedisCache with the same TTL semantics."""

    def __init__(self):
        self.data = {}

    def is_alive(self):
        return True

    def get(self, key):
        entry = self.data.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if time.monotonic() >= expires_at:
            del self.data[key]
            return None
        return value

    def set(self, key, value, ttl):
        self.data[key] = (value, time.monotonic() + ttl)
        return True

    def delete(self, key):
        self.data.pop(key, None)


class RecordingQueue:
    """Collects enqueued job data instead of talking to a broker."""

    def __init__(self):
        self.jobs = []

    async def connect(self):
        return None

    async def disconnect(self):
        return None

    async def enqueue(self, **job_data):
        self.jobs.append(job_data)
        return uuid4().hex


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url="sqlite://",
        folder_path=tmp_path / "files",
        mail_sender="noreply@files-manager.test",
        _env_file=None,
    )


@pytest.fixture
def session_factory():
    return create_session_factory("sqlite://")


@pytest.fixture
def cache():
    return MemoryCache()


@pytest.fixture
def thumbnail_queue():
    return RecordingQueue()


@pytest.fixture
def email_queue():
    return RecordingQueue()


@pytest.fixture
def client(settings, session_factory, cache, thumbnail_queue, email_queue):
    app = create_app(
        settings,
        session_factory=session_factory,
        cache=cache,
        thumbnail_queue=thumbnail_queue,
        email_queue=email_queue,
    )
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Create a user and return `(user_id, token)` for it."""

    def _register(email="bob@dylan.com", password="toto1234!"):
        res = client.post("/users", json={"email": email, "password": password})
        assert res.status_code == 201
        token = client.get("/connect", auth=(email, password)).json()["token"]
        return res.json()["id"], token

    return _register


def png_bytes(width=800, height=600, color=(200, 30, 30)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


def b64(content: bytes) -> str:
    return base64.b64encode(content).decode()
