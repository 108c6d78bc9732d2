import pytest
from fastapi.testclient import TestClient

from calmmind.analysis.ai_providers.base import GenerationClient, GenerationResult
from calmmind.core.config import Settings
from calmmind.main import create_app
from calmmind.storage.memory import MemStorage


class FakeGenerationClient(GenerationClient):
    """Records prompts and answers with canned text or a canned error."""

    def __init__(self, raw_text: str = "", configured: bool = True, error: Exception = None):
        self.raw_text = raw_text
        self.configured = configured
        self.error = error
        self.prompts = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    def generate(self, prompt: str) -> GenerationResult:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return GenerationResult(raw_text=self.raw_text)


@pytest.fixture
def settings():
    return Settings(
        openai_api_key="test-key",
        openai_chat_model="gpt-4o",
        openai_timeout=5.0,
        storage_backend="memory",
        database_url=None,
        secret_key="test-secret-key",
        algorithm="HS256",
        access_token_expire_minutes=5,
    )


@pytest.fixture
def fake_client():
    return FakeGenerationClient()


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def client(settings, storage, fake_client):
    app = create_app(settings, storage=storage, generation_client=fake_client)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    """Registers a user and returns a bearer header for it."""
    client.post("/api/auth/register", json={"username": "nimali", "password": "s3cret", "name": "Nimali"})
    resp = client.post("/api/auth/login", json={"username": "nimali", "password": "s3cret"})
    token = resp.json()["accessToken"]
    return {"Authorization": f"Bearer {token}"}
