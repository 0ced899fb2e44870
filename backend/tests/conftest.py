import pytest

from backend.exceptions import AIClientError


class FakeClient:
    """Stands in for OpenAIClient: returns a canned payload or raises."""

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.prompts = []

    def get_json(self, prompt, system_prompt=None, temperature=0.2):
        self.prompts.append(prompt)
        if self.error:
            raise AIClientError(self.error)
        return self.payload


@pytest.fixture
def no_ai(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("DEMO_MODE", raising=False)


@pytest.fixture
def with_ai(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.delenv("DEMO_MODE", raising=False)


@pytest.fixture
def demo_mode(monkeypatch):
    monkeypatch.setenv("DEMO_MODE", "true")


@pytest.fixture
def fake_client(monkeypatch):
    """Install a FakeClient everywhere get_client() is used; returns a setter."""
    def install(payload=None, error=None):
        client = FakeClient(payload, error)
        for module in (
            "backend.services.roadmap_generator",
            "backend.services.dream_role",
            "backend.services.resume_analyzer",
        ):
            monkeypatch.setattr(f"{module}.get_client", lambda: client)
        return client
    return install
