"""
Shared fixtures: in-memory database, fake completion client, test client
"""

import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from hrapply.context import AppContext
from hrapply.core.config import TestSettings
from hrapply.main import create_app
from hrapply.services.ai_processor import AIProcessor


class FakeCompletions:
    """Stands in for client.chat.completions"""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self, reply=None, error=None):
        self.completions = FakeCompletions(reply=reply, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


PARSED_RESUME = {
    "firstNameEn": "Somchai",
    "lastNameEn": "Jaidee",
    "email": "somchai@example.com",
    "age": "29",
    "englishSpoken": "good",
    "work1Company": "Siam Logistics",
    "masterName": "",
}


@pytest.fixture
def settings(tmp_path, monkeypatch):
    # Relative upload directory lands inside the test's tmp dir
    monkeypatch.chdir(tmp_path)
    return TestSettings(
        database_url="sqlite+aiosqlite:///:memory:",
        openai_api_key=None,
        vercel=False,
        fonts_dir=str(tmp_path / "fonts"),
        logo_path=str(tmp_path / "Logo.png"),
        max_file_size_mb=1,
    )


@pytest.fixture
def fake_openai():
    return FakeOpenAI(reply=json.dumps(PARSED_RESUME))


@pytest.fixture
def context(settings, fake_openai):
    context = AppContext.from_settings(settings)
    context.ai_processor = AIProcessor(None, client=fake_openai)
    return context


@pytest.fixture
def client(context):
    app = create_app(context=context)
    with TestClient(app) as test_client:
        yield test_client
