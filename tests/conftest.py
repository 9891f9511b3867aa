import json

import pytest
from fastapi.testclient import TestClient

from api.config import Settings
from api.dependencies import get_llm_client
from api.main import create_app


SINGLE_REPLY = {
    "sentiment": {"overall": "Negative", "positive": 10, "negative": 80, "neutral": 10},
    "issues": [
        {"category": "Bug", "description": "App crashes on login", "priority": "high", "severity": "critical"}
    ],
    "actionItems": ["Fix login crash"],
    "summary": "User is frustrated by crashes on login."
}

BULK_REPLY = {
    "aggregateSentiment": {"overall": "Mixed", "positive": 40, "negative": 40, "neutral": 20},
    "issueCategories": [
        {"category": "Bug Reports", "description": "Crashes", "priority": "high", "severity": "critical", "frequency": 12}
    ],
    "strategicRecommendations": ["Stabilize the mobile app"],
    "executiveSummary": "Users like the product but report crashes.",
    "priorityBreakdown": {"high": 3, "medium": 2, "low": 1}
}


class FakeLLMClient:
    """Stands in for LLMClient; returns a canned reply or raises"""

    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def complete(self, prompt, max_tokens):
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.reply


def wrap_in_prose(payload):
    return f"Here is the analysis you asked for:\n{json.dumps(payload)}\nLet me know if you need more."


@pytest.fixture
def settings():
    return Settings(CLAUDE_API_KEY="test-key", _env_file=None)


@pytest.fixture
def fake_llm():
    return FakeLLMClient(reply=wrap_in_prose(SINGLE_REPLY))


@pytest.fixture
def app(settings, fake_llm):
    application = create_app(settings)
    application.dependency_overrides[get_llm_client] = lambda: fake_llm
    return application


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
