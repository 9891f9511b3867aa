import pytest
import requests

import src.feedback_analyzer.llm_client as llm_client
from src.feedback_analyzer.exceptions import LLMClientError, ResponseFormatError, UpstreamAPIError
from src.feedback_analyzer.llm_client import LLMClient


class _FakeResponse:
    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json_data = json_data
        self.text = text

    def json(self):
        if self._json_data is None:
            raise ValueError("No JSON object could be decoded")
        return self._json_data


def _patch_post(monkeypatch, response=None, error=None):
    calls = []

    def fake_post(url, headers=None, json=None, timeout=None):
        calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if error is not None:
            raise error
        return response

    monkeypatch.setattr(llm_client.requests, "post", fake_post)
    return calls


def test_complete_sends_messages_request(monkeypatch):
    calls = _patch_post(monkeypatch, _FakeResponse(json_data={
        "content": [{"type": "text", "text": '{"summary": "ok"}'}],
        "usage": {"input_tokens": 12, "output_tokens": 5}
    }))

    client = LLMClient("secret-key", model="claude-test")
    reply = client.complete("Analyze this", max_tokens=1200)

    assert reply == '{"summary": "ok"}'
    call = calls[0]
    assert call["url"] == "https://api.anthropic.com/v1/messages"
    assert call["headers"]["x-api-key"] == "secret-key"
    assert call["headers"]["anthropic-version"] == "2023-06-01"
    assert call["json"] == {
        "model": "claude-test",
        "max_tokens": 1200,
        "messages": [{"role": "user", "content": "Analyze this"}]
    }
    assert call["timeout"] is None


def test_custom_endpoint_and_timeout(monkeypatch):
    calls = _patch_post(monkeypatch, _FakeResponse(json_data={"content": [{"text": "hi"}]}))

    LLMClient("k", endpoint="http://localhost:9000/v1/messages", timeout=30).complete("p", 10)

    assert calls[0]["url"] == "http://localhost:9000/v1/messages"
    assert calls[0]["timeout"] == 30


def test_non_success_status_raises_upstream_error(monkeypatch):
    _patch_post(monkeypatch, _FakeResponse(status_code=401, text='{"error": "invalid x-api-key"}'))

    with pytest.raises(UpstreamAPIError) as excinfo:
        LLMClient("bad-key").complete("p", 10)

    assert excinfo.value.status_code == 401
    assert excinfo.value.body == '{"error": "invalid x-api-key"}'
    assert str(excinfo.value) == "Claude API Error: 401"


def test_transport_failure_raises_client_error(monkeypatch):
    _patch_post(monkeypatch, error=requests.exceptions.ConnectionError("connection refused"))

    with pytest.raises(LLMClientError):
        LLMClient("k").complete("p", 10)


def test_non_json_body_raises_client_error(monkeypatch):
    _patch_post(monkeypatch, _FakeResponse(text="<html>gateway</html>"))

    with pytest.raises(LLMClientError):
        LLMClient("k").complete("p", 10)


def test_missing_content_raises_format_error(monkeypatch):
    _patch_post(monkeypatch, _FakeResponse(json_data={"content": []}, text='{"content": []}'))

    with pytest.raises(ResponseFormatError) as excinfo:
        LLMClient("k").complete("p", 10)

    assert excinfo.value.raw_response == '{"content": []}'
