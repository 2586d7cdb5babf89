from __future__ import annotations

import httpx
import pytest

from seidoku.analysis.errors import ConfigurationError, GenerationError
from seidoku.core.config import Settings
from seidoku.services.generation import GeminiGenerationService

GENERATE_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"


def _candidate_body(*texts: str) -> dict:
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text} for text in texts]},
                "finishReason": "STOP",
            }
        ]
    }


class _FakeResponse:
    def __init__(self, payload: object | None = None, *, raises: Exception | None = None):
        self._payload = payload if payload is not None else _candidate_body('{"tokens": []}')
        self._raises = raises

    def raise_for_status(self) -> None:
        if self._raises is not None:
            raise self._raises

    def json(self) -> object:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _FakeClient:
    def __init__(self, response: _FakeResponse | None = None, *, raises: Exception | None = None):
        self._response = response
        self._raises = raises
        self.calls: list[dict] = []

    def post(self, url: str, **kwargs) -> _FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self._raises is not None:
            raise self._raises
        if self._response is None:  # pragma: no cover - defensive path for test doubles
            raise RuntimeError("missing fake response")
        return self._response


def _http_status_error(status_code: int, body: dict | None = None) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", GENERATE_URL)
    response = httpx.Response(status_code, request=request, json=body) if body else httpx.Response(
        status_code, request=request
    )
    return httpx.HTTPStatusError("status failure", request=request, response=response)


def test_blank_api_key_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        GeminiGenerationService(api_key="   ")


def test_generate_posts_prompt_and_returns_candidate_text(monkeypatch) -> None:
    service = GeminiGenerationService(api_key=" test-key ")
    fake_client = _FakeClient(_FakeResponse(_candidate_body('{"tokens":', ' []}')))
    monkeypatch.setattr(service, "_ensure_client", lambda: fake_client)

    assert service.generate("analyse this") == '{"tokens": []}'

    assert len(fake_client.calls) == 1
    call = fake_client.calls[0]
    assert call["url"] == "/v1beta/models/gemini-2.5-flash:generateContent"
    assert call["headers"] == {"x-goog-api-key": "test-key"}
    assert call["json"]["contents"][0]["parts"] == [{"text": "analyse this"}]


def test_transport_errors_are_surfaced_verbatim(monkeypatch) -> None:
    service = GeminiGenerationService(api_key="test-key")
    fake_client = _FakeClient(raises=httpx.ConnectError("connection refused"))
    monkeypatch.setattr(service, "_ensure_client", lambda: fake_client)

    with pytest.raises(GenerationError) as excinfo:
        service.generate("prompt")

    assert str(excinfo.value) == "connection refused"
    assert len(fake_client.calls) == 1


def test_status_errors_carry_service_message_without_retry(monkeypatch) -> None:
    service = GeminiGenerationService(api_key="test-key")
    error = _http_status_error(400, {"error": {"code": 400, "message": "API key not valid."}})
    fake_client = _FakeClient(_FakeResponse(raises=error))
    monkeypatch.setattr(service, "_ensure_client", lambda: fake_client)

    with pytest.raises(GenerationError) as excinfo:
        service.generate("prompt")

    assert "400" in str(excinfo.value)
    assert "API key not valid." in str(excinfo.value)
    assert len(fake_client.calls) == 1


def test_status_errors_without_body_fall_back_to_status_code(monkeypatch) -> None:
    service = GeminiGenerationService(api_key="test-key")
    fake_client = _FakeClient(_FakeResponse(raises=_http_status_error(503)))
    monkeypatch.setattr(service, "_ensure_client", lambda: fake_client)

    with pytest.raises(GenerationError, match="status 503"):
        service.generate("prompt")


def test_invalid_json_body_raises_generation_error(monkeypatch) -> None:
    service = GeminiGenerationService(api_key="test-key")
    fake_client = _FakeClient(_FakeResponse(ValueError("bad body")))
    monkeypatch.setattr(service, "_ensure_client", lambda: fake_client)

    with pytest.raises(GenerationError, match="not valid JSON"):
        service.generate("prompt")


def test_blocked_prompt_reports_block_reason(monkeypatch) -> None:
    service = GeminiGenerationService(api_key="test-key")
    fake_client = _FakeClient(_FakeResponse({"promptFeedback": {"blockReason": "SAFETY"}}))
    monkeypatch.setattr(service, "_ensure_client", lambda: fake_client)

    with pytest.raises(GenerationError, match="SAFETY"):
        service.generate("prompt")


def test_candidate_without_text_reports_finish_reason(monkeypatch) -> None:
    service = GeminiGenerationService(api_key="test-key")
    body = {"candidates": [{"content": {"parts": []}, "finishReason": "MAX_TOKENS"}]}
    monkeypatch.setattr(service, "_ensure_client", lambda: _FakeClient(_FakeResponse(body)))

    with pytest.raises(GenerationError, match="MAX_TOKENS"):
        service.generate("prompt")


def test_from_settings_copies_model_and_endpoint() -> None:
    settings = Settings(
        environment="test",
        app_name="seidoku-backend-test",
        host="127.0.0.1",
        port=8001,
        gemini_api_key="abc",
        gemini_model="gemini-2.5-pro",
        gemini_base_url="http://localhost:9999",
        gemini_timeout_seconds=30.0,
    )

    service = GeminiGenerationService.from_settings("abc", settings)

    assert service.model == "gemini-2.5-pro"
    assert service.base_url == "http://localhost:9999"
    assert service.timeout_seconds == 30.0
