from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import httpx

from seidoku.analysis.errors import ConfigurationError, GenerationError
from seidoku.core.config import DEFAULT_GEMINI_BASE_URL, DEFAULT_GEMINI_MODEL, Settings


class GenerationService(Protocol):
    def generate(self, prompt: str) -> str: ...


@dataclass
class GeminiGenerationService:
    """Single-shot text generation backed by the Gemini ``generateContent`` API."""

    api_key: str
    model: str = DEFAULT_GEMINI_MODEL
    base_url: str = DEFAULT_GEMINI_BASE_URL
    timeout_seconds: float | None = None
    _client: httpx.Client | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        normalized_key = self.api_key.strip()
        if not normalized_key:
            raise ConfigurationError("Gemini API key is required for analysis.")
        self.api_key = normalized_key

    @classmethod
    def from_settings(cls, api_key: str, settings: Settings) -> GeminiGenerationService:
        return cls(
            api_key=api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout_seconds=settings.gemini_timeout_seconds,
        )

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(base_url=self.base_url, timeout=self.timeout_seconds)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def generate(self, prompt: str) -> str:
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self.api_key}

        try:
            response = self._ensure_client().post(
                f"/v1beta/models/{self.model}:generateContent",
                json=payload,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise GenerationError(self._describe_status_error(exc.response)) from exc
        except httpx.HTTPError as exc:
            raise GenerationError(str(exc) or f"Gemini request failed: {type(exc).__name__}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise GenerationError("Gemini response was not valid JSON.") from exc

        return self._extract_text(body)

    @staticmethod
    def _describe_status_error(response: httpx.Response) -> str:
        status_code = response.status_code
        try:
            body = response.json()
        except ValueError:
            body = None
        error = body.get("error") if isinstance(body, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        if isinstance(message, str) and message.strip():
            return f"Gemini request failed with status {status_code}: {message.strip()}"
        return f"Gemini request failed with status {status_code}."

    @staticmethod
    def _extract_text(body: object) -> str:
        if not isinstance(body, dict):
            raise GenerationError("Gemini response had an unexpected shape.")

        candidates = body.get("candidates")
        first = candidates[0] if isinstance(candidates, list) and candidates else None
        content = first.get("content") if isinstance(first, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None

        texts = [
            part["text"]
            for part in parts or []
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        ]
        text = "".join(texts)
        if text.strip():
            return text

        feedback = body.get("promptFeedback")
        block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        finish_reason = first.get("finishReason") if isinstance(first, dict) else None
        reason = block_reason or finish_reason
        if reason:
            raise GenerationError(f"Gemini returned no text (reason: {reason}).")
        raise GenerationError("Gemini returned no text.")
