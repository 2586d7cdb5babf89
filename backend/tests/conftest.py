from __future__ import annotations

import pytest


class StubGenerationService:
    def __init__(self, responses: list[str | Exception] | None = None):
        self._responses = list(responses or [])
        self.prompts: list[str] = []

    def queue(self, *responses: str | Exception) -> None:
        self._responses.extend(responses)

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._responses:
            return '{"tokens": [], "explanation": ""}'
        event = self._responses.pop(0)
        if isinstance(event, Exception):
            raise event
        return event


@pytest.fixture
def stub_generation_service() -> StubGenerationService:
    return StubGenerationService()


@pytest.fixture
def stub_generation_service_factory(stub_generation_service):
    return lambda _api_key, _settings: stub_generation_service
