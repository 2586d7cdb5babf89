from __future__ import annotations

import logging
import threading
from typing import Callable

from seidoku.analysis.decoder import decode_analysis
from seidoku.analysis.errors import AnalysisError, ConfigurationError
from seidoku.analysis.prompt import build_prompt
from seidoku.services.generation import GenerationService
from seidoku.services.use_cases.state import Failure, Idle, Loading, RequestState, Success

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Gemini API key is not configured. Set GEMINI_API_KEY and restart the backend."
FALLBACK_ERROR_MESSAGE = "An error occurred while the model was analysing the sentence."


class AnalysisController:
    """Owns the lifecycle of one sentence analysis at a time.

    ``submit`` is ignored for blank input and while another request is in
    flight. Every attempt that starts ends in ``Success`` or ``Failure``.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        generation_service_factory: Callable[[str], GenerationService],
        translation_enabled: bool = False,
    ):
        self._api_key = api_key.strip() if api_key else None
        self._generation_service_factory = generation_service_factory
        self._translation_enabled = translation_enabled
        self._service: GenerationService | None = None
        self._state: RequestState = Idle()
        self._in_flight = threading.Lock()

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def translation_enabled(self) -> bool:
        return self._translation_enabled

    def submit(self, text: str) -> RequestState:
        if not text.strip():
            return self._state
        if not self._in_flight.acquire(blocking=False):
            logger.info("analysis_submit_ignored", extra={"reason": "in_flight"})
            return self._state

        try:
            self._state = Loading()
            logger.info(
                "analysis_started",
                extra={"text_length": len(text), "translation": self._translation_enabled},
            )
            self._state = self._run(text)
        finally:
            if isinstance(self._state, Loading):
                self._state = Failure(FALLBACK_ERROR_MESSAGE)
            self._in_flight.release()
        return self._state

    def reset(self) -> RequestState:
        if not self._in_flight.acquire(blocking=False):
            return self._state
        try:
            self._state = Idle()
        finally:
            self._in_flight.release()
        return self._state

    def _run(self, text: str) -> RequestState:
        try:
            service = self._ensure_service()
            prompt = build_prompt(text, include_translation=self._translation_enabled)
            raw = service.generate(prompt)
            result = decode_analysis(raw)
        except AnalysisError as exc:
            logger.warning(
                "analysis_failed",
                extra={"error_type": type(exc).__name__, "error": str(exc)},
            )
            return Failure(str(exc) or FALLBACK_ERROR_MESSAGE)
        except Exception as exc:
            logger.exception("analysis_unexpected_error")
            return Failure(str(exc) or FALLBACK_ERROR_MESSAGE)

        logger.info("analysis_succeeded", extra={"token_count": len(result.tokens)})
        return Success(result)

    def _ensure_service(self) -> GenerationService:
        if not self._api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        if self._service is None:
            self._service = self._generation_service_factory(self._api_key)
        return self._service

    def close(self) -> None:
        close = getattr(self._service, "close", None)
        if callable(close):
            close()
        self._service = None
