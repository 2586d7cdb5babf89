from __future__ import annotations

import json

from pydantic import ValidationError

from seidoku.analysis.errors import DecodeError
from seidoku.analysis.models import AnalysisResult

_FENCE_MARKERS = ("```json", "```")


def strip_fences(text: str) -> str:
    """Remove markdown code-fence markers and surrounding whitespace.

    Markers are removed until none are left, so removing one marker can
    never leave a new one behind and a second call is a no-op.
    """
    cleaned = text
    previous = None
    while cleaned != previous:
        previous = cleaned
        for marker in _FENCE_MARKERS:
            cleaned = cleaned.replace(marker, "")
    return cleaned.strip()


def decode_analysis(text: str) -> AnalysisResult:
    payload_text = strip_fences(text)
    try:
        payload = json.loads(payload_text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Model response was not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise DecodeError(
            f"Model response must be a JSON object, got {type(payload).__name__}."
        )

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"Model response had an unexpected format: {exc}") from exc
