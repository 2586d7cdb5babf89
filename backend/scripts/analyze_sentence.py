from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from seidoku.api.routes.analyze import snapshot_from_state
from seidoku.core.config import load_settings
from seidoku.core.logging import configure_logging
from seidoku.services.generation import GeminiGenerationService
from seidoku.services.use_cases.analyze import AnalysisController
from seidoku.services.use_cases.state import Failure


def run_analysis(text: str, *, translation: bool | None = None) -> tuple[dict[str, object], bool]:
    settings = load_settings()
    translation_enabled = settings.translation_enabled if translation is None else translation
    controller = AnalysisController(
        settings.gemini_api_key,
        generation_service_factory=lambda api_key: GeminiGenerationService.from_settings(api_key, settings),
        translation_enabled=translation_enabled,
    )
    try:
        state = controller.submit(text)
    finally:
        controller.close()
    snapshot = snapshot_from_state(state, translation_enabled=translation_enabled)
    return snapshot.model_dump(), not isinstance(state, Failure)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tag the sentence roles of one English sentence")
    parser.add_argument("text", help="English sentence to analyse")
    translation = parser.add_mutually_exclusive_group()
    translation.add_argument(
        "--translation",
        dest="translation",
        action="store_true",
        default=None,
        help="Also request a Japanese translation",
    )
    translation.add_argument(
        "--no-translation",
        dest="translation",
        action="store_false",
        help="Only request tokens and the explanation",
    )
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    if not args.text.strip():
        raise SystemExit("text must not be blank")

    configure_logging()
    snapshot, ok = run_analysis(args.text, translation=args.translation)
    print(json.dumps(snapshot, ensure_ascii=False, indent=2))
    if not ok:
        raise SystemExit(1)
