from __future__ import annotations

import json


_HEADER = """あなたは言語学と英語教育の専門家です。以下の英文を解析してください。

【対象の英文】
"{text}"
"""

_BASE_INSTRUCTIONS = (
    "英文を意味のまとまり（単語や句）に分割してください。",
    "それぞれのまとまりに対して、S(主語), V(動詞), O(目的語), C(補語), M(修飾語) のいずれかの役割を"
    "付与してください。役割がない記号などは 'none' にしてください。",
    "文法的な構造のポイントを「explanation」として日本語で簡潔に解説してください。",
)

_TRANSLATION_INSTRUCTION = "英文全体の自然な日本語訳を「translation」として記述してください。"

_OUTPUT_INSTRUCTION = (
    "出力は必ず以下のJSON形式のみとし、マークダウンの記号(```json)やその他のテキストは"
    "一切含めないでください。"
)


def _example_output(include_translation: bool) -> str:
    example: dict[str, object] = {
        "tokens": [
            {"text": "The documents", "role": "S"},
            {"text": "were", "role": "V"},
        ],
    }
    if include_translation:
        example["translation"] = "ここに日本語訳を記述"
    example["explanation"] = "ここに解説を記述"
    return json.dumps(example, ensure_ascii=False, indent=2)


def build_prompt(text: str, *, include_translation: bool = False) -> str:
    """Compose the instruction prompt for one sentence.

    The sentence is embedded literally. With ``include_translation`` the
    model is also asked for a Japanese translation of the whole sentence.
    """
    instructions = list(_BASE_INSTRUCTIONS)
    if include_translation:
        instructions.append(_TRANSLATION_INSTRUCTION)
    instructions.append(_OUTPUT_INSTRUCTION)

    numbered = "\n".join(
        f"{index}. {line}" for index, line in enumerate(instructions, start=1)
    )
    return (
        _HEADER.format(text=text)
        + "\n【指示】\n"
        + numbered
        + "\n\n【出力JSONフォーマット例】\n"
        + _example_output(include_translation)
        + "\n"
    )
