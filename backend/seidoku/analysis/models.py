from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


KNOWN_ROLES: tuple[str, ...] = ("S", "V", "O", "C", "M", "none")


class Token(BaseModel):
    """One sense unit and the sentence role the model assigned to it.

    ``role`` is kept as a plain string: tags outside ``KNOWN_ROLES`` are
    passed through and rendered with the default style. A missing, null or
    non-string tag becomes ``"none"``.
    """

    text: str
    role: str = "none"

    @field_validator("role", mode="before")
    @classmethod
    def coerce_role(cls, value: object) -> str:
        return value if isinstance(value, str) else "none"


class AnalysisResult(BaseModel):
    tokens: list[Token] = Field(default_factory=list)
    translation: str | None = None
    explanation: str = ""
