from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    text: str = Field(...)


class TokenOut(BaseModel):
    text: str
    role: str


class AnalysisResultOut(BaseModel):
    tokens: list[TokenOut] = Field(default_factory=list)
    translation: str | None = None
    explanation: str = ""


class SegmentStyleOut(BaseModel):
    css_class: str
    color: str | None
    underline: Literal["solid", "dashed"] | None
    italic: bool
    badge_color: str


class SegmentOut(BaseModel):
    text: str
    role: str
    badge: str
    style: SegmentStyleOut


class AnalysisSnapshot(BaseModel):
    state: Literal["idle", "loading", "success", "error"]
    result: AnalysisResultOut | None = None
    segments: list[SegmentOut] = Field(default_factory=list)
    error: str | None = None
    translation_enabled: bool = False
