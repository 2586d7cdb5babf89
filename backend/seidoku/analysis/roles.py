from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from seidoku.analysis.models import AnalysisResult


@dataclass(frozen=True)
class RoleStyle:
    css_class: str
    color: str | None
    underline: Literal["solid", "dashed"] | None
    italic: bool
    badge_color: str


@dataclass(frozen=True)
class RenderedSegment:
    text: str
    role: str
    badge: str
    style: RoleStyle


DEFAULT_STYLE = RoleStyle(
    css_class="role-default",
    color=None,
    underline=None,
    italic=False,
    badge_color="lightgray",
)


_ROLE_STYLES: dict[str, RoleStyle] = {
    "S": RoleStyle("role-s", "blue", "solid", False, "blue"),
    "V": RoleStyle("role-v", "red", "solid", False, "red"),
    "O": RoleStyle("role-o", "green", "solid", False, "green"),
    "C": RoleStyle("role-c", "orange", "solid", False, "orange"),
    "M": RoleStyle("role-m", "gray", "dashed", True, "gray"),
}


def style_for_role(role: str) -> RoleStyle:
    return _ROLE_STYLES.get(role, DEFAULT_STYLE)


def badge_for_role(role: str) -> str:
    # Unknown tags keep their raw text on the badge; only "none" is blanked.
    return "-" if role == "none" else role


def render_segments(result: AnalysisResult) -> list[RenderedSegment]:
    return [
        RenderedSegment(
            text=token.text,
            role=token.role,
            badge=badge_for_role(token.role),
            style=style_for_role(token.role),
        )
        for token in result.tokens
    ]
