from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from seidoku.analysis.models import AnalysisResult


@dataclass(frozen=True)
class Idle:
    kind: Literal["idle"] = "idle"


@dataclass(frozen=True)
class Loading:
    kind: Literal["loading"] = "loading"


@dataclass(frozen=True)
class Success:
    result: AnalysisResult
    kind: Literal["success"] = "success"


@dataclass(frozen=True)
class Failure:
    message: str
    kind: Literal["error"] = "error"


RequestState = Union[Idle, Loading, Success, Failure]
