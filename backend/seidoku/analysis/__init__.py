from seidoku.analysis.decoder import decode_analysis, strip_fences
from seidoku.analysis.errors import AnalysisError, ConfigurationError, DecodeError, GenerationError
from seidoku.analysis.models import KNOWN_ROLES, AnalysisResult, Token
from seidoku.analysis.prompt import build_prompt
from seidoku.analysis.roles import RenderedSegment, RoleStyle, render_segments, style_for_role

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "ConfigurationError",
    "DecodeError",
    "GenerationError",
    "KNOWN_ROLES",
    "RenderedSegment",
    "RoleStyle",
    "Token",
    "build_prompt",
    "decode_analysis",
    "render_segments",
    "strip_fences",
    "style_for_role",
]
