from __future__ import annotations


class AnalysisError(RuntimeError):
    """Base class for failures that end one analysis attempt."""


class ConfigurationError(AnalysisError):
    """Raised when the generation credential is missing."""


class GenerationError(AnalysisError):
    """Raised when the text-generation provider cannot return a response."""


class DecodeError(AnalysisError):
    """Raised when the model response cannot be decoded into an analysis."""
