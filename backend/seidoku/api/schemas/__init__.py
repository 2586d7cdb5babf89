from seidoku.api.schemas.v1 import AnalysisSnapshot, AnalyzeRequest

__all__ = [
    "AnalyzeRequest",
    "AnalysisSnapshot",
]
