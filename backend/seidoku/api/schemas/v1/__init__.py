from seidoku.api.schemas.v1.analyze import (
    AnalysisResultOut,
    AnalysisSnapshot,
    AnalyzeRequest,
    SegmentOut,
    SegmentStyleOut,
    TokenOut,
)

__all__ = [
    "AnalyzeRequest",
    "AnalysisResultOut",
    "AnalysisSnapshot",
    "SegmentOut",
    "SegmentStyleOut",
    "TokenOut",
]
