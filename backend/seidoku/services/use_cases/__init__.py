from seidoku.services.use_cases.analyze import AnalysisController
from seidoku.services.use_cases.state import Failure, Idle, Loading, RequestState, Success

__all__ = ["AnalysisController", "Failure", "Idle", "Loading", "RequestState", "Success"]
