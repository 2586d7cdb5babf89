from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Request

from seidoku.analysis.roles import render_segments
from seidoku.api.schemas.v1.analyze import AnalysisSnapshot, AnalyzeRequest
from seidoku.services.use_cases.analyze import AnalysisController
from seidoku.services.use_cases.state import Failure, Loading, RequestState, Success

router = APIRouter()
logger = logging.getLogger(__name__)

IN_FLIGHT_DETAIL = "An analysis is already in progress. Wait for it to finish."


def _controller(request: Request) -> AnalysisController:
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(
            status_code=503,
            detail="Analysis unavailable. Check backend logs and configuration.",
        )
    return controller


def snapshot_from_state(state: RequestState, *, translation_enabled: bool) -> AnalysisSnapshot:
    if isinstance(state, Success):
        return AnalysisSnapshot(
            state="success",
            result=state.result.model_dump(),
            segments=[asdict(segment) for segment in render_segments(state.result)],
            translation_enabled=translation_enabled,
        )
    if isinstance(state, Failure):
        return AnalysisSnapshot(
            state="error",
            error=state.message,
            translation_enabled=translation_enabled,
        )
    return AnalysisSnapshot(state=state.kind, translation_enabled=translation_enabled)


@router.get("/analysis", response_model=AnalysisSnapshot)
def get_analysis(request: Request) -> AnalysisSnapshot:
    controller = _controller(request)
    return snapshot_from_state(
        controller.state,
        translation_enabled=controller.translation_enabled,
    )


@router.post("/analyze", response_model=AnalysisSnapshot)
def analyze_sentence(payload: AnalyzeRequest, request: Request) -> AnalysisSnapshot:
    controller = _controller(request)
    if not payload.text.strip():
        return snapshot_from_state(controller.state, translation_enabled=controller.translation_enabled)
    state = controller.submit(payload.text)
    # A finished submit never returns Loading, so this one was turned away.
    if isinstance(state, Loading):
        raise HTTPException(status_code=409, detail=IN_FLIGHT_DETAIL)
    return snapshot_from_state(state, translation_enabled=controller.translation_enabled)


@router.delete("/analysis", response_model=AnalysisSnapshot)
def reset_analysis(request: Request) -> AnalysisSnapshot:
    controller = _controller(request)
    state = controller.reset()
    if isinstance(state, Loading):
        raise HTTPException(status_code=409, detail=IN_FLIGHT_DETAIL)
    return snapshot_from_state(state, translation_enabled=controller.translation_enabled)
