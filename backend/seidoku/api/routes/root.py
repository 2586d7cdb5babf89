from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def api_root() -> dict[str, str]:
    return {"status": "ok", "message": "seidoku sentence analysis backend"}


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    settings = request.app.state.settings
    generation_ready = settings.gemini_configured
    payload: dict[str, object] = {
        "status": "ok" if generation_ready else "degraded",
        "service": "backend",
        "components": {
            "generation": "ok" if generation_ready else "unconfigured",
        },
        "model": settings.gemini_model,
        "translation_enabled": settings.translation_enabled,
    }
    if not generation_ready:
        payload["generation_error"] = "GEMINI_API_KEY is not set."
    return payload
