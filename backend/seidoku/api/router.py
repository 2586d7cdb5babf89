from fastapi import APIRouter

from seidoku.api.routes.analyze import router as analyze_router
from seidoku.api.routes.root import router as root_router

api_router = APIRouter()
api_router.include_router(root_router)
api_router.include_router(analyze_router)
