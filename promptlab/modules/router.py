from fastapi import APIRouter

from .schemas import LearningModule
from .service import get_module, list_modules


router = APIRouter(prefix="/api/modules", tags=["modules"])


@router.get("")
async def list_modules_endpoint() -> list[LearningModule]:
    """List all learning modules in course order."""
    return list_modules()


@router.get("/{module_id}")
async def get_module_endpoint(module_id: str) -> LearningModule:
    """Get a single learning module."""
    return get_module(module_id)
