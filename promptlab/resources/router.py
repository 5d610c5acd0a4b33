from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from promptlab.config.settings import Settings, get_settings

from .schemas import ResourceResponse
from .service import get_resource_path, list_resources


router = APIRouter(prefix="/api/resources", tags=["resources"])


@router.get("")
async def list_resources_endpoint() -> list[ResourceResponse]:
    """List downloadable resources."""
    return [ResourceResponse.from_resource(resource) for resource in list_resources()]


@router.get("/{filename}")
async def download_resource_endpoint(
    filename: str,
    settings: Annotated[Settings, Depends(get_settings)],
) -> FileResponse:
    """Download a resource file."""
    path = get_resource_path(Path(settings.RESOURCES_DIR), filename)
    return FileResponse(path, filename=path.name)
