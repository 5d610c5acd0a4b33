import logging
from pathlib import Path

from promptlab.exceptions import ResourceNotFoundError

from .catalog import RESOURCES
from .schemas import Resource


logger = logging.getLogger(__name__)


def list_resources() -> list[Resource]:
    return list(RESOURCES)


def ensure_resource_files(resources_dir: Path) -> None:
    """Create the resources directory with placeholder files on first start.

    An existing directory is left untouched.
    """
    if resources_dir.exists():
        return

    resources_dir.mkdir(parents=True, exist_ok=True)
    for resource in RESOURCES:
        (resources_dir / resource.filename).write_text(resource.placeholder, encoding="utf-8")
    logger.info("Created %d placeholder resources in %s", len(RESOURCES), resources_dir)


def get_resource_path(resources_dir: Path, filename: str) -> Path:
    """Resolve a catalogued resource to its file on disk.

    Only filenames listed in the catalog are served.

    Raises:
        ResourceNotFoundError: Unknown filename or missing file.
    """
    resource = next((r for r in RESOURCES if r.filename == filename), None)
    if resource is None:
        raise ResourceNotFoundError("Resource", filename)

    path = resources_dir / resource.filename
    if not path.is_file():
        logger.warning("Catalogued resource %s is missing from %s", filename, resources_dir)
        raise ResourceNotFoundError("Resource", filename)
    return path
