from promptlab.exceptions import ResourceNotFoundError

from .catalog import LEARNING_MODULES
from .schemas import LearningModule


def list_modules() -> list[LearningModule]:
    return list(LEARNING_MODULES)


def get_module(module_id: str) -> LearningModule:
    """Get a module by id.

    Raises:
        ResourceNotFoundError: No module has this id.
    """
    for module in LEARNING_MODULES:
        if module.id == module_id:
            return module
    raise ResourceNotFoundError("Module", module_id)
