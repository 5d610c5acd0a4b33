from typing import Literal

from pydantic import BaseModel, ConfigDict


class Lesson(BaseModel):
    """Lesson entry inside a learning module."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    completed: bool = False


class LearningModule(BaseModel):
    """A learning module with its objectives and lessons."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    subtitle: str
    status: Literal["not-started", "in-progress", "completed"]
    objectives: tuple[str, ...]
    lessons: tuple[Lesson, ...]
