"""Static catalog of learning modules."""

from .schemas import LearningModule, Lesson


LEARNING_MODULES: tuple[LearningModule, ...] = (
    LearningModule(
        id="1",
        title="Fundamentos del diseño de prompts",
        subtitle="Aprende a comunicarte de forma efectiva con la IA",
        status="in-progress",
        objectives=(
            "Comprender los principios de diseño efectivo de prompts para AI",
            "Aprender a estructurar peticiones para obtener respuestas específicas",
            "Practicar en inglés con ejemplos guiados",
        ),
        lessons=(
            Lesson(id="1.1", title="1.1 Introducción a los prompts", completed=True),
            Lesson(id="1.2", title="1.2 Estructura y claridad"),
            Lesson(id="1.3", title="1.3 Ejercicios prácticos"),
        ),
    ),
    LearningModule(
        id="2",
        title="Aplicaciones prácticas",
        subtitle="Lleva tus prompts a casos de uso reales",
        status="not-started",
        objectives=(
            "Aplicar técnicas de prompt design en situaciones reales",
            "Adaptar prompts para diferentes casos de uso",
            "Optimizar respuestas para diferentes modelos de AI",
        ),
        lessons=(
            Lesson(id="2.1", title="2.1 Casos de uso educativo"),
            Lesson(id="2.2", title="2.2 Aplicaciones profesionales"),
            Lesson(id="2.3", title="2.3 Proyecto final"),
        ),
    ),
)
