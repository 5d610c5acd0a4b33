"""Static catalog of downloadable resources."""

from .schemas import Resource


RESOURCES: tuple[Resource, ...] = (
    Resource(
        title="Guía de Prompts Efectivos",
        type="PDF",
        size="2.3 MB",
        filename="guide.pdf",
        placeholder="Placeholder for Prompt Design Guide",
    ),
    Resource(
        title="Plantillas de Ejercicios",
        type="XLSX",
        size="1.1 MB",
        filename="templates.xlsx",
        placeholder="Placeholder for Exercise Templates",
    ),
    Resource(
        title="Ejemplos de Prompts",
        type="PDF",
        size="1.5 MB",
        filename="examples.pdf",
        placeholder="Placeholder for Prompt Examples",
    ),
    Resource(
        title="Glosario de Términos AI",
        type="PDF",
        size="0.8 MB",
        filename="glossary.pdf",
        placeholder="Placeholder for AI Glossary",
    ),
)
