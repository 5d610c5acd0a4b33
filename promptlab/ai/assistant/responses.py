"""Canned replies used when the hosted model is unavailable.

Entries are ordered ``(keyword, reply)`` pairs: several keywords can occur in
one message and the first declared one wins.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LanguageResponses(BaseModel):
    """Keyword replies for one language plus its default answer."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[tuple[str, str], ...] = ()
    default: str = Field(..., min_length=1)

    @field_validator("entries")
    @classmethod
    def normalize_keywords(cls, entries: tuple[tuple[str, str], ...]) -> tuple[tuple[str, str], ...]:
        normalized = []
        for keyword, reply in entries:
            if not keyword:
                msg = "Keywords must be non-empty"
                raise ValueError(msg)
            if not reply:
                msg = f"Reply for keyword '{keyword}' must be non-empty"
                raise ValueError(msg)
            normalized.append((keyword.lower(), reply))
        return tuple(normalized)

    def match(self, message: str) -> str:
        """Return the reply of the first keyword contained in ``message``, else the default."""
        message_lc = message.lower()
        for keyword, reply in self.entries:
            if keyword in message_lc:
                return reply
        return self.default


class ResponseTable(BaseModel):
    """Fallback replies for the two supported languages."""

    model_config = ConfigDict(frozen=True)

    es: LanguageResponses
    en: LanguageResponses

    def for_language(self, language: str | None) -> LanguageResponses:
        """Spanish for ``"es"``, English for everything else."""
        return self.es if language == "es" else self.en

    def lookup(self, message: str, language: str | None) -> str:
        return self.for_language(language).match(message)


_ES_PRACTICE = (
    "Te sugiero revisar los ejercicios en el Módulo 1.3. Allí encontrarás actividades "
    "prácticas para mejorar tu habilidad de diseño de prompts."
)
_ES_GREETING = (
    "¡Hola! Estoy aquí para ayudarte con el diseño de prompts y el uso de inteligencia "
    "artificial. ¿En qué puedo asistirte hoy?"
)
_EN_PRACTICE = (
    "I suggest reviewing the exercises in Module 1.3. There you'll find practical "
    "activities to improve your prompt design skills."
)
_EN_GREETING = (
    "Hello! I'm here to help you with prompt design and the use of artificial "
    "intelligence. How can I assist you today?"
)

DEFAULT_RESPONSE_TABLE = ResponseTable(
    es=LanguageResponses(
        entries=(
            (
                "prompt",
                "Un buen prompt debe ser específico, claro y proporcionar contexto. Intenta "
                "formular preguntas precisas y proporcionar detalles relevantes para obtener "
                "mejores respuestas.",
            ),
            ("ejercicio", _ES_PRACTICE),
            ("practica", _ES_PRACTICE),
            ("hola", _ES_GREETING),
            ("ayuda", _ES_GREETING),
        ),
        default=(
            "Lo siento, no tengo una respuesta predefinida para esa pregunta. Te recomiendo "
            "revisar el material en los módulos de aprendizaje para encontrar información "
            "relacionada."
        ),
    ),
    en=LanguageResponses(
        entries=(
            (
                "prompt",
                "A good prompt should be specific, clear, and provide context. Try to formulate "
                "precise questions and provide relevant details to get better answers.",
            ),
            ("exercise", _EN_PRACTICE),
            ("practice", _EN_PRACTICE),
            ("hello", _EN_GREETING),
            ("help", _EN_GREETING),
        ),
        default=(
            "I'm sorry, I don't have a predefined response for that question. I recommend "
            "reviewing the material in the learning modules to find related information."
        ),
    ),
)
