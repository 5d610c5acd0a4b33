from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings - only define what needs validation."""

    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # "development", "production", "test"
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Remote text generation
    OPENAI_API_KEY: str | None = None
    PRIMARY_LLM_MODEL: str = "gpt-4o"
    AI_REQUEST_TIMEOUT: float = 10.0  # seconds
    CHAT_MAX_TOKENS: int = 250
    CHAT_TEMPERATURE: float = 0.7

    # Downloadable course material
    RESOURCES_DIR: str = "resources"

    @property
    def api_key_present(self) -> bool:
        """Whether a non-blank OpenAI credential is configured."""
        return bool(self.OPENAI_API_KEY and self.OPENAI_API_KEY.strip())

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="allow",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
