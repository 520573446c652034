"""Application configuration using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Task Manager API"
    VERSION: str = "0.1.0"
    LOG_LEVEL: str = Field(default="INFO", description="Log level name for the application loggers")

    # CORS
    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description=(
            "Allowed CORS origins for the browser frontend. "
            "Example: CORS_ORIGINS='[\"https://tasks.example.com\"]'"
        ),
    )

    # Client
    TASK_API_URL: str = Field(
        default="http://localhost:5161/api/tasks",
        description="Base URL of the tasks collection used by the task client",
    )
    CLIENT_TIMEOUT: float = Field(
        default=5.0,
        gt=0,
        description="Timeout in seconds for task client requests",
    )


settings = Settings()
