"""Configuration sections."""

from datetime import timedelta
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class ServerConfig(BaseModel):
    """Where uvicorn binds and which browser origins may call the API."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


class SessionStoreConfig(BaseModel):
    """Bounds on how many inquiries are kept and for how long."""

    capacity: int = Field(default=100, ge=1, description="Maximum live sessions")
    idle_timeout_seconds: float = Field(
        default=30 * 60,
        gt=0,
        description="Idle time after which a session may be evicted",
    )

    @property
    def idle_timeout(self) -> timedelta:
        return timedelta(seconds=self.idle_timeout_seconds)


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"
    # Answers are caller free text
    redact_pii: bool = True
