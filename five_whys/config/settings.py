"""Service settings: TOML file values under FIVE_WHYS_* variables."""

from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from five_whys.config.models import LoggingConfig, ServerConfig, SessionStoreConfig

_file_values: dict[str, Any] = {}


def set_file_values(values: dict[str, Any]) -> None:
    """Install the values read from TOML for later `Settings()` calls."""
    global _file_values
    _file_values = values


class Settings(BaseSettings):
    """Everything the service reads at startup.

    Precedence, highest first: constructor arguments, FIVE_WHYS_* variables
    (`__` separates nested keys, e.g. FIVE_WHYS_SESSION_STORE__CAPACITY),
    TOML file values, field defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIVE_WHYS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    api: ServerConfig = Field(default_factory=ServerConfig)
    session_store: SessionStoreConfig = Field(default_factory=SessionStoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    metrics_enabled: bool = Field(default=True, description="Serve /metrics")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            InitSettingsSource(settings_cls, init_kwargs=_file_values),
        )
