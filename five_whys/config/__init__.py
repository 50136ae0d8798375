"""Configuration for the Five Whys service."""

from functools import lru_cache

from five_whys.config.loader import load_config
from five_whys.config.settings import Settings, set_file_values
from five_whys.observability.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, read once.

    Without a config/default.toml the service runs on field defaults and
    environment variables.
    """
    try:
        set_file_values(load_config())
    except FileNotFoundError as e:
        logger.warning("config_files_missing", error=str(e))
        set_file_values({})
    return Settings()


__all__ = ["Settings", "get_settings"]
