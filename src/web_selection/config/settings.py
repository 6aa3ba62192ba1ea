"""
Settings - Pydantic models for type-safe configuration.

This module defines all configuration settings as Pydantic models,
providing validation, type hints, and automatic environment variable loading.

Example:
    >>> from web_selection.config import Settings, load_config
    >>> settings = load_config()  # Loads from env, yaml, and defaults
    >>> print(settings.driver.engine)
    'selenium'
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DriverSettings(BaseModel):
    """
    Driver boundary settings.

    Attributes:
        engine: Name of the registered driver adapter to build pages with
    """
    engine: Literal["selenium", "playwright"] = "selenium"


class LoggingSettings(BaseModel):
    """
    Logging configuration.

    Attributes:
        level: Log level
        format: Log format string (file handler only)
        file: Log file path (None for console only)
        rich_tracebacks: Render tracebacks with rich on the console
    """
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    rich_tracebacks: bool = True


class Settings(BaseSettings):
    """
    Root settings container.

    Settings are loaded in this priority order (highest to lowest):
    1. Explicit values passed to constructor
    2. Environment variables (prefixed with WEB_SELECTION__)
    3. Config file (YAML)
    4. Default values

    Attributes:
        driver: Driver adapter selection
        logging: Logging configuration
        debug: Force DEBUG logging regardless of ``logging.level``

    Example:
        >>> settings = Settings()  # Load from env vars
        >>> settings = Settings(driver=DriverSettings(engine="playwright"))
    """

    model_config = SettingsConfigDict(
        env_prefix="WEB_SELECTION__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    driver: DriverSettings = Field(default_factory=DriverSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    debug: bool = False

    @property
    def log_level(self) -> str:
        """The effective log level."""
        return "DEBUG" if self.debug else self.logging.level

    def merge_with(self, overrides: dict) -> "Settings":
        """
        Create a new Settings instance with overrides applied.

        Args:
            overrides: Dictionary of values to override

        Returns:
            New Settings instance with overrides applied
        """
        merged = deep_merge(self.model_dump(), overrides)
        return Settings(**merged)


def deep_merge(base: dict, updates: dict) -> dict:
    """Recursively merge ``updates`` into ``base`` in place and return it."""
    for key, value in updates.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
