"""Configuration management for uilocator using pydantic-settings.

Settings come from environment variables (``UILOCATOR_`` prefix) and an
optional ``.env`` file, with type validation.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Traversal recurses once per tree level, so the limit stays well below
# the interpreter recursion limit
MAX_TREE_DEPTH_LIMIT = 400


class UILocatorSettings(BaseSettings):
    """Main configuration settings for uilocator."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="UILOCATOR_",
        case_sensitive=False,
        extra="ignore",
    )

    # Configuration source
    config_name: str = Field("ui_config", description="Base name of the locator config file")
    config_file: Path | None = Field(
        None, description="Explicit config file; searched before every other location"
    )
    config_search_paths: list[Path] = Field(
        default_factory=list,
        description="Extra directories searched after the working directory",
    )

    # Tree traversal
    max_tree_depth: int = Field(
        200,
        ge=1,
        le=MAX_TREE_DEPTH_LIMIT,
        description="Deepest tree level searched or dumped before failing",
    )

    # Logging
    log_level: str = Field("INFO", description="Log level name")
    log_file: Path | None = Field(None, description="Optional log file path")
    structured_logs: bool = Field(False, description="Render logs as JSON")
    debug_mode: bool = Field(False, description="Enable debug logging")


# Singleton instance
_settings: UILocatorSettings | None = None


def get_settings() -> UILocatorSettings:
    """Get the singleton settings instance.

    Returns:
        UILocatorSettings instance
    """
    global _settings

    if _settings is None:
        _settings = UILocatorSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
