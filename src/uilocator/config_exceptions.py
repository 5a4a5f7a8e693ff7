"""Configuration exceptions.

This module contains exceptions for locating and parsing the locator
configuration source, and for lookups against a loaded configuration.
"""

from collections.abc import Sequence
from pathlib import Path

from .base_exceptions import UILocatorException


class ConfigurationException(UILocatorException):
    """Base exception for configuration source errors."""

    pass


class ConfigSourceMissing(ConfigurationException):
    """Raised when no configuration file exists in any searched location."""

    def __init__(self, name: str, searched: Sequence[Path], **kwargs) -> None:
        """Initialize with the configuration name and the paths that were tried."""
        super().__init__(
            f"Configuration '{name}' not found in any of {len(searched)} searched locations",
            error_code="CONFIG_SOURCE_MISSING",
            context={"name": name, "searched": [str(p) for p in searched], **kwargs},
        )
        self.name = name
        self.searched = list(searched)


class ConfigSourceMalformed(ConfigurationException):
    """Raised when a configuration source exists but cannot be parsed."""

    def __init__(self, source: str, reason: str, **kwargs) -> None:
        """Initialize with source description and reason."""
        super().__init__(
            f"Malformed configuration '{source}': {reason}",
            error_code="CONFIG_SOURCE_MALFORMED",
            context={"source": source, "reason": reason, **kwargs},
        )
        self.source = source
        self.reason = reason


class LookupException(UILocatorException):
    """Base exception for lookups against a loaded configuration."""

    pass


class AppConfigNotFound(LookupException):
    """Raised when an application has no configuration entry."""

    def __init__(self, app_name: str, **kwargs) -> None:
        """Initialize with the unknown application name."""
        super().__init__(
            f"No configuration found for app: {app_name}",
            error_code="APP_CONFIG_NOT_FOUND",
            context={"app_name": app_name, **kwargs},
        )
        self.app_name = app_name


class ElementPathNotFound(LookupException):
    """Raised when a known application has no pattern for an element name."""

    def __init__(self, app_name: str, element_name: str, **kwargs) -> None:
        """Initialize with the application and the unknown element name."""
        super().__init__(
            f"No element path found for: {element_name} in app: {app_name}",
            error_code="ELEMENT_PATH_NOT_FOUND",
            context={"app_name": app_name, "element_name": element_name, **kwargs},
        )
        self.app_name = app_name
        self.element_name = element_name
