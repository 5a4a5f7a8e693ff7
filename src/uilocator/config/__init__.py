"""Locator configuration: settings, model, and YAML loading."""

from .loader import (
    candidate_paths,
    find_config_file,
    load_config,
    load_configuration,
    parse_config,
)
from .model import ConfigurationModel, ConfigurationStore
from .settings import MAX_TREE_DEPTH_LIMIT, UILocatorSettings, get_settings, reset_settings

__all__ = [
    "MAX_TREE_DEPTH_LIMIT",
    "ConfigurationModel",
    "ConfigurationStore",
    "UILocatorSettings",
    "get_settings",
    "reset_settings",
    "candidate_paths",
    "find_config_file",
    "load_config",
    "load_configuration",
    "parse_config",
]
