"""Locator configuration loader.

Finds the YAML configuration file along the search path and parses it
into a ConfigurationModel. The document maps application names to
records of the form::

    QQMusic:
      bundleId: com.tencent.QQMusicMac
      elements:
        searchBox:
          role: AXTextField
          identifier: search
        searchResults:
          role: AXTable
          children:
            - role: AXRow
              index: 0

Search precedence (first existing file wins):
1. ``settings.config_file`` if set
2. ``<name>.yaml`` / ``<name>.yml`` in the current working directory
3. the same names in each of ``settings.config_search_paths``
4. the same names in ``~/.config/uilocator``
"""

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..config_exceptions import ConfigSourceMalformed, ConfigSourceMissing
from ..locators.pattern import AppLocatorConfig
from ..logging import get_logger
from .model import ConfigurationModel
from .settings import UILocatorSettings, get_settings

logger = get_logger(__name__)

CONFIG_SUFFIXES = (".yaml", ".yml")
USER_CONFIG_DIR = Path("~/.config/uilocator")


def candidate_paths(
    name: str | None = None,
    search_paths: Sequence[Path] | None = None,
    settings: UILocatorSettings | None = None,
) -> list[Path]:
    """List config file locations in precedence order.

    Args:
        name: Config base name (settings.config_name if None)
        search_paths: Extra directories (settings.config_search_paths if None)
        settings: Settings override

    Returns:
        Candidate file paths, highest precedence first
    """
    settings = settings or get_settings()
    name = name or settings.config_name

    candidates: list[Path] = []
    if settings.config_file is not None:
        candidates.append(settings.config_file.expanduser())

    directories = [
        Path.cwd(),
        *(search_paths if search_paths is not None else settings.config_search_paths),
        USER_CONFIG_DIR,
    ]
    for directory in directories:
        for suffix in CONFIG_SUFFIXES:
            candidates.append(Path(directory).expanduser() / f"{name}{suffix}")

    return candidates


def find_config_file(
    name: str | None = None,
    search_paths: Sequence[Path] | None = None,
    settings: UILocatorSettings | None = None,
) -> Path:
    """Find the highest-precedence existing config file.

    Raises:
        ConfigSourceMissing: If none of the candidates exists
    """
    settings = settings or get_settings()
    name = name or settings.config_name
    candidates = candidate_paths(name, search_paths, settings)

    for path in candidates:
        if path.is_file():
            logger.debug("config_file_found", path=str(path))
            return path

    logger.error("config_file_not_found", name=name, searched=[str(p) for p in candidates])
    raise ConfigSourceMissing(name, candidates)


def _summarize_validation_error(app_name: str, error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in (app_name, *item["loc"]))
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def parse_config(data: Any, source: str = "<memory>") -> ConfigurationModel:
    """Build a ConfigurationModel from an already-parsed document.

    Args:
        data: Parsed YAML document
        source: Description of the source for error messages

    Returns:
        ConfigurationModel

    Raises:
        ConfigSourceMalformed: If the document has the wrong shape
    """
    if data is None:
        raise ConfigSourceMalformed(source, "document is empty")
    if not isinstance(data, Mapping):
        raise ConfigSourceMalformed(
            source, "top level must map application names to app configs"
        )

    apps: dict[str, AppLocatorConfig] = {}
    for app_name, record in data.items():
        if not isinstance(app_name, str):
            raise ConfigSourceMalformed(source, f"application name must be a string: {app_name!r}")
        if not isinstance(record, Mapping):
            raise ConfigSourceMalformed(source, f"config for '{app_name}' must be a mapping")
        if "app_name" in record:
            raise ConfigSourceMalformed(
                source, f"config for '{app_name}' must not set app_name", app_name=app_name
            )

        try:
            apps[app_name] = AppLocatorConfig.model_validate({**record, "app_name": app_name})
        except ValidationError as e:
            reason = _summarize_validation_error(app_name, e)
            logger.error("config_app_invalid", source=source, app=app_name, reason=reason)
            raise ConfigSourceMalformed(source, reason, app_name=app_name) from e

    return ConfigurationModel(apps)


def load_config(path: Path) -> ConfigurationModel:
    """Load and parse one config file.

    Args:
        path: YAML file path

    Returns:
        ConfigurationModel

    Raises:
        ConfigSourceMissing: If the file does not exist
        ConfigSourceMalformed: If the file cannot be read or parsed
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigSourceMissing(path.stem, [path])

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("config_parse_failed", path=str(path), error=str(e))
        raise ConfigSourceMalformed(str(path), f"invalid YAML: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error("config_read_failed", path=str(path), error=str(e))
        raise ConfigSourceMalformed(str(path), f"cannot read file: {e}") from e

    model = parse_config(data, source=str(path))
    logger.info("config_loaded", path=str(path), apps=model.app_names())
    return model


def load_configuration(
    name: str | None = None,
    search_paths: Sequence[Path] | None = None,
) -> ConfigurationModel:
    """Find the config file along the search path and load it.

    Raises:
        ConfigSourceMissing: If no config file exists
        ConfigSourceMalformed: If the file cannot be parsed
    """
    return load_config(find_config_file(name, search_paths))
