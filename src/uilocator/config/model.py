"""In-memory locator configuration.

``ConfigurationModel`` is the read-only mapping of application name to
locator configuration. ``ConfigurationStore`` is the handle the engine
holds: reloading builds a complete new model and swaps the reference,
so a query always sees either the old mapping or the new one.
"""

import threading
from collections.abc import Callable, Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from ..config_exceptions import AppConfigNotFound, ElementPathNotFound
from ..locators.pattern import AppLocatorConfig, LocatorPattern
from ..logging import get_logger

logger = get_logger(__name__)


class ConfigurationModel:
    """Read-only mapping of application name to AppLocatorConfig.

    Example:
        >>> model = ConfigurationModel({"Demo": demo_config})
        >>> model.get_process_identifier("Demo")
        'com.example.demo'
        >>> model.require_pattern("Demo", "searchBox").role
        'AXTextField'
    """

    def __init__(self, apps: Mapping[str, AppLocatorConfig] | None = None) -> None:
        """Initialize the model.

        Args:
            apps: Application configs keyed by application name
        """
        self._apps: Mapping[str, AppLocatorConfig] = MappingProxyType(dict(apps or {}))

    @property
    def apps(self) -> Mapping[str, AppLocatorConfig]:
        """Read-only view of all application configs."""
        return self._apps

    def __contains__(self, app_name: object) -> bool:
        return app_name in self._apps

    def __iter__(self) -> Iterator[str]:
        return iter(self._apps)

    def __len__(self) -> int:
        return len(self._apps)

    def app_names(self) -> list[str]:
        """Get configured application names in load order."""
        return list(self._apps)

    def get_app(self, app_name: str) -> AppLocatorConfig | None:
        """Get an application's config, or None if unknown."""
        return self._apps.get(app_name)

    def get_process_identifier(self, app_name: str) -> str | None:
        """Get the bundle/process identifier configured for an application.

        Args:
            app_name: Application name

        Returns:
            Identifier, or None if the application is unknown
        """
        logger.debug("process_identifier_lookup", app=app_name)
        app = self._apps.get(app_name)
        identifier = app.process_identifier if app is not None else None
        logger.debug("process_identifier_found", app=app_name, identifier=identifier)
        return identifier

    def get_pattern(self, app_name: str, element_name: str) -> LocatorPattern | None:
        """Get the pattern for an element, or None if app or element is unknown.

        Use require_pattern() to tell the two cases apart.
        """
        app = self._apps.get(app_name)
        if app is None:
            return None
        return app.elements.get(element_name)

    def require_pattern(self, app_name: str, element_name: str) -> LocatorPattern:
        """Get the pattern for an element.

        Args:
            app_name: Application name
            element_name: Logical element name

        Returns:
            The configured LocatorPattern

        Raises:
            AppConfigNotFound: If the application is not configured
            ElementPathNotFound: If the application has no such element
        """
        app = self._apps.get(app_name)
        if app is None:
            logger.error("app_config_not_found", app=app_name)
            raise AppConfigNotFound(app_name)

        pattern = app.elements.get(element_name)
        if pattern is None:
            logger.error("element_path_not_found", app=app_name, element=element_name)
            raise ElementPathNotFound(app_name, element_name)

        return pattern

    def element_names(self, app_name: str) -> list[str]:
        """Get the logical element names configured for an application.

        Raises:
            AppConfigNotFound: If the application is not configured
        """
        app = self._apps.get(app_name)
        if app is None:
            raise AppConfigNotFound(app_name)
        return list(app.elements)


class ConfigurationStore:
    """Holds the current ConfigurationModel and swaps it atomically.

    Readers take ``current`` once per query and never lock. Writers
    replace the whole model; a model is never changed in place.
    """

    def __init__(
        self,
        model: ConfigurationModel | None = None,
        loader: Callable[[], ConfigurationModel] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            model: Initial model (empty if None)
            loader: Callable producing a fresh model, used by reload()
        """
        self._model = model if model is not None else ConfigurationModel()
        self._loader = loader
        self._lock = threading.Lock()

    @classmethod
    def from_source(
        cls,
        name: str | None = None,
        search_paths: Sequence[Path] | None = None,
    ) -> "ConfigurationStore":
        """Create a store loaded from the configuration file search path.

        Args:
            name: Config base name (settings.config_name if None)
            search_paths: Directories to search (settings if None)

        Raises:
            ConfigSourceMissing: If no config file exists
            ConfigSourceMalformed: If the file cannot be parsed
        """
        from .loader import load_configuration

        def loader() -> ConfigurationModel:
            return load_configuration(name, search_paths)

        return cls(loader(), loader)

    @property
    def current(self) -> ConfigurationModel:
        """The installed model."""
        return self._model

    def replace(self, model: ConfigurationModel) -> ConfigurationModel:
        """Install a new model.

        Args:
            model: Fully built replacement model

        Returns:
            The model that was previously installed
        """
        with self._lock:
            previous = self._model
            self._model = model
        logger.info("configuration_replaced", apps=model.app_names())
        return previous

    def reload(self) -> ConfigurationModel:
        """Rebuild the model with the bound loader and install it.

        The previous model stays installed if loading fails.

        Returns:
            The newly installed model

        Raises:
            RuntimeError: If the store has no loader
            ConfigurationException: If loading fails
        """
        if self._loader is None:
            raise RuntimeError("ConfigurationStore has no loader to reload from")

        model = self._loader()
        self.replace(model)
        return model
