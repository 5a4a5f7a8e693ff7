"""uilocator: Declarative accessibility-tree element locators.

Logical UI elements ("searchBox", "playButton") are described once in a
YAML configuration and resolved at run time against a live accessibility
tree, so automation code never hard-codes tree traversal.

Basic usage:
    from uilocator import ConfigurationStore, LocatorEngine, MacAXTreeAccess

    store = ConfigurationStore.from_source("ui_config")
    access = MacAXTreeAccess()
    engine = LocatorEngine(store, access)
    search_box = engine.resolve("QQMusic", "searchBox", access.application_element(pid))
"""

__version__ = "0.1.0"

from .logging import QueryLogger, get_logger, setup_logging
from .base_exceptions import UILocatorException
from .accessibility_exceptions import (
    AccessibilityDisabledError,
    AccessibilityError,
    AccessibilityNotSupportedError,
    AccessibilityUnreachableError,
    AXStatus,
    error_for_status,
)
from .config_exceptions import (
    AppConfigNotFound,
    ConfigSourceMalformed,
    ConfigSourceMissing,
    ConfigurationException,
    ElementPathNotFound,
    LookupException,
)
from .hal import ITreeAccess, NodeAttributes
from .hal.implementations.accessibility import InMemoryTreeAccess, MacAXTreeAccess, TreeNode
from .locators import (
    AppLocatorConfig,
    IndexOutOfRange,
    LocatorEngine,
    LocatorException,
    LocatorPattern,
    MatchType,
    TreeTooDeep,
    matches_node,
    matches_string,
)
from .config import (
    ConfigurationModel,
    ConfigurationStore,
    UILocatorSettings,
    get_settings,
    load_config,
    load_configuration,
    parse_config,
)
from .diagnostics import ElementCheckResult, check_elements, dump_tree, write_tree_dump

__all__ = [
    "__version__",
    # Logging
    "setup_logging",
    "get_logger",
    "QueryLogger",
    # Exceptions
    "UILocatorException",
    "AXStatus",
    "AccessibilityError",
    "AccessibilityDisabledError",
    "AccessibilityNotSupportedError",
    "AccessibilityUnreachableError",
    "error_for_status",
    "ConfigurationException",
    "ConfigSourceMissing",
    "ConfigSourceMalformed",
    "LookupException",
    "AppConfigNotFound",
    "ElementPathNotFound",
    "LocatorException",
    "IndexOutOfRange",
    "TreeTooDeep",
    # Tree access
    "ITreeAccess",
    "NodeAttributes",
    "InMemoryTreeAccess",
    "MacAXTreeAccess",
    "TreeNode",
    # Locators
    "AppLocatorConfig",
    "LocatorPattern",
    "MatchType",
    "LocatorEngine",
    "matches_node",
    "matches_string",
    # Configuration
    "ConfigurationModel",
    "ConfigurationStore",
    "UILocatorSettings",
    "get_settings",
    "load_config",
    "load_configuration",
    "parse_config",
    # Diagnostics
    "ElementCheckResult",
    "check_elements",
    "dump_tree",
    "write_tree_dump",
]
