"""Element check.

Resolves a set of configured elements against a live tree and reports,
per element, whether it was found. Used to confirm a configuration still
fits the installed version of an application.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..base_exceptions import UILocatorException
from ..locators.engine import LocatorEngine
from ..logging import get_logger

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "element not found"


@dataclass(frozen=True)
class ElementCheckResult:
    """Outcome of resolving one configured element."""

    element_path: str
    found: bool
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "element_path": self.element_path,
            "found": self.found,
            "error": self.error,
            "error_code": self.error_code,
        }


def check_element(
    engine: LocatorEngine, app_name: str, element_name: str, root: Any
) -> ElementCheckResult:
    """Resolve one element and report the outcome.

    uilocator errors are captured in the result; anything else propagates.
    """
    element_path = f"{app_name}.{element_name}"
    try:
        node = engine.resolve(app_name, element_name, root)
    except UILocatorException as e:
        logger.warning("element_check_failed", element=element_path, error=str(e))
        return ElementCheckResult(element_path, False, e.message, e.error_code)

    if node is None:
        return ElementCheckResult(element_path, False, NOT_FOUND_MESSAGE)
    return ElementCheckResult(element_path, True)


def check_elements(
    engine: LocatorEngine,
    app_name: str,
    root: Any,
    element_names: Iterable[str] | None = None,
) -> list[ElementCheckResult]:
    """Resolve several elements of one application.

    Args:
        engine: Locator engine
        app_name: Configured application name
        root: Node to search below
        element_names: Elements to check (every configured element if None)

    Returns:
        One result per element, in request order

    Raises:
        AppConfigNotFound: If element_names is None and the app is not configured
    """
    if element_names is None:
        element_names = engine.store.current.element_names(app_name)

    results = [check_element(engine, app_name, name, root) for name in element_names]
    found = sum(1 for result in results if result.found)
    logger.info("element_check_completed", app=app_name, checked=len(results), found=found)
    return results
