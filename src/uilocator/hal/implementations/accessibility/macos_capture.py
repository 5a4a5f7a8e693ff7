"""macOS Accessibility (AX) tree access.

Reads node attributes through ``AXUIElementCopyAttributeValue`` from
pyobjc's ApplicationServices bindings. Only available on macOS with the
pyobjc ApplicationServices framework installed; elsewhere every read
raises AccessibilityNotSupportedError.

The host process (terminal, IDE, app bundle) must be granted
Accessibility permission in System Settings, otherwise reads fail with
API_DISABLED.
"""

import platform
from collections.abc import Callable
from typing import Any

from ....accessibility_exceptions import (
    AccessibilityNotSupportedError,
    AXStatus,
    error_for_status,
)
from ....logging import get_logger
from ...interfaces.tree_access import ITreeAccess, NodeAttributes

logger = get_logger(__name__)

# AXError codes (HIServices/AXError.h)
AX_ERROR_SUCCESS = 0
AX_ERROR_FAILURE = -25200
AX_ERROR_ILLEGAL_ARGUMENT = -25201
AX_ERROR_INVALID_UI_ELEMENT = -25202
AX_ERROR_CANNOT_COMPLETE = -25204
AX_ERROR_ATTRIBUTE_UNSUPPORTED = -25205
AX_ERROR_NOT_IMPLEMENTED = -25208
AX_ERROR_API_DISABLED = -25211
AX_ERROR_NO_VALUE = -25212

# Codes that mean "this node has no such attribute" rather than a failure
ABSENT_ATTRIBUTE_CODES = frozenset({AX_ERROR_ATTRIBUTE_UNSUPPORTED, AX_ERROR_NO_VALUE})

AX_STATUS_BY_CODE: dict[int, AXStatus] = {
    AX_ERROR_SUCCESS: AXStatus.SUCCESS,
    AX_ERROR_API_DISABLED: AXStatus.API_DISABLED,
    AX_ERROR_NOT_IMPLEMENTED: AXStatus.NOT_SUPPORTED,
    AX_ERROR_CANNOT_COMPLETE: AXStatus.CANNOT_COMPLETE,
}

ATTR_ROLE = "AXRole"
ATTR_IDENTIFIER = "AXIdentifier"
ATTR_CLASS_DESCRIPTION = "AXClassDescription"
ATTR_TITLE = "AXTitle"
ATTR_CHILDREN = "AXChildren"

CopyAttribute = Callable[[Any, str], tuple[int, Any]]


def status_for_code(code: int) -> AXStatus:
    """Classify an AXError code."""
    return AX_STATUS_BY_CODE.get(code, AXStatus.OTHER)


def _is_macos() -> bool:
    """Check if running on macOS."""
    return platform.system() == "Darwin"


class MacAXTreeAccess(ITreeAccess):
    """ITreeAccess over live AXUIElement handles.

    Example:
        >>> access = MacAXTreeAccess()
        >>> app = access.application_element(pid)
        >>> [access.get_attributes(w).role for w in access.get_children(app)]
        ['AXWindow', 'AXMenuBar']
    """

    def __init__(self, copy_attribute: CopyAttribute | None = None) -> None:
        """Initialize the backend.

        Args:
            copy_attribute: Replacement for AXUIElementCopyAttributeValue,
                called as ``copy_attribute(element, attribute)`` and
                returning ``(error_code, value)``
        """
        self._copy_attribute = copy_attribute
        self._ax: Any = None  # ApplicationServices module

    def _ensure_ax_available(self) -> Any:
        """Import the ApplicationServices bindings on first use.

        Raises:
            AccessibilityNotSupportedError: If not on macOS or pyobjc is missing
        """
        if self._ax is not None:
            return self._ax

        if not _is_macos():
            raise AccessibilityNotSupportedError(
                "macOS accessibility access is only available on macOS"
            )

        try:
            import ApplicationServices
        except ImportError as e:
            logger.error(
                "pyobjc ApplicationServices not available. "
                "Install with: pip install pyobjc-framework-ApplicationServices"
            )
            raise AccessibilityNotSupportedError(
                "pyobjc ApplicationServices bindings are not installed"
            ) from e

        self._ax = ApplicationServices
        return self._ax

    def _copy(self, element: Any, attribute: str) -> Any:
        if self._copy_attribute is not None:
            err, value = self._copy_attribute(element, attribute)
        else:
            ax = self._ensure_ax_available()
            err, value = ax.AXUIElementCopyAttributeValue(element, attribute, None)

        if err == AX_ERROR_SUCCESS:
            return value
        if err in ABSENT_ATTRIBUTE_CODES:
            return None

        status = status_for_code(err)
        logger.error("ax_attribute_failed", attribute=attribute, code=err, status=status.value)
        raise error_for_status(status, raw_code=err, attribute=attribute)

    def _copy_string(self, element: Any, attribute: str) -> str | None:
        value = self._copy(element, attribute)
        if value is None:
            return None
        text = str(value)
        return text or None

    def get_attributes(self, node: Any) -> NodeAttributes:
        return NodeAttributes(
            role=self._copy_string(node, ATTR_ROLE),
            identifier=self._copy_string(node, ATTR_IDENTIFIER),
            class_name=self._copy_string(node, ATTR_CLASS_DESCRIPTION),
            label=self._copy_string(node, ATTR_TITLE),
        )

    def get_children(self, node: Any) -> list[Any]:
        children = self._copy(node, ATTR_CHILDREN)
        if not children:
            return []
        return list(children)

    def application_element(self, pid: int) -> Any:
        """Create the root AXUIElement for a running process.

        Args:
            pid: Process ID

        Returns:
            AXUIElement handle for the application
        """
        ax = self._ensure_ax_available()
        return ax.AXUIElementCreateApplication(pid)

    def is_process_trusted(self) -> bool:
        """Whether this process has been granted Accessibility permission."""
        ax = self._ensure_ax_available()
        return bool(ax.AXIsProcessTrusted())

    def get_backend_name(self) -> str:
        return "macos"
