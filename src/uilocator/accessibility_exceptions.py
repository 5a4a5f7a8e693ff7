"""Accessibility exceptions.

This module contains the exceptions raised when reading a node's
attributes or children through a tree-access backend fails. Each
failure carries an :class:`AXStatus` so callers can decide whether to
retry, prompt for permissions, or give up.
"""

from enum import Enum

from .base_exceptions import UILocatorException


class AXStatus(str, Enum):
    """Classified outcome of a tree-access call."""

    SUCCESS = "success"
    API_DISABLED = "api_disabled"
    NOT_SUPPORTED = "not_supported"
    CANNOT_COMPLETE = "cannot_complete"
    OTHER = "other"


class AccessibilityError(UILocatorException):
    """Raised when the accessibility backend fails to read a node.

    Attributes:
        status: Classified failure status
        raw_code: Platform status code, when the backend has one
    """

    def __init__(
        self,
        status: AXStatus,
        reason: str,
        raw_code: int | None = None,
        **kwargs,
    ) -> None:
        """Initialize with status and reason."""
        super().__init__(
            reason,
            error_code=f"ACCESSIBILITY_{status.name}",
            context={"status": status.value, "raw_code": raw_code, **kwargs},
        )
        self.status = status
        self.raw_code = raw_code


class AccessibilityDisabledError(AccessibilityError):
    """Accessibility API is disabled or this process is not trusted."""

    def __init__(self, reason: str = "Accessibility API is disabled", **kwargs) -> None:
        super().__init__(AXStatus.API_DISABLED, reason, **kwargs)


class AccessibilityNotSupportedError(AccessibilityError):
    """Target application does not support accessibility introspection."""

    def __init__(
        self, reason: str = "Application does not support accessibility API", **kwargs
    ) -> None:
        super().__init__(AXStatus.NOT_SUPPORTED, reason, **kwargs)


class AccessibilityUnreachableError(AccessibilityError):
    """Target application could not be reached; usually transient."""

    def __init__(
        self,
        reason: str = "Cannot access application. Try removing and re-adding accessibility permissions",
        **kwargs,
    ) -> None:
        super().__init__(AXStatus.CANNOT_COMPLETE, reason, **kwargs)


def error_for_status(
    status: AXStatus, reason: str | None = None, raw_code: int | None = None, **kwargs
) -> AccessibilityError:
    """Build the most specific AccessibilityError for a status.

    Args:
        status: Classified failure status (must not be SUCCESS)
        reason: Optional message override
        raw_code: Platform status code

    Returns:
        AccessibilityError subclass instance
    """
    if status is AXStatus.SUCCESS:
        raise ValueError("SUCCESS is not an error status")

    if status is AXStatus.API_DISABLED:
        cls: type[AccessibilityError] = AccessibilityDisabledError
    elif status is AXStatus.NOT_SUPPORTED:
        cls = AccessibilityNotSupportedError
    elif status is AXStatus.CANNOT_COMPLETE:
        cls = AccessibilityUnreachableError
    else:
        return AccessibilityError(
            status, reason or f"Accessibility call failed: {raw_code}", raw_code=raw_code, **kwargs
        )

    if reason is None:
        return cls(raw_code=raw_code, **kwargs)
    return cls(reason, raw_code=raw_code, **kwargs)
