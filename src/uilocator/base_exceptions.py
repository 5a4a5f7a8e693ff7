"""Root of the uilocator exception hierarchy.

Configuration lookups and accessibility backends raise subclasses of
UILocatorException, so callers embedding the library can catch one type.
"""

from typing import Any


class UILocatorException(Exception):
    """Raised for every failure uilocator reports.

    Attributes:
        message: What went wrong, without the code prefix
        error_code: Stable identifier such as ``APP_CONFIG_NOT_FOUND``
        context: Names and values that identify the failing lookup
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        if self.error_code is None:
            return self.message
        return f"[{self.error_code}] {self.message}"
