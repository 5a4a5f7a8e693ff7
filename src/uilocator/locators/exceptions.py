"""Locator exceptions.

Raised while resolving a well-formed pattern against a live tree. A
pattern that simply matches nothing is not an error and produces None.
"""

from ..base_exceptions import UILocatorException


class LocatorException(UILocatorException):
    """Base exception for locator resolution errors."""

    pass


class IndexOutOfRange(LocatorException):
    """Raised when a pattern's index selects past the candidate list."""

    def __init__(self, index: int, candidate_count: int, **kwargs) -> None:
        """Initialize with the requested index and number of candidates."""
        super().__init__(
            f"Index out of range: {index} (candidates: {candidate_count})",
            error_code="INDEX_OUT_OF_RANGE",
            context={"index": index, "candidate_count": candidate_count, **kwargs},
        )
        self.index = index
        self.candidate_count = candidate_count


class TreeTooDeep(LocatorException):
    """Raised when a tree walk goes deeper than the configured limit."""

    def __init__(self, max_depth: int, **kwargs) -> None:
        """Initialize with the depth limit that was exceeded."""
        super().__init__(
            f"Accessibility tree deeper than {max_depth} levels",
            error_code="TREE_TOO_DEEP",
            context={"max_depth": max_depth, **kwargs},
        )
        self.max_depth = max_depth
