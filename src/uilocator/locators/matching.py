"""String and node matching for locator patterns."""

import re
from collections.abc import Callable
from functools import lru_cache

from ..hal.interfaces.tree_access import NodeAttributes
from .pattern import LocatorPattern, MatchType


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def _regex_search(value: str, pattern: str) -> bool:
    return _compile(pattern).search(value) is not None


_MATCHERS: dict[MatchType, Callable[[str, str], bool]] = {
    MatchType.EXACT: lambda value, pattern: value == pattern,
    MatchType.CONTAINS: lambda value, pattern: pattern in value,
    MatchType.STARTS_WITH: lambda value, pattern: value.startswith(pattern),
    MatchType.ENDS_WITH: lambda value, pattern: value.endswith(pattern),
    MatchType.REGEX: _regex_search,
}


def matches_string(value: str | None, pattern: str, match_type: MatchType) -> bool:
    """Compare one node attribute against a pattern field.

    A missing or empty attribute never matches. ``REGEX`` searches for the
    pattern anywhere in the value rather than requiring a full match.

    Args:
        value: Attribute value read from the node
        pattern: Expected value from the locator pattern
        match_type: Comparison to apply

    Returns:
        True if the attribute satisfies the pattern
    """
    if not value:
        return False
    return _MATCHERS[match_type](value, pattern)


def matches_node(pattern: LocatorPattern, attributes: NodeAttributes) -> bool:
    """Check a node's attributes against a pattern's own constraints.

    Nested ``children`` patterns are not considered here.

    Args:
        pattern: Locator pattern
        attributes: Attributes of the candidate node

    Returns:
        True if the role is equal and every present string field matches
    """
    if attributes.role != pattern.role:
        return False

    for field_name, expected in pattern.string_constraints():
        if not matches_string(getattr(attributes, field_name), expected, pattern.match_type):
            return False

    return True
