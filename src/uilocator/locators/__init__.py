"""Declarative UI-element locators.

Key Components:
    - LocatorPattern: What a logical element looks like
    - MatchType: How string fields are compared
    - LocatorEngine: Resolves element names against accessibility trees
"""

from .pattern import AppLocatorConfig, LocatorPattern, MatchType
from .matching import matches_node, matches_string
from .exceptions import IndexOutOfRange, LocatorException, TreeTooDeep
from .engine import LocatorEngine, select_candidate

__all__ = [
    "AppLocatorConfig",
    "LocatorPattern",
    "MatchType",
    "matches_node",
    "matches_string",
    "LocatorException",
    "IndexOutOfRange",
    "TreeTooDeep",
    "LocatorEngine",
    "select_candidate",
]
