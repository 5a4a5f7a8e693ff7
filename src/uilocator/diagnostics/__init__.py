"""Authoring and diagnostic tools for locator configurations."""

from .element_check import ElementCheckResult, check_element, check_elements
from .tree_dump import dump_tree, iter_tree_dump, write_tree_dump

__all__ = [
    "ElementCheckResult",
    "check_element",
    "check_elements",
    "dump_tree",
    "iter_tree_dump",
    "write_tree_dump",
]
