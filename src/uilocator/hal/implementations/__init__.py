"""Tree-access backend implementations."""

from .accessibility import InMemoryTreeAccess, MacAXTreeAccess, TreeNode

__all__ = [
    "InMemoryTreeAccess",
    "MacAXTreeAccess",
    "TreeNode",
]
