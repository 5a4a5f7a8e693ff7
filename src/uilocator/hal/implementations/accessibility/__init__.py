"""Accessibility tree-access implementations.

This module provides implementations of the ITreeAccess interface:

- InMemoryTreeAccess: TreeNode trees built in code or re-parsed from dumps
- MacAXTreeAccess: live macOS Accessibility (AX) trees [macOS only]
"""

from .macos_capture import MacAXTreeAccess
from .memory_tree import InMemoryTreeAccess, TreeNode

__all__ = [
    "InMemoryTreeAccess",
    "MacAXTreeAccess",
    "TreeNode",
]
