"""Hardware Abstraction Layer for uilocator.

Provides the tree-access capability the locator engine reads
accessibility trees through, plus the shipped backends.
"""

from .interfaces import ITreeAccess, NodeAttributes

__all__ = [
    "ITreeAccess",
    "NodeAttributes",
]
