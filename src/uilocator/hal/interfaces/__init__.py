"""HAL Interface definitions.

These interfaces define the contracts that all HAL implementations must follow.
"""

from .tree_access import ITreeAccess, NodeAttributes

__all__ = [
    "ITreeAccess",
    "NodeAttributes",
]
