"""Tree-access interface definition.

This module defines the capability the locator engine consumes to read
an accessibility tree. The engine never builds or mutates nodes; it
only asks a backend for a node's attributes and its ordered children.
Node handles are opaque to everything except the backend that produced
them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NodeAttributes:
    """Attributes of one accessibility node that patterns can match.

    A backend reports an attribute the node does not expose as None.
    """

    role: str | None = None
    identifier: str | None = None
    class_name: str | None = None
    label: str | None = None


class ITreeAccess(ABC):
    """Interface for reading accessibility trees.

    Calls may block (a live backend talks to another process's
    accessibility server) and may fail. Failures are raised as
    AccessibilityError carrying an AXStatus; a missing optional
    attribute is not a failure.

    Example:
        >>> access = InMemoryTreeAccess()
        >>> attrs = access.get_attributes(root)
        >>> for child in access.get_children(root):
        ...     print(access.get_attributes(child).role)
    """

    @abstractmethod
    def get_attributes(self, node: Any) -> NodeAttributes:
        """Read the matchable attributes of a node.

        Args:
            node: Opaque node handle

        Returns:
            NodeAttributes for the node

        Raises:
            AccessibilityError: If the backend cannot read the node
        """
        ...

    @abstractmethod
    def get_children(self, node: Any) -> list[Any]:
        """Read the ordered child handles of a node.

        Args:
            node: Opaque node handle

        Returns:
            Child handles in the tree's native order (may be empty)

        Raises:
            AccessibilityError: If the backend cannot read the node
        """
        ...

    @abstractmethod
    def get_backend_name(self) -> str:
        """Get the name of this backend implementation.

        Returns:
            Backend name (e.g., "memory", "macos")
        """
        ...
