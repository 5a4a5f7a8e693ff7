"""In-memory accessibility trees.

``TreeNode`` is a plain model of an accessibility node and
``InMemoryTreeAccess`` serves it through the ITreeAccess interface.
Trees can be built in code, loaded from YAML, or re-parsed from the
output of the tree dump, which makes captured trees replayable offline.
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ....accessibility_exceptions import AXStatus, error_for_status
from ....config_exceptions import ConfigSourceMalformed
from ...interfaces.tree_access import ITreeAccess, NodeAttributes


class TreeNode(BaseModel):
    """A node of an in-memory accessibility tree.

    Field aliases follow the tree dump and configuration spelling
    (``className``).
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    role: str | None = None
    identifier: str | None = None
    class_name: str | None = Field(None, alias="className")
    label: str | None = None
    children: list[TreeNode] = Field(default_factory=list)

    @classmethod
    def from_dump(cls, text: str, source: str = "<dump>") -> TreeNode:
        """Parse the text produced by the tree dump back into nodes.

        Args:
            text: Tree dump output (YAML)
            source: Where the text came from, for error messages

        Returns:
            Root TreeNode

        Raises:
            ConfigSourceMalformed: If the text is not a node outline
        """
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigSourceMalformed(source, f"invalid YAML: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigSourceMalformed(source, "top level must be a node mapping")

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigSourceMalformed(source, f"{e.error_count()} invalid node field(s)") from e

    def walk(self) -> list[TreeNode]:
        """All nodes of this subtree in document order, self first."""
        nodes = [self]
        for child in self.children:
            nodes.extend(child.walk())
        return nodes


class InMemoryTreeAccess(ITreeAccess):
    """ITreeAccess over TreeNode objects.

    Failures can be injected per node to simulate an unreachable or
    unsupported application.

    Example:
        >>> access = InMemoryTreeAccess()
        >>> access.fail_on(window, AXStatus.CANNOT_COMPLETE)
        >>> access.get_children(window)  # raises AccessibilityUnreachableError
    """

    def __init__(self) -> None:
        """Initialize with no injected failures."""
        self._failures: dict[int, tuple[TreeNode, AXStatus, int | None]] = {}

    def fail_on(self, node: TreeNode, status: AXStatus, raw_code: int | None = None) -> None:
        """Make every read of ``node`` fail with ``status``."""
        self._failures[id(node)] = (node, status, raw_code)

    def clear_failures(self) -> None:
        """Remove all injected failures."""
        self._failures.clear()

    def _check(self, node: Any) -> TreeNode:
        if not isinstance(node, TreeNode):
            raise TypeError(f"InMemoryTreeAccess cannot read {type(node).__name__}")
        failure = self._failures.get(id(node))
        if failure is not None:
            _, status, raw_code = failure
            raise error_for_status(status, raw_code=raw_code)
        return node

    def get_attributes(self, node: Any) -> NodeAttributes:
        tree_node = self._check(node)
        return NodeAttributes(
            role=tree_node.role or None,
            identifier=tree_node.identifier or None,
            class_name=tree_node.class_name or None,
            label=tree_node.label or None,
        )

    def get_children(self, node: Any) -> list[Any]:
        return list(self._check(node).children)

    def get_backend_name(self) -> str:
        return "memory"


TreeNode.model_rebuild()
