"""Accessibility tree dump.

Renders a live tree as indented YAML using the same keys locator
patterns use (``role``, ``identifier``, ``className``, ``label``,
``children``), so a fragment of the output can be pasted into the
configuration file and trimmed down to a pattern. Children appear in
the tree's own order; attributes a node lacks are omitted, and a node
without children has no ``children`` key.

Example output::

    role: "AXApplication"
    label: "QQ音乐"
    children:
      - role: "AXWindow"
        children:
          - role: "AXTextField"
            identifier: "search"
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..config.settings import MAX_TREE_DEPTH_LIMIT, get_settings
from ..hal.interfaces.tree_access import ITreeAccess
from ..locators.exceptions import TreeTooDeep
from ..logging import get_logger

logger = get_logger(__name__)

# (dump key, NodeAttributes field)
DUMP_FIELDS = (
    ("role", "role"),
    ("identifier", "identifier"),
    ("className", "class_name"),
    ("label", "label"),
)

CHILD_INDENT = "  "


def _quote(value: str) -> str:
    # JSON strings are valid YAML double-quoted scalars
    return json.dumps(value, ensure_ascii=False)


def _dump_node(
    node: Any,
    access: ITreeAccess,
    lead: str,
    pad: str,
    depth: int,
    max_depth: int,
) -> Iterator[str]:
    if depth > max_depth:
        logger.error("tree_too_deep", max_depth=max_depth)
        raise TreeTooDeep(max_depth)

    attributes = access.get_attributes(node)
    children = access.get_children(node)

    lines = []
    for key, field_name in DUMP_FIELDS:
        value = getattr(attributes, field_name)
        if value:
            lines.append(f"{key}: {_quote(value)}")
    if children:
        lines.append("children:")
    if not lines:
        lines.append("{}")

    yield lead + lines[0]
    for line in lines[1:]:
        yield pad + line

    child_pad = pad + CHILD_INDENT
    for child in children:
        yield from _dump_node(
            child, access, child_pad + "- ", child_pad + "  ", depth + 1, max_depth
        )


def iter_tree_dump(
    root: Any,
    access: ITreeAccess,
    max_depth: int | None = None,
) -> Iterator[str]:
    """Lazily render a tree, one line at a time.

    Each node is read only when the line before it has been consumed.

    Args:
        root: Root node handle
        access: Tree-access backend
        max_depth: Deepest level rendered (settings.max_tree_depth if None)

    Yields:
        Dump lines without trailing newlines

    Raises:
        AccessibilityError: If the backend fails to read a node
        TreeTooDeep: If the tree exceeds max_depth
        ValueError: If max_depth is outside 1..MAX_TREE_DEPTH_LIMIT
    """
    limit = max_depth if max_depth is not None else get_settings().max_tree_depth
    if not 1 <= limit <= MAX_TREE_DEPTH_LIMIT:
        raise ValueError(f"max_depth must be between 1 and {MAX_TREE_DEPTH_LIMIT}, got {limit}")
    yield from _dump_node(root, access, "", "", 0, limit)


def dump_tree(root: Any, access: ITreeAccess, max_depth: int | None = None) -> str:
    """Render a tree as a single string.

    Returns:
        Dump text ending with a newline
    """
    return "\n".join(iter_tree_dump(root, access, max_depth)) + "\n"


def write_tree_dump(
    root: Any,
    access: ITreeAccess,
    path: Path,
    max_depth: int | None = None,
) -> int:
    """Stream a tree dump to a file.

    Args:
        root: Root node handle
        access: Tree-access backend
        path: Output file (parent directories are created)
        max_depth: Deepest level rendered

    Returns:
        Number of lines written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for line in iter_tree_dump(root, access, max_depth):
            f.write(line + "\n")
            count += 1

    logger.info("tree_dump_written", path=str(path), lines=count, backend=access.get_backend_name())
    return count
