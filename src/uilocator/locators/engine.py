"""Locator engine.

Resolves a logical element name to a concrete accessibility node by
walking the tree through an ITreeAccess backend and applying the
element's LocatorPattern.

Search order is document order: for each child of a node, the child
itself is considered first, then its whole subtree. Matching does not
stop the walk, so deeper occurrences of the same pattern are also
collected; ``index`` can then select any of them, including the last
one with ``-1``.
"""

from typing import Any

from ..base_exceptions import UILocatorException
from ..config.model import ConfigurationModel, ConfigurationStore
from ..config.settings import MAX_TREE_DEPTH_LIMIT, get_settings
from ..hal.interfaces.tree_access import ITreeAccess
from ..logging import QueryLogger, get_logger
from .exceptions import IndexOutOfRange, TreeTooDeep
from .matching import matches_node
from .pattern import LocatorPattern

logger = get_logger(__name__)


def select_candidate(candidates: list[Any], index: int | None) -> Any | None:
    """Apply an index rule to a candidate list.

    Args:
        candidates: Candidates in document order
        index: None for the first candidate, >= 0 from the front, < 0 from the back

    Returns:
        Selected candidate, or None if there are no candidates and no index

    Raises:
        IndexOutOfRange: If the index selects past the candidates, including
            any index into an empty list
    """
    if index is None:
        return candidates[0] if candidates else None

    actual_index = index if index >= 0 else len(candidates) + index
    if not 0 <= actual_index < len(candidates):
        raise IndexOutOfRange(index, len(candidates))

    return candidates[actual_index]


class LocatorEngine:
    """Resolves configured element names against accessibility trees.

    The engine is synchronous and holds no per-query state, so separate
    queries may run concurrently. Whether one tree may be read from
    several threads at once is up to the tree-access backend.

    Example:
        >>> store = ConfigurationStore.from_source()
        >>> engine = LocatorEngine(store, MacAXTreeAccess())
        >>> search_box = engine.resolve("QQMusic", "searchBox", window)
    """

    def __init__(
        self,
        config: ConfigurationStore | ConfigurationModel,
        access: ITreeAccess,
        max_depth: int | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Store (shared, reloadable) or a fixed model
            access: Tree-access backend
            max_depth: Deepest level searched (settings.max_tree_depth if None)

        Raises:
            ValueError: If max_depth is outside 1..MAX_TREE_DEPTH_LIMIT
        """
        if isinstance(config, ConfigurationModel):
            config = ConfigurationStore(config)
        self._store = config
        self._access = access
        self._max_depth = max_depth if max_depth is not None else get_settings().max_tree_depth
        if not 1 <= self._max_depth <= MAX_TREE_DEPTH_LIMIT:
            raise ValueError(
                f"max_depth must be between 1 and {MAX_TREE_DEPTH_LIMIT}, got {self._max_depth}"
            )
        self._query_logger = QueryLogger(logger)

    @property
    def store(self) -> ConfigurationStore:
        """The configuration store this engine reads from."""
        return self._store

    @property
    def access(self) -> ITreeAccess:
        """The tree-access backend this engine reads through."""
        return self._access

    @property
    def max_depth(self) -> int:
        """Deepest tree level searched before TreeTooDeep is raised."""
        return self._max_depth

    def resolve(self, app_name: str, element_name: str, root: Any) -> Any | None:
        """Resolve a configured element within a tree.

        Args:
            app_name: Configured application name
            element_name: Logical element name
            root: Node to search below (the root itself is never a candidate)

        Returns:
            Matching node, or None if nothing in the tree matches

        Raises:
            AppConfigNotFound: If the application is not configured
            ElementPathNotFound: If the element is not configured for the app
            IndexOutOfRange: If the pattern's index selects past the matches
            AccessibilityError: If the backend fails to read the tree
            TreeTooDeep: If the tree exceeds max_depth
        """
        query = self._query_logger.start(
            app_name, element_name, backend=self._access.get_backend_name()
        )
        try:
            pattern = self._store.current.require_pattern(app_name, element_name)
            node = self.resolve_pattern(pattern, root)
        except UILocatorException as e:
            self._query_logger.finish(query, found=False, error=e)
            raise

        self._query_logger.finish(query, found=node is not None)
        return node

    def resolve_pattern(self, pattern: LocatorPattern, root: Any) -> Any | None:
        """Resolve a pattern within a tree without a configuration lookup.

        Raises:
            IndexOutOfRange: If the pattern's index selects past the matches
            AccessibilityError: If the backend fails to read the tree
            TreeTooDeep: If the tree exceeds max_depth
        """
        return select_candidate(self.search(pattern, root), pattern.index)

    def search(self, pattern: LocatorPattern, node: Any) -> list[Any]:
        """Collect every candidate for a pattern below a node.

        Args:
            pattern: Locator pattern
            node: Node whose descendants are searched

        Returns:
            Candidates in document order, before index selection
        """
        return self._search(pattern, node, 0)

    def _search(self, pattern: LocatorPattern, node: Any, depth: int) -> list[Any]:
        if depth > self._max_depth:
            logger.error("tree_too_deep", max_depth=self._max_depth)
            raise TreeTooDeep(self._max_depth)

        children = self._access.get_children(node)
        logger.debug(
            "element_search",
            pattern=pattern.describe(),
            depth=depth,
            child_count=len(children),
        )

        candidates: list[Any] = []
        for child in children:
            if matches_node(pattern, self._access.get_attributes(child)):
                if pattern.children is None:
                    candidates.append(child)
                else:
                    for sub_pattern in pattern.children:
                        found = self._resolve_nested(sub_pattern, child, depth + 1)
                        if found is not None:
                            candidates.append(found)

            candidates.extend(self._search(pattern, child, depth + 1))

        return candidates

    def _resolve_nested(self, pattern: LocatorPattern, node: Any, depth: int) -> Any | None:
        # A nested selection that runs past its candidates leaves the outer match unresolved
        candidates = self._search(pattern, node, depth)
        try:
            return select_candidate(candidates, pattern.index)
        except IndexOutOfRange:
            logger.debug(
                "nested_index_out_of_range",
                pattern=pattern.describe(),
                candidate_count=len(candidates),
            )
            return None
