"""Session state for the hierarchy table: the current tree plus its expand set.

The store is the single owner of both values. Readers get immutable
snapshots; every change goes through ``initialize``, ``toggle_expanded`` or
``remove_node`` and is committed in one step before listeners are notified.
"""

from collections.abc import Callable
from typing import Any

from loguru import logger

from hierarchy_table.core.importer.normalizer import normalize
from hierarchy_table.core.tree.builder import build, count_nodes, iter_nodes
from hierarchy_table.core.tree.columns import all_columns, columns_by_depth
from hierarchy_table.core.tree.mutation import descendant_uids, find_node, prune
from hierarchy_table.core.tree.rows import visible_rows
from hierarchy_table.models.node import Row, Tree

Listener = Callable[["TreeStore"], None]


class TreeStore:
    """Holds the live tree and the set of expanded node uids."""

    def __init__(self) -> None:
        self._tree: Tree = ()
        self._expanded: frozenset[str] = frozenset()
        self._listeners: list[Listener] = []
        # Column inventories, keyed on the tree object they were computed from.
        self._columns_for: Tree | None = None
        self._columns: list[str] = []
        self._columns_by_depth: dict[int, list[str]] = {}

    @property
    def tree(self) -> Tree:
        return self._tree

    @property
    def expanded(self) -> frozenset[str]:
        return self._expanded

    def is_expanded(self, uid: str) -> bool:
        return uid in self._expanded

    def initialize(self, tree: Tree) -> None:
        """Replace the tree and collapse everything."""
        self._commit(tree, frozenset())
        logger.debug("Store initialized with {} nodes", count_nodes(tree))

    def load(self, value: Any) -> None:
        """Normalize raw JSON, build a fresh tree from it and initialize."""
        self.initialize(build(normalize(value)))

    def toggle_expanded(self, uid: str) -> None:
        """Flip whether ``uid`` shows its children. Unknown uids are harmless."""
        self._commit(self._tree, self._expanded ^ {uid})

    def remove_node(self, uid: str) -> None:
        """Remove a node and its subtree, forgetting their expand state.

        Does nothing if no node has this uid.
        """
        target = find_node(self._tree, uid)
        if target is None:
            logger.debug("remove_node: no node with uid {}", uid)
            return

        closure = frozenset(descendant_uids(target))
        tree = prune(self._tree, closure)
        # Also drops entries toggled for uids that never existed in this tree.
        live = {node.uid for node in iter_nodes(tree)}
        self._commit(tree, frozenset(uid for uid in self._expanded if uid in live))
        logger.debug("Removed {} ({} nodes)", uid, len(closure))

    @property
    def columns(self) -> list[str]:
        """Global column inventory of the current tree."""
        self._refresh_columns()
        return list(self._columns)

    @property
    def columns_by_depth(self) -> dict[int, list[str]]:
        """Per-depth column inventory of the current tree."""
        self._refresh_columns()
        return {depth: list(names) for depth, names in self._columns_by_depth.items()}

    def rows(self) -> list[Row]:
        """Rows visible under the current expand set."""
        return visible_rows(self._tree, self._expanded)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every committed change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _refresh_columns(self) -> None:
        if self._columns_for is self._tree:
            return
        self._columns = all_columns(self._tree)
        self._columns_by_depth = columns_by_depth(self._tree)
        self._columns_for = self._tree

    def _commit(self, tree: Tree, expanded: frozenset[str]) -> None:
        self._tree = tree
        self._expanded = expanded
        for listener in list(self._listeners):
            listener(self)


_store = TreeStore()


def get_store() -> TreeStore:
    """Return the process-wide session store."""
    return _store


def reset_store() -> TreeStore:
    """Replace the session store with a fresh, empty one and return it."""
    global _store
    _store = TreeStore()
    return _store
