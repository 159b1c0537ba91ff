"""Column inventories: which field names render, globally and per depth."""

from collections.abc import Iterable

from hierarchy_table.core.tree.builder import iter_nodes
from hierarchy_table.models.node import Tree, TreeNode


def all_columns(tree: Tree) -> list[str]:
    """Distinct field names across the whole forest, in first-seen pre-order."""
    seen: dict[str, None] = {}
    for node in iter_nodes(tree):
        seen.update(dict.fromkeys(node.data))
    return list(seen)


def columns_by_depth(tree: Tree) -> dict[int, list[str]]:
    """Distinct field names per depth, each in first-seen pre-order."""
    by_depth: dict[int, dict[str, None]] = {}
    for node in iter_nodes(tree):
        by_depth.setdefault(node.depth, {}).update(dict.fromkeys(node.data))
    return {depth: list(names) for depth, names in by_depth.items()}


def columns_for_nodes(nodes: Iterable[TreeNode]) -> list[str]:
    """Distinct field names of one sibling list, without descending."""
    seen: dict[str, None] = {}
    for node in nodes:
        seen.update(dict.fromkeys(node.data))
    return list(seen)
