"""Flatten a tree into the rows currently visible for an expand set."""

from collections.abc import Set

from hierarchy_table.models.node import Row, Tree


def visible_rows(tree: Tree, expanded: Set[str]) -> list[Row]:
    """List visible rows in display order.

    Roots are always visible; a node's children are visible only when the
    node's uid is in ``expanded`` (and, transitively, all its ancestors are).
    """
    rows: list[Row] = []
    stack = list(reversed(tree))
    while stack:
        node = stack.pop()
        is_open = node.uid in expanded
        rows.append(Row(node=node, expanded=is_open, can_expand=bool(node.children)))
        if is_open:
            stack.extend(reversed(node.children))
    return rows
