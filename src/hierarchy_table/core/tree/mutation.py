"""Tree mutations: descendant closure, pruning, lookup.

Nothing here modifies its input; every operation returns new values.
"""

from collections.abc import Set
from dataclasses import replace

from hierarchy_table.models.node import Tree, TreeNode


def descendant_uids(node: TreeNode) -> list[str]:
    """Return the uid of ``node`` followed by the uids of all its descendants."""
    uids = [node.uid]
    stack = list(node.children)
    while stack:
        current = stack.pop()
        uids.append(current.uid)
        stack.extend(current.children)
    return uids


def prune(tree: Tree, uids_to_remove: Set[str]) -> Tree:
    """Return a new forest without the nodes whose uid is in ``uids_to_remove``.

    Removal applies at every level. A removed node takes its whole subtree
    with it; children are never promoted to the removed node's place.
    """
    return tuple(
        replace(node, children=prune(node.children, uids_to_remove))
        for node in tree
        if node.uid not in uids_to_remove
    )


def find_node(tree: Tree, uid: str) -> TreeNode | None:
    """Locate a node by uid anywhere in the forest."""
    stack = list(tree)
    while stack:
        node = stack.pop()
        if node.uid == uid:
            return node
        stack.extend(node.children)
    return None
