"""Build a uid-tagged node forest from normalized records."""

import secrets
from collections.abc import Callable, Iterator, Sequence
from types import MappingProxyType

from hierarchy_table.config import ROOT_NAMESPACE, UID_TOKEN_BYTES
from hierarchy_table.models.node import RawRecord, Tree, TreeNode


def _random_token() -> str:
    return secrets.token_hex(UID_TOKEN_BYTES)


def build(
    records: Sequence[RawRecord],
    depth: int = 0,
    relationship_name: str | None = None,
    uid_namespace: str = ROOT_NAMESPACE,
    *,
    token_factory: Callable[[], str] | None = None,
) -> Tree:
    """Expand RawRecords into TreeNodes, recursing through relationship groups.

    Each uid is ``{namespace}-{index}-{token}``. Children of a node live in the
    namespace ``{uid}.{relationship}``, so uids from different branches never
    collide even if two random tokens do.

    Args:
        records: Normalized records for one level.
        depth: Depth assigned to the nodes of this level.
        relationship_name: Group the records came from (None for roots).
        uid_namespace: Prefix for the uids of this level.
        token_factory: Source of uid disambiguators; random by default.

    Returns:
        Tuple of TreeNodes. A node's children are its groups' nodes
        concatenated in group iteration order.
    """
    make_token = token_factory or _random_token
    nodes: list[TreeNode] = []

    for index, record in enumerate(records):
        uid = f"{uid_namespace}-{index}-{make_token()}"
        children: list[TreeNode] = []
        for rel_name, group in record.children.items():
            children.extend(
                build(
                    group.records,
                    depth + 1,
                    rel_name,
                    f"{uid}.{rel_name}",
                    token_factory=make_token,
                )
            )
        nodes.append(
            TreeNode(
                uid=uid,
                relationship_name=relationship_name,
                depth=depth,
                data=MappingProxyType(dict(record.data)),
                children=tuple(children),
            )
        )

    return tuple(nodes)


def iter_nodes(tree: Tree) -> Iterator[TreeNode]:
    """Yield every node in pre-order (parent before children, left to right)."""
    for node in tree:
        yield node
        yield from iter_nodes(node.children)


def count_nodes(tree: Tree) -> int:
    return sum(1 for _ in iter_nodes(tree))
