"""Domain models for hierarchical record tables."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto

# Field name -> text value. Insertion order drives column discovery.
DataRecord = dict[str, str]


class NodeShape(StrEnum):
    """Shape of one nesting level of loosely-typed input."""

    NESTED = auto()
    FLAT = auto()
    UNRECOGNIZED = auto()


@dataclass(frozen=True)
class RelationshipGroup:
    """A named collection of child records owned by a parent record."""

    records: tuple["RawRecord", ...] = ()


@dataclass(frozen=True)
class RawRecord:
    """A normalized input record with its children grouped by relationship."""

    data: DataRecord = field(default_factory=dict)
    children: dict[str, RelationshipGroup] = field(default_factory=dict)


@dataclass(frozen=True)
class TreeNode:
    """A single node in a built record tree.

    ``data`` is a read-only view (the builder wraps it in a
    ``MappingProxyType``), so pruned trees can share it with earlier
    snapshots. Nodes compare by value and are not hashable.
    """

    uid: str
    relationship_name: str | None
    depth: int
    data: Mapping[str, str]
    children: tuple["TreeNode", ...] = ()


Tree = tuple[TreeNode, ...]


@dataclass(frozen=True)
class Row:
    """One visible line of the rendered table."""

    node: TreeNode
    expanded: bool
    can_expand: bool
