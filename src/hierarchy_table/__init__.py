"""Expandable, column-aligned tables over hierarchical record sets."""

from hierarchy_table.core.importer.normalizer import classify_shape, normalize
from hierarchy_table.core.tree.builder import build
from hierarchy_table.core.tree.columns import all_columns, columns_by_depth, columns_for_nodes
from hierarchy_table.core.tree.mutation import descendant_uids, prune
from hierarchy_table.errors import NormalizationError
from hierarchy_table.models.node import RawRecord, RelationshipGroup, Tree, TreeNode
from hierarchy_table.store import TreeStore, get_store

__all__ = [
    "NormalizationError",
    "RawRecord",
    "RelationshipGroup",
    "Tree",
    "TreeNode",
    "TreeStore",
    "all_columns",
    "build",
    "classify_shape",
    "columns_by_depth",
    "columns_for_nodes",
    "descendant_uids",
    "get_store",
    "normalize",
    "prune",
]
