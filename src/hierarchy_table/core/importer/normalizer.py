"""Normalize loosely-typed JSON input into RawRecords.

Two input shapes are recognized at every nesting level:

- nested: ``[{"data": {...}, "children": {"<rel>": {"records": [...]}}}, ...]``
- flat:   ``[{"field": value, ...}, ...]``

Nested wins when every element matches it, otherwise flat is tried, otherwise
the level normalizes to nothing. Each ``records`` list is classified on its
own, so a nested parent may own flat children and vice versa.
"""

import json
from collections.abc import Mapping
from typing import Any

from loguru import logger

from hierarchy_table.errors import NormalizationError
from hierarchy_table.models.node import DataRecord, NodeShape, RawRecord, RelationshipGroup

_NESTED_KEYS = frozenset({"data", "children"})


def to_text(value: Any) -> str:
    """Coerce a JSON value to the text shown in a table cell.

    Integral floats print without a fractional part (``1.0`` -> ``"1"``).
    Values outside the JSON types fall back to ``str``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    return str(value)


def _to_data_record(obj: Mapping[str, Any]) -> DataRecord:
    return {str(k): to_text(v) for k, v in obj.items()}


def _is_group(group: Any) -> bool:
    return isinstance(group, Mapping) and isinstance(group.get("records"), list)


def _is_nested_record(item: Any) -> bool:
    """Check one element against the nested shape.

    Extra keys are allowed (and ignored) when the element also carries a
    well-formed ``children`` mapping. When ``data`` is the only clue, any
    extra key keeps the element flat.
    """
    if not isinstance(item, Mapping) or not isinstance(item.get("data"), Mapping):
        return False
    children = item.get("children")
    if children is None:
        return _NESTED_KEYS.issuperset(item.keys())
    return isinstance(children, Mapping) and all(_is_group(g) for g in children.values())


def classify_shape(value: Any) -> NodeShape:
    """Decide which record shape a single nesting level has."""
    if not isinstance(value, list):
        return NodeShape.UNRECOGNIZED
    if all(_is_nested_record(item) for item in value):
        return NodeShape.NESTED
    if all(isinstance(item, Mapping) for item in value):
        return NodeShape.FLAT
    return NodeShape.UNRECOGNIZED


def _normalize_children(
    children: Mapping[str, Any] | None, *, strict: bool
) -> dict[str, RelationshipGroup]:
    out: dict[str, RelationshipGroup] = {}
    for rel_name, group in (children or {}).items():
        out[str(rel_name)] = RelationshipGroup(
            records=normalize(group["records"], strict=strict),
        )
    return out


def normalize(value: Any, *, strict: bool = False) -> tuple[RawRecord, ...]:
    """Convert an unknown JSON value into a sequence of RawRecords.

    Args:
        value: Parsed JSON of unknown shape.
        strict: Raise instead of returning an empty result when a level
            matches neither shape.

    Returns:
        Tuple of RawRecords, empty when the input is not recognized.

    Raises:
        NormalizationError: Only with ``strict=True``, carrying the fragment
            that failed to classify.
    """
    shape = classify_shape(value)

    if shape is NodeShape.NESTED:
        return tuple(
            RawRecord(
                data=_to_data_record(item["data"]),
                children=_normalize_children(item.get("children"), strict=strict),
            )
            for item in value
        )

    if shape is NodeShape.FLAT:
        return tuple(RawRecord(data=_to_data_record(item)) for item in value)

    found = "a list with non-object items" if isinstance(value, list) else type(value).__name__
    if strict:
        msg = f"Unrecognized record shape: expected a list of objects, got {found}"
        raise NormalizationError(msg, fragment=value)

    logger.warning("Ignoring input of unrecognized shape ({})", found)
    return ()
