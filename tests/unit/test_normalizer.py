"""Tests for shape detection and normalization of loosely-typed input."""

from datetime import date
from decimal import Decimal

import pytest

from hierarchy_table.core.importer.normalizer import classify_shape, normalize, to_text
from hierarchy_table.errors import NormalizationError
from hierarchy_table.models.node import NodeShape, RawRecord, RelationshipGroup
from tests.unit.sample_data import CUSTOMERS, NESTED_ACME


def test_nested_shape_keeps_groups_and_order() -> None:
    records = normalize(NESTED_ACME)
    assert records == (
        RawRecord(
            data={"name": "Acme"},
            children={
                "orders": RelationshipGroup(
                    records=(RawRecord(data={"id": "1"}), RawRecord(data={"id": "2"}))
                )
            },
        ),
    )


def test_flat_shape_when_top_level_lacks_data() -> None:
    """A record with a children key but no data key is a flat record."""
    value = [{"name": "Acme", "children": {"orders": {"records": [{"data": {"id": "1"}}]}}}]
    records = normalize(value)

    assert len(records) == 1
    assert records[0].children == {}
    assert records[0].data["name"] == "Acme"
    assert records[0].data["children"] == '{"orders":{"records":[{"data":{"id":"1"}}]}}'


def test_flat_record_with_data_field_and_extra_keys_stays_flat() -> None:
    value = [{"data": {"x": 1}, "label": "not nested"}]
    assert classify_shape(value) is NodeShape.FLAT
    assert normalize(value)[0].data == {"data": '{"x":1}', "label": "not nested"}


def test_nested_record_with_extra_keys_keeps_its_children() -> None:
    value = [
        {
            "id": "c1",
            "data": {"name": "Acme"},
            "children": {"orders": {"records": [{"data": {"id": "1"}}]}},
        }
    ]
    assert classify_shape(value) is NodeShape.NESTED
    assert normalize(value) == (
        RawRecord(
            data={"name": "Acme"},
            children={"orders": RelationshipGroup(records=(RawRecord(data={"id": "1"}),))},
        ),
    )


def test_extra_keys_without_children_stay_flat() -> None:
    value = [{"id": "c1", "data": {"name": "Acme"}, "children": None}]
    assert classify_shape(value) is NodeShape.FLAT
    assert normalize(value)[0].data == {"id": "c1", "data": '{"name":"Acme"}', "children": ""}


def test_missing_or_null_children_default_to_empty() -> None:
    records = normalize([{"data": {"a": "1"}}, {"data": {"a": "2"}, "children": None}])
    assert [r.children for r in records] == [{}, {}]


def test_one_flat_element_makes_the_whole_level_flat() -> None:
    value = [{"data": {"a": "1"}}, {"a": "2"}]
    assert classify_shape(value) is NodeShape.FLAT
    assert [r.data for r in normalize(value)] == [{"data": '{"a":"1"}'}, {"a": "2"}]


@pytest.mark.parametrize(
    "value",
    [None, 42, "text", {"data": {}}, [1, 2], [{"a": 1}, "b"]],
)
def test_unrecognized_input_yields_empty(value: object, log_messages: list[str]) -> None:
    assert classify_shape(value) is NodeShape.UNRECOGNIZED
    assert normalize(value) == ()
    assert any("unrecognized shape" in m for m in log_messages)


def test_empty_list_yields_empty_without_warning(log_messages: list[str]) -> None:
    assert normalize([]) == ()
    assert log_messages == []


def test_shape_is_detected_per_level() -> None:
    records = normalize(CUSTOMERS)
    acme = records[0]

    orders = acme.children["orders"].records
    contacts = acme.children["contacts"].records
    assert orders[0].children["lines"].records[1].data == {"sku": "B-7", "qty": "1"}
    # contacts are flat records under a nested parent
    assert contacts == (RawRecord(data={"email": "ops@acme.test", "primary": "true"}),)


def test_unrecognized_deeper_level_only_empties_that_group() -> None:
    value = [
        {
            "data": {"name": "Acme"},
            "children": {
                "broken": {"records": [1, 2, 3]},
                "orders": {"records": [{"id": 7}]},
            },
        }
    ]
    acme = normalize(value)[0]
    assert acme.children["broken"].records == ()
    assert acme.children["orders"].records == (RawRecord(data={"id": "7"}),)


def test_strict_mode_raises_with_fragment() -> None:
    with pytest.raises(NormalizationError) as exc_info:
        normalize({"not": "a list"}, strict=True)
    assert exc_info.value.fragment == {"not": "a list"}


def test_strict_mode_raises_for_deeper_level() -> None:
    value = [{"data": {}, "children": {"rel": {"records": ["x"]}}}]
    with pytest.raises(NormalizationError) as exc_info:
        normalize(value, strict=True)
    assert exc_info.value.fragment == ["x"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("abc", "abc"),
        (None, ""),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (2.5, "2.5"),
        (1.0, "1"),
        (1e16, "10000000000000000"),
        (Decimal("9.50"), "9.50"),
        (date(2024, 1, 2), "2024-01-02"),
        ({"price": Decimal("1.5")}, '{"price":"1.5"}'),
        ([1, "a"], '[1,"a"]'),
        ({"k": None}, '{"k":null}'),
    ],
)
def test_to_text(value: object, expected: str) -> None:
    assert to_text(value) == expected


def test_non_json_values_do_not_raise() -> None:
    records = normalize([{"price": Decimal("9.50"), "when": date(2024, 1, 2), "tags": {"a"}}])
    assert records[0].data == {"price": "9.50", "when": "2024-01-02", "tags": "{'a'}"}
