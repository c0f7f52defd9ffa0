"""
Tests for the schema dispatcher: integers, booleans, objects, arrays,
defaults and unknown types.
"""
import random

import pytest

from core.constants import MAX_SAFE_INTEGER
from core.errors import SchemaPreconditionError
from core.schema import PropertySchema
from utils.date_generator import today_iso
from utils.json_generator import JsonGenerator, format_path, generate_json_from_schema

TRIALS = 500


@pytest.fixture
def generator():
    return JsonGenerator()


def test_degenerate_ranges_are_deterministic(generator):
    schema = {
        "type": "object",
        "properties": {
            "id": {"type": "integer", "minimum": 1, "maximum": 1},
            "tag": {"type": "string", "enum": ["x"]},
        },
    }
    for _ in range(50):
        assert generator.generate_json_from_schema(schema) == {"id": 1, "tag": "x"}


def test_integer_stays_within_bounds(generator):
    schema = {"type": "integer", "minimum": -5, "maximum": 5}
    seen = set()
    for _ in range(TRIALS):
        value = generator.generate_json_from_schema(schema)
        assert isinstance(value, int)
        assert -5 <= value <= 5
        seen.add(value)
    # Both ends of the range are reachable
    assert -5 in seen and 5 in seen


def test_integer_never_overflows_the_upper_bound(generator):
    top = {"type": "integer", "minimum": MAX_SAFE_INTEGER - 1}
    for _ in range(TRIALS):
        assert generator.generate_json_from_schema(top) <= MAX_SAFE_INTEGER

    pinned = {"type": "integer", "minimum": MAX_SAFE_INTEGER, "maximum": MAX_SAFE_INTEGER}
    assert generator.generate_json_from_schema(pinned) == MAX_SAFE_INTEGER


def test_integer_defaults_to_non_negative_range(generator):
    for _ in range(100):
        value = generator.generate_json_from_schema({"type": "integer"})
        assert 0 <= value <= MAX_SAFE_INTEGER


def test_integer_inverted_range_fails_fast(generator):
    with pytest.raises(SchemaPreconditionError) as exc_info:
        generator.generate_json_from_schema(
            {"type": "object", "properties": {"n": {"type": "integer", "minimum": 9, "maximum": 1}}}
        )
    assert "$.n" in str(exc_info.value)


def test_integer_use_default(generator):
    schema = {"type": "integer", "useDefault": True, "default": 42, "minimum": 0, "maximum": 1}
    assert generator.generate_json_from_schema(schema) == 42


def test_integer_falsy_default_falls_through_to_random(generator):
    schema = {"type": "integer", "useDefault": True, "default": 0, "minimum": 7, "maximum": 7}
    assert generator.generate_json_from_schema(schema) == 7


def test_integer_default_ignored_without_use_default(generator):
    schema = {"type": "integer", "default": 42, "minimum": 3, "maximum": 3}
    assert generator.generate_json_from_schema(schema) == 3


def test_seeded_generators_agree_on_integers():
    schema = {"type": "integer", "minimum": 0, "maximum": 10 ** 9}
    first = JsonGenerator(rng=random.Random(1234))
    second = JsonGenerator(rng=random.Random(1234))
    assert [first.generate_json_from_schema(schema) for _ in range(5)] == \
        [second.generate_json_from_schema(schema) for _ in range(5)]


def test_boolean_produces_both_values(generator):
    values = {generator.generate_json_from_schema({"type": "boolean"}) for _ in range(200)}
    assert values == {True, False}


def test_object_keys_match_properties_exactly(generator):
    schema = {
        "type": "object",
        "required": ["id"],
        "properties": {
            "id": {"type": "integer"},
            "name": {"type": "string"},
            "active": {"type": "boolean"},
            "address": {
                "type": "object",
                "properties": {"city": {"type": "string", "enum": ["Paris", "Lyon"]}},
            },
        },
    }
    result = generator.generate_json_from_schema(schema)
    assert list(result.keys()) == ["id", "name", "active", "address"]
    assert set(result["address"].keys()) == {"city"}
    assert result["address"]["city"] in ("Paris", "Lyon")


def test_empty_object(generator):
    assert generator.generate_json_from_schema({"type": "object", "properties": {}}) == {}


def test_array_follows_item_schemas_in_order(generator):
    schema = {
        "type": "array",
        "items": [
            {"type": "integer", "minimum": 10, "maximum": 20},
            {"type": "string", "enum": ["a"]},
            {"type": "boolean"},
            {"type": "array", "items": [{"type": "integer", "minimum": 0, "maximum": 0}]},
        ],
    }
    for _ in range(50):
        result = generator.generate_json_from_schema(schema)
        assert len(result) == 4
        assert 10 <= result[0] <= 20
        assert result[1] == "a"
        assert isinstance(result[2], bool)
        assert result[3] == [0]


def test_object_without_properties_fails_fast(generator):
    with pytest.raises(SchemaPreconditionError) as exc_info:
        generator.generate_json_from_schema(
            {"type": "object", "properties": {"profile": {"type": "object"}}}
        )
    assert exc_info.value.path == "$.profile"


def test_array_without_items_fails_fast(generator):
    schema = {
        "type": "array",
        "items": [{"type": "object", "properties": {"tags": {"type": "array"}}}],
    }
    with pytest.raises(SchemaPreconditionError) as exc_info:
        generator.generate_json_from_schema(schema)
    assert exc_info.value.path == "$.items.0.tags"


def test_unknown_type_uses_default_or_none(generator):
    assert generator.generate_json_from_schema({"type": "number", "default": 3.5}) == 3.5
    assert generator.generate_json_from_schema({"type": "null"}) is None
    assert generator.generate_json_from_schema({"type": "whatever", "useDefault": True}) is None


def test_date_use_default(generator):
    schema = {"type": "date", "useDefault": True, "default": "1999-12-31", "format": "DD/MM/YYYY"}
    assert generator.generate_json_from_schema(schema) == "1999-12-31"


def test_date_use_default_without_default_is_today(generator):
    schema = {"type": "date", "useDefault": True, "format": "DD/MM/YYYY"}
    assert generator.generate_json_from_schema(schema) == today_iso()


def test_date_without_format_is_today(generator):
    assert generator.generate_json_from_schema({"type": "date"}) == today_iso()


def test_accepts_parsed_schema_nodes(generator):
    node = PropertySchema.from_dict(
        {"type": "object", "properties": {"flag": {"type": "string", "enum": ["on"]}}}
    )
    assert isinstance(node.properties["flag"], PropertySchema)
    assert generator.generate_json_from_schema(node) == {"flag": "on"}


def test_single_item_dict_is_treated_as_one_position():
    node = PropertySchema.from_dict({"type": "array", "items": {"type": "boolean"}})
    assert len(node.items) == 1
    assert len(generate_json_from_schema(node)) == 1


def test_format_path():
    assert format_path([]) == "$"
    assert format_path(["users", "items", "3", "email"]) == "$.users.items.3.email"


def test_integral_float_bounds_are_narrowed_to_int(generator):
    node = PropertySchema.from_dict(
        {"type": "string", "length": 3.0, "minLength": 2.0, "maxLength": 8.0}
    )
    assert (node.length, node.min_length, node.max_length) == (3, 2, 8)
    assert all(isinstance(v, int) for v in (node.length, node.min_length, node.max_length))

    assert len(generator.generate_json_from_schema({"type": "string", "length": 3.0})) == 3

    value = generator.generate_json_from_schema({"type": "integer", "minimum": 4.0, "maximum": 4.0})
    assert value == 4 and isinstance(value, int)
