"""Tests for path addressing: format_path, to_pointer, resolve, write_at_path.

Covers:
- Bracket rendering of empty, string, integer and mixed paths
- Unescaped (default) versus escaped rendering of embedded quotes
- RFC 6901 pointer rendering
- resolve() on present, null, missing and type-mismatched steps
- write_at_path(): whole-document replacement, copy-on-write, structural
  sharing, container creation for missing steps, array padding, errors
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from json_node_edit.errors import PathError
from json_node_edit.path import (
    NOT_FOUND,
    format_path,
    resolve,
    to_pointer,
    write_at_path,
)

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def document() -> dict[str, Any]:
    return {
        "user": {"name": "Bob", "tags": ["x", "y"], "address": {"city": "Oslo"}},
        "orders": [{"id": 1, "total": 9.5}, {"id": 2, "total": None}],
        "meta": {"version": 3},
    }


# ---------------------------------------------------------------------------
# format_path
# ---------------------------------------------------------------------------


class TestFormatPath:
    def test_empty_path_is_dollar(self) -> None:
        assert format_path([]) == "$"

    def test_none_path_is_dollar(self) -> None:
        assert format_path(None) == "$"

    def test_single_string_segment_is_quoted(self) -> None:
        assert format_path(["customer"]) == '$["customer"]'

    def test_mixed_segments(self) -> None:
        assert format_path(["a", 0, "b"]) == '$["a"][0]["b"]'

    def test_integer_only_path(self) -> None:
        assert format_path([0, 12]) == "$[0][12]"

    def test_tuple_paths_are_accepted(self) -> None:
        assert format_path(("users", 3)) == '$["users"][3]'

    def test_embedded_quote_is_not_escaped_by_default(self) -> None:
        assert format_path(['say "hi"']) == '$["say "hi""]'

    def test_escape_renders_json_string_literals(self) -> None:
        assert format_path(['say "hi"'], escape=True) == '$["say \\"hi\\""]'

    def test_escape_keeps_non_ascii(self) -> None:
        assert format_path(["név"], escape=True) == '$["név"]'

    def test_bool_segment_is_rejected(self) -> None:
        with pytest.raises(TypeError):
            format_path([True])


# ---------------------------------------------------------------------------
# to_pointer
# ---------------------------------------------------------------------------


class TestToPointer:
    def test_root_is_empty_string(self) -> None:
        assert to_pointer([]) == ""

    def test_segments_are_slash_joined(self) -> None:
        assert to_pointer(["orders", 0, "id"]) == "/orders/0/id"

    def test_tilde_and_slash_are_escaped(self) -> None:
        assert to_pointer(["a/b", "c~d"]) == "/a~1b/c~0d"


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


class TestResolve:
    def test_empty_path_returns_root(self, document: dict[str, Any]) -> None:
        assert resolve(document, []) is document

    def test_object_key(self, document: dict[str, Any]) -> None:
        assert resolve(document, ["user", "name"]) == "Bob"

    def test_array_index(self, document: dict[str, Any]) -> None:
        assert resolve(document, ["orders", 1, "id"]) == 2

    def test_returns_same_object_not_a_copy(self, document: dict[str, Any]) -> None:
        assert resolve(document, ["user"]) is document["user"]

    def test_json_null_is_a_value(self, document: dict[str, Any]) -> None:
        assert resolve(document, ["orders", 1, "total"]) is None

    def test_missing_key_is_not_found(self, document: dict[str, Any]) -> None:
        assert resolve(document, ["user", "email"]) is NOT_FOUND

    def test_missing_intermediate_does_not_raise(
        self, document: dict[str, Any]
    ) -> None:
        assert resolve(document, ["nope", "deeper", 0]) is NOT_FOUND

    def test_step_through_null_is_not_found(self, document: dict[str, Any]) -> None:
        assert resolve(document, ["orders", 1, "total", "x"]) is NOT_FOUND

    def test_index_out_of_range_is_not_found(self, document: dict[str, Any]) -> None:
        assert resolve(document, ["orders", 5]) is NOT_FOUND

    def test_negative_index_is_not_found(self, document: dict[str, Any]) -> None:
        assert resolve(document, ["orders", -1]) is NOT_FOUND

    def test_string_segment_into_array_is_not_found(
        self, document: dict[str, Any]
    ) -> None:
        assert resolve(document, ["orders", "id"]) is NOT_FOUND

    def test_descent_into_primitive_is_not_found(
        self, document: dict[str, Any]
    ) -> None:
        assert resolve(document, ["user", "name", 0]) is NOT_FOUND

    def test_integer_segment_reads_decimal_key_of_object(self) -> None:
        assert resolve({"0": "zero"}, [0]) == "zero"

    def test_not_found_is_falsy_and_distinct_from_none(self) -> None:
        assert not NOT_FOUND
        assert NOT_FOUND is not None
        assert repr(NOT_FOUND) == "NOT_FOUND"


# ---------------------------------------------------------------------------
# write_at_path
# ---------------------------------------------------------------------------


class TestWriteAtPathRoot:
    def test_empty_path_returns_value_itself(self, document: dict[str, Any]) -> None:
        value = {"replaced": True}
        assert write_at_path(document, [], value) is value

    @pytest.mark.parametrize("root", [None, 1, "x", [1], {"a": 1}])
    def test_empty_path_ignores_any_root(self, root: Any) -> None:
        assert write_at_path(root, [], [7]) == [7]


class TestWriteAtPathCopyOnWrite:
    def test_input_is_not_mutated(self, document: dict[str, Any]) -> None:
        before = copy.deepcopy(document)
        write_at_path(document, ["user", "name"], "Alice")
        assert document == before

    def test_value_is_written(self, document: dict[str, Any]) -> None:
        result = write_at_path(document, ["user", "name"], "Alice")
        assert result["user"]["name"] == "Alice"

    def test_containers_on_path_are_new(self, document: dict[str, Any]) -> None:
        result = write_at_path(document, ["orders", 0, "total"], 10)
        assert result is not document
        assert result["orders"] is not document["orders"]
        assert result["orders"][0] is not document["orders"][0]

    def test_siblings_keep_identity(self, document: dict[str, Any]) -> None:
        result = write_at_path(document, ["orders", 0, "total"], 10)
        assert result["user"] is document["user"]
        assert result["meta"] is document["meta"]
        assert result["orders"][1] is document["orders"][1]

    def test_nested_siblings_keep_identity(self, document: dict[str, Any]) -> None:
        result = write_at_path(document, ["user", "name"], "Alice")
        assert result["user"]["tags"] is document["user"]["tags"]
        assert result["user"]["address"] is document["user"]["address"]

    def test_resolve_then_write_same_value_is_structural_noop(
        self, document: dict[str, Any]
    ) -> None:
        path = ["user", "address"]
        result = write_at_path(document, path, resolve(document, path))
        assert result == document
        assert result is not document
        assert result["user"] is not document["user"]

    def test_key_order_is_preserved(self, document: dict[str, Any]) -> None:
        result = write_at_path(document, ["user", "tags"], [])
        assert list(result["user"]) == ["name", "tags", "address"]
        assert list(result) == ["user", "orders", "meta"]


class TestWriteAtPathMissingSteps:
    def test_creates_object_for_string_next_segment(self) -> None:
        assert write_at_path({}, ["a", "b"], 1) == {"a": {"b": 1}}

    def test_creates_array_for_integer_next_segment(self) -> None:
        assert write_at_path({}, ["a", 0], "x") == {"a": ["x"]}

    def test_mixed_missing_chain(self) -> None:
        result = write_at_path({}, ["a", 0, "b", 1], True)
        assert result == {"a": [{"b": [None, True]}]}

    def test_null_intermediate_is_replaced(self) -> None:
        assert write_at_path({"a": None}, ["a", "b"], 1) == {"a": {"b": 1}}

    def test_primitive_intermediate_is_replaced(self) -> None:
        assert write_at_path({"a": "text"}, ["a", "b"], 1) == {"a": {"b": 1}}

    def test_non_container_root_becomes_object(self) -> None:
        assert write_at_path(None, ["k"], 1) == {"k": 1}

    def test_non_container_root_becomes_array(self) -> None:
        assert write_at_path("scalar", [0], 1) == [1]

    def test_index_past_end_pads_with_null(self) -> None:
        assert write_at_path({"a": [1]}, ["a", 3], 4) == {"a": [1, None, None, 4]}

    def test_integer_segment_on_object_writes_decimal_key(self) -> None:
        assert write_at_path({"m": {}}, ["m", 2], "v") == {"m": {"2": "v"}}


class TestWriteAtPathErrors:
    def test_string_segment_into_existing_array(self) -> None:
        with pytest.raises(PathError, match="string segment"):
            write_at_path({"a": [1, 2]}, ["a", "b"], 1)

    def test_negative_index(self) -> None:
        with pytest.raises(PathError, match="Negative"):
            write_at_path([1, 2], [-1], 0)

    def test_path_error_is_a_key_error(self) -> None:
        with pytest.raises(KeyError):
            write_at_path([1], ["x"], 0)

    def test_bool_segment(self) -> None:
        with pytest.raises(TypeError):
            write_at_path({}, [False], 0)

    def test_failed_write_leaves_input_untouched(self) -> None:
        document = {"a": [1, 2]}
        with pytest.raises(PathError):
            write_at_path(document, ["a", "b"], 1)
        assert document == {"a": [1, 2]}
