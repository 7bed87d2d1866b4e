"""Row reconciliation between a node's flattened rows and JSON objects.

Rows only carry values for primitive fields.  Nested objects and arrays are
shown collapsed, so their contents can never be rebuilt from rows and must
come from the canonical document instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from json_node_edit.tree.nodes import Row, RowType

__all__ = ["apply_edits_to_rows", "rows_to_object"]


def rows_to_object(rows: Iterable[Row]) -> dict[str, Any]:
    """Fold keyed primitive rows into a key -> value mapping.

    OBJECT/ARRAY rows and rows without a key are skipped.  A later row with
    the same key overrides an earlier one.
    """
    result: dict[str, Any] = {}
    for row in rows:
        if row.type == RowType.PRIMITIVE and row.key:
            result[row.key] = row.value
    return result


def apply_edits_to_rows(rows: Iterable[Row], edits: Mapping[str, Any]) -> list[Row]:
    """Return new rows with edited values applied to matching primitive rows.

    Container rows pass through unchanged even when their key is in
    ``edits``, as do unkeyed rows.  Order is preserved and neither the input
    sequence nor its rows are modified.
    """
    updated: list[Row] = []
    for row in rows:
        if row.is_editable and row.key in edits:
            updated.append(replace(row, value=edits[row.key]))
        else:
            updated.append(row)
    return updated
