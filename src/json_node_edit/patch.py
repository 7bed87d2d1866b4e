"""Patch builder: computes the replacement value for an edited node.

When the canonical value at the node's path is an object, the edits are
merged into it so every untouched field (including nested containers) is
preserved.  For anything else (an array, a primitive, or a missing path) a
keyed merge would destroy data, so the replacement is rebuilt from the
node's primitive rows instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from json_node_edit.path.addressing import resolve
from json_node_edit.tree.nodes import NodeData, Row
from json_node_edit.tree.reconcile import apply_edits_to_rows, rows_to_object

__all__ = ["PatchResult", "build_patch", "merge_fields"]


@dataclass(frozen=True, slots=True)
class PatchResult:
    """Output of build_patch().

    Attributes:
        replacement:  The object to write at the node's path.
        updated_rows: The node's rows with the edits applied, for refreshing
                      the view without re-flattening the document.
        merged:       True when the edits were merged into the existing
                      object; False when the replacement was rebuilt from rows.
    """

    replacement: dict[str, Any]
    updated_rows: tuple[Row, ...]
    merged: bool


def merge_fields(
    current: Mapping[str, Any], edits: Mapping[str, Any]
) -> dict[str, Any]:
    """Return ``current`` with ``edits`` applied as a new dict.

    Existing keys keep their position (edited ones are updated in place);
    edit keys not present in ``current`` are appended in edit order.
    """
    merged = dict(current)
    merged.update(edits)
    return merged


def build_patch(document: Any, node: NodeData, edits: Mapping[str, Any]) -> PatchResult:
    """Compute the replacement for ``node`` and its refreshed rows."""
    match resolve(document, node.path):
        case dict() as current:
            replacement = merge_fields(current, edits)
            merged = True
        case _:
            # Array, primitive, null or NOT_FOUND: never coerce into an object.
            replacement = merge_fields(rows_to_object(node.text), edits)
            merged = False
    return PatchResult(
        replacement=replacement,
        updated_rows=tuple(apply_edits_to_rows(node.text, edits)),
        merged=merged,
    )
