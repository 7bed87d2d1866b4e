"""One-shot functions for applying a field edit without an edit session.

Each call works on fresh values only: the input document, node and text are
never modified, and nothing is cached between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from json_node_edit.document import parse_document, serialize_document, write_document
from json_node_edit.patch import build_patch
from json_node_edit.tree.nodes import NodeData

__all__ = ["edit_document_text", "edit_node"]


def edit_node(
    document: Any,
    node: NodeData,
    edits: Mapping[str, Any],
) -> tuple[Any, NodeData]:
    """Apply ``edits`` to the subtree ``node`` points at.

    Args:
        document: Root JSON value the node was built from.
        node:     The node being edited.
        edits:    Field name -> new value.

    Returns:
        ``(new_document, updated_node)``.  Containers off the node's path are
        shared between ``document`` and ``new_document``.
    """
    patch = build_patch(document, node, edits)
    new_document = write_document(document, node.path, patch.replacement)
    return new_document, node.with_rows(patch.updated_rows)


def edit_document_text(
    text: str,
    node: NodeData,
    edits: Mapping[str, Any],
    indent: int = 2,
) -> str:
    """Apply ``edits`` to a document given as JSON text; return the new text.

    Raises:
        ParseError: If ``text`` is not valid JSON.
    """
    new_document, _ = edit_node(parse_document(text), node, edits)
    return serialize_document(new_document, indent=indent)
