"""JSON node edit - path-addressed, copy-on-write field edits for JSON documents."""

from __future__ import annotations

from json_node_edit.api import edit_document_text, edit_node
from json_node_edit.cache import DocumentCache
from json_node_edit.config import EditConfig, NodeUpdatePolicy
from json_node_edit.errors import (
    EditError,
    LoadError,
    ParseError,
    PathError,
    PersistError,
    SessionStateError,
)
from json_node_edit.path import NOT_FOUND, format_path, resolve, write_at_path
from json_node_edit.patch import PatchResult, build_patch
from json_node_edit.session import EditContext, EditSession, SessionState
from json_node_edit.tree import NodeBuilder, NodeData, Row, RowType

__version__: str = "0.1.0"
__all__: list[str] = [
    "NOT_FOUND",
    "DocumentCache",
    "EditConfig",
    "EditContext",
    "EditError",
    "EditSession",
    "LoadError",
    "NodeBuilder",
    "NodeData",
    "NodeUpdatePolicy",
    "ParseError",
    "PatchResult",
    "PathError",
    "PersistError",
    "Row",
    "RowType",
    "SessionState",
    "SessionStateError",
    "build_patch",
    "edit_document_text",
    "edit_node",
    "format_path",
    "resolve",
    "write_at_path",
]
