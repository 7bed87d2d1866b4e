"""EditConfig and NodeUpdatePolicy for edit-session configuration.

EditConfig is a frozen (immutable) dataclass holding the session
parameters.  NodeUpdatePolicy selects when the selected node's rows are
refreshed relative to persisting the new document.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DEFAULT_EDITABLE_FIELDS", "EditConfig", "NodeUpdatePolicy"]

DEFAULT_EDITABLE_FIELDS: tuple[str, ...] = ("name", "color")


class NodeUpdatePolicy(StrEnum):
    """When the selected node's rows are replaced during a save.

    - OPTIMISTIC: Before persisting; a failed save leaves the new rows shown.
    - DEFERRED:   Only after persisting succeeds.
    - ROLLBACK:   Before persisting; the original node is restored on failure.
    """

    OPTIMISTIC = auto()
    DEFERRED = auto()
    ROLLBACK = auto()


@dataclass(frozen=True, slots=True)
class EditConfig:
    """Immutable configuration for an edit session.

    Attributes:
        editable_fields: Field names offered for editing.  None derives them
            from the selected node's keyed primitive rows.
        indent: Indentation used when serialising the saved document.
        node_update: When the selected node is refreshed (see NodeUpdatePolicy).
        edit_modal: Modal id of the edit dialog.
        detail_modal: Modal id opened after a successful save.
        parse_cache_size: Number of parsed documents kept by DocumentCache.
    """

    editable_fields: tuple[str, ...] | None = DEFAULT_EDITABLE_FIELDS
    indent: int = 2
    node_update: NodeUpdatePolicy = NodeUpdatePolicy.OPTIMISTIC
    edit_modal: str = "NodeEditModal"
    detail_modal: str = "NodeModal"
    parse_cache_size: int = 8

    def __post_init__(self) -> None:
        fields = self.editable_fields
        if fields is not None:
            if not fields:
                msg = "editable_fields must not be empty (use None to derive them)"
                raise ValueError(msg)
            if any(not name for name in fields):
                msg = f"editable_fields must not contain empty names, got {fields}"
                raise ValueError(msg)
            if len(set(fields)) != len(fields):
                msg = f"editable_fields must be unique, got {fields}"
                raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if self.parse_cache_size < 1:
            msg = f"parse_cache_size must be >= 1, got {self.parse_cache_size}"
            raise ValueError(msg)
