"""Row and NodeData dataclasses plus the RowType StrEnum.

A NodeData is the graph-side view of one JSON subtree: the path that locates
it in the root document and a flattened list of rows, one per direct field.
Container fields are shown collapsed, so their rows carry no editable value.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import StrEnum, auto
from typing import Any

from json_node_edit.path.addressing import format_path, to_pointer
from json_node_edit.types import JsonKind

__all__ = ["NodeData", "Row", "RowType"]


class RowType(StrEnum):
    """Kind of a flattened row.

    - PRIMITIVE -> "primitive" : string, number, boolean or null field
    - OBJECT    -> "object"    : nested object, shown collapsed
    - ARRAY     -> "array"     : nested array, shown collapsed
    """

    PRIMITIVE = auto()
    OBJECT = auto()
    ARRAY = auto()

    @classmethod
    def for_kind(cls, kind: JsonKind) -> RowType:
        match kind:
            case JsonKind.OBJECT:
                return cls.OBJECT
            case JsonKind.ARRAY:
                return cls.ARRAY
            case JsonKind.NULL | JsonKind.BOOLEAN | JsonKind.NUMBER | JsonKind.STRING:
                return cls.PRIMITIVE


@dataclass(frozen=True, slots=True)
class Row:
    """One direct field of a node.

    Attributes:
        key:         Object key of the field; None for unkeyed rows such as
                     array elements.
        type:        Row kind (see RowType).
        value:       The scalar value for PRIMITIVE rows; None for containers.
        child_count: Number of entries/elements for OBJECT and ARRAY rows.
    """

    key: str | None
    type: RowType = RowType.PRIMITIVE
    value: Any = None
    child_count: int = 0

    def __post_init__(self) -> None:
        # Accept the plain string tags ("primitive", "object", "array").
        object.__setattr__(self, "type", RowType(self.type))

    @property
    def is_container(self) -> bool:
        return self.type != RowType.PRIMITIVE

    @property
    def is_editable(self) -> bool:
        """Keyed primitive rows are the only ones a field edit can change."""
        return bool(self.key) and not self.is_container


@dataclass(frozen=True, slots=True)
class NodeData:
    """The visual node for one JSON subtree.

    Attributes:
        path: Segments locating the subtree in the root document; () is the root.
        text: Flattened rows for the subtree's direct fields, in document order.
        id:   Optional graph identifier; not used by the edit pipeline.
    """

    path: tuple[str | int, ...] = ()
    text: tuple[Row, ...] = field(default_factory=tuple)
    id: str = ""

    def __post_init__(self) -> None:
        # Accept any sequence at construction time but store tuples.
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "text", tuple(self.text))

    def row(self, key: str) -> Row | None:
        """Return the first row with ``key``, or None."""
        for r in self.text:
            if r.key == key:
                return r
        return None

    def with_rows(self, rows: Iterable[Row]) -> NodeData:
        """Return a copy of this node showing ``rows``."""
        return replace(self, text=tuple(rows))

    @property
    def pointer(self) -> str:
        return to_pointer(self.path)

    @property
    def display_path(self) -> str:
        return format_path(self.path)
