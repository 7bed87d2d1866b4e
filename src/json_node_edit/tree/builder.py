"""NodeBuilder: flattens JSON subtrees into NodeData rows.

This is the graph-side producer of the nodes the edit pipeline consumes.
Each node covers one container (or the root) and lists its direct fields:

- object    -> one keyed row per entry, in insertion order
- array     -> one unkeyed row per element, in index order
- primitive -> a single unkeyed PRIMITIVE row (only possible at the root)

Nested containers become collapsed OBJECT/ARRAY rows with a child count;
``walk`` yields a separate node for each of them.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from json_node_edit.errors import PathError
from json_node_edit.path.addressing import NOT_FOUND, format_path, resolve
from json_node_edit.tree.nodes import NodeData, Row, RowType
from json_node_edit.types import JsonKind, is_container, kind_of

__all__ = ["NodeBuilder"]


def _row_for(key: str | None, value: Any) -> Row:
    kind = kind_of(value)
    row_type = RowType.for_kind(kind)
    if is_container(kind):
        return Row(key=key, type=row_type, child_count=len(value))
    return Row(key=key, type=row_type, value=value)


@dataclass
class NodeBuilder:
    """Builds NodeData for subtrees of a root document.

    Example::

        builder = NodeBuilder()
        node = builder.build({"user": {"name": "Bob", "tags": ["x"]}}, ["user"])
        # node.text: (Row("name", PRIMITIVE, "Bob"), Row("tags", ARRAY, child_count=1))
    """

    def rows(self, value: Any) -> tuple[Row, ...]:
        """Flatten the direct fields of ``value`` into rows."""
        match kind_of(value):
            case JsonKind.OBJECT:
                return tuple(_row_for(key, child) for key, child in value.items())
            case JsonKind.ARRAY:
                return tuple(_row_for(None, child) for child in value)
            case _:
                return (_row_for(None, value),)

    def build(self, root: Any, path: Sequence[str | int] = ()) -> NodeData:
        """Build the node for the subtree of ``root`` at ``path``.

        Raises:
            PathError: If ``path`` does not resolve in ``root``.
        """
        value = resolve(root, path)
        if value is NOT_FOUND:
            raise PathError(f"Path {format_path(path)} does not resolve in document")
        return NodeData(path=tuple(path), text=self.rows(value))

    def walk(self, root: Any) -> Iterator[NodeData]:
        """Yield a node for the root and every nested container, depth-first."""
        yield from self._walk(root, ())

    def _walk(self, value: Any, path: tuple[str | int, ...]) -> Iterator[NodeData]:
        yield NodeData(path=path, text=self.rows(value))
        match kind_of(value):
            case JsonKind.OBJECT:
                children: Iterator[tuple[str | int, Any]] = iter(value.items())
            case JsonKind.ARRAY:
                children = enumerate(value)
            case _:
                return
        for seg, child in children:
            if is_container(kind_of(child)):
                yield from self._walk(child, (*path, seg))
