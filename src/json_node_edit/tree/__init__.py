"""Tree subpackage for the node/row view of a JSON document.

Re-exports the public API for the tree module:
- Row: one flattened field of a node
- RowType: StrEnum of the three row kinds (PRIMITIVE, OBJECT, ARRAY)
- NodeData: a node's path plus its rows
- NodeBuilder: builds NodeData from a document and a path
- rows_to_object / apply_edits_to_rows: reconcile rows with JSON objects
"""

from json_node_edit.tree.builder import NodeBuilder
from json_node_edit.tree.nodes import NodeData, Row, RowType
from json_node_edit.tree.reconcile import apply_edits_to_rows, rows_to_object

__all__ = [
    "NodeBuilder",
    "NodeData",
    "Row",
    "RowType",
    "apply_edits_to_rows",
    "rows_to_object",
]
