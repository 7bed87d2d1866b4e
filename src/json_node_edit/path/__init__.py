"""Path subpackage: rendering, resolving and copy-on-write writing of JSON paths.

Re-exports the public API for the path module:
- format_path: bracket rendering such as ``$["a"][0]``
- to_pointer: RFC 6901 JSON Pointer rendering
- resolve: read the value at a path (NOT_FOUND when absent)
- write_at_path: return a new document with a value placed at a path
"""

from json_node_edit.path.addressing import (
    NOT_FOUND,
    NotFound,
    format_path,
    resolve,
    to_pointer,
    write_at_path,
)

__all__ = [
    "NOT_FOUND",
    "NotFound",
    "format_path",
    "resolve",
    "to_pointer",
    "write_at_path",
]
