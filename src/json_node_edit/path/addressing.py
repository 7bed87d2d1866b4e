"""Path addressing: render, resolve and copy-on-write paths into a JSON tree.

A path is a sequence of segments.  Integer segments index arrays, string
segments key objects, and the empty path is the document root.

Rendering follows the bracket form shown to users::

    format_path([])                 # "$"
    format_path(["a", 0, "b"])      # '$["a"][0]["b"]'

``write_at_path`` never mutates its input.  Only the containers strictly on
the path are shallow-copied; everything else in the new document is shared
by reference with the old one.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any, Final, Literal

from json_node_edit.errors import PathError
from json_node_edit.types import JsonKind, kind_of

__all__ = [
    "NOT_FOUND",
    "NotFound",
    "format_path",
    "resolve",
    "to_pointer",
    "write_at_path",
]

logger = logging.getLogger(__name__)


class NotFound(Enum):
    """Sentinel type for a path that does not resolve (distinct from JSON null)."""

    NOT_FOUND = "NOT_FOUND"

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> Literal[False]:
        return False


NOT_FOUND: Final = NotFound.NOT_FOUND


def _check_segment(seg: Any) -> None:
    match seg:
        case bool():
            raise TypeError(f"Path segments must be str or int, got bool {seg!r}")
        case int() | str():
            return
        case _:
            raise TypeError(f"Path segments must be str or int, got {type(seg)!r}")


def format_path(path: Sequence[str | int] | None, escape: bool = False) -> str:
    """Render a path as ``$`` or ``$[seg1][seg2]...``.

    Integer segments render bare, string segments render double-quoted.  By
    default embedded quotes are NOT escaped, so a key containing ``"`` renders
    ambiguously; pass ``escape=True`` to render string segments as JSON string
    literals instead.
    """
    if not path:
        return "$"
    parts: list[str] = []
    for seg in path:
        _check_segment(seg)
        if isinstance(seg, int):
            parts.append(str(seg))
        elif escape:
            parts.append(json.dumps(seg, ensure_ascii=False))
        else:
            parts.append(f'"{seg}"')
    return "$[" + "][".join(parts) + "]"


def to_pointer(path: Sequence[str | int] | None) -> str:
    """Render a path as an RFC 6901 JSON Pointer ("" for the root)."""
    if not path:
        return ""
    tokens: list[str] = []
    for seg in path:
        _check_segment(seg)
        tokens.append(str(seg).replace("~", "~0").replace("/", "~1"))
    return "/" + "/".join(tokens)


def _child(container: Any, seg: str | int) -> Any:
    """Return ``container[seg]`` or NOT_FOUND; never raises."""
    match kind_of(container):
        case JsonKind.OBJECT:
            key = seg if isinstance(seg, str) else str(seg)
            return container.get(key, NOT_FOUND)
        case JsonKind.ARRAY:
            if isinstance(seg, int) and 0 <= seg < len(container):
                return container[seg]
            return NOT_FOUND
        case JsonKind.NULL | JsonKind.BOOLEAN | JsonKind.NUMBER | JsonKind.STRING:
            return NOT_FOUND


def resolve(root: Any, path: Sequence[str | int] | None) -> Any:
    """Walk ``root`` along ``path`` and return the value found there.

    Returns:
        The value at ``path`` (possibly ``None`` for a JSON null), ``root``
        itself for an empty path, or ``NOT_FOUND`` when any step is missing,
        null, or not a container.
    """
    cur = root
    for seg in path or ():
        _check_segment(seg)
        if cur is None or cur is NOT_FOUND:
            return NOT_FOUND
        cur = _child(cur, seg)
    return cur


def _empty_for(seg: str | int) -> list[Any] | dict[str, Any]:
    """A new container suited to receive ``seg``: array for ints, object otherwise."""
    return [] if isinstance(seg, int) else {}


def _copy_for(value: Any, seg: str | int) -> list[Any] | dict[str, Any]:
    """Shallow-copy ``value`` so ``seg`` can be set on it.

    Missing values, nulls and primitives are replaced by a new empty
    container chosen by the segment type.
    """
    if value is NOT_FOUND:
        return _empty_for(seg)
    match kind_of(value):
        case JsonKind.ARRAY:
            return list(value)
        case JsonKind.OBJECT:
            return dict(value)
        case _:
            return _empty_for(seg)


def _slot(container: list[Any] | dict[str, Any], seg: str | int) -> Any:
    """Make room for ``seg`` in a freshly copied container; return its current child."""
    if isinstance(container, list):
        if not isinstance(seg, int):
            raise PathError(f"Cannot address array with string segment {seg!r}")
        if seg < 0:
            raise PathError(f"Negative array index {seg!r} is not a valid path segment")
        if seg >= len(container):
            # Writing past the end pads the gap with nulls.
            container.extend([None] * (seg + 1 - len(container)))
        return container[seg]
    key = seg if isinstance(seg, str) else str(seg)
    return container.get(key, NOT_FOUND)


def _assign(container: list[Any] | dict[str, Any], seg: str | int, value: Any) -> None:
    if isinstance(container, list):
        container[seg] = value  # type: ignore[index]
    else:
        container[seg if isinstance(seg, str) else str(seg)] = value


def write_at_path(root: Any, path: Sequence[str | int] | None, value: Any) -> Any:
    """Return a new root with ``value`` placed at ``path``.

    An empty path replaces the whole document and returns ``value`` itself.
    Otherwise every container from the root down to the parent of the final
    segment is shallow-copied before descending; missing intermediate steps
    become a new array when the next segment is an int and an object
    otherwise.

    Raises:
        PathError: If a string segment addresses an existing array, or an
            array index is negative.
        TypeError: If a segment is neither str nor int.
    """
    if not path:
        return value
    segments = list(path)
    for seg in segments:
        _check_segment(seg)

    result = _copy_for(root, segments[0])
    cur = result
    for seg, next_seg in zip(segments, segments[1:]):
        child = _slot(cur, seg)
        copied = _copy_for(child, next_seg)
        _assign(cur, seg, copied)
        cur = copied

    last = segments[-1]
    _slot(cur, last)
    _assign(cur, last, value)
    logger.debug("Wrote value at %s", to_pointer(segments) or "/")
    return result
