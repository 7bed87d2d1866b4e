"""JSON value aliases and the closed JsonKind variant.

Documents are kept as the native Python values produced by ``json.loads``.
``kind_of`` gives every value exactly one ``JsonKind`` tag, so the rest of
the package dispatches on the tag instead of probing types ad hoc.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any, TypeAlias

__all__ = [
    "JsonKind",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Path",
    "PathSegment",
    "is_container",
    "kind_of",
]

JsonScalar: TypeAlias = "str | int | float | bool | None"
JsonValue: TypeAlias = "dict[str, Any] | list[Any] | str | int | float | bool | None"
JsonObject: TypeAlias = "dict[str, Any]"

PathSegment: TypeAlias = "str | int"
Path: TypeAlias = "tuple[str | int, ...]"


class JsonKind(StrEnum):
    """The six kinds of JSON value.

    - NULL    -> "null"
    - BOOLEAN -> "boolean"
    - NUMBER  -> "number"  : int or float (never bool)
    - STRING  -> "string"
    - ARRAY   -> "array"   : Python list
    - OBJECT  -> "object"  : Python dict with string keys
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


def kind_of(value: Any) -> JsonKind:
    """Classify a Python value as one of the JSON kinds.

    ``bool`` is matched before ``int`` because bool subclasses int.

    Raises:
        TypeError: If value is not a JSON-compatible Python value.
    """
    match value:
        case None:
            return JsonKind.NULL
        case bool():
            return JsonKind.BOOLEAN
        case int() | float():
            return JsonKind.NUMBER
        case str():
            return JsonKind.STRING
        case list():
            return JsonKind.ARRAY
        case dict():
            return JsonKind.OBJECT
        case _:
            raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_container(kind: JsonKind) -> bool:
    return kind in (JsonKind.ARRAY, JsonKind.OBJECT)
