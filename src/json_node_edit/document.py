"""Document writer: parse, copy-on-write update, and serialise JSON documents.

``write_document`` is the only place a new document is produced.  It is a
pure function of its inputs: the old document is never modified and every
container off the edited path is shared with the new one.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from json_node_edit.errors import ParseError
from json_node_edit.path.addressing import format_path, write_at_path

__all__ = ["parse_document", "serialize_document", "write_document"]

logger = logging.getLogger(__name__)


def parse_document(text: str) -> Any:
    """Parse document text.

    Raises:
        ParseError: If ``text`` is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Document is not valid JSON: {exc}") from exc


def serialize_document(document: Any, indent: int = 2) -> str:
    """Serialise ``document`` as indented JSON text, keeping non-ASCII as-is."""
    return json.dumps(document, indent=indent, ensure_ascii=False)


def write_document(document: Any, path: Sequence[str | int], replacement: Any) -> Any:
    """Return a new document with ``replacement`` placed at ``path``."""
    logger.debug("Writing replacement at %s", format_path(path))
    return write_at_path(document, path, replacement)
