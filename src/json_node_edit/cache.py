"""DocumentCache: LRU cache of parsed documents keyed by their text.

Large documents are parsed once per distinct text.  Repeated edit sessions
against an unchanged document reuse the parsed value instead of calling
``json.loads`` again.

Sharing a parsed value is safe because the edit pipeline never mutates a
document: every write produces a new root via copy-on-write.  Callers that
mutate a value returned by ``parse`` would corrupt the cache entry.

Each ``DocumentCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.

Example::

    cache = DocumentCache(max_size=4)
    doc = cache.parse('{"a": 1}')
    assert cache.parse('{"a": 1}') is doc   # served from memory
"""

from __future__ import annotations

import logging
from typing import Any

from cachetools import LRUCache

from json_node_edit.document import parse_document

__all__ = ["DocumentCache"]

logger = logging.getLogger(__name__)


class DocumentCache:
    """LRU-backed cache of parsed JSON documents.

    Args:
        max_size: Maximum number of parsed documents held in memory.  When
            exceeded, the least-recently-used entry is silently evicted.
    """

    def __init__(self, max_size: int = 8) -> None:
        self._cache: LRUCache[str, Any] = LRUCache(maxsize=max_size)
        self._hits = 0
        self._misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    @property
    def hits(self) -> int:
        return self._hits

    @property
    def misses(self) -> int:
        return self._misses

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, text: str) -> Any:
        """Return the parsed document for ``text``, parsing only on a miss.

        Raises:
            ParseError: If ``text`` is not valid JSON.  Failures are not cached.
        """
        try:
            document = self._cache[text]
        except KeyError:
            self._misses += 1
            document = parse_document(text)
            self._cache[text] = document
            logger.debug("Parsed document (%d chars) into cache", len(text))
            return document
        self._hits += 1
        return document

    def clear(self) -> None:
        self._cache.clear()
