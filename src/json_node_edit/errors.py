"""Exception hierarchy for json-node-edit.

Every error the edit pipeline can report derives from ``EditError`` so the
edit session can catch them at a single boundary.  Each concrete error also
subclasses the closest builtin, so callers outside the session can keep
catching ``ValueError`` / ``KeyError`` / ``RuntimeError``.
"""

from __future__ import annotations

__all__ = [
    "EditError",
    "LoadError",
    "ParseError",
    "PathError",
    "PersistError",
    "SessionStateError",
]


class EditError(Exception):
    """Base class for all json-node-edit errors."""


class ParseError(EditError, ValueError):
    """The current document text is not valid JSON."""


class LoadError(EditError):
    """The document store could not supply the current document text."""


class PersistError(EditError):
    """The document store rejected the new document text."""


class PathError(EditError, KeyError):
    """A path cannot be resolved or written in the given document."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class SessionStateError(EditError, RuntimeError):
    """An edit-session action was invoked in a state that does not allow it."""
