"""EditSession: drives one node-edit dialog from open to save or cancel.

States::

    IDLE --open()--> EDITING --save()--> SAVING --> COMMITTED
                        ^                   |
                        |                   +-----> FAILED --save()/cancel()
                        +---- cancel() -----------------------> IDLE

A save is one logical step: read and parse the current document, build the
patch for the selected node, refresh the node's rows, write the new
document copy-on-write, serialise it and persist it.  Errors raised along
the way are caught here, logged and kept in ``last_error``; the dialog stays
open so the user can retry or cancel.

All collaborators arrive through an ``EditContext`` built per session, so no
state is read from process-wide singletons.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_node_edit.cache import DocumentCache
from json_node_edit.config import EditConfig, NodeUpdatePolicy
from json_node_edit.document import parse_document, serialize_document, write_document
from json_node_edit.errors import (
    EditError,
    LoadError,
    PersistError,
    SessionStateError,
)
from json_node_edit.patch import build_patch
from json_node_edit.protocols import DocumentStore, ModalController, NodeSelection
from json_node_edit.tree.nodes import NodeData, Row

__all__ = ["EditContext", "EditSession", "SessionState"]

logger = logging.getLogger(__name__)


def _input_text(row: Row | None) -> str:
    """Text shown in an input for a row: empty for a missing row or null value."""
    if row is None or row.value is None:
        return ""
    if isinstance(row.value, str):
        return row.value
    if isinstance(row.value, float) and row.value.is_integer():
        # JSON does not tell 3 and 3.0 apart.
        return str(int(row.value))
    return json.dumps(row.value)


class SessionState(StrEnum):
    """Lifecycle state of an EditSession."""

    IDLE = auto()
    EDITING = auto()
    SAVING = auto()
    COMMITTED = auto()
    FAILED = auto()


@dataclass
class EditContext:
    """Collaborators and settings for one edit session.

    Attributes:
        store:     Holds the current document text.
        selection: Holds the selected node.
        modals:    Shows and hides the edit and detail modals.
        config:    Session configuration.  Defaults to ``EditConfig()``.
        cache:     Parse cache.  Pass one in to share it between sessions;
                   otherwise a private one sized by
                   ``config.parse_cache_size`` is created.
    """

    store: DocumentStore
    selection: NodeSelection
    modals: ModalController
    config: EditConfig = field(default_factory=EditConfig)
    cache: DocumentCache | None = None

    def __post_init__(self) -> None:
        if self.cache is None:
            self.cache = DocumentCache(max_size=self.config.parse_cache_size)

    def load_document(self) -> Any:
        """Parse the store's current text, via the cache when one is set.

        Raises:
            LoadError: If the store cannot supply the text.
            ParseError: If the stored text is not valid JSON.
        """
        try:
            text = self.store.get_contents()
        except Exception as exc:
            raise LoadError(f"Failed to read document: {exc}") from exc
        if self.cache is None:
            return parse_document(text)
        return self.cache.parse(text)

    async def persist(self, text: str) -> None:
        """Hand ``text`` to the store, reporting any failure as PersistError."""
        try:
            await self.store.set_contents(text)
        except Exception as exc:
            raise PersistError(f"Failed to persist document: {exc}") from exc


class EditSession:
    """Field editor for the selected node.

    Example::

        session = EditSession(EditContext(store, selection, modals))
        session.open()
        session.set_field("name", "Alice")
        state = await session.save()   # SessionState.COMMITTED
    """

    def __init__(self, context: EditContext) -> None:
        self._context = context
        self._state = SessionState.IDLE
        self._fields: dict[str, str] = {}
        self._last_error: EditError | None = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def fields(self) -> dict[str, str]:
        """A copy of the current input values, keyed by field name."""
        return dict(self._fields)

    @property
    def last_error(self) -> EditError | None:
        """The error that caused the most recent FAILED transition, if any."""
        return self._last_error

    @property
    def is_open(self) -> bool:
        return self._state in (
            SessionState.EDITING,
            SessionState.SAVING,
            SessionState.FAILED,
        )

    # ------------------------------------------------------------------
    # Dialog lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Show the edit modal and load the inputs from the selected node."""
        self._require_not_saving("open")
        self._context.modals.set_visible(self._context.config.edit_modal, True)
        self._state = SessionState.EDITING
        self._last_error = None
        self.sync_selection()

    def sync_selection(self) -> None:
        """Reload the inputs from the currently selected node.

        A field with no matching row, or whose row value is null, starts as
        an empty string.  With no selection every field is empty.
        """
        node = self._context.selection.selected_node
        self._fields = {}
        for name in self._field_names(node):
            row = node.row(name) if node is not None else None
            self._fields[name] = _input_text(row)

    def set_field(self, name: str, value: str) -> None:
        """Set the input value of an editable field.

        Raises:
            SessionStateError: If the dialog is not open for editing.
            KeyError: If ``name`` is not an editable field.
        """
        if self._state not in (SessionState.EDITING, SessionState.FAILED):
            raise SessionStateError(f"Cannot edit fields while {self._state}")
        if name not in self._fields:
            raise KeyError(name)
        self._fields[name] = value

    def edit_set(self) -> dict[str, str]:
        """The edits a save would apply: every editable field, changed or not."""
        return dict(self._fields)

    def cancel(self) -> None:
        """Discard the inputs and close the edit modal; the document is untouched."""
        self._require_not_saving("cancel")
        self._context.modals.set_visible(self._context.config.edit_modal, False)
        self._fields = {}
        self._last_error = None
        self._state = SessionState.IDLE

    async def save(self) -> SessionState:
        """Apply the inputs to the selected node and persist the new document.

        With no selected node this is a no-op that returns the current state,
        whether or not the dialog is open.

        Returns:
            COMMITTED on success, FAILED when reading, parsing, writing or
            persisting failed (see ``last_error``).

        Raises:
            SessionStateError: If the dialog is not open or a save is in flight.

        Any other exception, cancellation included, leaves the session in
        FAILED and propagates.
        """
        self._require_not_saving("save")
        ctx = self._context
        node = ctx.selection.selected_node
        if node is None:
            logger.debug("Save requested with no selected node; nothing to do")
            return self._state
        if self._state not in (SessionState.EDITING, SessionState.FAILED):
            raise SessionStateError(f"Cannot save while {self._state}")

        policy = ctx.config.node_update
        self._state = SessionState.SAVING
        node_replaced = False
        try:
            document = ctx.load_document()
            patch = build_patch(document, node, self.edit_set())
            updated = node.with_rows(patch.updated_rows)
            if policy is not NodeUpdatePolicy.DEFERRED:
                ctx.selection.set_selected_node(updated)
                node_replaced = True
            new_document = write_document(document, node.path, patch.replacement)
            text = serialize_document(new_document, indent=ctx.config.indent)
            await ctx.persist(text)
        except EditError as exc:
            self._abandon_save(node, node_replaced)
            logger.exception("Failed to save node %s", node.display_path)
            self._last_error = exc
            return self._state
        except BaseException:
            self._abandon_save(node, node_replaced)
            raise

        if policy is NodeUpdatePolicy.DEFERRED:
            ctx.selection.set_selected_node(updated)
        ctx.modals.set_visible(ctx.config.edit_modal, False)
        ctx.modals.set_visible(ctx.config.detail_modal, True)
        source = "merged" if patch.merged else "rebuilt from rows"
        logger.info("Saved node %s (%s)", node.display_path, source)
        self._last_error = None
        self._state = SessionState.COMMITTED
        return self._state

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _field_names(self, node: NodeData | None) -> tuple[str, ...]:
        configured = self._context.config.editable_fields
        if configured is not None:
            return configured
        if node is None:
            return ()
        names: dict[str, None] = {}
        for row in node.text:
            if row.is_editable and row.key is not None:
                names.setdefault(row.key, None)
        return tuple(names)

    def _abandon_save(self, node: NodeData, node_replaced: bool) -> None:
        policy = self._context.config.node_update
        if node_replaced and policy is NodeUpdatePolicy.ROLLBACK:
            self._context.selection.set_selected_node(node)
        self._state = SessionState.FAILED

    def _require_not_saving(self, action: str) -> None:
        if self._state is SessionState.SAVING:
            raise SessionStateError(f"Cannot {action} while a save is in flight")
