"""Collaborator protocols consumed by the edit session.

The session never reaches for global state: it is handed a document store,
a node selection and a modal controller.  Any object with the right methods
satisfies these protocols structurally, with no inheritance required.

Example::

    from json_node_edit.protocols import DocumentStore

    class FileStore:
        def __init__(self, path):
            self.path = path

        def get_contents(self) -> str:
            return self.path.read_text()

        async def set_contents(self, contents: str) -> None:
            self.path.write_text(contents)

    assert isinstance(FileStore(path), DocumentStore)  # structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_node_edit.tree.nodes import NodeData

__all__ = ["DocumentStore", "ModalController", "NodeSelection"]


@runtime_checkable
class DocumentStore(Protocol):
    """Holds the current document as JSON text.

    ``set_contents`` may fail by raising; the session reports the failure as
    a ``PersistError``.
    """

    def get_contents(self) -> str: ...

    async def set_contents(self, contents: str) -> None: ...


@runtime_checkable
class NodeSelection(Protocol):
    """The single currently selected graph node, if any."""

    @property
    def selected_node(self) -> NodeData | None: ...

    def set_selected_node(self, node: NodeData | None) -> None: ...


@runtime_checkable
class ModalController(Protocol):
    """Shows and hides modals by id."""

    def set_visible(self, modal_id: str, visible: bool) -> None: ...
