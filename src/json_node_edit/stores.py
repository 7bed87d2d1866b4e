"""In-memory implementations of the collaborator protocols.

Useful for tests, scripts and headless tools that drive an edit session
without a UI.  Each satisfies its protocol in ``json_node_edit.protocols``
structurally.
"""

from __future__ import annotations

from json_node_edit.tree.nodes import NodeData

__all__ = ["GraphSelection", "InMemoryDocumentStore", "ModalRegistry"]


class InMemoryDocumentStore:
    """Document text held in memory; every saved text is kept in ``history``."""

    def __init__(self, contents: str = "{}") -> None:
        self.contents = contents
        self.history: list[str] = []

    def get_contents(self) -> str:
        return self.contents

    async def set_contents(self, contents: str) -> None:
        self.history.append(contents)
        self.contents = contents


class GraphSelection:
    """Holds the selected node; replaced wholesale, never mutated."""

    def __init__(self, node: NodeData | None = None) -> None:
        self._node = node

    @property
    def selected_node(self) -> NodeData | None:
        return self._node

    def set_selected_node(self, node: NodeData | None) -> None:
        self._node = node


class ModalRegistry:
    """Tracks which modals are visible."""

    def __init__(self) -> None:
        self._visible: dict[str, bool] = {}

    def set_visible(self, modal_id: str, visible: bool) -> None:
        self._visible[modal_id] = visible

    def is_visible(self, modal_id: str) -> bool:
        return self._visible.get(modal_id, False)

    @property
    def open_modals(self) -> list[str]:
        return sorted(modal_id for modal_id, shown in self._visible.items() if shown)
