"""
    EditEngine — the single entry point for changing a graph.

    Design Patterns
    ───────────────
    • Facade   – hides the graph, its id allocators and the history.
    • Invoker  – every successful mutation is packaged as an invertible
                 edit and recorded for undo / redo.

    A mutation that raises (unknown id, missing endpoint) never reaches the
    history, and the graph guarantees it changed nothing.
"""
import logging
from typing import List, Optional

from microdot_api.models.graph import Graph
from microdot_api.models.node import Node

from .edits import (
    GraphEdit,
    AddNodeEdit,
    RenameNodeEdit,
    DeleteNodeEdit,
    AddEdgeEdit,
    RelabelEdgeEdit,
    DeleteEdgeEdit,
)
from .history import History

logger = logging.getLogger(__name__)


class EditEngine:
    """
    Coordinates graph mutations and their history.

    Usage:
        engine = EditEngine()
        a = engine.add_node("a")
        b = engine.add_node("b")
        engine.add_edge(a, b, "knows")
        engine.undo()
    """

    def __init__(self, graph: Optional[Graph] = None,
                 max_history_depth: Optional[int] = None):
        self._graph = graph if graph is not None else Graph()
        self._history = History(max_history_depth)

    @classmethod
    def from_graph(cls, graph: Graph,
                   max_history_depth: Optional[int] = None) -> 'EditEngine':
        """Wrap an existing graph (e.g. loaded from a snapshot) with empty history."""
        return cls(graph, max_history_depth)

    @property
    def graph(self) -> Graph:
        """The current graph. Treat as read-only; mutate through the engine."""
        return self._graph

    # ── Node operations ──────────────────────────────────────────

    def add_node(self, label: str) -> int:
        node_id = self._graph.add_node(label)
        self._record(AddNodeEdit(node_id, label))
        return node_id

    def rename_node(self, node_id: int, label: str) -> str:
        old_label = self._graph.rename_node(node_id, label)
        self._record(RenameNodeEdit(node_id, old_label, label))
        return old_label

    def delete_node(self, node_id: int) -> DeleteNodeEdit:
        node, edges = self._graph.delete_node(node_id)
        edit = DeleteNodeEdit(node, tuple(edges))
        self._record(edit)
        return edit

    # ── Edge operations ──────────────────────────────────────────

    def add_edge(self, source_id: int, target_id: int, label: str = "") -> int:
        edge_id = self._graph.add_edge(source_id, target_id, label)
        self._record(AddEdgeEdit(edge_id, source_id, target_id, label))
        return edge_id

    def relabel_edge(self, edge_id: int, label: str) -> str:
        old_label = self._graph.relabel_edge(edge_id, label)
        self._record(RelabelEdgeEdit(edge_id, old_label, label))
        return old_label

    def delete_edge(self, edge_id: int) -> DeleteEdgeEdit:
        edge = self._graph.delete_edge(edge_id)
        edit = DeleteEdgeEdit(edge)
        self._record(edit)
        return edit

    # ── History ──────────────────────────────────────────────────

    def undo(self) -> GraphEdit:
        edit = self._history.undo(self._graph)
        logger.debug("Undo: %s", edit.describe())
        return edit

    def redo(self) -> GraphEdit:
        edit = self._history.redo(self._graph)
        logger.debug("Redo: %s", edit.describe())
        return edit

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    @property
    def undo_depth(self) -> int:
        return self._history.undo_depth

    @property
    def redo_depth(self) -> int:
        return self._history.redo_depth

    def _record(self, edit: GraphEdit) -> None:
        self._history.record(edit)
        logger.debug("Applied: %s", edit.describe())

    # ── Queries ──────────────────────────────────────────────────

    def find_nodes(self, query: str) -> List[Node]:
        return self._graph.find_nodes(query)
