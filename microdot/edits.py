"""
    Invertible graph edits.

    Design Pattern: Command
    ───────────────────────
    Each edit is a frozen value describing one applied mutation, with
        • ``apply(graph)``   — perform (or re-perform) the mutation
        • ``revert(graph)``  — undo it

    Edits are built by ``EditEngine`` *after* the mutation succeeded, from
    the values the graph returned (the new id, the overwritten label, the
    removed records). ``apply`` therefore always goes through the
    id-preserving restore path: redoing an add brings back the same id
    instead of allocating a new one.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Tuple

from microdot_api.models.edge import Edge
from microdot_api.models.graph import Graph
from microdot_api.models.node import Node


class GraphEdit(ABC):
    """Abstract base for all invertible edits."""

    @abstractmethod
    def apply(self, graph: Graph) -> None:
        """Perform the mutation on the graph."""
        ...

    @abstractmethod
    def revert(self, graph: Graph) -> None:
        """Reverse the mutation on the graph."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """One-line, human-readable summary."""
        ...


# ═════════════════════════════════════════════════════════════════
#  NODE EDITS
# ═════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AddNodeEdit(GraphEdit):
    node_id: int
    label: str

    def apply(self, graph: Graph) -> None:
        graph.restore_node(self.node_id, self.label)

    def revert(self, graph: Graph) -> None:
        graph.delete_node(self.node_id)

    def describe(self) -> str:
        return f"add node {self.node_id} '{self.label}'"


@dataclass(frozen=True)
class RenameNodeEdit(GraphEdit):
    node_id: int
    old_label: str
    new_label: str

    def apply(self, graph: Graph) -> None:
        graph.rename_node(self.node_id, self.new_label)

    def revert(self, graph: Graph) -> None:
        graph.rename_node(self.node_id, self.old_label)

    def describe(self) -> str:
        return f"rename node {self.node_id} '{self.old_label}' -> '{self.new_label}'"


@dataclass(frozen=True)
class DeleteNodeEdit(GraphEdit):
    """
    Composite edit: a node together with every edge the deletion cascaded to.
    History treats it as a single unit.
    """
    node: Node
    edges: Tuple[Edge, ...] = ()

    @property
    def removed_count(self) -> int:
        return 1 + len(self.edges)

    def apply(self, graph: Graph) -> None:
        graph.delete_node(self.node.node_id)

    def revert(self, graph: Graph) -> None:
        graph.restore_node(self.node.node_id, self.node.label)
        for edge in self.edges:
            graph.restore_edge(edge.edge_id, edge.source_id, edge.target_id, edge.label)

    def describe(self) -> str:
        return (
            f"delete node {self.node.node_id} '{self.node.label}' "
            f"and {len(self.edges)} edge(s)"
        )


# ═════════════════════════════════════════════════════════════════
#  EDGE EDITS
# ═════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AddEdgeEdit(GraphEdit):
    edge_id: int
    source_id: int
    target_id: int
    label: str = ""

    def apply(self, graph: Graph) -> None:
        graph.restore_edge(self.edge_id, self.source_id, self.target_id, self.label)

    def revert(self, graph: Graph) -> None:
        graph.delete_edge(self.edge_id)

    def describe(self) -> str:
        return f"add edge {self.edge_id} {self.source_id} -> {self.target_id}"


@dataclass(frozen=True)
class RelabelEdgeEdit(GraphEdit):
    edge_id: int
    old_label: str
    new_label: str

    def apply(self, graph: Graph) -> None:
        graph.relabel_edge(self.edge_id, self.new_label)

    def revert(self, graph: Graph) -> None:
        graph.relabel_edge(self.edge_id, self.old_label)

    def describe(self) -> str:
        return f"relabel edge {self.edge_id} '{self.old_label}' -> '{self.new_label}'"


@dataclass(frozen=True)
class DeleteEdgeEdit(GraphEdit):
    edge: Edge

    def apply(self, graph: Graph) -> None:
        graph.delete_edge(self.edge.edge_id)

    def revert(self, graph: Graph) -> None:
        e = self.edge
        graph.restore_edge(e.edge_id, e.source_id, e.target_id, e.label)

    def describe(self) -> str:
        return f"delete edge {self.edge.edge_id}"
