"""
    Graph model - the authoritative in-memory directed graph.

    Nodes and edges are keyed by integer ids issued from two independent
    allocators. Every mutation validates first and changes state second,
    so a call that raises leaves the graph untouched.
"""
from typing import Dict, List, Optional, Tuple

from ..exceptions import DuplicateIdentifier, InvalidEdgeEndpoint, NotFound
from .edge import Edge
from .ids import IdAllocator
from .node import Node


class Graph:
    """
        Labeled directed graph.
        Self-loops and parallel edges are allowed.
    """

    def __init__(self, id_limit: Optional[int] = None):
        """
        Initialize an empty graph.
        Args:
            id_limit: Optional exclusive upper bound for node and edge ids.
        """
        self.nodes: Dict[int, Node] = {}  # node_id -> Node
        self.edges: Dict[int, Edge] = {}  # edge_id -> Edge
        self._adjacency_list: Dict[int, List[int]] = {}  # node_id -> [edge_id]
        self.node_ids = IdAllocator("node", limit=id_limit)
        self.edge_ids = IdAllocator("edge", limit=id_limit)

    # ── Nodes ────────────────────────────────────────────────────

    def add_node(self, label: str) -> int:
        """Allocate an id and insert a new node. Returns the id."""
        node_id = self.node_ids.next()
        self._insert_node(Node(node_id, label))
        return node_id

    def rename_node(self, node_id: int, new_label: str) -> str:
        """Replace a node's label. Returns the previous label."""
        node = self._require_node(node_id)
        self.nodes[node_id] = node.with_label(new_label)
        return node.label

    def delete_node(self, node_id: int) -> Tuple[Node, List[Edge]]:
        """
        Remove a node and every edge touching it.

        Returns:
            The removed node and the cascaded edges, ordered by edge id.
        """
        node = self._require_node(node_id)

        # 1. Detach incident edges
        removed = self.get_incident_edges(node_id)
        for edge in removed:
            self._remove_edge(edge)

        # 2. Delete node
        del self.nodes[node_id]
        del self._adjacency_list[node_id]
        return node, removed

    def restore_node(self, node_id: int, label: str) -> Node:
        """
        Reinsert a node under its original id.
        Used by undo / redo and snapshot loading; the allocator is bypassed.
        """
        if node_id in self.nodes:
            raise DuplicateIdentifier("node", node_id)
        self.node_ids.advance_past(node_id)
        node = Node(node_id, label)
        self._insert_node(node)
        return node

    def _insert_node(self, node: Node) -> None:
        self.nodes[node.node_id] = node
        self._adjacency_list[node.node_id] = []

    # ── Edges ────────────────────────────────────────────────────

    def add_edge(self, source_id: int, target_id: int, label: str = "") -> int:
        """Allocate an id and insert a new edge. Returns the id."""
        self._require_endpoints(source_id, target_id)
        edge_id = self.edge_ids.next()
        self._insert_edge(Edge(edge_id, source_id, target_id, label))
        return edge_id

    def relabel_edge(self, edge_id: int, new_label: str) -> str:
        """Replace an edge's label. Returns the previous label."""
        edge = self._require_edge(edge_id)
        self.edges[edge_id] = edge.with_label(new_label)
        return edge.label

    def delete_edge(self, edge_id: int) -> Edge:
        """Remove an edge. Returns the removed record."""
        edge = self._require_edge(edge_id)
        self._remove_edge(edge)
        return edge

    def restore_edge(self, edge_id: int, source_id: int, target_id: int,
                     label: str = "") -> Edge:
        """Reinsert an edge under its original id."""
        if edge_id in self.edges:
            raise DuplicateIdentifier("edge", edge_id)
        self._require_endpoints(source_id, target_id)
        self.edge_ids.advance_past(edge_id)
        edge = Edge(edge_id, source_id, target_id, label)
        self._insert_edge(edge)
        return edge

    def _insert_edge(self, edge: Edge) -> None:
        self.edges[edge.edge_id] = edge

        # Add to adjacency list for both endpoints (once for a self-loop)
        self._adjacency_list[edge.source_id].append(edge.edge_id)
        if not edge.is_self_loop():
            self._adjacency_list[edge.target_id].append(edge.edge_id)

    def _remove_edge(self, edge: Edge) -> None:
        for node_id in {edge.source_id, edge.target_id}:
            self._adjacency_list[node_id].remove(edge.edge_id)
        del self.edges[edge.edge_id]

    # ── Validation ───────────────────────────────────────────────

    def _require_node(self, node_id: int) -> Node:
        node = self.nodes.get(node_id)
        if node is None:
            raise NotFound("node", node_id)
        return node

    def _require_edge(self, edge_id: int) -> Edge:
        edge = self.edges.get(edge_id)
        if edge is None:
            raise NotFound("edge", edge_id)
        return edge

    def _require_endpoints(self, source_id: int, target_id: int) -> None:
        if source_id not in self.nodes:
            raise InvalidEdgeEndpoint("source", source_id)
        if target_id not in self.nodes:
            raise InvalidEdgeEndpoint("target", target_id)

    # ── Queries ──────────────────────────────────────────────────

    def get_node(self, node_id: int) -> Optional[Node]:
        return self.nodes.get(node_id)

    def get_edge(self, edge_id: int) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def get_all_nodes(self) -> List[Node]:
        return [self.nodes[k] for k in sorted(self.nodes)]

    def get_all_edges(self) -> List[Edge]:
        return [self.edges[k] for k in sorted(self.edges)]

    def get_incident_edges(self, node_id: int) -> List[Edge]:
        """Edges whose source or target is the node, ordered by id."""
        return [self.edges[e] for e in sorted(self._adjacency_list.get(node_id, []))]

    def find_nodes(self, query: str) -> List[Node]:
        """Nodes whose label contains ``query`` (case-insensitive)."""
        return [node for node in self.get_all_nodes() if node.matches(query)]

    def get_number_of_nodes(self) -> int:
        return len(self.nodes)

    def get_number_of_edges(self) -> int:
        return len(self.edges)

    def __eq__(self, other) -> bool:
        """Two graphs are equal if they hold the same node and edge records"""
        if not isinstance(other, Graph):
            return NotImplemented
        return self.nodes == other.nodes and self.edges == other.edges

    __hash__ = None

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)})"
