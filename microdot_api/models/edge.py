"""
    Edge model - a labeled, directed edge between two nodes.
"""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Edge:
    """
    Immutable directed edge record.

    Endpoints are stored as node ids rather than node objects, so an edge
    record stays valid while its endpoint nodes are renamed.
    """
    edge_id: int
    source_id: int
    target_id: int
    label: str = ""

    def with_label(self, label: str) -> 'Edge':
        return replace(self, label=label)

    def is_self_loop(self) -> bool:
        return self.source_id == self.target_id

    def __repr__(self) -> str:
        return f"Edge({self.edge_id}: {self.source_id} -> {self.target_id}, {self.label!r})"
