"""
    Node model - a labeled node in the graph.
"""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Node:
    """
    Immutable node record.

    The graph replaces the record on rename, so a ``Node`` held elsewhere
    (e.g. by an edit in the history) never changes underneath its holder.
    """
    node_id: int
    label: str

    def with_label(self, label: str) -> 'Node':
        return replace(self, label=label)

    def matches(self, query: str) -> bool:
        """Case-insensitive label substring match."""
        if not query:
            return False
        return query.lower() in self.label.lower()

    def __repr__(self) -> str:
        return f"Node({self.node_id}, {self.label!r})"
