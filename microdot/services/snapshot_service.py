"""
    Snapshot serialization and deserialization for Graph models.

    The snapshot maps node ids to labels and edge ids to
    ``{source, destination, label}``, and stores each allocator's next
    value so identifiers stay retired across restarts.

    Usage:
        serializer = GraphSerializer()
        data = serializer.serialize(graph)       # → dict
        json_str = serializer.to_json(graph)     # → str
        graph = serializer.deserialize(data)     # → Graph
        serializer.save(graph, path)
        graph = serializer.load(path)
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Union

from microdot_api.exceptions import DuplicateIdentifier
from microdot_api.models.graph import Graph
from microdot_api.plugins.base import GraphExporter

from ..config import SerializationConfig
from .exceptions import SnapshotError

logger = logging.getLogger(__name__)

SNAPSHOT_FORMAT = "microdot"
SNAPSHOT_VERSION = 1


class GraphSerializer(GraphExporter):
    """Serialize / deserialize ``Graph`` instances as JSON snapshots."""

    def __init__(self, config: Optional[SerializationConfig] = None):
        self._config = config or SerializationConfig()

    @property
    def config(self) -> SerializationConfig:
        return self._config

    # ── Serialization ────────────────────────────────────────────

    def serialize(self, graph: Graph) -> Dict[str, Any]:
        """Convert a Graph to a plain dictionary."""
        return {
            'format': SNAPSHOT_FORMAT,
            'version': SNAPSHOT_VERSION,
            'next_node_id': graph.node_ids.next_value,
            'next_edge_id': graph.edge_ids.next_value,
            'nodes': {str(n.node_id): n.label for n in graph.get_all_nodes()},
            'edges': {
                str(e.edge_id): {
                    'source': e.source_id,
                    'destination': e.target_id,
                    'label': e.label,
                }
                for e in graph.get_all_edges()
            },
        }

    def to_json(self, graph: Graph) -> str:
        """Serialize a Graph directly to a JSON string."""
        return json.dumps(
            self.serialize(graph),
            indent=self._config.indent,
            sort_keys=self._config.sort_keys,
        )

    def export(self, graph: Graph) -> str:
        return self.to_json(graph)

    def save(self, graph: Graph, path: Union[str, Path]) -> Path:
        """Write the snapshot, replacing any previous file in one step."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(self.to_json(graph))
                fh.write("\n")
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.info("Snapshot saved to %s (%d nodes, %d edges)",
                    path, graph.get_number_of_nodes(), graph.get_number_of_edges())
        return path

    # ── Deserialization ──────────────────────────────────────────

    def deserialize(self, data: Dict[str, Any]) -> Graph:
        """
        Reconstruct a Graph from a dictionary (inverse of ``serialize``).

        Every node and edge keeps its saved id. Allocators resume from the
        saved counters, or from past the highest id present if that is larger.

        Raises:
            SnapshotError: If the document does not have the expected layout.
        """
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot must be a JSON object.")
        if data.get('format', SNAPSHOT_FORMAT) != SNAPSHOT_FORMAT:
            raise SnapshotError(f"Unknown snapshot format: {data.get('format')!r}")

        nodes = data.get('nodes', {})
        edges = data.get('edges', {})
        if not isinstance(nodes, dict) or not isinstance(edges, dict):
            raise SnapshotError("Snapshot 'nodes' and 'edges' must be objects.")

        graph = Graph()

        # --- Nodes ---
        for raw_id, label in sorted(nodes.items(), key=lambda kv: self._to_id(kv[0])):
            try:
                graph.restore_node(self._to_id(raw_id), self._to_label(label))
            except DuplicateIdentifier as e:
                raise SnapshotError(str(e)) from e

        # --- Edges ---
        for raw_id, edge_data in sorted(edges.items(), key=lambda kv: self._to_id(kv[0])):
            edge_id = self._to_id(raw_id)
            if not isinstance(edge_data, dict):
                raise SnapshotError(f"Edge {raw_id} must be an object.")
            try:
                source_id = self._to_id(edge_data['source'])
                target_id = self._to_id(edge_data['destination'])
            except KeyError as e:
                raise SnapshotError(f"Edge {raw_id} is missing {e}") from e

            if source_id not in graph.nodes or target_id not in graph.nodes:
                logger.warning("Skipping edge %s: endpoint %s or %s missing",
                               edge_id, source_id, target_id)
                # The id stays retired even though the edge is dropped
                graph.edge_ids.advance_past(edge_id)
                continue

            try:
                graph.restore_edge(edge_id, source_id, target_id,
                                   self._to_label(edge_data.get('label', "")))
            except DuplicateIdentifier as e:
                raise SnapshotError(str(e)) from e

        # --- Counters ---
        next_node = self._to_id(data.get('next_node_id', 0))
        next_edge = self._to_id(data.get('next_edge_id', 0))
        if next_node > 0:
            graph.node_ids.advance_past(next_node - 1)
        if next_edge > 0:
            graph.edge_ids.advance_past(next_edge - 1)

        return graph

    def from_json(self, json_str: str) -> Graph:
        """Deserialize a Graph from a JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Invalid snapshot JSON: {e}") from e
        return self.deserialize(data)

    def load(self, path: Union[str, Path]) -> Graph:
        """Read a snapshot file."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SnapshotError(f"Snapshot {path} is not valid UTF-8: {e}") from e
        graph = self.from_json(text)
        logger.info("Snapshot loaded from %s (%d nodes, %d edges)",
                    path, graph.get_number_of_nodes(), graph.get_number_of_edges())
        return graph

    @staticmethod
    def _to_id(value: Any) -> int:
        """Accept a non-negative int, or a string of ASCII digits (object keys)."""
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
        if isinstance(value, str) and value.isascii() and value.isdigit():
            return int(value)
        raise SnapshotError(f"Invalid identifier: {value!r}")

    @staticmethod
    def _to_label(value: Any) -> str:
        if not isinstance(value, str):
            raise SnapshotError(f"Label must be a string, got {value!r}")
        return value
