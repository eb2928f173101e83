"""
    Graphviz DOT export.

    Produces a ``digraph`` that the ``dot`` layout tool can render:

        digraph microdot {
            graph [fontname="helvetica" rankdir=LR ranksep=0.8 nodesep=0.4];
            n0 [label="a"];
            n1 [label="b"];
            n0 -> n1 [label="knows"];
        }

    Nodes listed in ``DotExporter.highlighted`` (the last search result)
    get the highlight fill color.
"""
import textwrap
from typing import FrozenSet, Iterable, List, Optional

from microdot_api.models.edge import Edge
from microdot_api.models.graph import Graph
from microdot_api.models.node import Node
from microdot_api.plugins.base import GraphExporter

from ..config import DotConfig


def escape_label(label: str) -> str:
    """Quote a label for DOT, escaping backslashes, quotes and newlines."""
    escaped = (
        label.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


def node_name(node_id: int) -> str:
    return f"n{node_id}"


class DotExporter(GraphExporter):
    """Render a Graph as Graphviz DOT text."""

    def __init__(self, config: Optional[DotConfig] = None):
        self._config = config or DotConfig()
        self._highlighted: FrozenSet[int] = frozenset()

    @property
    def config(self) -> DotConfig:
        return self._config

    @property
    def highlighted(self) -> FrozenSet[int]:
        return self._highlighted

    @highlighted.setter
    def highlighted(self, node_ids: Iterable[int]) -> None:
        self._highlighted = frozenset(node_ids)

    def export(self, graph: Graph) -> str:
        cfg = self._config
        lines: List[str] = [f"digraph {cfg.graph_name} {{"]
        lines.append(
            f'    graph [fontname="{cfg.font}" rankdir={"LR" if cfg.left_right else "TB"} '
            f'ranksep={cfg.rank_sep} nodesep={cfg.node_sep}];'
        )
        lines.append(
            f'    node [fontname="{cfg.font}" shape=box style="rounded,filled" '
            f'fillcolor="{cfg.resolve_color(cfg.node_color)}" '
            f'fontcolor="{cfg.resolve_color(cfg.node_font_color)}"];'
        )
        lines.append(f'    edge [fontname="{cfg.font}"];')
        lines.append("")

        for node in graph.get_all_nodes():
            lines.append(self._node_line(node))

        for edge in graph.get_all_edges():
            lines.append(self._edge_line(edge))

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _node_line(self, node: Node) -> str:
        attrs = f"label={escape_label(self._node_label(node))}"
        if node.node_id in self._highlighted:
            attrs += f' fillcolor="{self._config.resolve_color(self._config.highlight_color)}"'
        return f"    {node_name(node.node_id)} [{attrs}];"

    def _node_label(self, node: Node) -> str:
        if not self._config.debug_labels:
            return node.label
        text = f"{node_name(node.node_id)}: {node.label}"
        # wrap line by line; explicit newlines in the label survive
        return "\n".join(
            textwrap.fill(part, self._config.wrap_width) if part else part
            for part in text.split("\n")
        )

    def _edge_line(self, edge: Edge) -> str:
        label = edge.label
        if not label and self._config.debug_labels:
            label = f"e{edge.edge_id}"

        attrs = f" [label={escape_label(label)}]" if label else ""
        return f"    {node_name(edge.source_id)} -> {node_name(edge.target_id)}{attrs};"
