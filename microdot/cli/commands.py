"""
    CLI Commands — concrete command implementations.

    Design Pattern: Command
    ───────────────────────
    Each command is a parsed user request with an
        • ``execute(engine) → CommandResult``

    Graph-changing commands go through ``EditEngine``, which records the
    invertible edit; undo and redo are ordinary commands calling the engine.
    Commands that need file access (save, export) or end the session (exit)
    are handled by ``CommandProcessor`` itself.

    Supported commands:
    ───────────────────
        add     node <label>
        rename  node <id> <label>
        delete  node <id>
        add     edge <source_id> <target_id> [<label>]
        relabel edge <id> <label>
        delete  edge <id>
        undo
        redo
        search  <text>
        list    [nodes|edges]
        info    [node|edge <id>]
        dot
        json
        save
        export
        help
        exit
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from microdot_api.plugins.base import GraphExporter

from ..engine import EditEngine


# ── Result wrapper ───────────────────────────────────────────────

@dataclass
class CommandResult:
    """
    Value object returned by every command execution.

    Attributes:
        success:  Whether the command completed without error.
        message:  Human-readable output.
        data:     Structured data for programmatic consumers.
                  ``dirty`` is set when the graph changed, ``redraw``
                  when only the diagram needs refreshing.
    """
    success: bool
    message: str
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def dirty(self) -> bool:
        return bool(self.data.get("dirty"))

    @property
    def redraw(self) -> bool:
        return self.dirty or bool(self.data.get("redraw"))


def _changed(message: str, **data) -> CommandResult:
    data["dirty"] = True
    return CommandResult(True, message, data)


# ── Abstract base ────────────────────────────────────────────────

class Command(ABC):
    """
    Abstract base for all CLI commands.

    Design Pattern: Command
    """

    @abstractmethod
    def execute(self, engine: EditEngine) -> CommandResult:
        """Execute the command against the engine."""
        ...


# ═════════════════════════════════════════════════════════════════
#  NODE COMMANDS
# ═════════════════════════════════════════════════════════════════

class AddNodeCommand(Command):
    """
    Add a node; the id is allocated by the graph.

    Syntax:
        add node Alice Smith
    """

    def __init__(self, label: str):
        self._label = label

    def execute(self, engine: EditEngine) -> CommandResult:
        node_id = engine.add_node(self._label)
        return _changed(f"Inserted node n{node_id}: '{self._label}'.", node_id=node_id)


class RenameNodeCommand(Command):
    """
    Syntax:
        rename node <id> <new label>
    """

    def __init__(self, node_id: int, label: str):
        self._node_id = node_id
        self._label = label

    def execute(self, engine: EditEngine) -> CommandResult:
        old = engine.rename_node(self._node_id, self._label)
        return _changed(f"Node n{self._node_id} renamed from '{old}' to '{self._label}'.")


class DeleteNodeCommand(Command):
    """
    Delete a node and every edge touching it.

    Syntax:
        delete node <id>
    """

    def __init__(self, node_id: int):
        self._node_id = node_id

    def execute(self, engine: EditEngine) -> CommandResult:
        edit = engine.delete_node(self._node_id)
        edge_ids = [e.edge_id for e in edit.edges]
        msg = f"Node n{self._node_id} removed"
        if edge_ids:
            msg += f" with {len(edge_ids)} edge(s): {', '.join(f'e{i}' for i in edge_ids)}"
        return _changed(msg + ".", removed_edges=edge_ids)


# ═════════════════════════════════════════════════════════════════
#  EDGE COMMANDS
# ═════════════════════════════════════════════════════════════════

class AddEdgeCommand(Command):
    """
    Link two existing nodes.

    Syntax:
        add edge <source_id> <target_id> [label]
    """

    def __init__(self, source_id: int, target_id: int, label: str = ""):
        self._source_id = source_id
        self._target_id = target_id
        self._label = label

    def execute(self, engine: EditEngine) -> CommandResult:
        edge_id = engine.add_edge(self._source_id, self._target_id, self._label)
        return _changed(
            f"Added edge e{edge_id} from n{self._source_id} to n{self._target_id}.",
            edge_id=edge_id,
        )


class RelabelEdgeCommand(Command):
    """
    Syntax:
        relabel edge <id> <new label>
    """

    def __init__(self, edge_id: int, label: str):
        self._edge_id = edge_id
        self._label = label

    def execute(self, engine: EditEngine) -> CommandResult:
        old = engine.relabel_edge(self._edge_id, self._label)
        return _changed(f"Edge e{self._edge_id} relabelled from '{old}' to '{self._label}'.")


class DeleteEdgeCommand(Command):
    """
    Syntax:
        delete edge <id>
    """

    def __init__(self, edge_id: int):
        self._edge_id = edge_id

    def execute(self, engine: EditEngine) -> CommandResult:
        engine.delete_edge(self._edge_id)
        return _changed(f"Edge e{self._edge_id} removed.")


# ═════════════════════════════════════════════════════════════════
#  HISTORY COMMANDS
# ═════════════════════════════════════════════════════════════════

class UndoCommand(Command):
    """
    Syntax:
        undo
    """

    def execute(self, engine: EditEngine) -> CommandResult:
        edit = engine.undo()
        return _changed(f"Undo: {edit.describe()} (undo depth: {engine.undo_depth}).")


class RedoCommand(Command):
    """
    Syntax:
        redo
    """

    def execute(self, engine: EditEngine) -> CommandResult:
        edit = engine.redo()
        return _changed(f"Redo: {edit.describe()} (redo depth: {engine.redo_depth}).")


# ═════════════════════════════════════════════════════════════════
#  INFORMATIONAL COMMANDS (no graph mutation)
# ═════════════════════════════════════════════════════════════════

class SearchCommand(Command):
    """
    Find nodes whose label contains the text (case-insensitive).
    The processor highlights the matches in the next diagram.

    Syntax:
        search <text>
    """

    def __init__(self, query: str):
        self._query = query

    def execute(self, engine: EditEngine) -> CommandResult:
        matches = engine.find_nodes(self._query)
        data = {"matches": [n.node_id for n in matches], "redraw": True}
        if not matches:
            return CommandResult(True, f"No nodes match '{self._query}'.", data)
        lines = [f"{len(matches)} node(s) match '{self._query}':"]
        lines += [f"  [n{n.node_id}] {n.label}" for n in matches]
        return CommandResult(True, "\n".join(lines), data)


class InfoCommand(Command):
    """
    Display details about a node or edge.

    Syntax:
        info node <id>
        info edge <id>
        info   (shows graph summary)
    """

    def __init__(self, target_type: Optional[str] = None,
                 target_id: Optional[int] = None):
        self._target_type = target_type      # "node", "edge", or None
        self._target_id = target_id

    def execute(self, engine: EditEngine) -> CommandResult:
        graph = engine.graph

        if self._target_type is None:
            msg = (
                f"Graph: {graph.get_number_of_nodes()} node(s), "
                f"{graph.get_number_of_edges()} edge(s); "
                f"undo depth {engine.undo_depth}, redo depth {engine.redo_depth}; "
                f"next ids n{graph.node_ids.next_value} / e{graph.edge_ids.next_value}"
            )
            return CommandResult(True, msg)

        if self._target_type == "node":
            node = graph.get_node(self._target_id)
            if node is None:
                return CommandResult(False, f"Node {self._target_id} not found.")
            lines = [f"Node n{node.node_id}: '{node.label}'"]
            for edge in graph.get_incident_edges(node.node_id):
                lines.append(f"  [e{edge.edge_id}] n{edge.source_id} -> n{edge.target_id} '{edge.label}'")
            return CommandResult(True, "\n".join(lines))

        if self._target_type == "edge":
            edge = graph.get_edge(self._target_id)
            if edge is None:
                return CommandResult(False, f"Edge {self._target_id} not found.")
            return CommandResult(
                True,
                f"Edge e{edge.edge_id}: n{edge.source_id} -> n{edge.target_id} '{edge.label}'",
            )

        return CommandResult(False, f"Unknown target type: '{self._target_type}'.")


class ListCommand(Command):
    """
    List all nodes or edges in the graph.

    Syntax:
        list nodes
        list edges
        list   (lists both)
    """

    def __init__(self, target: Optional[str] = None):
        self._target = target  # "nodes", "edges", or None

    def execute(self, engine: EditEngine) -> CommandResult:
        graph = engine.graph
        lines: List[str] = []

        if self._target in (None, "nodes"):
            lines.append(f"── Nodes ({graph.get_number_of_nodes()}) ──")
            for node in graph.get_all_nodes():
                lines.append(f"  [n{node.node_id}] {node.label}")

        if self._target in (None, "edges"):
            lines.append(f"── Edges ({graph.get_number_of_edges()}) ──")
            for edge in graph.get_all_edges():
                line = f"  [e{edge.edge_id}] n{edge.source_id} -> n{edge.target_id}"
                if edge.label:
                    line += f"  ({edge.label})"
                lines.append(line)

        return CommandResult(True, "\n".join(lines))


class PrintCommand(Command):
    """
    Print the graph through one of the processor's exporters.

    Syntax:
        dot    (DOT definition)
        json   (JSON snapshot)
    """

    def __init__(self, exporter: GraphExporter):
        self._exporter = exporter

    def execute(self, engine: EditEngine) -> CommandResult:
        return CommandResult(True, self._exporter.export(engine.graph).rstrip("\n"))


# ═════════════════════════════════════════════════════════════════
#  SESSION COMMANDS (handled by CommandProcessor)
# ═════════════════════════════════════════════════════════════════

class SaveCommand(Command):
    """
    Write the snapshot and DOT file now.  Handled by ``CommandProcessor``.

    Syntax:
        save
    """

    def execute(self, engine: EditEngine) -> CommandResult:
        return CommandResult(True, "Save delegated to processor.")


class ExportCommand(Command):
    """
    Write the snapshot and DOT file and render the diagram.
    Handled by ``CommandProcessor``.

    Syntax:
        export
    """

    def execute(self, engine: EditEngine) -> CommandResult:
        return CommandResult(True, "Export delegated to processor.")


class ExitCommand(Command):
    """
    Syntax:
        exit
        quit
    """

    def execute(self, engine: EditEngine) -> CommandResult:
        return CommandResult(True, "Bye.", {"action": "exit"})


class HelpCommand(Command):
    """
    Display available CLI commands.

    Syntax:
        help
    """

    def execute(self, engine: EditEngine) -> CommandResult:
        help_text = """
Available commands:
───────────────────────────────────────────────────────
  add node <label>
      Insert a node. Its id (n0, n1, ...) is assigned automatically.

  rename node <id> <label>
      Change a node's label.

  delete node <id>
      Delete a node together with every edge touching it.

  add edge <source_id> <target_id> [<label>]
      Link two existing nodes.

  relabel edge <id> <label>
      Change an edge's label.

  delete edge <id>
      Delete an edge.

  undo / redo
      Step backwards / forwards through the edit history.

  search <text>
      List nodes whose label contains the text and highlight them
      in the diagram.

  list [nodes|edges]
      List all nodes, edges, or both.

  info [node|edge <id>]
      Show details about a node, edge, or the whole graph.

  dot / json
      Print the DOT definition / JSON snapshot.

  save
      Write the snapshot and DOT file.

  export
      Write the snapshot and DOT file and render the SVG diagram.

  help
      Show this help text.

  exit
      Leave microdot.

Ids may be written with or without their prefix: 3, n3 and e3 are all fine.
───────────────────────────────────────────────────────
""".strip()
        return CommandResult(True, help_text)
