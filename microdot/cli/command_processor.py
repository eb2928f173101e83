"""
    CommandProcessor — parses raw CLI strings and dispatches commands.

    Design Patterns
    ───────────────
    • Interpreter   – parses the CLI text into structured ``Command`` objects.
    • Facade        – single ``process(text)`` entry-point hides parsing,
                      error reporting and file output.

    Graph errors raised by the engine are turned into failed
    ``CommandResult`` objects; the graph and history are unchanged in that
    case. Identifier exhaustion is the exception: it propagates.
"""
from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import List, Optional, Tuple

from microdot_api.exceptions import GraphError, IdentifierExhausted
from microdot_api.plugins.base import GraphExporter

from ..config import PlatformConfig
from ..engine import EditEngine
from ..services.dot_service import DotExporter
from ..services.exceptions import RenderError
from ..services.render_service import GraphvizRenderer
from ..services.snapshot_service import GraphSerializer
from .commands import (
    Command,
    CommandResult,
    AddNodeCommand,
    RenameNodeCommand,
    DeleteNodeCommand,
    AddEdgeCommand,
    RelabelEdgeCommand,
    DeleteEdgeCommand,
    UndoCommand,
    RedoCommand,
    SearchCommand,
    InfoCommand,
    ListCommand,
    PrintCommand,
    SaveCommand,
    ExportCommand,
    ExitCommand,
    HelpCommand,
)

logger = logging.getLogger(__name__)


class CommandProcessor:
    """
    Parses raw CLI input, creates ``Command`` objects and executes them
    against an ``EditEngine``.

    Usage:
        processor = CommandProcessor(engine, config)
        result = processor.process("add node Alice")
    """

    def __init__(self, engine: EditEngine, config: Optional[PlatformConfig] = None,
                 renderer: Optional[GraphvizRenderer] = None):
        self._engine = engine
        self._config = config or PlatformConfig()
        self._serializer = GraphSerializer(self._config.serialization)
        self._dot_exporter = DotExporter(self._config.dot)
        self._renderer = renderer or GraphvizRenderer(self._config.dot_binary)

    @property
    def engine(self) -> EditEngine:
        return self._engine

    @property
    def config(self) -> PlatformConfig:
        return self._config

    # ── Public API ───────────────────────────────────────────────

    def process(self, text: str) -> CommandResult:
        """
        Parse and execute a single CLI command.

        Returns:
            ``CommandResult`` with success status and message.
        """
        text = self._strip_comments(text).strip()
        if not text:
            return CommandResult(False, "Empty command. Type 'help' for usage.")

        try:
            command = self._parse(text)
        except ValueError as e:
            return CommandResult(False, f"Parse error: {e}")

        return self._execute(command)

    def save(self, render: bool = False) -> CommandResult:
        """
        Write the snapshot and DOT file, and optionally render the diagram.
        A render failure is reported but the files stay written.
        """
        graph = self._engine.graph
        try:
            for exporter, path in self._outputs():
                exporter.save(graph, path)
        except OSError as e:
            logger.error("Could not save graph: %s", e)
            return CommandResult(False, f"Could not save graph: {e}")

        message = f"Saved to {self._config.snapshot_path}"
        if not render:
            return CommandResult(True, message)

        try:
            rendered = self._renderer.render(self._config.dot_path, self._config.svg_path)
        except RenderError as e:
            logger.warning("Render failed: %s", e)
            return CommandResult(False, f"{message}; render failed: {e}")

        return CommandResult(
            True,
            f"{message}; {rendered.summary()}",
            {"svg_path": str(rendered.output_path)},
        )

    def _outputs(self) -> List[Tuple[GraphExporter, Path]]:
        return [
            (self._serializer, self._config.snapshot_path),
            (self._dot_exporter, self._config.dot_path),
        ]

    # ── Execution engine ─────────────────────────────────────────

    def _execute(self, command: Command) -> CommandResult:
        # --- Special: file output needs the services ---
        if isinstance(command, SaveCommand):
            return self.save(render=False)
        if isinstance(command, ExportCommand):
            return self.save(render=True)

        try:
            result = command.execute(self._engine)
        except IdentifierExhausted:
            raise
        except GraphError as e:
            return CommandResult(False, str(e))

        if isinstance(command, SearchCommand):
            self._dot_exporter.highlighted = result.data["matches"]
        return result

    # ── Comment handling ────────────────────────────────────────

    @staticmethod
    def _strip_comments(text: str) -> str:
        """
        Strip inline comments — everything after an unquoted ``#``.
        A single quote only opens a quoted span at the start of a word,
        so apostrophes inside labels ("Bob's") are plain characters.

        Example:
            >>> CommandProcessor._strip_comments(
            ...     "add edge 1 2 knows   # a comment")
            'add edge 1 2 knows'
        """
        in_single = False
        in_double = False
        for i, ch in enumerate(text):
            if ch == "'" and not in_double:
                if in_single or i == 0 or text[i - 1].isspace():
                    in_single = not in_single
            elif ch == '"' and not in_single:
                in_double = not in_double
            elif ch == '#' and not in_single and not in_double:
                return text[:i].rstrip()
        return text

    # ── Parser ───────────────────────────────────────────────────

    def _parse(self, text: str) -> Command:
        """
        Parse raw CLI text into a ``Command`` object.

        Raises:
            ValueError: If the text cannot be parsed.
        """
        # Normalize and tokenize using shlex for proper quote handling
        try:
            tokens = shlex.split(text)
        except ValueError:
            # Fallback: simple split if quotes are malformed
            tokens = text.split()

        if not tokens:
            raise ValueError("Empty command.")

        verb = tokens[0].lower()
        args = tokens[1:]

        # ── Single-word commands ──
        if verb == "help":
            return HelpCommand()
        if verb == "undo":
            return UndoCommand()
        if verb == "redo":
            return RedoCommand()
        if verb == "save":
            return SaveCommand()
        if verb == "export":
            return ExportCommand()
        if verb == "dot":
            return PrintCommand(self._dot_exporter)
        if verb == "json":
            return PrintCommand(self._serializer)
        if verb in ("exit", "quit"):
            return ExitCommand()

        # ── search ──
        if verb == "search":
            query = self._join_label(args)
            if not query:
                raise ValueError("Usage: search <text>")
            return SearchCommand(query)

        # ── list ──
        if verb == "list":
            target = args[0].lower() if args else None
            if target not in (None, "nodes", "edges"):
                raise ValueError(f"Unknown list target: '{target}'. Use 'nodes' or 'edges'.")
            return ListCommand(target)

        # ── info ──
        if verb == "info":
            if not args:
                return InfoCommand()
            target_type = args[0].lower()
            if target_type not in ("node", "edge"):
                raise ValueError("Usage: info [node|edge] <id>")
            if len(args) < 2:
                raise ValueError(f"Usage: info {target_type} <id>")
            return InfoCommand(target_type, self._parse_id(args[1], target_type))

        # ── add / rename / relabel / delete ──
        if verb in ("add", "rename", "relabel", "delete"):
            if not args:
                raise ValueError(f"Usage: {verb} <node|edge> ...")
            entity = args[0].lower()
            remaining = args[1:]

            if verb == "add" and entity == "node":
                return AddNodeCommand(self._join_label(remaining))
            if verb == "add" and entity == "edge":
                return self._parse_add_edge(remaining)
            if verb == "rename" and entity == "node":
                node_id, label = self._parse_id_and_label(remaining, "node", verb)
                return RenameNodeCommand(node_id, label)
            if verb == "relabel" and entity == "edge":
                edge_id, label = self._parse_id_and_label(remaining, "edge", verb)
                return RelabelEdgeCommand(edge_id, label)
            if verb == "delete" and entity == "node":
                return DeleteNodeCommand(self._parse_single_id(remaining, "node"))
            if verb == "delete" and entity == "edge":
                return DeleteEdgeCommand(self._parse_single_id(remaining, "edge"))

            raise ValueError(f"Cannot {verb} '{entity}'. Type 'help' for usage.")

        raise ValueError(f"Unknown command: '{verb}'. Type 'help' for usage.")

    # ── Token parsers ────────────────────────────────────────────

    @staticmethod
    def _parse_id(token: str, kind: str) -> int:
        """
        Parse an id token. The display prefix is optional:
        ``3`` and ``n3`` name the same node, ``3`` and ``e3`` the same edge.
        """
        raw = token
        prefix = kind[0]
        if raw[:1].lower() == prefix:
            raw = raw[1:]
        if not raw.isdigit():
            raise ValueError(f"Invalid {kind} id: '{token}'.")
        return int(raw)

    @staticmethod
    def _join_label(tokens: List[str]) -> str:
        return " ".join(tokens).strip()

    def _parse_single_id(self, tokens: List[str], kind: str) -> int:
        if len(tokens) != 1:
            raise ValueError(f"Usage: delete {kind} <id>")
        return self._parse_id(tokens[0], kind)

    def _parse_id_and_label(self, tokens: List[str], kind: str, verb: str):
        if len(tokens) < 2:
            raise ValueError(f"Usage: {verb} {kind} <id> <label>")
        return self._parse_id(tokens[0], kind), self._join_label(tokens[1:])

    def _parse_add_edge(self, tokens: List[str]) -> AddEdgeCommand:
        if len(tokens) < 2:
            raise ValueError("add edge requires <source_id> <target_id> as positional arguments.")
        source_id = self._parse_id(tokens[0], "node")
        target_id = self._parse_id(tokens[1], "node")
        return AddEdgeCommand(source_id, target_id, self._join_label(tokens[2:]))
