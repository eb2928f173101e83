"""
CLI package — Command-Line Interface for building graphs.

Design Patterns
───────────────
• Command       – each CLI operation is a ``Command`` object with an
                  ``execute(engine)`` method.
• Interpreter   – parsing the CLI syntax into structured command objects.
"""
from .command_processor import CommandProcessor
from .repl import run_repl
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

__all__ = [
    'CommandProcessor',
    'run_repl',
    'Command',
    'CommandResult',
    'AddNodeCommand',
    'RenameNodeCommand',
    'DeleteNodeCommand',
    'AddEdgeCommand',
    'RelabelEdgeCommand',
    'DeleteEdgeCommand',
    'UndoCommand',
    'RedoCommand',
    'SearchCommand',
    'InfoCommand',
    'ListCommand',
    'PrintCommand',
    'SaveCommand',
    'ExportCommand',
    'ExitCommand',
    'HelpCommand',
]
