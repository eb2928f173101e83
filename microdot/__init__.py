"""
microdot — build a labeled directed graph one command at a time.

Public API:
    EditEngine      – mutation facade with undo / redo
    History         – undo / redo ledger
    PlatformConfig  – file locations and export settings
"""
from .config import PlatformConfig, SerializationConfig, DotConfig
from .engine import EditEngine
from .history import History
from .edits import (
    GraphEdit,
    AddNodeEdit,
    RenameNodeEdit,
    DeleteNodeEdit,
    AddEdgeEdit,
    RelabelEdgeEdit,
    DeleteEdgeEdit,
)

__all__ = [
    'PlatformConfig',
    'SerializationConfig',
    'DotConfig',
    'EditEngine',
    'History',
    'GraphEdit',
    'AddNodeEdit',
    'RenameNodeEdit',
    'DeleteNodeEdit',
    'AddEdgeEdit',
    'RelabelEdgeEdit',
    'DeleteEdgeEdit',
]
