"""
Services — snapshot persistence, DOT export and Graphviz rendering.
"""
from .exceptions import SnapshotError, RenderError
from .snapshot_service import GraphSerializer
from .dot_service import DotExporter
from .render_service import GraphvizRenderer, RenderResult

__all__ = [
    'SnapshotError',
    'RenderError',
    'GraphSerializer',
    'DotExporter',
    'GraphvizRenderer',
    'RenderResult',
]
