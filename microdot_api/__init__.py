"""
microdot API - graph models, errors and exporter contracts.
"""
from .exceptions import (
    GraphError,
    NotFound,
    InvalidEdgeEndpoint,
    DuplicateIdentifier,
    IdentifierExhausted,
    HistoryError,
    NothingToUndo,
    NothingToRedo,
)
from .models.ids import IdAllocator
from .models.node import Node
from .models.edge import Edge
from .models.graph import Graph
from .plugins.base import GraphExporter

__all__ = [
    'GraphError',
    'NotFound',
    'InvalidEdgeEndpoint',
    'DuplicateIdentifier',
    'IdentifierExhausted',
    'HistoryError',
    'NothingToUndo',
    'NothingToRedo',
    'IdAllocator',
    'Node',
    'Edge',
    'Graph',
    'GraphExporter',
]
