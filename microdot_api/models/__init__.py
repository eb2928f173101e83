from .ids import IdAllocator
from .node import Node
from .edge import Edge
from .graph import Graph

__all__ = ['IdAllocator', 'Node', 'Edge', 'Graph']
