"""
    Abstract base class for graph exporters.
    Defines the "Contract" that every text exporter must follow.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ..models.graph import Graph

logger = logging.getLogger(__name__)


class GraphExporter(ABC):
    """
        Abstract base class for exporters that turn a graph into text.
        Pattern: Strategy (for export format).
    """

    @abstractmethod
    def export(self, graph: Graph) -> str:
        """
        Main method: Converts a graph into its textual representation.

        Args:
            graph: Graph data model.

        Returns:
            str: The exported document.
        """
        pass

    def save(self, graph: Graph, path: Union[str, Path]) -> Path:
        """Write ``export(graph)`` to ``path``, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.export(graph), encoding="utf-8")
        logger.info("%s written to %s", type(self).__name__, path)
        return path
