"""
    Graphviz rendering — hands a DOT file to the external ``dot`` binary.

    The renderer is optional: when Graphviz is not installed, ``render``
    raises ``RenderError`` and the caller decides whether that matters.
"""
import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from lxml import etree

from .exceptions import RenderError

logger = logging.getLogger(__name__)

# dot - graphviz version 2.49.1 (20210923.0004)
_VERSION_RX = re.compile(r"dot - graphviz version (?P<ver>[0-9.]+)")

SVG_NS = {"svg": "http://www.w3.org/2000/svg"}


@dataclass
class RenderResult:
    """
    Outcome of a render.

    Attributes:
        output_path:  File written by Graphviz.
        fmt:          Output format (``svg``, ``png``, ...).
        node_count:   Node groups found in the SVG (``None`` for other formats).
        edge_count:   Edge groups found in the SVG (``None`` for other formats).
    """
    output_path: Path
    fmt: str
    node_count: Optional[int] = None
    edge_count: Optional[int] = None

    def summary(self) -> str:
        if self.node_count is None:
            return f"Rendered {self.output_path}"
        return (
            f"Rendered {self.output_path}: "
            f"{self.node_count} node(s), {self.edge_count} edge(s)"
        )


class GraphvizRenderer:
    """Runs ``dot -T<fmt>`` on exported DOT files."""

    def __init__(self, dot_binary: str = "dot"):
        self._dot_binary = dot_binary

    def installed_version(self) -> Optional[str]:
        """Graphviz version string, or ``None`` if ``dot`` cannot be run."""
        try:
            proc = subprocess.run(
                [self._dot_binary, "-V"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            return None

        # dot prints its version on stderr
        match = _VERSION_RX.search(proc.stderr or proc.stdout or "")
        return match.group("ver") if match else None

    def render(self, dot_path: Union[str, Path],
               output_path: Union[str, Path, None] = None,
               fmt: str = "svg") -> RenderResult:
        """
        Compile a DOT file.

        Args:
            dot_path:     Input DOT file.
            output_path:  Output file; defaults to ``dot_path`` with the
                          format as extension.
            fmt:          Graphviz output format.

        Raises:
            RenderError: If Graphviz is missing or exits with an error.
        """
        dot_path = Path(dot_path)
        out = Path(output_path) if output_path is not None else dot_path.with_suffix(f".{fmt}")

        if self.installed_version() is None:
            raise RenderError("graphviz not installed")

        try:
            proc = subprocess.run(
                [self._dot_binary, str(dot_path), f"-T{fmt}", "-o", str(out)],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise RenderError(f"Could not run {self._dot_binary}: {e}") from e

        if proc.returncode != 0:
            raise RenderError(
                f"{self._dot_binary} exited with status {proc.returncode}: {proc.stderr.strip()}"
            )

        result = RenderResult(out, fmt)
        if fmt == "svg":
            result.node_count, result.edge_count = self.inspect_svg(out)
        logger.info(result.summary())
        return result

    @staticmethod
    def inspect_svg(svg_path: Union[str, Path]):
        """
        Count the node and edge groups Graphviz emitted.

        Returns:
            ``(node_count, edge_count)``
        """
        parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
        try:
            tree = etree.parse(str(svg_path), parser)
        except (OSError, etree.XMLSyntaxError) as e:
            raise RenderError(f"Could not read rendered SVG {svg_path}: {e}") from e

        root = tree.getroot()
        nodes = root.xpath("//svg:g[@class='node']", namespaces=SVG_NS)
        edges = root.xpath("//svg:g[@class='edge']", namespaces=SVG_NS)
        return len(nodes), len(edges)
