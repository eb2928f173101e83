"""
    Platform configuration — file locations, serialization and DOT styling.

    Provides typed configuration objects that control where the graph is
    saved, how the snapshot is written and how the DOT export looks.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


DEFAULT_SNAPSHOT_NAME = "microdot_graph.json"

# Named palette used for DOT styling.
COLORS: Dict[str, str] = {
    "julep": "#73DBE6",
    "pacifica": "#2BBDCB",
    "lemonade": "#FFDD99",
    "bright_sun": "#FFBB16",
    "athens": "#F8F8FA",
    "linkwater": "#E6EBF8",
    "ghost": "#DFE2EB",
    "comet": "#485478",
    "martinique": "#242D48",
    "iris": "#C882D9",
    "orchid": "#B25DC6",
    "empire": "#821499",
    "rain": "#A136B4",
}


def default_snapshot_path() -> Path:
    return Path.home() / DEFAULT_SNAPSHOT_NAME


@dataclass
class SerializationConfig:
    """
    Controls the JSON snapshot layout.

    Attributes:
        indent:     Indentation passed to ``json.dumps`` (``None`` = compact).
        sort_keys:  Whether object keys are sorted in the output.
    """
    indent: Optional[int] = 2
    sort_keys: bool = False


@dataclass
class DotConfig:
    """
    Controls the Graphviz DOT export.

    Attributes:
        graph_name:       Name of the emitted ``digraph``.
        font:             Font for graph, nodes and edges.
        left_right:       ``rankdir=LR`` when true, ``TB`` otherwise.
        rank_sep:         ``ranksep`` graph attribute.
        node_sep:         ``nodesep`` graph attribute.
        node_color:       Palette name (see ``COLORS``) or hex color for node fill.
        node_font_color:  Palette name or hex color for node text.
        debug_labels:     Prefix node labels with their id and show edge ids
                          on unlabeled edges.
        wrap_width:       Column at which debug node labels are word-wrapped.
        highlight_color:  Fill for nodes matched by the last search.
    """
    graph_name: str = "microdot"
    font: str = "helvetica"
    left_right: bool = True
    rank_sep: float = 0.8
    node_sep: float = 0.4
    node_color: str = "lemonade"
    node_font_color: str = "martinique"
    debug_labels: bool = True
    wrap_width: int = 40
    highlight_color: str = "bright_sun"

    @staticmethod
    def resolve_color(name: str) -> str:
        """Map a palette name to its hex value; pass anything else through."""
        return COLORS.get(name, name)


@dataclass
class PlatformConfig:
    """
    Top-level configuration.

    Attributes:
        snapshot_path:      JSON snapshot location.
        dot_path:           DOT export location.
        svg_path:           Rendered diagram location.
        serialization:      Snapshot layout.
        dot:                DOT styling.
        render_svg:         Run Graphviz after each graph change.
        auto_save:          Save snapshot and DOT after each graph change.
        max_history_depth:  How many edits can be undone (``None`` = unlimited).
        dot_binary:         Graphviz executable.
    """
    snapshot_path: Path = field(default_factory=default_snapshot_path)
    dot_path: Optional[Path] = None
    svg_path: Optional[Path] = None
    serialization: SerializationConfig = field(default_factory=SerializationConfig)
    dot: DotConfig = field(default_factory=DotConfig)
    render_svg: bool = True
    auto_save: bool = True
    max_history_depth: Optional[int] = None
    dot_binary: str = "dot"

    def __post_init__(self):
        self.snapshot_path = Path(self.snapshot_path).expanduser()
        if self.dot_path is None:
            self.dot_path = self.snapshot_path.with_suffix(".dot")
        if self.svg_path is None:
            self.svg_path = self.snapshot_path.with_suffix(".svg")

    @classmethod
    def for_snapshot(cls, snapshot_path, **kwargs) -> 'PlatformConfig':
        """Config whose DOT and SVG files sit next to ``snapshot_path``."""
        return cls(snapshot_path=Path(snapshot_path), **kwargs)
