# tests/conftest.py
"""
Shared test fixtures.

Stub graph ("chain"):

    n0 alice --e0 knows--> n1 bob --e1 manages--> n2 carol
      ^                      |
      └───── e2 reports ─────┘        plus a self-loop e3 on n2
"""
import pytest

from microdot_api.models.graph import Graph
from microdot.config import PlatformConfig
from microdot.engine import EditEngine


def _build_engine() -> EditEngine:
    engine = EditEngine()
    a = engine.add_node("alice")
    b = engine.add_node("bob")
    c = engine.add_node("carol")
    engine.add_edge(a, b, "knows")
    engine.add_edge(b, c, "manages")
    engine.add_edge(b, a, "reports")
    engine.add_edge(c, c, "self")
    return engine


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def empty_graph() -> Graph:
    return Graph()


@pytest.fixture
def chain_graph() -> Graph:
    """The stub graph, built straight on the store (no history)."""
    g = Graph()
    a = g.add_node("alice")
    b = g.add_node("bob")
    c = g.add_node("carol")
    g.add_edge(a, b, "knows")
    g.add_edge(b, c, "manages")
    g.add_edge(b, a, "reports")
    g.add_edge(c, c, "self")
    return g


@pytest.fixture
def engine() -> EditEngine:
    return EditEngine()


@pytest.fixture
def chain_engine() -> EditEngine:
    """The stub graph built through the engine (7 history entries)."""
    return _build_engine()


@pytest.fixture
def platform_config(tmp_path) -> PlatformConfig:
    """Config writing into a temporary directory, rendering disabled."""
    return PlatformConfig.for_snapshot(tmp_path / "graph.json", render_svg=False)
