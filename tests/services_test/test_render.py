# tests/services_test/test_render.py
"""
Tests for GraphvizRenderer (microdot/services/render_service.py).
The ``dot`` binary is replaced by a fake ``subprocess.run``.
"""
import subprocess
from pathlib import Path

import pytest

from microdot.services import render_service
from microdot.services.exceptions import RenderError
from microdot.services.render_service import GraphvizRenderer

SVG = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!-- Generated by graphviz -->
<svg xmlns="http://www.w3.org/2000/svg" width="100pt" height="100pt">
<g id="graph0" class="graph"><title>microdot</title>
<g id="node1" class="node"><title>n0</title></g>
<g id="node2" class="node"><title>n1</title></g>
<g id="edge1" class="edge"><title>n0&#45;&gt;n1</title></g>
</g>
</svg>
"""


class FakeDot:
    """Stands in for ``subprocess.run`` and records every call."""

    def __init__(self, version_output="dot - graphviz version 2.49.1 (20210923.0004)\n",
                 returncode=0, svg=SVG, missing=False):
        self.calls = []
        self._version_output = version_output
        self._returncode = returncode
        self._svg = svg
        self._missing = missing

    def __call__(self, args, **kwargs):
        self.calls.append(args)
        if self._missing:
            raise FileNotFoundError(args[0])
        if args[1] == "-V":
            return subprocess.CompletedProcess(args, 0, "", self._version_output)
        if self._returncode == 0:
            Path(args[args.index("-o") + 1]).write_text(self._svg, encoding="utf-8")
        return subprocess.CompletedProcess(args, self._returncode, "", "syntax error in line 1")


@pytest.fixture
def dot_file(tmp_path) -> Path:
    path = tmp_path / "graph.dot"
    path.write_text("digraph microdot {}\n", encoding="utf-8")
    return path


class TestInstalledVersion:

    def test_parses_version(self, monkeypatch):
        monkeypatch.setattr(render_service.subprocess, "run", FakeDot())
        assert GraphvizRenderer().installed_version() == "2.49.1"

    def test_missing_binary(self, monkeypatch):
        monkeypatch.setattr(render_service.subprocess, "run", FakeDot(missing=True))
        assert GraphvizRenderer().installed_version() is None

    def test_unexpected_output(self, monkeypatch):
        monkeypatch.setattr(render_service.subprocess, "run", FakeDot(version_output="hello"))
        assert GraphvizRenderer().installed_version() is None


class TestRender:

    def test_render_svg_counts_groups(self, monkeypatch, dot_file):
        fake = FakeDot()
        monkeypatch.setattr(render_service.subprocess, "run", fake)

        result = GraphvizRenderer().render(dot_file)

        out = dot_file.with_suffix(".svg")
        assert fake.calls[-1] == ["dot", str(dot_file), "-Tsvg", "-o", str(out)]
        assert result.output_path == out
        assert (result.node_count, result.edge_count) == (2, 1)
        assert result.summary().endswith("2 node(s), 1 edge(s)")

    def test_custom_binary_and_output(self, monkeypatch, dot_file, tmp_path):
        fake = FakeDot()
        monkeypatch.setattr(render_service.subprocess, "run", fake)
        out = tmp_path / "diagram.svg"
        GraphvizRenderer("/opt/gv/dot").render(dot_file, out)
        assert fake.calls[0] == ["/opt/gv/dot", "-V"]
        assert fake.calls[-1][-1] == str(out)

    def test_non_svg_format_skips_inspection(self, monkeypatch, dot_file):
        monkeypatch.setattr(render_service.subprocess, "run", FakeDot())
        result = GraphvizRenderer().render(dot_file, fmt="png")
        assert result.output_path.suffix == ".png"
        assert result.node_count is None

    def test_not_installed(self, monkeypatch, dot_file):
        monkeypatch.setattr(render_service.subprocess, "run", FakeDot(missing=True))
        with pytest.raises(RenderError, match="graphviz not installed"):
            GraphvizRenderer().render(dot_file)

    def test_dot_failure(self, monkeypatch, dot_file):
        monkeypatch.setattr(render_service.subprocess, "run", FakeDot(returncode=1))
        with pytest.raises(RenderError, match="syntax error"):
            GraphvizRenderer().render(dot_file)

    def test_unreadable_svg(self, monkeypatch, dot_file):
        monkeypatch.setattr(render_service.subprocess, "run", FakeDot(svg="<svg"))
        with pytest.raises(RenderError, match="Could not read rendered SVG"):
            GraphvizRenderer().render(dot_file)
