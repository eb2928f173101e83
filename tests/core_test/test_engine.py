# tests/core_test/test_engine.py
"""
Tests for EditEngine (microdot/engine.py) — mutation, undo / redo and
identity guarantees across arbitrary edit sequences.
"""
from copy import deepcopy

import pytest

from microdot_api.exceptions import (
    InvalidEdgeEndpoint,
    NotFound,
    NothingToRedo,
    NothingToUndo,
)
from microdot_api.models.edge import Edge
from microdot_api.models.graph import Graph
from microdot_api.models.node import Node
from microdot.edits import DeleteNodeEdit
from microdot.engine import EditEngine
from microdot.services.dot_service import DotExporter


# Each step is valid on a fresh chain_engine graph and also when
# applied in order.
_STEPS = [
    ("add_node", ("dave",)),
    ("rename_node", (0, "alicia")),
    ("add_edge", (2, 0, "mentors")),
    ("add_edge", (0, 0, "")),
    ("relabel_edge", (1, "leads")),
    ("delete_edge", (3,)),
    ("delete_node", (1,)),
    ("delete_node", (2,)),
]


# ═════════════════════════════════════════════════════════════════
#  SCENARIO
# ═════════════════════════════════════════════════════════════════

class TestScenario:

    def test_delete_and_undo_restores_exactly(self, engine):
        assert engine.add_node("a") == 0
        assert engine.add_node("b") == 1
        assert engine.add_edge(0, 1, "knows") == 0

        edit = engine.delete_node(0)
        assert edit.removed_count == 2
        assert engine.graph.get_all_nodes() == [Node(1, "b")]
        assert engine.graph.get_all_edges() == []

        engine.undo()
        assert engine.graph.get_node(0) == Node(0, "a")
        assert engine.graph.get_edge(0) == Edge(0, 0, 1, "knows")

        dot = DotExporter().export(engine.graph)
        assert 'n0 [label="n0: a"];' in dot
        assert 'n1 [label="n1: b"];' in dot
        assert 'n0 -> n1 [label="knows"];' in dot


# ═════════════════════════════════════════════════════════════════
#  UNDO / REDO PROPERTIES
# ═════════════════════════════════════════════════════════════════

class TestUndoRedo:

    @pytest.mark.parametrize("method,args", _STEPS)
    def test_undo_restores_previous_state(self, chain_engine, method, args):
        before = deepcopy(chain_engine.graph)
        getattr(chain_engine, method)(*args)
        assert chain_engine.graph != before
        chain_engine.undo()
        assert chain_engine.graph == before

    @pytest.mark.parametrize("method,args", _STEPS)
    def test_redo_restores_state_before_undo(self, chain_engine, method, args):
        getattr(chain_engine, method)(*args)
        after = deepcopy(chain_engine.graph)
        chain_engine.undo()
        chain_engine.redo()
        assert chain_engine.graph == after

    def test_full_rewind_and_replay(self, chain_engine):
        states = [deepcopy(chain_engine.graph)]
        for method, args in _STEPS:
            getattr(chain_engine, method)(*args)
            states.append(deepcopy(chain_engine.graph))

        for expected in reversed(states[:-1]):
            chain_engine.undo()
            assert chain_engine.graph == expected

        for expected in states[1:len(_STEPS) + 1]:
            chain_engine.redo()
            assert chain_engine.graph == expected

    def test_new_edit_discards_redo(self, engine):
        engine.add_node("a")
        engine.undo()
        engine.add_node("x")
        with pytest.raises(NothingToRedo):
            engine.redo()

    def test_undo_on_empty_history(self, engine):
        with pytest.raises(NothingToUndo):
            engine.undo()
        assert not engine.can_undo()

    def test_depth_counters(self, chain_engine):
        assert chain_engine.undo_depth == 7
        chain_engine.undo()
        assert chain_engine.undo_depth == 6
        assert chain_engine.redo_depth == 1
        assert chain_engine.can_redo()

    def test_max_history_depth(self):
        engine = EditEngine(max_history_depth=1)
        engine.add_node("a")
        engine.add_node("b")
        engine.undo()
        with pytest.raises(NothingToUndo):
            engine.undo()


# ═════════════════════════════════════════════════════════════════
#  CASCADING DELETE
# ═════════════════════════════════════════════════════════════════

class TestCascadingDelete:

    def test_one_history_entry(self, chain_engine):
        depth = chain_engine.undo_depth
        edit = chain_engine.delete_node(1)
        assert isinstance(edit, DeleteNodeEdit)
        assert edit.removed_count == 4    # bob + 3 incident edges
        assert chain_engine.undo_depth == depth + 1

    def test_single_undo_restores_all_ids(self, chain_engine):
        before = deepcopy(chain_engine.graph)
        chain_engine.delete_node(1)
        chain_engine.undo()
        assert chain_engine.graph == before
        assert {e.edge_id for e in chain_engine.graph.get_incident_edges(1)} == {0, 1, 2}

    def test_single_redo_removes_all_again(self, chain_engine):
        chain_engine.delete_node(1)
        after = deepcopy(chain_engine.graph)
        chain_engine.undo()
        chain_engine.redo()
        assert chain_engine.graph == after
        assert chain_engine.graph.get_number_of_edges() == 1


# ═════════════════════════════════════════════════════════════════
#  IDENTITY
# ═════════════════════════════════════════════════════════════════

class TestIdentity:

    def test_ids_never_reissued_across_undo_redo(self, engine):
        a = engine.add_node("A")
        engine.delete_node(a)
        engine.undo()
        engine.redo()
        b = engine.add_node("B")
        assert b != a

    def test_undone_add_does_not_free_id(self, engine):
        a = engine.add_node("A")
        engine.undo()
        assert engine.add_node("B") != a

    def test_redo_of_add_keeps_original_id(self, engine):
        a = engine.add_node("A")
        engine.undo()
        engine.redo()
        assert engine.graph.get_node(a) == Node(a, "A")

    def test_undone_edge_id_not_reused(self, chain_engine):
        e = chain_engine.add_edge(0, 2, "x")
        chain_engine.undo()
        assert chain_engine.add_edge(0, 2, "y") == e + 1


# ═════════════════════════════════════════════════════════════════
#  REJECTED COMMANDS
# ═════════════════════════════════════════════════════════════════

class TestRejected:

    def _state(self, engine: EditEngine):
        g = engine.graph
        return (
            deepcopy(g),
            g.node_ids.next_value,
            g.edge_ids.next_value,
            engine.undo_depth,
            engine.redo_depth,
        )

    def test_missing_endpoint_changes_nothing(self, chain_engine):
        chain_engine.undo()  # leave something redoable
        before = self._state(chain_engine)
        with pytest.raises(InvalidEdgeEndpoint):
            chain_engine.add_edge(0, 42, "ghost")
        assert self._state(chain_engine) == before

    @pytest.mark.parametrize("method,args", [
        ("rename_node", (42, "x")),
        ("delete_node", (42,)),
        ("relabel_edge", (42, "x")),
        ("delete_edge", (42,)),
        ("add_edge", (42, 0)),
    ])
    def test_not_found_changes_nothing(self, chain_engine, method, args):
        before = self._state(chain_engine)
        with pytest.raises(NotFound):
            getattr(chain_engine, method)(*args)
        assert self._state(chain_engine) == before


# ═════════════════════════════════════════════════════════════════
#  MISC
# ═════════════════════════════════════════════════════════════════

class TestMisc:

    def test_from_graph_has_empty_history(self, chain_graph):
        engine = EditEngine.from_graph(chain_graph)
        assert engine.graph is chain_graph
        assert not engine.can_undo()
        assert engine.add_node("new") == 3

    def test_default_engine_starts_empty(self):
        assert EditEngine().graph == Graph()

    def test_find_nodes(self, chain_engine):
        assert [n.label for n in chain_engine.find_nodes("o")] == ["bob", "carol"]
