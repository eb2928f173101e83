"""
    History — the undo / redo ledger of applied edits.

    Two stacks: applied edits (most recent last) and undone edits
    (most recently undone last). Recording a new edit discards the
    undone branch.
"""
import logging
from typing import List, Optional

from microdot_api.exceptions import NothingToRedo, NothingToUndo
from microdot_api.models.graph import Graph

from .edits import GraphEdit

logger = logging.getLogger(__name__)


class History:

    def __init__(self, max_depth: Optional[int] = None):
        """
        Args:
            max_depth: Maximum number of undoable edits kept.
                       ``None`` keeps everything.
        """
        self._undo_stack: List[GraphEdit] = []
        self._redo_stack: List[GraphEdit] = []
        self._max_depth = max_depth

    def record(self, edit: GraphEdit) -> None:
        """Push an already-applied edit and drop the redo branch."""
        self._undo_stack.append(edit)
        self._redo_stack.clear()
        if self._max_depth is not None and len(self._undo_stack) > self._max_depth:
            dropped = self._undo_stack.pop(0)
            logger.debug("History full, dropping oldest edit: %s", dropped.describe())

    def undo(self, graph: Graph) -> GraphEdit:
        """Revert the most recent edit and move it to the redo stack."""
        if not self._undo_stack:
            raise NothingToUndo()

        edit = self._undo_stack[-1]
        edit.revert(graph)
        self._undo_stack.pop()
        self._redo_stack.append(edit)
        return edit

    def redo(self, graph: Graph) -> GraphEdit:
        """Re-apply the most recently undone edit."""
        if not self._redo_stack:
            raise NothingToRedo()

        edit = self._redo_stack[-1]
        edit.apply(graph)
        self._redo_stack.pop()
        self._undo_stack.append(edit)
        return edit

    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()
