"""
Single-cell undo for the map editor.

Every edit has the same shape, so an entry is plain data: the cell that was
written and the value it held before.
"""

import logging
from typing import NamedTuple, Optional

from .errors import OutOfBounds

logger = logging.getLogger(__name__)


class UndoEntry(NamedTuple):
    layer: int
    row: int
    col: int
    old_value: int
    new_value: Optional[int] = None


class UndoLedger:
    """Unbounded last-in-first-out stack of cell edits."""

    def __init__(self):
        self._entries: list[UndoEntry] = []

    def record(self, layer: int, row: int, col: int, old_value: int, new_value: Optional[int] = None) -> None:
        self._entries.append(UndoEntry(layer, row, col, old_value, new_value))

    def undo(self, grid) -> bool:
        """
        Restore the most recent edit on ``grid``.

        Returns:
            bool: False when there was nothing to undo
        """
        if not self._entries:
            return False

        entry = self._entries.pop()
        try:
            grid.set(entry.layer, entry.row, entry.col, entry.old_value)
        except OutOfBounds:
            # only reachable if someone reshaped the grid without clearing us
            logger.warning("Dropped stale undo entry %s for %r", entry, grid)
            return False
        logger.debug("Undid %s", entry)
        return True

    def peek(self) -> Optional[UndoEntry]:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __bool__(self):
        return bool(self._entries)
