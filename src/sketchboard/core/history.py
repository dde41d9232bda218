"""Linear undo history over snapshots of the element collection."""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from .models import Element

logger = logging.getLogger(__name__)

Snapshot = Tuple[Element, ...]


class History(QObject):
    """
    Append-only log of element snapshots with a cursor.

    A commit discards every snapshot after the cursor and appends a new one;
    an overwrite replaces the snapshot at the cursor so a whole drag gesture
    ends up as a single entry. Undone states are not kept for redo.

    Emits state_changed whenever the current snapshot changes.
    """

    state_changed = pyqtSignal()

    def __init__(self, max_history: int = 0) -> None:
        """
        Initialize with a single empty snapshot.

        Args:
            max_history: Maximum number of snapshots to keep (0 = unbounded)
        """
        super().__init__()
        self._snapshots: List[Snapshot] = [()]
        self._cursor = 0
        self._max_history = max(0, max_history)

    @property
    def current(self) -> Snapshot:
        """The snapshot at the cursor."""
        return self._snapshots[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._snapshots)

    def commit(self, elements: Iterable[Element]) -> None:
        """
        Append a new snapshot after the cursor.

        Args:
            elements: New element collection
        """
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(tuple(elements))
        self._cursor += 1

        # Limit history size
        if self._max_history:
            while len(self._snapshots) > self._max_history:
                self._snapshots.pop(0)
                self._cursor -= 1

        logger.debug(f"Committed snapshot {self._cursor} ({len(self.current)} elements)")
        self.state_changed.emit()

    def overwrite(self, elements: Iterable[Element]) -> None:
        """
        Replace the snapshot at the cursor in place.

        Args:
            elements: New element collection
        """
        self._snapshots[self._cursor] = tuple(elements)
        self.state_changed.emit()

    def undo(self) -> bool:
        """
        Step the cursor back one snapshot.

        Returns:
            True if the cursor moved, False at the start of history
        """
        if self._cursor == 0:
            return False

        self._cursor -= 1
        logger.debug(f"Undone to snapshot {self._cursor}")
        self.state_changed.emit()
        return True

    def can_undo(self) -> bool:
        """Check if undo is available."""
        return self._cursor > 0
