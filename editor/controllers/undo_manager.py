"""
Wang Terrain Tools - Undo Manager

Manages undo/redo history for map and tileset modifications.
"""
import logging
from contextlib import contextmanager
from typing import Any, Optional, Protocol

from editor.core.constants import MAX_UNDO_LEVELS

logger = logging.getLogger(__name__)


class Document(Protocol):
    """Anything that can snapshot and restore its own editable state."""

    def snapshot(self) -> Any: ...

    def restore(self, snapshot: Any) -> None: ...


class UndoEntry:
    """One undo step: a document and its state before the step."""

    def __init__(self, document: Document, label: str = ""):
        self.document = document
        self.label = label
        self.state = document.snapshot()


class UndoManager:
    """Manages undo/redo stacks for document modifications."""

    def __init__(self, max_undo_levels: int = MAX_UNDO_LEVELS):
        """
        Initialize undo manager.

        Args:
            max_undo_levels: Maximum number of undo levels to keep (default: 50)
        """
        self.undo_stack: list[UndoEntry] = []
        self.redo_stack: list[UndoEntry] = []
        self.max_undo_levels = max_undo_levels

    def push_state(self, document: Document, label: str = "") -> UndoEntry:
        """
        Push current state onto undo stack before making changes.
        Clears redo stack when new action is taken.

        Args:
            document: Document about to be modified
            label: Name of the action, for display
        """
        entry = UndoEntry(document, label)
        self.undo_stack.append(entry)

        # Limit stack size
        if len(self.undo_stack) > self.max_undo_levels:
            self.undo_stack.pop(0)

        # Clear redo stack on new action
        self.redo_stack.clear()
        return entry

    @contextmanager
    def transaction(self, document: Document, label: str = ""):
        """
        Run a block of modifications as one undo step.

        If the block raises, the document is restored to its state before
        the block and no undo step is recorded.
        """
        entry = self.push_state(document, label)
        try:
            yield entry
        except Exception:
            document.restore(entry.state)
            if self.undo_stack and self.undo_stack[-1] is entry:
                self.undo_stack.pop()
            logger.warning("Rolled back %r after an error", label or "edit")
            raise

    def can_undo(self) -> bool:
        """Check if undo is available."""
        return len(self.undo_stack) > 0

    def can_redo(self) -> bool:
        """Check if redo is available."""
        return len(self.redo_stack) > 0

    def undo(self) -> Optional[str]:
        """
        Undo last action.

        Returns:
            Label of the undone action, or None if no undo available
        """
        if not self.can_undo():
            return None

        entry = self.undo_stack.pop()
        # Save current state to redo stack
        self.redo_stack.append(UndoEntry(entry.document, entry.label))
        entry.document.restore(entry.state)
        return entry.label

    def redo(self) -> Optional[str]:
        """
        Redo last undone action.

        Returns:
            Label of the redone action, or None if no redo available
        """
        if not self.can_redo():
            return None

        entry = self.redo_stack.pop()
        # Save current state to undo stack
        self.undo_stack.append(UndoEntry(entry.document, entry.label))
        entry.document.restore(entry.state)
        return entry.label

    def clear(self):
        """Clear all undo/redo history."""
        self.undo_stack.clear()
        self.redo_stack.clear()
