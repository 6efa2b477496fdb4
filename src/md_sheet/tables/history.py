"""Undo/redo history of table-list snapshots for an editing session."""

from md_sheet.tables.schema import MarkdownTable


def _snapshot(tables: list[MarkdownTable]) -> list[MarkdownTable]:
    return [table.model_copy(deep=True) for table in tables]


class EditHistory:
    """Current tables plus undo and redo stacks of earlier/later versions.

    Typical use with the editing functions::

        history = EditHistory(doc.tables)
        history.push(add_row(history.state, 0, 0))
        history.undo()
    """

    def __init__(self, initial: list[MarkdownTable]):
        self._state = _snapshot(initial)
        self._undo: list[list[MarkdownTable]] = []
        self._redo: list[list[MarkdownTable]] = []

    @property
    def state(self) -> list[MarkdownTable]:
        """The current tables."""
        return self._state

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def push(self, tables: list[MarkdownTable]) -> None:
        """Make *tables* the current state; the previous one becomes undoable and redo is cleared."""
        self._undo.append(self._state)
        self._redo.clear()
        self._state = _snapshot(tables)

    def undo(self) -> None:
        """Step back one edit (no-op when there is nothing to undo)."""
        if not self._undo:
            return
        self._redo.append(self._state)
        self._state = self._undo.pop()

    def redo(self) -> None:
        """Re-apply the last undone edit (no-op when there is nothing to redo)."""
        if not self._redo:
            return
        self._undo.append(self._state)
        self._state = self._redo.pop()

    def reset(self, tables: list[MarkdownTable]) -> None:
        """Replace the state and forget all history, e.g. after loading another file."""
        self._undo.clear()
        self._redo.clear()
        self._state = _snapshot(tables)
