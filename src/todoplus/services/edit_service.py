"""Service turning per-todo edits into one atomic batch."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..exceptions import EditConflictError
from ..models import CaretSuggestion, Edit, EditBatch, Position, Selection, TodoPlusConfig
from ..parsing import get_grammar

logger = logging.getLogger(__name__)


class EditService:
    """Service for collecting edits and suggesting caret moves."""

    def __init__(self, config: TodoPlusConfig | None = None) -> None:
        self.config = config or TodoPlusConfig.default()
        self._grammar = get_grammar(self.config)

    def build(
        self,
        edits: Iterable[Edit | Iterable[Edit] | None],
        selections: list[Selection],
        lines: list[str],
    ) -> EditBatch:
        """
        Build a batch from the edits of one command.

        Args:
            edits: Edits, possibly nested one list per todo
            selections: Selections at the time the command ran
            lines: Document text before any edit is applied

        Returns:
            The batch with no-op edits removed and caret suggestions for
            selections parked at the end of an untagged line.

        Raises:
            EditConflictError: If two different edits target the same line
        """
        by_line: dict[int, Edit] = {}
        for edit in self._flatten(edits):
            current = lines[edit.line_number] if edit.line_number < len(lines) else None
            if edit.new_raw_text == current:
                continue
            previous = by_line.get(edit.line_number)
            if previous is not None and previous.new_raw_text != edit.new_raw_text:
                raise EditConflictError(edit.line_number)
            by_line[edit.line_number] = edit

        batch = EditBatch(
            edits=[by_line[n] for n in sorted(by_line)],
            carets=self._suggest_carets(by_line, selections, lines),
        )
        logger.debug("Built batch: %d edits, %d caret moves", len(batch.edits), len(batch.carets))
        return batch

    def _flatten(self, edits: Iterable[Edit | Iterable[Edit] | None]) -> Iterable[Edit]:
        for item in edits:
            if item is None:
                continue
            if isinstance(item, Edit):
                yield item
            else:
                yield from self._flatten(item)

    def _suggest_carets(
        self, by_line: dict[int, Edit], selections: list[Selection], lines: list[str]
    ) -> list[CaretSuggestion]:
        """Put carets sitting at the end of an untagged line before its first new tag."""
        carets: list[CaretSuggestion] = []
        for index, selection in enumerate(selections):
            line_number = selection.start.line
            edit = by_line.get(line_number)
            if edit is None or line_number >= len(lines):
                continue
            before = lines[line_number]
            if self._grammar.tag.search(before) is not None:
                continue
            if selection.start.character != len(before):
                continue
            first_tag = self._grammar.tag.search(edit.new_raw_text)
            if first_tag is None:
                continue
            position = Position(line=line_number, character=first_tag.start())
            carets.append(CaretSuggestion(selection_index=index, position=position))
        return carets
