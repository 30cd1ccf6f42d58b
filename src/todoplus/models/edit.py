"""Edit and selection models exchanged with the host editor."""

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """A caret position (0-based line and character)."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=0)
    character: int = Field(default=0, ge=0)


class Selection(BaseModel):
    """A selection between two positions; ``start == end`` is a caret."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @classmethod
    def caret(cls, line: int, character: int = 0) -> "Selection":
        """Create an empty selection at a position."""
        position = Position(line=line, character=character)
        return cls(start=position, end=position)

    @classmethod
    def lines(cls, start_line: int, end_line: int | None = None) -> "Selection":
        """Create a selection spanning whole lines."""
        end_line = start_line if end_line is None else end_line
        return cls(start=Position(line=start_line), end=Position(line=end_line))

    @property
    def line_numbers(self) -> range:
        """Every line touched by the selection."""
        first, last = sorted((self.start.line, self.end.line))
        return range(first, last + 1)


class Edit(BaseModel):
    """A pending replacement of one whole line."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=0)
    new_raw_text: str


class CaretSuggestion(BaseModel):
    """Where to move the caret of one selection after a batch applies."""

    model_config = ConfigDict(frozen=True)

    selection_index: int = Field(..., ge=0)
    position: Position


class EditBatch(BaseModel):
    """Edits to apply atomically plus caret suggestions."""

    edits: list[Edit] = Field(default_factory=list)
    carets: list[CaretSuggestion] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.edits

    def apply_carets(self, selections: list[Selection]) -> list[Selection]:
        """Return the selections with suggested carets substituted in."""
        moved = {c.selection_index: c.position for c in self.carets}
        result: list[Selection] = []
        for index, selection in enumerate(selections):
            position = moved.get(index)
            if position is None:
                result.append(selection)
            else:
                result.append(Selection(start=position, end=position))
        return result
