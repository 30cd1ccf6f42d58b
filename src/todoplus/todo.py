"""Todo domain model and its state transitions."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from .models import Edit, Line, ParsedLine, TagKind, TagSpan, TodoPlusConfig, TodoState, TodoStatus
from .parsing.grammar import get_grammar
from .parsing.line_parser import classify, indent_level
from .utils import (
    format_duration,
    format_timestamp,
    now_local,
    parse_duration,
    parse_timestamp,
    timestamp_resolution,
)

logger = logging.getLogger(__name__)

_MIN_ELAPSED = timedelta(minutes=1)


class Todo:
    """A single todo line.

    The raw text is the source of truth; status and tags are views parsed
    from it after every change. State only changes through the ``toggle_*``
    transitions so tag invariants are enforced here and nowhere else.
    """

    def __init__(self, line_number: int, raw_text: str, config: TodoPlusConfig | None = None) -> None:
        self.line_number = line_number
        self.config = config or TodoPlusConfig.default()
        self._grammar = get_grammar(self.config)
        self._original = raw_text
        self._raw_text = raw_text
        self._parsed = self._parse(raw_text)

    @classmethod
    def from_line(cls, line: Line, config: TodoPlusConfig | None = None) -> Todo | None:
        """Create a Todo from a line, or None if the line isn't a todo."""
        config = config or TodoPlusConfig.default()
        if not classify(line.raw_text, get_grammar(config)).is_todo:
            return None
        return cls(line.line_number, line.raw_text, config)

    def _parse(self, raw_text: str) -> ParsedLine:
        parsed = classify(raw_text, self._grammar)
        if not parsed.is_todo:
            raise ValueError(f"Line {self.line_number} is not a todo: {raw_text!r}")
        return parsed

    def __repr__(self) -> str:
        return f"Todo(line={self.line_number}, state={self.state.value}, text={self.text!r})"

    # --- Views ---

    @property
    def raw_text(self) -> str:
        return self._raw_text

    @property
    def original_text(self) -> str:
        """The text the todo was parsed from, before any transition."""
        return self._original

    @property
    def status(self) -> TodoStatus:
        return self._parsed.status

    @property
    def state(self) -> TodoState:
        if self.status == TodoStatus.CANCELLED:
            return TodoState.CANCELLED
        if self.status == TodoStatus.DONE:
            return TodoState.DONE
        if self.is_started:
            return TodoState.STARTED
        return TodoState.OPEN

    @property
    def text(self) -> str:
        return self._parsed.text

    @property
    def tags(self) -> tuple[TagSpan, ...]:
        return self._parsed.tags

    @property
    def indent(self) -> str:
        return self._parsed.indent

    @property
    def indent_level(self) -> int:
        return indent_level(self._parsed.indent, self.config.indentation)

    def get_tag(self, kind: TagKind) -> TagSpan | None:
        return self._parsed.get_tag(kind)

    def is_box(self) -> bool:
        """True when the todo is neither done nor cancelled."""
        return self.status == TodoStatus.OPEN

    def is_done(self) -> bool:
        return self.status == TodoStatus.DONE

    def is_cancelled(self) -> bool:
        return self.status == TodoStatus.CANCELLED

    def is_finished(self) -> bool:
        return not self.is_box()

    @property
    def is_started(self) -> bool:
        return (
            self.get_tag(TagKind.STARTED) is not None
            and self.get_tag(TagKind.FINISHED) is None
            and self.is_box()
        )

    @property
    def priority(self) -> str | None:
        tag = self.get_tag(TagKind.PRIORITY)
        return tag.name if tag else None

    @property
    def created_at(self) -> datetime | None:
        return self._tag_datetime(TagKind.CREATED)

    @property
    def started_at(self) -> datetime | None:
        return self._tag_datetime(TagKind.STARTED)

    @property
    def finished_at(self) -> datetime | None:
        return self._tag_datetime(TagKind.FINISHED)

    @property
    def elapsed(self) -> timedelta | None:
        tag = self.get_tag(TagKind.ELAPSED)
        return parse_duration(tag.value) if tag else None

    @property
    def estimate(self) -> timedelta | None:
        tag = self.get_tag(TagKind.ESTIMATE)
        return parse_duration(tag.value) if tag else None

    def _tag_datetime(self, kind: TagKind) -> datetime | None:
        tag = self.get_tag(kind)
        if tag is None:
            return None
        return parse_timestamp(tag.value, self.config.timekeeping.timestamp_format)

    # --- Transitions ---

    def toggle_box(self, now: datetime | None = None) -> str:
        """Open (or started) becomes done; done or cancelled becomes open."""
        if self.is_box():
            self._finish(TodoStatus.DONE, now)
        else:
            self._unfinish()
        return self._raw_text

    def toggle_done(self, now: datetime | None = None) -> str:
        """Done becomes open; anything else becomes done."""
        if self.is_done():
            self._unfinish()
        else:
            self._finish(TodoStatus.DONE, now)
        return self._raw_text

    def toggle_cancelled(self, now: datetime | None = None) -> str:
        """Cancelled becomes open; anything else becomes cancelled."""
        if self.is_cancelled():
            self._unfinish()
        else:
            self._finish(TodoStatus.CANCELLED, now)
        return self._raw_text

    def toggle_start(self, now: datetime | None = None) -> str:
        """Start an open todo, or stop a started one folding time into elapsed.

        Does nothing on done or cancelled todos.
        """
        if not self.is_box():
            logger.debug("toggle_start ignored on finished todo at line %d", self.line_number)
            return self._raw_text
        now = now or now_local()
        if self.get_tag(TagKind.STARTED) is not None:
            self._stop_clock(now, TodoStatus.OPEN)
        else:
            stamp = format_timestamp(now, self.config.timekeeping.timestamp_format)
            self._add_tag("started", stamp)
        return self._raw_text

    def make_edit(self) -> list[Edit]:
        """Edits implied by the transitions applied so far."""
        if self._raw_text == self._original:
            return []
        return [Edit(line_number=self.line_number, new_raw_text=self._raw_text)]

    def _finish(self, status: TodoStatus, now: datetime | None) -> None:
        now = now or now_local()
        if self.get_tag(TagKind.FINISHED) is not None:
            self._remove_tag(TagKind.FINISHED)
        self._stop_clock(now, status)
        self._set_symbol(status)
        if self.config.timekeeping.finished_enabled:
            name = "cancelled" if status == TodoStatus.CANCELLED else "done"
            self._add_tag(name, format_timestamp(now, self.config.timekeeping.timestamp_format))

    def _unfinish(self) -> None:
        if self.get_tag(TagKind.FINISHED) is not None:
            self._remove_tag(TagKind.FINISHED)
        self._set_symbol(TodoStatus.OPEN)

    def _stop_clock(self, now: datetime, status: TodoStatus) -> None:
        """Remove the started tag and add the time since into elapsed."""
        started = self.get_tag(TagKind.STARTED)
        if started is None:
            return
        started_at = self.started_at
        self._remove_tag(TagKind.STARTED)
        if started_at is None or not self.config.timekeeping.elapsed_enabled:
            return
        if started_at.tzinfo is not None and now.tzinfo is None:
            now = now.astimezone()
        elif started_at.tzinfo is None and now.tzinfo is not None:
            now = now.astimezone().replace(tzinfo=None)
        fmt = self.config.timekeeping.timestamp_format
        resolution = timestamp_resolution(fmt)
        if started_at.tzinfo is None:
            # Compare like with like: both ends truncated to the written stamp
            now = parse_timestamp(format_timestamp(now, fmt), fmt) or now
        delta = now - started_at
        # A truncated stamp hides up to one unit of its resolution
        if delta < _MIN_ELAPSED + resolution:
            return
        existing = self.get_tag(TagKind.ELAPSED)
        if existing is None:
            name = "wasted" if status == TodoStatus.CANCELLED else "lasted"
            self._add_tag(name, format_duration(delta))
            return
        total = (parse_duration(existing.value) or timedelta()) + delta
        self._replace_tag(existing, existing.name, format_duration(total))

    # --- Text mutation ---

    def _update(self, raw_text: str) -> None:
        self._parsed = self._parse(raw_text)
        self._raw_text = raw_text

    def _format_tag(self, name: str, value: str | None) -> str:
        symbol = self.config.symbols.tag
        return f"{symbol}{name}" if value is None else f"{symbol}{name}({value})"

    def _set_symbol(self, status: TodoStatus) -> None:
        start = len(self._parsed.indent)
        end = start + len(self._parsed.symbol)
        symbol = self._grammar.symbol_for(status)
        self._update(self._raw_text[:start] + symbol + self._raw_text[end:])

    def _add_tag(self, name: str, value: str | None) -> None:
        # Insert after the last visible character, keeping trailing whitespace
        at = max(len(self._raw_text.rstrip()), self._parsed.body_start)
        head, tail = self._raw_text[:at], self._raw_text[at:]
        tag = self._format_tag(name, value)
        if at == self._parsed.body_start:
            # Empty body: the tag becomes the first word
            self._update(head + tag + (" " + tail if tail else ""))
        else:
            self._update(head + " " + tag + tail)

    def _remove_tag(self, kind: TagKind) -> None:
        tag = self.get_tag(kind)
        if tag is None:
            return
        start, end = tag.start, tag.end
        raw = self._raw_text
        if start > self._parsed.body_start and raw[start - 1] in " \t":
            start -= 1
        elif end < len(raw) and raw[end] in " \t":
            end += 1
        self._update(raw[:start] + raw[end:])

    def _replace_tag(self, tag: TagSpan, name: str, value: str | None) -> None:
        raw = self._raw_text
        self._update(raw[: tag.start] + self._format_tag(name, value) + raw[tag.end :])
