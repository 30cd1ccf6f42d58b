"""Service rendering a todo document as colorized HTML."""

from __future__ import annotations

import html
import logging
from typing import TYPE_CHECKING

from ..models import LineKind, TagKind, TodoPlusConfig, TodoStatus
from ..parsing import classify, get_grammar

if TYPE_CHECKING:
    from ..document import Document

logger = logging.getLogger(__name__)

HTML_HEADER = "<html><head></head><body>\n"
HTML_FOOTER = "</body></html>\n"
LINE_BREAK = "<br>\n"


class _SpanWriter:
    """Accumulates one line of markup with an explicit stack of open spans."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._open = 0

    def open(self, tag: str) -> None:
        self._parts.append(tag)
        self._open += 1

    def close(self) -> None:
        if self._open:
            self._parts.append("</font>")
            self._open -= 1

    def close_all(self) -> None:
        while self._open:
            self.close()

    def text(self, value: str) -> None:
        if value:
            self._parts.append(escape_text(value))

    def render(self) -> str:
        self.close_all()
        return "".join(self._parts)


def escape_text(value: str) -> str:
    """Escape markup characters and keep runs of spaces visible."""
    return html.escape(value, quote=False).replace("  ", "&nbsp;&nbsp;")


class ExportService:
    """Service for exporting todo documents to HTML."""

    def __init__(self, config: TodoPlusConfig | None = None) -> None:
        self.config = config or TodoPlusConfig.default()
        self._grammar = get_grammar(self.config)
        indentation = self.config.indentation
        # A tab indentation setting can't expand a tab; fall back to two spaces
        self._tab = indentation if "\t" not in indentation else "  "

    def render_line(self, raw: str) -> str | None:
        """
        Render one line without its line break.

        Returns None for comment lines, which are left out of the export.
        Tabs are expanded to one indentation level so they stay visible.
        """
        raw = raw.replace("\t", self._tab)
        parsed = classify(raw, self._grammar)
        colors = self.config.colors
        writer = _SpanWriter()

        if parsed.kind == LineKind.COMMENT:
            return None

        if parsed.kind == LineKind.PROJECT:
            writer.open(f'<font color="{colors.project}">')
            writer.text(raw)
            return writer.render()

        if parsed.status == TodoStatus.CANCELLED:
            writer.open(f'<font color="{colors.cancelled}">')
        elif parsed.status == TodoStatus.DONE:
            writer.open(f'<font color="{colors.done}">')

        cursor = 0
        for tag in parsed.tags:
            if tag.kind == TagKind.PRIORITY:
                background = self.config.tag_background(tag.name)
            else:
                background = colors.tag
            if background is None:
                continue
            writer.text(raw[cursor : tag.start])
            writer.open(f'<font style="background-color:{background}">')
            writer.text(tag.raw(raw))
            writer.close()
            cursor = tag.end
        writer.text(raw[cursor:])
        return writer.render()

    def render(self, lines: list[str]) -> str:
        """Render a whole document."""
        rows: list[str] = [HTML_HEADER]
        skipped = 0
        for raw in lines:
            row = self.render_line(raw)
            if row is None:
                skipped += 1
                continue
            rows.append(row + LINE_BREAK)
        rows.append(HTML_FOOTER)
        logger.debug("Rendered %d lines (%d comments skipped)", len(lines) - skipped, skipped)
        return "".join(rows)

    def export_document(self, document: Document) -> str:
        """Render the current text of a document."""
        return self.render([line.raw_text for line in document.get_lines()])
