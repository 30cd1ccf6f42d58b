"""Regular expressions recognizing todo file structure and tags.

Patterns are compiled once per configuration and hold no state between
calls: every ``match``/``search`` scans the given string afresh.
"""

from __future__ import annotations

import re
from functools import lru_cache

from ..models.enums import TagKind, TodoStatus
from ..models.todoplus_config import TodoPlusConfig

BOX_SYMBOLS = ("-", "❍", "❑", "■", "⬜", "□", "☐", "▪", "▫", "–", "—", "≡", "→", "›", "[ ]", "[]")
DONE_SYMBOLS = ("✔", "✓", "☑", "+", "[x]", "[X]", "[+]")
CANCELLED_SYMBOLS = ("✘", "x", "X", "[-]")

# Tags may not be glued to a preceding word or sit inside inline code
_TAG_BOUNDARY = r"(?<![A-Za-z0-9`])"
# A tag name ends at whitespace, an opening paren or the end of the line
_NAME_END = r"(?![^\s(])"
_PARENS = r"(?:\((?P<value>[^)]*)\))?"


def _alternation(symbols: tuple[str, ...] | list[str]) -> str:
    # Longest first so "[x]" wins over "x"
    ordered = sorted(set(symbols), key=len, reverse=True)
    return "|".join(re.escape(s) for s in ordered)


class Grammar:
    """Compiled patterns for one configuration."""

    def __init__(self, config: TodoPlusConfig | None = None) -> None:
        self.config = config or TodoPlusConfig.default()
        symbols = self.config.symbols
        tag = re.escape(symbols.tag)

        box = _alternation((*BOX_SYMBOLS, symbols.box))
        done = _alternation((*DONE_SYMBOLS, symbols.done))
        cancelled = _alternation((*CANCELLED_SYMBOLS, symbols.cancelled))

        self.todo = re.compile(
            r"^(?P<indent>[^\S\n]*)(?!--|––|——)"
            rf"(?P<symbol>(?P<cancelled>{cancelled})|(?P<done>{done})|(?P<box>{box}))"
            r"\s"
        )
        self.project = re.compile(
            r"^(?P<indent>[^\S\n]*)(?P<name>\S.*?):[^\S\n]*"
            rf"(?P<tags>(?:{tag}[^\s*~(]+(?:\([^)]*\))?[^\S\n]*)*)$"
        )
        self.tag = re.compile(rf"{_TAG_BOUNDARY}{tag}(?P<name>[^\s*~(]+)(?:\((?P<value>[^)]*)\))?")

        priority = "|".join(re.escape(name) for name in self.config.tags.names)
        self.tag_patterns: dict[TagKind, re.Pattern[str]] = {
            TagKind.CREATED: re.compile(rf"{_TAG_BOUNDARY}{tag}(?P<name>created){_NAME_END}{_PARENS}"),
            TagKind.STARTED: re.compile(rf"{_TAG_BOUNDARY}{tag}(?P<name>started){_NAME_END}{_PARENS}"),
            TagKind.FINISHED: re.compile(
                rf"{_TAG_BOUNDARY}{tag}(?P<name>done|cancelled){_NAME_END}{_PARENS}"
            ),
            TagKind.ELAPSED: re.compile(
                rf"{_TAG_BOUNDARY}{tag}(?P<name>lasted|wasted){_NAME_END}{_PARENS}"
            ),
            TagKind.ESTIMATE: re.compile(
                rf"{_TAG_BOUNDARY}{tag}(?:(?P<name>est)\((?P<value>[^)]*)\)"
                r"|(?P<bare>\d[\w.]*)(?!\S))"
            ),
            TagKind.PRIORITY: re.compile(rf"{_TAG_BOUNDARY}{tag}(?P<name>{priority})(?!\S)"),
        }

    def symbol_status(self, match: re.Match[str]) -> TodoStatus:
        """Status implied by the symbol group of a ``todo`` match."""
        if match.group("cancelled") is not None:
            return TodoStatus.CANCELLED
        if match.group("done") is not None:
            return TodoStatus.DONE
        return TodoStatus.OPEN

    def is_blank(self, text: str) -> bool:
        return not text.strip()

    def is_todo(self, text: str) -> bool:
        return self.todo.match(text) is not None

    def is_project(self, text: str) -> bool:
        return not self.is_todo(text) and self.project.match(text) is not None

    def is_comment(self, text: str) -> bool:
        """Any non-blank line that is neither a todo nor a project."""
        return not self.is_blank(text) and not self.is_todo(text) and self.project.match(text) is None

    def symbol_for(self, status: TodoStatus) -> str:
        """Glyph written for a status."""
        symbols = self.config.symbols
        if status == TodoStatus.DONE:
            return symbols.done
        if status == TodoStatus.CANCELLED:
            return symbols.cancelled
        return symbols.box


@lru_cache(maxsize=8)
def _grammar_for(config_json: str) -> Grammar:
    return Grammar(TodoPlusConfig.model_validate_json(config_json))


def get_grammar(config: TodoPlusConfig | None = None) -> Grammar:
    """Return a (cached) grammar for the configuration."""
    config = config or TodoPlusConfig.default()
    return _grammar_for(config.model_dump_json())
