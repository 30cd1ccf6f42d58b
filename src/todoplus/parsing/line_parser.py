"""Classify raw lines and extract their tag spans.

Both the state machine and the HTML exporter go through
:func:`extract_tags`, so tag boundaries are identical everywhere.
"""

from __future__ import annotations

from ..models.enums import LineKind, TagKind, TodoStatus
from ..models.line import Line, ParsedLine, Project, TagSpan
from ..models.todoplus_config import TodoPlusConfig
from .grammar import Grammar, get_grammar

TAG_KIND_ORDER: tuple[TagKind, ...] = tuple(TagKind)


def extract_tags(text: str, grammar: Grammar | None = None, start: int = 0) -> tuple[TagSpan, ...]:
    """Find at most one tag of each kind in ``text`` from offset ``start``.

    Spans are returned in document order. When two kinds claim
    overlapping text the one earlier in ``TAG_KIND_ORDER`` wins.
    """
    grammar = grammar or get_grammar()
    found: list[tuple[int, int, TagSpan]] = []

    for priority, kind in enumerate(TAG_KIND_ORDER):
        match = grammar.tag_patterns[kind].search(text, start)
        if match is None:
            continue
        groups = match.groupdict()
        if kind == TagKind.ESTIMATE and groups.get("bare"):
            name, value = "est", groups["bare"]
        else:
            name, value = groups["name"], groups.get("value")
        span = TagSpan(kind=kind, name=name, start=match.start(), end=match.end(), value=value)
        found.append((span.start, priority, span))

    accepted: list[TagSpan] = []
    for _, _, span in sorted(found, key=lambda item: (item[0], item[1])):
        if any(span.start < other.end and other.start < span.end for other in accepted):
            continue
        accepted.append(span)
    return tuple(sorted(accepted, key=lambda span: span.start))


def classify(raw_text: str, grammar: Grammar | None = None) -> ParsedLine:
    """Classify one raw line.

    Order matters: comments short-circuit everything else, then projects,
    then todos (status checked cancelled first, then done, else open).
    """
    grammar = grammar or get_grammar()

    if grammar.is_blank(raw_text):
        return ParsedLine(kind=LineKind.BLANK, raw_text=raw_text)

    if grammar.is_comment(raw_text):
        return ParsedLine(kind=LineKind.COMMENT, raw_text=raw_text)

    if grammar.is_project(raw_text):
        match = grammar.project.match(raw_text)
        return ParsedLine(kind=LineKind.PROJECT, raw_text=raw_text, indent=match.group("indent"))

    match = grammar.todo.match(raw_text)
    body_start = match.end()
    tags = extract_tags(raw_text, grammar, body_start)
    status = grammar.symbol_status(match)

    if status == TodoStatus.OPEN:
        finished = next((t for t in tags if t.kind == TagKind.FINISHED), None)
        if finished is not None and finished.name == "cancelled":
            status = TodoStatus.CANCELLED
        elif finished is not None:
            status = TodoStatus.DONE

    return ParsedLine(
        kind=LineKind.TODO,
        raw_text=raw_text,
        indent=match.group("indent"),
        status=status,
        symbol=match.group("symbol"),
        body_start=body_start,
        tags=tags,
    )


def indent_level(indent: str, indentation: str = "  ") -> int:
    """Nesting depth of a leading-whitespace string."""
    expanded = indent.replace("\t", indentation)
    return len(expanded) // len(indentation)


def parse_project(line: Line, config: TodoPlusConfig | None = None) -> Project | None:
    """Build a Project from a line, or None if it isn't a project header."""
    config = config or TodoPlusConfig.default()
    grammar = get_grammar(config)
    if not grammar.is_project(line.raw_text):
        return None
    match = grammar.project.match(line.raw_text)
    indent = match.group("indent")
    return Project(
        line_number=line.line_number,
        raw_text=line.raw_text,
        name=match.group("name").strip(),
        indent=indent,
        indent_level=indent_level(indent, config.indentation),
    )
