"""Todo file grammar and line parser."""

from .grammar import Grammar, get_grammar
from .line_parser import TAG_KIND_ORDER, classify, extract_tags, indent_level, parse_project

__all__ = [
    "TAG_KIND_ORDER",
    "Grammar",
    "classify",
    "extract_tags",
    "get_grammar",
    "indent_level",
    "parse_project",
]
