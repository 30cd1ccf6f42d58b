"""Tests for line classification and tag extraction."""

import pytest

from todoplus.models import LineKind, TagKind, TodoPlusConfig, TodoStatus
from todoplus.parsing import Grammar, classify, extract_tags, get_grammar, indent_level


@pytest.fixture
def grammar() -> Grammar:
    """Grammar for the default configuration."""
    return get_grammar()


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.parametrize("text", ["", "   ", "\t"])
    def test_blank_lines(self, text: str, grammar: Grammar):
        """Whitespace-only lines are blank."""
        assert classify(text, grammar).kind == LineKind.BLANK

    def test_plain_text_is_comment(self, grammar: Grammar):
        """Text that is neither todo nor project is a comment."""
        assert classify("Just a note", grammar).kind == LineKind.COMMENT

    def test_comment_has_no_tags(self, grammar: Grammar):
        """Comments never carry tag spans, even with tag-like words."""
        parsed = classify("Remember @high @created(2024-01-01 10:00)", grammar)
        assert parsed.kind == LineKind.COMMENT
        assert parsed.tags == ()
        assert parsed.status is None

    @pytest.mark.parametrize("text", ["Project:", "  Sub project:", "Work: @high", "Work:   "])
    def test_projects(self, text: str, grammar: Grammar):
        """Lines ending with a colon (optionally followed by tags) are projects."""
        parsed = classify(text, grammar)
        assert parsed.kind == LineKind.PROJECT
        assert parsed.tags == ()

    def test_colon_inside_text_is_not_project(self, grammar: Grammar):
        """A colon followed by plain words doesn't make a project."""
        assert classify("Work: meeting notes", grammar).kind == LineKind.COMMENT

    def test_todo_ending_with_colon_is_todo(self, grammar: Grammar):
        """Todo detection wins over the project shape."""
        assert classify("☐ Write report:", grammar).kind == LineKind.TODO

    @pytest.mark.parametrize(
        ("text", "status"),
        [
            ("☐ Item", TodoStatus.OPEN),
            ("- Item", TodoStatus.OPEN),
            ("[ ] Item", TodoStatus.OPEN),
            ("✔ Item", TodoStatus.DONE),
            ("[x] Item", TodoStatus.DONE),
            ("+ Item", TodoStatus.DONE),
            ("✘ Item", TodoStatus.CANCELLED),
            ("[-] Item", TodoStatus.CANCELLED),
            ("x Item", TodoStatus.CANCELLED),
        ],
    )
    def test_todo_status_from_symbol(self, text: str, status: TodoStatus, grammar: Grammar):
        """Every accepted symbol maps to its status."""
        parsed = classify(text, grammar)
        assert parsed.kind == LineKind.TODO
        assert parsed.status == status

    def test_status_from_finished_tag(self, grammar: Grammar):
        """A box carrying @done or @cancelled is finished."""
        assert classify("☐ Item @done(2024-01-01 10:00)", grammar).status == TodoStatus.DONE
        assert classify("☐ Item @cancelled", grammar).status == TodoStatus.CANCELLED

    def test_dash_separator_is_not_todo(self, grammar: Grammar):
        """Lines starting with a double dash aren't todos."""
        assert classify("-- separator --", grammar).kind == LineKind.COMMENT

    def test_symbol_needs_following_space(self, grammar: Grammar):
        """A symbol glued to text isn't a todo marker."""
        assert classify("☐Item", grammar).kind == LineKind.COMMENT

    def test_indented_todo(self, grammar: Grammar):
        """Indentation is captured and the body starts after the symbol."""
        parsed = classify("    ☐ Nested", grammar)
        assert parsed.indent == "    "
        assert parsed.symbol == "☐"
        assert parsed.body == "Nested"

    def test_text_excludes_tags(self, grammar: Grammar):
        """The description drops tag spans and collapses whitespace."""
        parsed = classify("☐ Buy @high milk @created(2024-01-01 10:00)", grammar)
        assert parsed.text == "Buy milk"


class TestExtractTags:
    """Tests for extract_tags()."""

    def test_document_order(self, grammar: Grammar):
        """Spans come back in order of appearance, not kind order."""
        text = "☐ Foo @high @created(2024-01-01 10:00) @est(2h)"
        tags = extract_tags(text, grammar)
        assert [t.kind for t in tags] == [TagKind.PRIORITY, TagKind.CREATED, TagKind.ESTIMATE]
        assert [t.raw(text) for t in tags] == ["@high", "@created(2024-01-01 10:00)", "@est(2h)"]

    def test_payloads(self, grammar: Grammar):
        """Tag values are the text inside the parens."""
        text = "☐ Foo @started(2024-01-01 09:00) @lasted(1h30m)"
        started, elapsed = extract_tags(text, grammar)
        assert started.value == "2024-01-01 09:00"
        assert elapsed.name == "lasted"
        assert elapsed.value == "1h30m"

    def test_tag_without_parens(self, grammar: Grammar):
        """Time tags may be written bare."""
        (tag,) = extract_tags("☐ Foo @done", grammar)
        assert tag.kind == TagKind.FINISHED
        assert tag.value is None

    def test_bare_estimate(self, grammar: Grammar):
        """@1h30m is an estimate."""
        (tag,) = extract_tags("☐ Foo @1h30m", grammar)
        assert tag.kind == TagKind.ESTIMATE
        assert tag.name == "est"
        assert tag.value == "1h30m"

    def test_one_tag_per_kind(self, grammar: Grammar):
        """Only the first match of a kind is kept."""
        text = "☐ a @low @high"
        tags = extract_tags(text, grammar)
        assert [t.raw(text) for t in tags] == ["@low"]

    @pytest.mark.parametrize(
        "text",
        [
            "☐ Fix @highest",
            "☐ Mail me@high.example",
            "☐ Use `@high` literally",
            "☐ Unknown @foo(bar)",
            "☐ Not a date @createdAt(x)",
        ],
    )
    def test_non_tags_ignored(self, text: str, grammar: Grammar):
        """Near-misses never produce spans."""
        assert extract_tags(text, grammar) == ()

    def test_start_offset(self, grammar: Grammar):
        """Scanning starts at the given offset."""
        text = "@high ☐ later @low"
        tags = extract_tags(text, grammar, start=6)
        assert [t.raw(text) for t in tags] == ["@low"]

    def test_repeated_calls_are_consistent(self, grammar: Grammar):
        """Identical lines classify identically on every call."""
        lines = [f"☐ Item {n} @low" for n in range(1, 5)]
        results = [classify(line, grammar) for line in lines]
        again = [classify(line, grammar) for line in lines]

        assert all(len(r.tags) == 1 for r in results)
        assert [r.tags[0].start for r in results] == [r.tags[0].start for r in again]
        assert results == again

    def test_repeated_comment_checks_are_consistent(self, grammar: Grammar):
        """Consecutive comment lines are all comments."""
        lines = ["This is a comment", "This is a comment again", "Here is another comment"]
        assert [classify(line, grammar).kind for line in lines] == [LineKind.COMMENT] * 3

    def test_custom_priority_names(self):
        """Priority vocabulary comes from configuration."""
        config = TodoPlusConfig.model_validate(
            {"tags": {"names": ["urgent", "later"]}, "colors": {"tag_backgrounds": ["#f00", "#0f0"]}}
        )
        grammar = get_grammar(config)
        (tag,) = extract_tags("☐ Ship it @urgent", grammar)
        assert tag.kind == TagKind.PRIORITY
        assert tag.name == "urgent"
        assert extract_tags("☐ Ship it @high", grammar) == ()


class TestIndentLevel:
    """Tests for indent_level()."""

    @pytest.mark.parametrize(("indent", "level"), [("", 0), ("  ", 1), ("    ", 2), ("\t", 1), ("\t  ", 2)])
    def test_levels(self, indent: str, level: int):
        """Two spaces or a tab make one level."""
        assert indent_level(indent) == level
