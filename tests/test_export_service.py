"""Tests for the HTML exporter."""

import pytest

from todoplus.document import Document
from todoplus.models import TodoPlusConfig
from todoplus.services import ExportService
from todoplus.services.export_service import HTML_FOOTER, HTML_HEADER, escape_text


@pytest.fixture
def service() -> ExportService:
    """ExportService with default config."""
    return ExportService()


class TestRenderLine:
    """Tests for ExportService.render_line()."""

    def test_comment_skipped(self, service: ExportService):
        """Comments aren't exported."""
        assert service.render_line("A note @high") is None

    def test_blank_line(self, service: ExportService):
        """Blank lines export as empty rows."""
        assert service.render_line("") == ""

    def test_project(self, service: ExportService):
        """Projects get the project color."""
        assert service.render_line("Work:") == '<font color="#66d9ef">Work:</font>'

    def test_open_todo_with_tag(self, service: ExportService):
        """Only the tag is wrapped, the rest is plain."""
        row = service.render_line("☐ Buy milk @created(2024-01-01 10:00)")
        assert row == '☐ Buy milk <font style="background-color:#e6db74">@created(2024-01-01 10:00)</font>'
        assert row.count("<font") == 1

    def test_cancelled_nests_tags_inside_status(self, service: ExportService):
        """Tag spans sit inside the status span and never cross it."""
        row = service.render_line("✘ Task @cancelled(2024-01-01 10:00)")
        assert row == (
            '<font color="#f92672">✘ Task '
            '<font style="background-color:#e6db74">@cancelled(2024-01-01 10:00)</font></font>'
        )

    def test_done_color(self, service: ExportService):
        """Done todos get the done color."""
        row = service.render_line("✔ Task")
        assert row == '<font color="#a6e25b">✔ Task</font>'

    def test_priority_palette(self, service: ExportService):
        """Priority tags take their palette color."""
        row = service.render_line("☐ Task @high")
        assert row == '☐ Task <font style="background-color:#e59345">@high</font>'

    def test_unknown_priority_word_not_wrapped(self, service: ExportService):
        """@-words that aren't priorities stay plain text."""
        assert service.render_line("☐ Mail @bob") == "☐ Mail @bob"

    def test_spans_balanced(self, service: ExportService):
        """Every opened span is closed."""
        row = service.render_line("  ✔ A @high @est(1h) @lasted(2h) @done(2024-01-01 10:00)")
        assert row.count("<font") == row.count("</font>") == 5

    def test_escaping(self, service: ExportService):
        """Markup characters are escaped and double spaces kept."""
        row = service.render_line("☐ a <b> & c  d")
        assert row == "☐ a &lt;b&gt; &amp; c&nbsp;&nbsp;d"

    def test_indentation_preserved(self, service: ExportService):
        """Leading indentation renders as non-breaking spaces."""
        assert service.render_line("    ☐ Nested") == "&nbsp;&nbsp;&nbsp;&nbsp;☐ Nested"

    def test_tab_indentation_expanded(self, service: ExportService):
        """Tabs count as one indentation level each."""
        assert service.render_line("\t\t☐ Nested") == "&nbsp;&nbsp;&nbsp;&nbsp;☐ Nested"

    def test_tab_before_tag(self, service: ExportService):
        """Tag spans still line up after tab expansion."""
        row = service.render_line("\t✔ A @high")
        assert row == (
            '<font color="#a6e25b">&nbsp;&nbsp;✔ A '
            '<font style="background-color:#e59345">@high</font></font>'
        )

    def test_tab_width_follows_indentation(self):
        """A wider indentation setting widens expanded tabs."""
        config = TodoPlusConfig(indentation="    ")
        row = ExportService(config).render_line("\tWork:")
        assert row == '<font color="#66d9ef">&nbsp;&nbsp;&nbsp;&nbsp;Work:</font>'


class TestRender:
    """Tests for whole-document export."""

    def test_document(self, service: ExportService):
        """Rows are wrapped in a page and comments dropped."""
        document = Document.from_text("Work:\n  ☐ Task\nsome note")
        html = service.export_document(document)
        assert html.startswith(HTML_HEADER)
        assert html.endswith(HTML_FOOTER)
        assert "some note" not in html
        assert html.count("<br>") == 2

    def test_custom_colors(self):
        """Colors come from configuration."""
        config = TodoPlusConfig.model_validate({"colors": {"project": "#000"}})
        html = ExportService(config).render(["Work:"])
        assert '<font color="#000">Work:</font>' in html


class TestEscapeText:
    """Tests for escape_text()."""

    def test_quotes_untouched(self):
        """Quotes are left as-is in text content."""
        assert escape_text('say "hi"') == 'say "hi"'
