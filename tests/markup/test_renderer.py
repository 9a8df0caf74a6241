"""
Unit tests for TreeRenderer.
"""

from cribtutor.core.models import Element, ElementPart, Tag
from cribtutor.markup import RenderConfig, TreeRenderer, parse_document, render

SCENARIO_TEXT = "The European Union and United States are international organisations."


class TestTreeRenderer:
    """Tests for the quiz text view."""

    def test_render_when_no_masks_then_reproduces_text(self, scenario_root):
        """Paragraphs of plain text and terms round-trip."""
        # Act & Assert
        assert render(scenario_root) == SCENARIO_TEXT

    def test_render_when_content_mask_then_mask_replaces_content(self):
        """A masked element prints its mask."""
        # Arrange
        term = Element(Tag.EM, [ElementPart("heart")])
        paragraph = Element(Tag.P, [ElementPart("The ", term), ElementPart(" pumps.")])
        term.content_mask = "____"

        # Act & Assert
        assert render(paragraph) == "The ____ pumps."

    def test_render_when_paragraphs_then_blank_line_between(self):
        """Top-level paragraphs are separated by a blank line."""
        # Act & Assert
        assert render(parse_document("<p>One.</p><p>Two.</p>")) == "One.\n\nTwo."

    def test_render_when_break_then_newline(self):
        """<br> becomes a newline."""
        # Act & Assert
        assert render(parse_document("<p>a<br>b</p>")) == "a\nb"

    def test_render_when_ordered_list_then_items_indented(self):
        """Ordered items are indented, sentences separated by blank lines."""
        # Act
        text = render(parse_document("<p>Steps:</p><ol><li>Heat.</li><li>Cool.</li></ol>"))

        # Assert
        assert text == "Steps:\n\n  Heat.\n\n  Cool."

    def test_render_when_pre_merged_after_paragraph_then_no_trailing_space(self):
        """A merged block starts on a new line without a space left behind."""
        # Act
        text = render(parse_document("<p>Before</p><pre>code</pre>"))

        # Assert
        assert text == "Before\n\ncode"

    def test_render_when_comment_then_hidden(self):
        """Comments are not part of the quiz text."""
        # Act & Assert
        assert render(parse_document("<p>a<!-- note --> b</p>")) == "a b"

    def test_render_when_verbose_then_shows_tags(self):
        """The raw view prints markers around indented content."""
        # Arrange
        renderer = TreeRenderer(RenderConfig(verbose=True))
        term = Element(Tag.EM, [ElementPart("cell")])

        # Act & Assert
        assert renderer.render(term) == "<em>\n  cell\n</em>\n"

    def test_render_when_verbose_then_comments_shown(self):
        """The raw view includes comments."""
        # Arrange
        renderer = TreeRenderer(RenderConfig(verbose=True))
        root = parse_document("<p>a<!-- note --></p>")

        # Act
        text = renderer.render(root)

        # Assert
        assert "<!--" in text
        assert "note" in text
        assert "-->" in text
