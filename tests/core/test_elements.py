"""
Unit tests for the Element tree model.
"""

import pytest

from cribtutor.core.models import Element, ElementPart, Tag


def _comment(text):
    return Element(Tag.COMMENT, [ElementPart(text)])


class TestTag:
    """Tests for the Tag vocabulary."""

    def test_from_name_when_known_name_then_returns_tag(self):
        """Names are looked up case-insensitively."""
        # Act & Assert
        assert Tag.from_name("EM") is Tag.EM
        assert Tag.from_name("ol") is Tag.OL

    def test_from_name_when_unknown_name_then_returns_none(self):
        """Tags outside the vocabulary are not recognised."""
        # Act & Assert
        assert Tag.from_name("span") is None
        assert Tag.from_name("") is None
        assert Tag.from_name("!--") is None

    def test_markers_when_comment_then_uses_comment_syntax(self):
        """Comment markers differ from element markers."""
        # Act & Assert
        assert Tag.COMMENT.open_marker == "<!--"
        assert Tag.COMMENT.close_marker == "-->"
        assert Tag.EM.open_marker == "<em>"
        assert Tag.EM.close_marker == "</em>"


class TestElementPart:
    """Tests for ElementPart construction."""

    def test_init_when_no_text_or_sub_then_raises_error(self):
        """A part must hold something."""
        # Act & Assert
        with pytest.raises(ValueError, match="requires text or a subelement"):
            ElementPart()

    def test_init_when_only_sub_then_creates_part(self):
        """A subelement alone is a valid part."""
        # Act
        part = ElementPart(sub=Element(Tag.BR))

        # Assert
        assert part.text == ""
        assert part.sub.tag is Tag.BR


class TestElement:
    """Tests for Element structure and text helpers."""

    def test_plain_text_when_nested_then_concatenates_in_order(self):
        """Text of subelements is included in document order."""
        # Arrange
        term = Element(Tag.EM, [ElementPart("photosynthesis")])
        para = Element(Tag.P, [ElementPart("Plants use ", term), ElementPart(".")])

        # Act & Assert
        assert para.plain_text() == "Plants use photosynthesis."

    def test_plain_text_when_comment_then_skipped(self):
        """Comment text never reaches plain text."""
        # Arrange
        para = Element(Tag.P, [ElementPart("a", _comment("hidden")), ElementPart("b")])

        # Act & Assert
        assert para.plain_text() == "ab"

    def test_merge_when_other_element_then_moves_parts(self):
        """Merging moves all parts and leaves the source consumed."""
        # Arrange
        first = Element(Tag.P, [ElementPart("one")])
        second = Element(Tag.P, [ElementPart("two"), ElementPart("three")])

        # Act
        first.merge(second)

        # Assert
        assert [part.text for part in first.parts] == ["one", "two", "three"]
        assert second.parts == []
        assert second.tag is Tag.NONE
        assert second.consumed is True

    def test_merge_when_self_then_raises_error(self):
        """An element cannot be merged into itself."""
        # Arrange
        para = Element(Tag.P, [ElementPart("x")])

        # Act & Assert
        with pytest.raises(ValueError):
            para.merge(para)

    def test_iter_all_when_nested_then_yields_pre_order(self):
        """iter_all visits parents before children."""
        # Arrange
        inner = Element(Tag.EM, [ElementPart("x")])
        item = Element(Tag.LI, [ElementPart("", inner)])
        ul = Element(Tag.UL, [ElementPart(sub=item)])

        # Act
        tags = [element.tag for element in ul.iter_all()]

        # Assert
        assert tags == [Tag.UL, Tag.LI, Tag.EM]
        assert ul.find_all(Tag.EM) == [inner]

    def test_comment_text_when_not_comment_then_none(self):
        """Only comments have comment text."""
        # Act & Assert
        assert Element(Tag.P, [ElementPart("x")]).comment_text is None
        assert _comment("  Shuffle On ").comment_text == "Shuffle On"
        assert Element(Tag.COMMENT).comment_text == ""

    def test_starts_with_comment_when_text_precedes_then_false(self):
        """A comment only starts an element when no text precedes it."""
        # Arrange
        leading = Element(Tag.LI, [ElementPart("", _comment("x")), ElementPart("one")])
        trailing = Element(Tag.LI, [ElementPart("one", _comment("x"))])

        # Act & Assert
        assert leading.starts_with_comment() is True
        assert trailing.starts_with_comment() is False
        assert trailing.ends_with_comment() is True
        assert Element(Tag.P).ends_with_comment() is False
