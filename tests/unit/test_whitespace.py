#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the whitespace normalization pass."""
import pytest
from bs4 import BeautifulSoup

from blockdown.whitespace import normalize_whitespace


def _normalized(markup: str) -> BeautifulSoup:
    return normalize_whitespace(BeautifulSoup(markup, "html.parser"))


@pytest.mark.unit
class TestNormalizeWhitespace:
    """Test trimming and removal of text nodes at block boundaries."""

    def test_removes_whitespace_between_blocks(self) -> None:
        """Indentation between sibling block elements disappears."""
        soup = _normalized("<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>")
        assert [str(child) for child in soup.ul.contents] == ["<li>a</li>", "<li>b</li>"]

    def test_trims_first_and_last_child_of_block(self) -> None:
        """Text at the edges of a block-level parent is trimmed."""
        soup = _normalized("<p>\n   Hello world  \n</p>")
        assert soup.p.string == "Hello world"

    def test_keeps_whitespace_inside_inline_parent(self) -> None:
        """Edges of an inline parent are not block boundaries."""
        soup = _normalized("<p>a<span> b </span>c</p>")
        assert soup.span.string == " b "

    def test_keeps_whitespace_next_to_inline_sibling(self) -> None:
        """Spaces around inline siblings are significant."""
        soup = _normalized("<p>Hello <strong>world</strong> again</p>")
        texts = [str(s) for s in soup.p.find_all(string=True, recursive=False)]
        assert texts == ["Hello ", " again"]

    def test_trims_after_block_sibling(self) -> None:
        """Text following a block sibling loses its leading whitespace."""
        soup = _normalized("<div><p>x</p>   tail <b>y</b></div>")
        assert soup.div.contents[1] == "tail "

    def test_trims_before_block_sibling(self) -> None:
        """Text preceding a block sibling loses its trailing whitespace."""
        soup = _normalized("<div><b>y</b> lead   <p>x</p></div>")
        assert soup.div.contents[1] == " lead"

    def test_top_level_text_is_trimmed(self) -> None:
        """The document root counts as a block-level parent."""
        soup = _normalized("\n  <p>x</p>\n")
        assert [str(child) for child in soup.contents] == ["<p>x</p>"]

    def test_non_breaking_space_is_kept(self) -> None:
        """A non-breaking space is content, not insignificant whitespace."""
        soup = _normalized("<p>\u00a0x\u00a0</p>")
        assert soup.p.string == "\u00a0x\u00a0"

    def test_comments_are_untouched(self) -> None:
        """Comments are not text and are never trimmed or removed."""
        soup = _normalized("<div><!--  spaced  --></div>")
        assert soup.div.contents[0] == "  spaced  "

    def test_returns_same_document(self) -> None:
        """The pass works in place."""
        soup = BeautifulSoup("<p> x </p>", "html.parser")
        assert normalize_whitespace(soup) is soup
