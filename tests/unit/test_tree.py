#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the BeautifulSoup node tree adapter."""
import pytest
from bs4 import BeautifulSoup

from blockdown.exceptions import DependencyError
from blockdown.tree import (
    find_child,
    get_attribute,
    is_block_level,
    is_element,
    is_text,
    next_element,
    outer_html,
    parse_html,
    previous_element,
    text_content,
)


def _soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


@pytest.mark.unit
class TestParseHtml:
    """Test tree building."""

    def test_parses_fragment(self) -> None:
        """A fragment parses into a document whose children are the top-level nodes."""
        soup = parse_html("<p>a</p><p>b</p>")
        assert [child.name for child in soup.children] == ["p", "p"]

    def test_unknown_parser_raises_dependency_error(self) -> None:
        """A tree builder BeautifulSoup cannot find is reported as a missing dependency."""
        with pytest.raises(DependencyError) as exc_info:
            parse_html("<p>x</p>", parser="no-such-builder")
        assert "no-such-builder" in str(exc_info.value)


@pytest.mark.unit
class TestNodeClassification:
    """Test text, element and block-level predicates."""

    def test_text_and_elements(self) -> None:
        """Text nodes and tags are told apart; comments are neither."""
        soup = _soup("<p>text<!-- note --></p>")
        paragraph = soup.p
        text, comment = list(paragraph.children)
        assert is_element(paragraph)
        assert is_text(text)
        assert not is_text(comment)
        assert not is_element(comment)

    def test_doctype_is_not_text(self) -> None:
        """A doctype declaration carries no document text."""
        soup = _soup("<!DOCTYPE html><p>x</p>")
        doctype = next(iter(soup.children))
        assert not is_text(doctype)

    @pytest.mark.parametrize(
        "tag", ["div", "p", "li", "ul", "ol", "menu", "h1", "h6", "blockquote", "pre", "table", "form", "body"]
    )
    def test_block_level_tags(self, tag: str) -> None:
        """Elements that occupy their own region are block-level."""
        soup = _soup(f"<{tag}></{tag}>")
        assert is_block_level(soup.find(tag))

    @pytest.mark.parametrize("tag", ["span", "a", "strong", "em", "code", "img", "abbr", "custom-tag"])
    def test_inline_tags(self, tag: str) -> None:
        """Phrasing content and unknown elements are inline."""
        soup = _soup(f"<{tag}></{tag}>")
        assert not is_block_level(soup.find(tag))

    def test_document_root_is_block_level(self) -> None:
        """Top-level content behaves as if wrapped in a body element."""
        assert is_block_level(_soup("<span>x</span>"))

    def test_text_and_none_are_not_block_level(self) -> None:
        """Only elements can be block-level."""
        soup = _soup("<div>text</div>")
        assert not is_block_level(soup.div.string)
        assert not is_block_level(None)


@pytest.mark.unit
class TestNavigation:
    """Test sibling element lookup."""

    def test_sibling_elements_skip_text(self) -> None:
        """Neighbouring text nodes are skipped when looking for sibling elements."""
        soup = _soup("<div><b>1</b> middle <i>2</i></div>")
        middle = soup.div.contents[1]
        assert previous_element(middle).name == "b"
        assert next_element(middle).name == "i"

    def test_missing_siblings(self) -> None:
        """First and last children have no previous/next element."""
        soup = _soup("<div>only</div>")
        text = soup.div.contents[0]
        assert previous_element(text) is None
        assert next_element(text) is None

    def test_find_child_is_direct_only(self) -> None:
        """Only direct children are considered."""
        soup = _soup("<pre><span><code>nested</code></span></pre>")
        assert find_child(soup.pre, "code") is None
        soup = _soup("<pre>x<code>direct</code></pre>")
        assert find_child(soup.pre, "code").get_text() == "direct"


@pytest.mark.unit
class TestAttributesAndText:
    """Test attribute lookup, text content and serialization."""

    def test_missing_attribute_is_empty(self) -> None:
        """Absent attributes read as the empty string."""
        soup = _soup("<a>x</a>")
        assert get_attribute(soup.a, "href") == ""

    def test_multi_valued_attribute_is_joined(self) -> None:
        """Class lists are joined the way they appear in the source."""
        soup = _soup('<code class="highlight lang-ruby">x</code>')
        assert get_attribute(soup.code, "class") == "highlight lang-ruby"

    def test_attribute_verbatim(self) -> None:
        """Attribute values are returned unchanged."""
        soup = _soup('<a href="/path?q=1&amp;r=2">x</a>')
        assert get_attribute(soup.a, "href") == "/path?q=1&r=2"

    def test_text_content_includes_descendants(self) -> None:
        """Text content gathers the text of all descendants."""
        soup = _soup("<strong>a <em>b*</em> c</strong>")
        assert text_content(soup.strong) == "a b* c"

    def test_outer_html_includes_tag(self) -> None:
        """Serialization includes the element's own tag and attributes."""
        soup = _soup('<img src="a.png">')
        html = outer_html(soup.img)
        assert html.startswith("<img")
        assert 'src="a.png"' in html
