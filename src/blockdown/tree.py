#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/tree.py
"""Node tree adapter over BeautifulSoup.

The converter never touches parsing: it walks a tree built here and asks
this module the handful of questions it needs about each node (is it text,
is it block-level, what are its neighbouring elements, what does an
attribute hold). Keeping those questions in one place means the visitor and
the whitespace pass agree on what counts as a text node or a block.

"""

from __future__ import annotations

import logging
from typing import Optional

from bs4 import BeautifulSoup, FeatureNotFound, NavigableString, PageElement, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from blockdown.constants import BLOCK_LEVEL_ELEMENTS, DEFAULT_HTML_PARSER, DEPS_HTML_PARSERS
from blockdown.exceptions import DependencyError, ParsingError

logger = logging.getLogger(__name__)


def parse_html(markup: str, parser: str = DEFAULT_HTML_PARSER) -> BeautifulSoup:
    """Build a node tree from HTML markup.

    Parameters
    ----------
    markup : str
        HTML document or fragment
    parser : str, default "html.parser"
        BeautifulSoup tree builder name

    Returns
    -------
    BeautifulSoup
        Root of the parsed tree

    Raises
    ------
    DependencyError
        If the requested tree builder is not installed
    ParsingError
        If the tree builder fails on the markup

    """
    try:
        soup = BeautifulSoup(markup, parser)
    except FeatureNotFound as e:
        packages = [(name, spec) for name, _, spec in DEPS_HTML_PARSERS.get(parser, [])]
        raise DependencyError(f"{parser} parser", packages or [(parser, "")], original_import_error=e) from e
    except ParserRejectedMarkup as e:
        raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="tree_building", original_error=e) from e

    logger.debug("Parsed %d characters of HTML with %s", len(markup), parser)
    return soup


def is_element(node: PageElement | None) -> bool:
    """Return True for element nodes, including the document root."""
    return isinstance(node, Tag)


def is_text(node: PageElement | None) -> bool:
    """Return True for character data that renders as text.

    Comments, doctypes, CDATA sections, declarations and processing
    instructions are strings to BeautifulSoup but carry no document text.
    """
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_block_level(node: PageElement | None) -> bool:
    """Check if a node is a block-level element.

    The document root counts as block-level: fragments parsed without an
    ``<html>``/``<body>`` wrapper behave as though they had one.

    Parameters
    ----------
    node : PageElement or None
        Node to classify

    Returns
    -------
    bool
        True if the node occupies its own block region

    """
    if isinstance(node, BeautifulSoup):
        return True
    if not isinstance(node, Tag):
        return False
    return node.name.lower() in BLOCK_LEVEL_ELEMENTS


def previous_element(node: PageElement) -> Optional[Tag]:
    """Return the nearest preceding sibling that is an element, skipping text."""
    for sibling in node.previous_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def next_element(node: PageElement) -> Optional[Tag]:
    """Return the nearest following sibling that is an element, skipping text."""
    for sibling in node.next_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def get_attribute(node: Tag, name: str) -> str:
    """Look up an attribute as a string.

    Missing attributes read as ``""``. Multi-valued attributes such as
    ``class`` are joined with single spaces, as they appear in the source.
    """
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def text_content(node: PageElement) -> str:
    """Return the concatenated text of a node and all of its descendants."""
    return node.get_text()


def outer_html(node: Tag) -> str:
    """Serialize an element back to markup, including its own tag."""
    return str(node)


def find_child(node: Tag, name: str) -> Optional[Tag]:
    """Return the first direct child element named ``name``."""
    for child in node.children:
        if isinstance(child, Tag) and child.name == name:
            return child
    return None
