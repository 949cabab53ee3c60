#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/whitespace.py
"""Whitespace normalization pass.

Hand-formatted HTML puts newlines and indentation between block elements.
Those text runs carry no content, but left alone they would surface as
stray spaces at the start of list items or as blank inline runs. This pass
trims text nodes at block boundaries and drops the ones left empty. It runs
once, in place, before conversion.

"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, NavigableString, PageElement

from blockdown.constants import STRIPPABLE_WHITESPACE
from blockdown.tree import is_block_level, is_text, next_element, previous_element

logger = logging.getLogger(__name__)


def _trims_leading(node: PageElement) -> bool:
    sibling = previous_element(node)
    if sibling is None:
        return is_block_level(node.parent)
    return is_block_level(sibling)


def _trims_trailing(node: PageElement) -> bool:
    sibling = next_element(node)
    if sibling is None:
        return is_block_level(node.parent)
    return is_block_level(sibling)


def normalize_whitespace(soup: BeautifulSoup) -> BeautifulSoup:
    """Trim insignificant whitespace next to block-level elements.

    A text node loses its leading whitespace when the element before it is
    block-level, or when no element precedes it and its parent is
    block-level; trailing whitespace is trimmed symmetrically. Text nodes
    left empty are removed from the tree.

    Parameters
    ----------
    soup : BeautifulSoup
        Parsed document; modified in place

    Returns
    -------
    BeautifulSoup
        The same document, for chaining

    """
    # Snapshot first: replacing and extracting nodes invalidates the live iterator
    text_nodes = [node for node in soup.descendants if is_text(node)]
    removed = 0

    for node in text_nodes:
        content = str(node)
        if _trims_leading(node):
            content = content.lstrip(STRIPPABLE_WHITESPACE)
        if _trims_trailing(node):
            content = content.rstrip(STRIPPABLE_WHITESPACE)

        if not content:
            node.extract()
            removed += 1
        elif content != node:
            node.replace_with(NavigableString(content))

    logger.debug("Whitespace pass visited %d text nodes, removed %d", len(text_nodes), removed)
    return soup
