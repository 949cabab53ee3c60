"""HTML to Markdown conversion module.

This module converts a parsed HTML tree into Markdown. The tree is walked
depth first; every element is classified into a :class:`TagRule` and handled
by the matching visitor method. Block-level elements open a block on a
:class:`~blockdown.blocks.BlockStack`, inline elements and text write into
the top block's buffer, and closing a block flushes its prefixed lines into
the document output.

Key Features
------------
- Arbitrary nesting of lists, blockquotes and paragraphs with correct prefixes
- Fenced code blocks with ``lang-*`` language detection
- Emphasis delimiters that stay unambiguous when the text contains ``*``
- Inline elements without Markdown syntax kept as raw HTML tags
- Form controls, scripts and styles dropped entirely

Supported HTML Elements
-----------------------
- Structure: headings (h1-h6), paragraphs, divs, line breaks, horizontal rules
- Lists: ul, ol and menu, nested to any depth
- Blockquotes, including nested and inside list items
- Code: pre/code fences, inline code and tt
- Text formatting: strong/b, em/i, del, ins, kbd, s, small, strike, sub, sup, abbr
- Links and images

Examples
--------
Basic HTML string conversion:

    >>> from blockdown import html_to_markdown
    >>> html_to_markdown('<h1>Title</h1><p>Hello <strong>world</strong></p>')
    '# Title\\n\\nHello **world**'

Keep image tags as HTML:

    >>> html_to_markdown('<img src="a.png" alt="A">', keep_img_tags=True)
    '<img alt="A" src="a.png"/>'
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import IO, Any, Callable, Mapping, Union

from bs4 import BeautifulSoup, PageElement, Tag

from blockdown._input_utils import read_html_input
from blockdown.blocks import BlockStack
from blockdown.constants import (
    BLACKLISTED_TAGS,
    BLANK_LINE_RUN_PATTERN,
    BLOCKQUOTE_PREFIX,
    CODE_FENCE,
    CODE_LANGUAGE_PATTERN,
    EMPHASIS_DELIMITER,
    EMPHASIS_DELIMITER_ALT,
    EMPHASIS_TAGS,
    HEADING_MARKER,
    HEADING_TAGS,
    HORIZONTAL_RULE,
    INLINE_CODE_DELIMITER,
    LIST_ITEM_CONTINUATION,
    LIST_TAGS,
    ORDERED_LIST_PREFIX,
    PARAGRAPH_TAGS,
    PASSTHROUGH_INLINE_TAGS,
    STRIPPABLE_WHITESPACE,
    STRONG_DELIMITER,
    STRONG_DELIMITER_ALT,
    STRONG_TAGS,
    UNORDERED_LIST_PREFIX,
    WHITESPACE_RUN_PATTERN,
)
from blockdown.exceptions import InvalidOptionsError, ParsingError, ValidationError
from blockdown.options import HtmlOptions
from blockdown.tree import (
    find_child,
    get_attribute,
    is_block_level,
    is_element,
    is_text,
    outer_html,
    parse_html,
    text_content,
)
from blockdown.whitespace import normalize_whitespace

logger = logging.getLogger(__name__)


class TagRule(Enum):
    """Conversion rule families, one per distinct way a node is rendered."""

    IGNORED = "ignored"
    TEXT = "text"
    TRANSPARENT = "transparent"
    BLACKLISTED = "blacklisted"
    CODE_BLOCK = "code_block"
    BLOCKQUOTE = "blockquote"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LIST_ITEM = "list_item"
    HEADING = "heading"
    PASSTHROUGH = "passthrough"
    ABBREVIATION = "abbreviation"
    IMAGE = "image"
    LINK = "link"
    INLINE_CODE = "inline_code"
    CODE = "code"
    LINE_BREAK = "line_break"
    HORIZONTAL_RULE = "horizontal_rule"
    STRONG = "strong"
    EMPHASIS = "emphasis"


def _build_tag_rules() -> dict[str, TagRule]:
    rules: dict[str, TagRule] = {}
    for tags, rule in (
        (BLACKLISTED_TAGS, TagRule.BLACKLISTED),
        (PARAGRAPH_TAGS, TagRule.PARAGRAPH),
        (LIST_TAGS, TagRule.LIST),
        (HEADING_TAGS, TagRule.HEADING),
        (PASSTHROUGH_INLINE_TAGS, TagRule.PASSTHROUGH),
        (STRONG_TAGS, TagRule.STRONG),
        (EMPHASIS_TAGS, TagRule.EMPHASIS),
    ):
        rules.update(dict.fromkeys(tags, rule))
    rules.update(
        {
            "pre": TagRule.CODE_BLOCK,
            "blockquote": TagRule.BLOCKQUOTE,
            "li": TagRule.LIST_ITEM,
            "abbr": TagRule.ABBREVIATION,
            "img": TagRule.IMAGE,
            "a": TagRule.LINK,
            "tt": TagRule.INLINE_CODE,
            "code": TagRule.CODE,
            "br": TagRule.LINE_BREAK,
            "hr": TagRule.HORIZONTAL_RULE,
        }
    )
    return rules


TAG_RULES: Mapping[str, TagRule] = _build_tag_rules()


def classify(node: PageElement) -> TagRule:
    """Return the conversion rule for a node.

    Elements without a dedicated rule are TRANSPARENT: their children are
    converted and the element itself adds nothing.
    """
    if is_text(node):
        return TagRule.TEXT
    if not is_element(node):
        return TagRule.IGNORED
    return TAG_RULES.get(node.name, TagRule.TRANSPARENT)


class HtmlToMarkdown:
    """HTML to Markdown converter.

    Each :meth:`convert` call walks one document with its own block stack and
    output buffer, so a converter can be reused but not shared between
    concurrent conversions.

    Parameters
    ----------
    options : HtmlOptions or None, default = None
        Conversion options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an :class:`HtmlOptions`

    """

    def __init__(self, options: HtmlOptions | None = None):
        if options is not None and not isinstance(options, HtmlOptions):
            raise InvalidOptionsError("html", HtmlOptions, type(options))
        self.options: HtmlOptions = options or HtmlOptions()

        self._stack = BlockStack()
        self._output_parts: list[str] = []
        self._handlers: dict[TagRule, Callable[[Any], None]] = {
            TagRule.IGNORED: self._skip,
            TagRule.TEXT: self._visit_text,
            TagRule.TRANSPARENT: self._traverse,
            TagRule.BLACKLISTED: self._skip,
            TagRule.CODE_BLOCK: self._visit_code_block,
            TagRule.BLOCKQUOTE: self._visit_blockquote,
            TagRule.PARAGRAPH: self._visit_paragraph,
            TagRule.LIST: self._visit_list,
            TagRule.LIST_ITEM: self._visit_list_item,
            TagRule.HEADING: self._visit_heading,
            TagRule.PASSTHROUGH: self._visit_passthrough,
            TagRule.ABBREVIATION: self._visit_abbreviation,
            TagRule.IMAGE: self._visit_image,
            TagRule.LINK: self._visit_link,
            TagRule.INLINE_CODE: self._visit_inline_code,
            TagRule.CODE: self._visit_code,
            TagRule.LINE_BREAK: self._visit_line_break,
            TagRule.HORIZONTAL_RULE: self._visit_horizontal_rule,
            TagRule.STRONG: self._visit_strong,
            TagRule.EMPHASIS: self._visit_emphasis,
        }

    def convert(self, soup: BeautifulSoup) -> str:
        """Convert a parsed document to Markdown.

        The tree's whitespace is normalized in place before it is walked.
        The walk is recursive and each nesting level costs about four
        interpreter frames, so at the default recursion limit of 1000
        documents nested deeper than roughly 240 block elements are
        rejected with :class:`ParsingError`.

        Parameters
        ----------
        soup : BeautifulSoup
            Parsed HTML document

        Returns
        -------
        str
            Markdown with at most one blank line in a row and no leading or
            trailing whitespace

        Raises
        ------
        ParsingError
            If the document is nested deeper than the interpreter's recursion limit

        """
        normalize_whitespace(soup)

        self._stack = BlockStack()
        self._output_parts = []
        try:
            self._traverse(soup)
        except RecursionError as e:
            raise ParsingError(
                "Document nesting exceeds the recursion limit", parsing_stage="traversal", original_error=e
            ) from e
        self._output_parts.append(self._stack.flush())

        markdown = BLANK_LINE_RUN_PATTERN.sub("\n\n", "".join(self._output_parts))
        return markdown.strip(STRIPPABLE_WHITESPACE)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _traverse(self, node: Tag) -> None:
        for child in node.children:
            self._visit(child)

    def _visit(self, node: PageElement) -> None:
        # Inline text already written to the enclosing block must reach the
        # output before a nested block starts writing.
        if is_block_level(node) and is_block_level(node.parent) and self._stack.top.buffer:
            self._output_parts.append(self._stack.split())

        self._handlers[classify(node)](node)

    def _write(self, text: str) -> None:
        self._stack.append(text)

    def _wrap(self, node: Tag, opening: str, closing: str) -> None:
        self._write(opening)
        self._traverse(node)
        self._write(closing)

    def _render_block(self, node: Tag, name: str, head: str = "", body: str = "") -> None:
        self._stack.push(name, head, body)
        self._traverse(node)
        self._output_parts.append(self._stack.flush())

    # ------------------------------------------------------------------
    # Block rules
    # ------------------------------------------------------------------

    def _skip(self, node: PageElement) -> None:
        pass

    def _visit_code_block(self, node: Tag) -> None:
        code = find_child(node, "code")
        match = CODE_LANGUAGE_PATTERN.search(get_attribute(code, "class")) if code is not None else None
        language = match.group(1) if match else ""

        self._stack.push("pre")
        self._output_parts.append(f"{CODE_FENCE}{language}\n")
        self._traverse(node)
        self._output_parts.append(self._stack.flush())
        self._output_parts.append(f"{CODE_FENCE}\n")

    def _visit_blockquote(self, node: Tag) -> None:
        self._render_block(node, "blockquote", BLOCKQUOTE_PREFIX, BLOCKQUOTE_PREFIX)

    def _visit_paragraph(self, node: Tag) -> None:
        self._render_block(node, node.name)
        self._output_parts.append("\n")

    def _visit_list(self, node: Tag) -> None:
        self._render_block(node, node.name)

    def _visit_list_item(self, node: Tag) -> None:
        parent = self._stack.find(LIST_TAGS)
        head = ORDERED_LIST_PREFIX if parent is not None and parent.name == "ol" else UNORDERED_LIST_PREFIX
        self._render_block(node, "li", head, LIST_ITEM_CONTINUATION)

    def _visit_heading(self, node: Tag) -> None:
        level = int(node.name[1])
        self._render_block(node, node.name, HEADING_MARKER * level + " ")
        self._output_parts.append("\n")

    # ------------------------------------------------------------------
    # Inline rules
    # ------------------------------------------------------------------

    def _visit_passthrough(self, node: Tag) -> None:
        self._wrap(node, f"<{node.name}>", f"</{node.name}>")

    def _visit_abbreviation(self, node: Tag) -> None:
        title = get_attribute(node, "title")
        self._wrap(node, f'<abbr title="{title}">' if title.strip() else "<abbr>", "</abbr>")

    def _visit_image(self, node: Tag) -> None:
        if self.options.keep_img_tags:
            self._write(outer_html(node))
            return

        alt = get_attribute(node, "alt")
        title = get_attribute(node, "title")
        label = alt if alt.strip() else title if title.strip() else ""
        self._write(f"![{label}]({get_attribute(node, 'src')})")

    def _visit_link(self, node: Tag) -> None:
        self._wrap(node, "[", f"]({get_attribute(node, 'href')})")

    def _visit_inline_code(self, node: Tag) -> None:
        self._wrap(node, INLINE_CODE_DELIMITER, INLINE_CODE_DELIMITER)

    def _visit_code(self, node: Tag) -> None:
        if self._stack.find(["pre"]) is not None:
            self._traverse(node)
        else:
            self._visit_inline_code(node)

    def _visit_line_break(self, node: Tag) -> None:
        self._write("\n")

    def _visit_horizontal_rule(self, node: Tag) -> None:
        self._write(HORIZONTAL_RULE)

    def _visit_strong(self, node: Tag) -> None:
        delimiter = STRONG_DELIMITER_ALT if "*" in text_content(node) else STRONG_DELIMITER
        self._wrap(node, delimiter, delimiter)

    def _visit_emphasis(self, node: Tag) -> None:
        delimiter = EMPHASIS_DELIMITER_ALT if "*" in text_content(node) else EMPHASIS_DELIMITER
        self._wrap(node, delimiter, delimiter)

    def _visit_text(self, node: PageElement) -> None:
        self._write(WHITESPACE_RUN_PATTERN.sub(" ", str(node)))


def html_to_markdown(
    input_data: Union[str, Path, bytes, IO[str], IO[bytes], BeautifulSoup],
    options: HtmlOptions | None = None,
    **kwargs: Any,
) -> str:
    """Convert HTML to Markdown format.

    Parameters
    ----------
    input_data : str, pathlib.Path, bytes, file-like object, or BeautifulSoup
        HTML content to convert. Can be:
        - String containing HTML content directly
        - String path or pathlib.Path pointing to an HTML file
        - Raw bytes; the encoding is detected
        - File-like object in text or binary mode
        - An already parsed BeautifulSoup document (its whitespace is
          normalized in place)
    options : HtmlOptions or None, default None
        Configuration options. If None, uses default settings.
    **kwargs
        Individual option overrides applied on top of ``options``
        (e.g. ``keep_img_tags=True``).

    Returns
    -------
    str
        Markdown representation of the HTML content

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an :class:`HtmlOptions`
    ValidationError
        If an override names an unknown option or holds an invalid value,
        or the input type is not supported
    FileError
        If an input file cannot be found or read
    DependencyError
        If the configured tree builder is not installed
    ParsingError
        If the markup cannot be parsed or is nested too deeply

    Examples
    --------
    >>> html_to_markdown('<ul><li>One</li><li>Two</li></ul>')
    '- One\\n- Two'

    """
    if options is not None and not isinstance(options, HtmlOptions):
        raise InvalidOptionsError("html", HtmlOptions, type(options))
    options = options or HtmlOptions()

    if kwargs:
        unknown = sorted(set(kwargs) - HtmlOptions.field_names())
        if unknown:
            raise ValidationError(
                f"Unknown HTML option(s): {', '.join(unknown)}", parameter_name=unknown[0], parameter_value=kwargs
            )
        try:
            options = options.create_updated(**kwargs)
        except ValueError as e:
            raise ValidationError(str(e), parameter_value=kwargs, original_error=e) from e

    if isinstance(input_data, BeautifulSoup):
        soup = input_data
    else:
        soup = parse_html(read_html_input(input_data), options.html_parser)

    markdown = HtmlToMarkdown(options).convert(soup)
    logger.debug("Converted HTML to %d characters of Markdown", len(markdown))
    return markdown
