#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the blockdown library.

This module centralizes the tag tables, patterns and default configuration
values used across blockdown. Constants are organized by category:

1. Type Definitions - Literal types and type aliases
2. Configuration Defaults - Defaults for ``HtmlOptions``
3. Element Classification - Block-level and rule-family tag tables
4. Markdown Output - Prefixes, delimiters and cleanup patterns
5. Dependencies and Exit Codes
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "lxml", "html5lib"]

# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULT_KEEP_IMG_TAGS = False
DEFAULT_HTML_PARSER: HtmlParser = "html.parser"

HTML_PARSERS: tuple[str, ...] = ("html.parser", "lxml", "html5lib")

# Environment variable prefix for CLI defaults (BLOCKDOWN_KEEP_IMG_TAGS=1)
ENV_VAR_PREFIX = "BLOCKDOWN_"

# =============================================================================
# Element Classification
# =============================================================================

# Block-level elements per the HTML5 content model, plus the document
# scaffolding and table structure elements that occupy their own region.
BLOCK_LEVEL_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "body",
        "caption",
        "center",
        "colgroup",
        "dd",
        "details",
        "dialog",
        "dir",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "frameset",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "head",
        "header",
        "hgroup",
        "hr",
        "html",
        "legend",
        "li",
        "main",
        "menu",
        "nav",
        "noscript",
        "ol",
        "p",
        "pre",
        "section",
        "summary",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "tr",
        "ul",
    }
)

# Form controls and non-content elements: nothing is rendered, children are skipped
BLACKLISTED_TAGS = frozenset(
    {
        "button",
        "datalist",
        "fieldset",
        "form",
        "input",
        "label",
        "legend",
        "meter",
        "optgroup",
        "option",
        "output",
        "progress",
        "select",
        "textarea",
        "style",
        "script",
    }
)

# Inline elements with no Markdown syntax; their tags are written through verbatim
PASSTHROUGH_INLINE_TAGS = frozenset({"del", "ins", "kbd", "s", "small", "strike", "sub", "sup"})

PARAGRAPH_TAGS = frozenset({"div", "p"})
LIST_TAGS = frozenset({"menu", "ol", "ul"})
HEADING_TAGS = frozenset(f"h{level}" for level in range(1, 7))
STRONG_TAGS = frozenset({"strong", "b"})
EMPHASIS_TAGS = frozenset({"em", "i"})

# =============================================================================
# Markdown Output
# =============================================================================

ROOT_BLOCK_NAME = "root"

ORDERED_LIST_PREFIX = "1. "
UNORDERED_LIST_PREFIX = "- "
LIST_ITEM_CONTINUATION = "  "
BLOCKQUOTE_PREFIX = "> "
HEADING_MARKER = "#"
CODE_FENCE = "```"
INLINE_CODE_DELIMITER = "`"
HORIZONTAL_RULE = "\n\n---\n\n"

STRONG_DELIMITER = "**"
STRONG_DELIMITER_ALT = "__"
EMPHASIS_DELIMITER = "*"
EMPHASIS_DELIMITER_ALT = "_"

# ASCII whitespace and NUL; a non-breaking space is content, not whitespace
STRIPPABLE_WHITESPACE = " \t\n\v\f\r\0"

WHITESPACE_RUN_PATTERN = re.compile(r"[ \t\n\v\f\r]{2,}")
BLANK_LINE_RUN_PATTERN = re.compile(r"\n{3,}")
CODE_LANGUAGE_PATTERN = re.compile(r"lang-(\w+)", re.ASCII)
# Each line keeps its terminating newline; a trailing newline adds no empty line
LINE_PATTERN = re.compile(r"[^\n]*\n|[^\n]+")

# =============================================================================
# Dependencies and Exit Codes
# =============================================================================

# (install_name, import_name, version_spec) for each BeautifulSoup tree builder
DEPS_HTML_PARSERS: dict[str, list[tuple[str, str, str]]] = {
    "html.parser": [],
    "lxml": [("lxml", "lxml", "")],
    "html5lib": [("html5lib", "html5lib", "")],
}

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
