"""blockdown - HTML to Markdown conversion driven by a stack of block contexts.

blockdown walks a BeautifulSoup tree depth first and keeps one block context
per open block-level element. Each context knows the prefix its first line
takes (a list bullet, a heading marker, a quote marker) and the prefix every
later line takes, so arbitrarily nested lists, blockquotes and paragraphs
render with the right indentation.

Requirements
------------
- Python 3.10+
- beautifulsoup4 (``lxml`` or ``html5lib`` optionally, as alternative tree builders)

Examples
--------
Basic usage:

    >>> from blockdown import html_to_markdown
    >>> html_to_markdown("<blockquote><p>Quoted</p></blockquote>")
    '> Quoted'

With options:

    >>> from blockdown import HtmlOptions
    >>> html_to_markdown('<img src="x.png" alt="X">', options=HtmlOptions(keep_img_tags=False))
    '![X](x.png)'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from blockdown.exceptions import (
    BlockdownError,
    DependencyError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from blockdown.html2markdown import HtmlToMarkdown, TagRule, html_to_markdown
from blockdown.options import HtmlOptions

__all__ = [
    "html_to_markdown",
    "HtmlToMarkdown",
    "HtmlOptions",
    "TagRule",
    "BlockdownError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "FileAccessError",
    "ParsingError",
    "DependencyError",
]
