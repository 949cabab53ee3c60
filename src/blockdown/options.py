#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML to Markdown conversion.

Options are frozen dataclasses: build one, hand it to the converter, and use
``create_updated`` to derive variants instead of mutating it.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from blockdown.constants import DEFAULT_HTML_PARSER, DEFAULT_KEEP_IMG_TAGS, HTML_PARSERS, HtmlParser


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Return the names of all option fields."""
        return frozenset(f.name for f in fields(cls))


@dataclass(frozen=True)
class HtmlOptions(CloneFrozenMixin):
    """Configuration options for HTML to Markdown conversion.

    Parameters
    ----------
    keep_img_tags : bool, default False
        Preserve the raw ``<img>`` markup instead of emitting ``![alt](src)``.
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup tree builder used to parse the markup. ``lxml`` and
        ``html5lib`` must be installed separately.

    Examples
    --------
    >>> options = HtmlOptions(keep_img_tags=True)
    >>> options.create_updated(html_parser="lxml").html_parser
    'lxml'

    """

    keep_img_tags: bool = field(
        default=DEFAULT_KEEP_IMG_TAGS,
        metadata={"help": "Keep raw <img> tags instead of converting them to Markdown images"},
    )
    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup tree builder", "choices": list(HTML_PARSERS)},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``html_parser`` names an unknown tree builder.

        """
        if self.html_parser not in HTML_PARSERS:
            raise ValueError(f"html_parser must be one of {', '.join(HTML_PARSERS)}, got {self.html_parser!r}")
