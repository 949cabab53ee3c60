#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockdown/blocks.py
"""Block stack and line renderer.

Every block-level construct being converted (a paragraph, a list item, a
blockquote) owns a :class:`Block` on the :class:`BlockStack`. Inline content
is appended to the top block's buffer. Flushing the top block renders its
buffer line by line, prefixing each line with the prefixes of every block on
the stack, bottom to top.

Each block has two prefixes. ``head`` is used the first time the block
contributes to a rendered line and ``body`` on every line after that; once
any line has been rendered, every block on the stack counts as opened. That
is what gives a list item its bullet on the first line only and its
continuation indent afterwards, however deeply the flushed block is nested.

Examples
--------
>>> stack = BlockStack()
>>> item = stack.push("li", head="- ", body="  ")
>>> stack.append("first\\nsecond")
>>> stack.flush()
'- first\\n  second\\n'

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional

from blockdown.constants import LINE_PATTERN, ROOT_BLOCK_NAME, STRIPPABLE_WHITESPACE


@dataclass
class Block:
    """A nested rendering context.

    Parameters
    ----------
    name : str
        Rule family that created the block ("li", "blockquote", "h2", ...)
    head : str
        Prefix for the first rendered line of the block's lifetime
    body : str
        Prefix for every later line
    opened : bool
        Whether a line has been rendered while this block was on the stack
    buffer : str
        Unprefixed text accumulated since the block was pushed

    """

    name: str
    head: str = ""
    body: str = ""
    opened: bool = False
    buffer: str = ""

    @property
    def prefix(self) -> str:
        """Prefix this block contributes to the next rendered line."""
        return self.body if self.opened else self.head


class BlockStack:
    """Ordered stack of :class:`Block` contexts over a root sentinel.

    ``push``, ``append``, ``flush`` and ``split`` are the only operations
    that change the stack.
    """

    def __init__(self) -> None:
        self._blocks: list[Block] = [Block(ROOT_BLOCK_NAME)]

    def __len__(self) -> int:
        return len(self._blocks)

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    @property
    def top(self) -> Block:
        """The block currently receiving text."""
        return self._blocks[-1]

    def push(self, name: str, head: str = "", body: str = "") -> Block:
        """Open a new block on top of the stack."""
        block = Block(name, head, body)
        self._blocks.append(block)
        return block

    def append(self, text: str) -> None:
        """Add text to the top block's buffer."""
        self._blocks[-1].buffer += text

    def find(self, names: Iterable[str]) -> Optional[Block]:
        """Return the innermost block whose name is one of ``names``."""
        wanted = frozenset(names)
        for block in reversed(self._blocks):
            if block.name in wanted:
                return block
        return None

    def flush(self) -> str:
        """Render the top block's buffer into prefixed lines and pop the block.

        The buffer is split at line breaks; a trailing line break ends the
        last line rather than starting an empty one, and an empty buffer
        renders no lines at all. Each line gets the stack's current prefix
        and is right-trimmed. The result always ends with a line break so
        consecutive flushes land on separate lines.

        Returns
        -------
        str
            Rendered lines joined by ``\\n``, plus a final ``\\n`` when any
            line was rendered; ``""`` for an empty buffer

        """
        lines = []
        for line in LINE_PATTERN.findall(self._blocks[-1].buffer):
            prefix = "".join(block.prefix for block in self._blocks)
            for block in self._blocks:
                block.opened = True
            lines.append(prefix + line.rstrip(STRIPPABLE_WHITESPACE))

        self._blocks.pop()
        lines.append("")
        return "\n".join(lines)

    def split(self) -> str:
        """Commit the top block's text while keeping its context open.

        The top block is flushed and replaced by a fresh copy with the same
        name and prefixes, already opened, so text that follows continues
        with the block's ``body`` prefix.

        Returns
        -------
        str
            The rendered lines of the flushed block

        """
        successor = replace(self._blocks[-1], opened=True, buffer="")
        rendered = self.flush()
        self._blocks.append(successor)
        return rendered
