"""Utilities for uniform input handling.

``html_to_markdown`` accepts markup in several shapes: a string of HTML, a
path to an HTML file, raw bytes, or a text/binary file-like object. This
module resolves all of them to a single decoded string before parsing.

Functions
---------
- is_path_like: Check if input is path-like (string or Path object)
- is_file_like: Check if input is a file-like object
- decode_html_bytes: Decode raw HTML bytes with encoding detection
- read_html_input: Resolve any supported input to decoded markup
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Any, Union

from bs4 import UnicodeDammit

from .exceptions import FileAccessError, FileNotFoundError, ValidationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
InputType = Union[str, Path, bytes, IO[str], IO[bytes]]


def is_path_like(obj: Any) -> bool:
    """Check if an object is path-like (string or pathlib.Path).

    Examples
    --------
    >>> is_path_like("page.html")
    True
    >>> is_path_like(b"<p>x</p>")
    False
    """
    return isinstance(obj, (str, Path))


def is_file_like(obj: Any) -> bool:
    """Check if an object is file-like (has a callable ``read``)."""
    return hasattr(obj, "read") and callable(obj.read)


def _looks_like_file_path(text: str) -> bool:
    # Markup always contains a tag opener; a bare existing filename does not.
    return "<" not in text and "\n" not in text and os.path.isfile(text)


def decode_html_bytes(data: bytes) -> str:
    """Decode HTML bytes, honoring BOMs and ``<meta charset>`` declarations.

    Parameters
    ----------
    data : bytes
        Raw HTML document

    Returns
    -------
    str
        Decoded markup. Bytes no encoding can decode come back as windows-1252
        with replacement characters.

    """
    dammit = UnicodeDammit(data, is_html=True)
    logger.debug("Decoded HTML bytes as %s", dammit.original_encoding)
    return dammit.unicode_markup


def _read_html_file(path: PathLike) -> str:
    path_str = str(path)
    if not os.path.exists(path_str):
        raise FileNotFoundError(path_str)
    if not os.path.isfile(path_str):
        raise FileAccessError(path_str, message=f"Path is not a file: {path_str}")

    try:
        with open(path_str, "rb") as f:
            data = f.read()
    except OSError as e:
        raise FileAccessError(path_str, original_error=e) from e

    logger.debug("Read %d bytes from %s", len(data), path_str)
    return decode_html_bytes(data)


def read_html_input(input_data: InputType) -> str:
    """Resolve a supported input to a string of HTML markup.

    Parameters
    ----------
    input_data : str, pathlib.Path, bytes, or file-like object
        HTML content to resolve. Can be:
        - String containing HTML content directly
        - String path to an existing HTML file (no ``<`` in the string)
        - pathlib.Path object pointing to an HTML file
        - Raw bytes of an HTML document
        - File-like object opened in text or binary mode

    Returns
    -------
    str
        Decoded HTML markup

    Raises
    ------
    FileNotFoundError
        If a ``pathlib.Path`` does not exist
    FileAccessError
        If a file exists but cannot be read
    ValidationError
        If the input type is not supported

    Examples
    --------
    >>> read_html_input("<p>Hi</p>")
    '<p>Hi</p>'
    >>> read_html_input(b"<p>Hi</p>")
    '<p>Hi</p>'
    """
    if isinstance(input_data, Path):
        return _read_html_file(input_data)

    if isinstance(input_data, str):
        if _looks_like_file_path(input_data):
            return _read_html_file(input_data)
        return input_data

    if isinstance(input_data, (bytes, bytearray)):
        return decode_html_bytes(bytes(input_data))

    if is_file_like(input_data):
        try:
            content = input_data.read()
        except OSError as e:
            name = str(getattr(input_data, "name", "<stream>"))
            raise FileAccessError(name, original_error=e) from e
        if isinstance(content, bytes):
            return decode_html_bytes(content)
        return content

    raise ValidationError(
        f"Unsupported input type: {type(input_data).__name__}. "
        "Supported types: HTML strings, path-like, bytes, file-like",
        parameter_name="input_data",
        parameter_value=input_data,
    )
