#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utilities for uniform input handling.

The converter itself only works on HTML text. These helpers turn the other
accepted inputs (paths, bytes, file-like objects) into that text and give
clear errors for anything else.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO, Any, Union

from section2md.constants import DEFAULT_INPUT_ENCODING, HTML_FILE_EXTENSIONS
from section2md.exceptions import FileError, InputError

PathLike = Union[str, Path]
HtmlSource = Union[str, Path, bytes, IO[str], IO[bytes]]


def is_file_like(obj: Any) -> bool:
    """Check if an object is file-like (has a callable read method)."""
    return hasattr(obj, "read") and callable(obj.read)


def is_html_filename(name: PathLike) -> bool:
    """Return True if ``name`` has an HTML file extension.

    Examples
    --------
    >>> is_html_filename("Task.HTML")
    True
    >>> is_html_filename("notes.txt")
    False
    """
    return str(name).lower().endswith(HTML_FILE_EXTENSIONS)


def _decode(data: bytes, encoding: str) -> str:
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise InputError(f"Input is not valid {encoding} text: {e}", original_error=e) from e


def _read_file(path: PathLike, encoding: str) -> str:
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileError(f"File is not valid {encoding} text: {path}", file_path=str(path), original_error=e) from e
    except OSError as e:
        raise FileError(f"Failed to read HTML file: {e}", file_path=str(path), original_error=e) from e


def read_html_input(source: HtmlSource, encoding: str = DEFAULT_INPUT_ENCODING) -> str:
    """Return the HTML text held by or referenced from ``source``.

    Parameters
    ----------
    source : str, pathlib.Path, bytes or file-like object
        - ``pathlib.Path``: the file is read.
        - ``str``: read as a file when it names an existing file, otherwise
          taken as HTML text.
        - ``bytes``: decoded.
        - file-like object, text or binary: read to the end, bytes decoded.
    encoding : str, default "utf-8"
        Encoding used for files and bytes.

    Returns
    -------
    str
        The HTML text.

    Raises
    ------
    FileError
        If a referenced file cannot be read.
    InputError
        If the input type is unsupported or bytes cannot be decoded.

    """
    if isinstance(source, Path):
        if not source.is_file():
            raise FileError(f"File does not exist: {source}", file_path=str(source))
        return _read_file(source, encoding)

    if isinstance(source, str):
        # Strings containing markup are HTML and never looked up on disk
        if "<" not in source and os.path.isfile(source):
            return _read_file(source, encoding)
        return source

    if isinstance(source, (bytes, bytearray)):
        return _decode(bytes(source), encoding)

    if is_file_like(source):
        try:
            content = source.read()
        except OSError as e:
            raise FileError(f"Failed to read HTML input: {e}", original_error=e) from e
        if isinstance(content, bytes):
            return _decode(content, encoding)
        if isinstance(content, str):
            return content
        raise InputError(
            f"File-like object returned {type(content).__name__}, expected str or bytes", parameter_value=source
        )

    raise InputError(
        f"Unsupported input type: {type(source).__name__}. "
        "Supported types: HTML strings, path-like, bytes, file-like",
        parameter_value=source,
    )


__all__ = ["HtmlSource", "is_file_like", "is_html_filename", "read_html_input"]
