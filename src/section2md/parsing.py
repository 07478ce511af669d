#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML parsing capability used by the converter.

The converter never builds trees itself; it asks an injected
:class:`DocumentParser` for one. :class:`SoupParser` is the default
implementation, backed by BeautifulSoup with a selectable tree builder.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from bs4 import BeautifulSoup

from section2md.constants import DEFAULT_HTML_PARSER, HtmlParser
from section2md.exceptions import ParseFailure

logger = logging.getLogger(__name__)


@runtime_checkable
class DocumentParser(Protocol):
    """Anything able to turn raw HTML text into a BeautifulSoup tree."""

    def parse(self, text: str) -> BeautifulSoup:
        """Parse ``text`` and return a fresh document tree.

        Raises
        ------
        ParseFailure
            If the text cannot be parsed.

        """
        ...


class SoupParser:
    """BeautifulSoup-backed :class:`DocumentParser`.

    Parameters
    ----------
    features : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        Tree builder passed to BeautifulSoup. ``lxml`` and ``html5lib`` must
        be installed separately.

    """

    def __init__(self, features: HtmlParser = DEFAULT_HTML_PARSER):
        self.features = features

    def parse(self, text: str) -> BeautifulSoup:
        """Parse ``text`` into a new tree, wrapping any parser error in ParseFailure."""
        try:
            soup = BeautifulSoup(text, self.features)
        except Exception as e:
            raise ParseFailure(parser_name=self.features, original_error=e) from e
        logger.debug("Parsed %d characters of HTML with %s", len(text), self.features)
        return soup

    def __repr__(self) -> str:
        return f"{type(self).__name__}(features={self.features!r})"


__all__ = ["DocumentParser", "SoupParser"]
