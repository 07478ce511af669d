#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Text content of document elements.

BeautifulSoup's default ``get_text`` leaves out the strings it files under
dedicated classes, such as ruby annotations (``rt``, ``rp``) and template
contents. Marker searches and Markdown rendering need the complete text of
an element, so both go through :func:`text_content`.
"""

from __future__ import annotations

from bs4 import CData, NavigableString, Tag
from bs4.element import RubyParenthesisString, RubyTextString, TemplateString

# Comments, doctypes and other PreformattedString subclasses stay excluded
TEXT_CONTENT_TYPES: tuple[type[NavigableString], ...] = (
    NavigableString,
    CData,
    RubyTextString,
    RubyParenthesisString,
    TemplateString,
)


def text_content(element: Tag) -> str:
    """Return the concatenated text of every content string below ``element``.

    Examples
    --------
    >>> from bs4 import BeautifulSoup
    >>> soup = BeautifulSoup("<b>漢<rt>かん</rt></b>", "html.parser")
    >>> text_content(soup.b)
    '漢かん'
    """
    return element.get_text(types=TEXT_CONTENT_TYPES)


__all__ = ["TEXT_CONTENT_TYPES", "text_content"]
