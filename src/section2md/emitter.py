#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markdown emitter for BeautifulSoup document trees.

The emitter walks a tree recursively and renders it directly to a Markdown
string; there is no intermediate representation. Element handling is looked
up by tag name in a dispatch table, and any tag without a handler is treated
as a transparent container whose children are rendered in order.

Supported HTML Elements
-----------------------
- Headings h1-h6, paragraphs, line breaks, horizontal rules
- Bold (strong, b), italic (em, i), inline code, ``var`` as inline math
- Preformatted blocks as fenced code
- Blockquotes
- Links and images
- Ordered and unordered lists (direct ``li`` children)
- Tables, with a separator row after a first row containing ``th`` cells

Elements whose text content is empty produce no output, except ``br``,
``hr`` and ``img``. Inline formatting uses the element's plain text, so
nested markup inside bold, italic, code, headings and links is flattened.

Examples
--------
    >>> from bs4 import BeautifulSoup
    >>> from section2md.emitter import MarkdownEmitter
    >>> soup = BeautifulSoup("<h2>Input</h2><p>Read <var>N</var>.</p>", "html.parser")
    >>> MarkdownEmitter().render_children(soup).strip()
    '## Input\\n\\n\\nRead $N$.'
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from bs4 import NavigableString, PageElement, Tag
from bs4.element import PreformattedString

from section2md._text_utils import text_content
from section2md.constants import (
    HEADING_ELEMENTS,
    HORIZONTAL_RULE,
    PASSTHROUGH_ELEMENTS,
    SELF_CONTAINED_ELEMENTS,
    TABLE_CELL_ELEMENTS,
    TABLE_SEPARATOR_CELL,
    UNORDERED_LIST_PREFIX,
)

logger = logging.getLogger(__name__)

ElementHandler = Callable[[Tag, str], str]


class MarkdownEmitter:
    """Render document nodes as Markdown.

    The emitter is stateless: it never modifies the tree it is given and a
    single instance can be reused for any number of documents.
    """

    def __init__(self) -> None:
        handlers: dict[str, ElementHandler] = {
            "p": self._process_paragraph,
            "br": self._process_line_break,
            "hr": self._process_horizontal_rule,
            "strong": self._process_bold,
            "b": self._process_bold,
            "em": self._process_italic,
            "i": self._process_italic,
            "code": self._process_inline_code,
            "var": self._process_variable,
            "pre": self._process_code_block,
            "blockquote": self._process_blockquote,
            "a": self._process_link,
            "img": self._process_image,
            "ul": self._process_unordered_list,
            "ol": self._process_ordered_list,
            "table": self._process_table,
        }
        for name in HEADING_ELEMENTS:
            handlers[name] = self._process_heading
        for name in PASSTHROUGH_ELEMENTS:
            handlers[name] = self._process_passthrough
        self._handlers = handlers

    def render(self, node: PageElement) -> str:
        """Render a single node, text or element, with its subtree."""
        if isinstance(node, Tag):
            return self._process_element(node)
        # Comments, doctypes, CDATA and processing instructions carry no content
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            return self._process_text(node)
        return ""

    def render_children(self, element: Tag) -> str:
        """Render the children of ``element`` in order and concatenate them."""
        return "".join(self.render(child) for child in element.children)

    def _process_text(self, node: NavigableString) -> str:
        text = node.strip()
        return f"{text} " if text else ""

    def _process_element(self, element: Tag) -> str:
        name = element.name.lower()
        text = text_content(element).strip()

        if not text and name not in SELF_CONTAINED_ELEMENTS:
            return ""

        handler = self._handlers.get(name, self._process_passthrough)
        return handler(element, text)

    def _process_passthrough(self, element: Tag, text: str) -> str:
        return self.render_children(element)

    def _process_heading(self, element: Tag, text: str) -> str:
        level = int(element.name[1])
        return f"\n{'#' * level} {text}\n\n"

    def _process_paragraph(self, element: Tag, text: str) -> str:
        return f"\n{self.render_children(element)}\n\n"

    def _process_line_break(self, element: Tag, text: str) -> str:
        return "\n"

    def _process_horizontal_rule(self, element: Tag, text: str) -> str:
        return f"\n{HORIZONTAL_RULE}\n\n"

    def _process_bold(self, element: Tag, text: str) -> str:
        return f"**{text}**"

    def _process_italic(self, element: Tag, text: str) -> str:
        return f"*{text}*"

    def _process_inline_code(self, element: Tag, text: str) -> str:
        return f"`{text}`"

    def _process_variable(self, element: Tag, text: str) -> str:
        return f"${text}$"

    def _process_code_block(self, element: Tag, text: str) -> str:
        """Fence the raw text of the block, preferring a nested ``code`` element."""
        code = element.find("code")
        code_text = text_content(code) if code is not None else text
        return f"\n```\n{code_text}\n```\n\n"

    def _process_blockquote(self, element: Tag, text: str) -> str:
        return f"\n> {self.render_children(element)}\n\n"

    def _process_link(self, element: Tag, text: str) -> str:
        href = element.get("href")
        return f"[{text}]({href})" if href else text

    def _process_image(self, element: Tag, text: str) -> str:
        src = element.get("src")
        if not src:
            return ""
        alt = element.get("alt") or ""
        return f"![{alt}]({src})"

    def _process_unordered_list(self, element: Tag, text: str) -> str:
        return f"\n{self._process_list_items(element, ordered=False)}\n"

    def _process_ordered_list(self, element: Tag, text: str) -> str:
        return f"\n{self._process_list_items(element, ordered=True)}\n"

    def _process_list_items(self, element: Tag, ordered: bool) -> str:
        """Render the direct ``li`` children, one per line, with their markers.

        Bullets and numbers are only ever added here; a ``li`` rendered on its
        own is a plain passthrough.
        """
        lines = []
        for index, item in enumerate(element.find_all("li", recursive=False), start=1):
            prefix = f"{index}. " if ordered else UNORDERED_LIST_PREFIX
            lines.append(f"{prefix}{self.render_children(item).strip()}")
        return "\n".join(lines)

    def _process_table(self, element: Tag, text: str) -> str:
        """Render every row of the table as a pipe-delimited line.

        Rows and cells are collected at any depth, so ``thead``/``tbody``
        wrappers are transparent. A separator row follows the first row when
        that row holds at least one ``th``.
        """
        rows = element.find_all("tr")
        if not rows:
            return ""

        lines = []
        for row_index, row in enumerate(rows):
            cells = row.find_all(list(TABLE_CELL_ELEMENTS))
            contents = [self.render_children(cell).strip().replace("\n", " ") for cell in cells]
            lines.append(f"| {' | '.join(contents)} |\n")

            if row_index == 0 and row.find("th") is not None:
                lines.append(f"| {' | '.join(TABLE_SEPARATOR_CELL for _ in cells)} |\n")

        logger.debug("Rendered table with %d row(s)", len(rows))
        return "\n" + "".join(lines) + "\n"


_DEFAULT_EMITTER = MarkdownEmitter()


def emit_markdown(node: PageElement) -> str:
    """Render ``node`` with a shared :class:`MarkdownEmitter`."""
    return _DEFAULT_EMITTER.render(node)


__all__ = ["MarkdownEmitter", "emit_markdown"]
