#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the section2md package.

This module centralizes the static, read-only configuration shared by the
sanitizer, the range extractor, the Markdown emitter and the command line
front end.
"""

from __future__ import annotations

from typing import Literal

HtmlParser = Literal["html.parser", "html5lib", "lxml"]

RangeBoundary = Literal["start", "end"]

# Elements that never carry document content and are removed before conversion
DISALLOWED_ELEMENTS: frozenset[str] = frozenset({"script", "style", "meta", "link", "noscript"})

# Elements rendered even when their text content is empty
SELF_CONTAINED_ELEMENTS: frozenset[str] = frozenset({"br", "hr", "img"})

HEADING_ELEMENTS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

PASSTHROUGH_ELEMENTS: tuple[str, ...] = ("div", "span", "section", "article", "li")

TABLE_CELL_ELEMENTS: tuple[str, ...] = ("td", "th")

UNORDERED_LIST_PREFIX = "- "

TABLE_SEPARATOR_CELL = "---"

HORIZONTAL_RULE = "---"

# Range extraction defaults (task statement pages of competitive programming sites)
DEFAULT_SCOPED_EXTRACTION = True
DEFAULT_START_MARKER = "実行時間制限:"
DEFAULT_END_MARKERS: tuple[str, ...] = ("Problem Statement", "問題文", "問題の説明")
DEFAULT_INNERMOST_MATCH = False

DEFAULT_HTML_PARSER: HtmlParser = "html.parser"

# Tag name of the detached element holding an extracted range
RANGE_CONTAINER_TAG = "div"

RANGE_NOT_FOUND_TEMPLATE = (
    '⚠️ Warning: the section from "{start}" to "{end}" could not be found.\n\n'
    "Check the structure of the HTML file."
)

HTML_FILE_EXTENSIONS: tuple[str, ...] = (".html", ".htm")

DEFAULT_INPUT_ENCODING = "utf-8"

# CLI exit codes
EXIT_SUCCESS = 0
EXIT_RANGE_WARNING = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_INPUT_ERROR = 10
