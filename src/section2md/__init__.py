"""section2md - Convert HTML documents, or a marked section of them, to Markdown.

section2md parses an HTML document with BeautifulSoup, removes non-content
elements, optionally narrows the tree to the section lying between two text
markers, and renders what remains as Markdown by walking the tree directly.

The default markers select the task statement of saved competitive
programming task pages: the section opens at the element containing
"実行時間制限:" and closes before the element containing "Problem Statement",
"問題文" or "問題の説明".

Examples
--------
Convert the marked section of a saved page:

    >>> from section2md import convert_file
    >>> result = convert_file("task.html")
    >>> print(result.text)

Convert a complete document:

    >>> from section2md import ConversionOptions, ExtractionOptions, convert
    >>> options = ConversionOptions(extraction=ExtractionOptions.full_document())
    >>> convert("<ul><li>a</li><li>b</li></ul>", options).markdown
    '- a\\n- b'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from section2md.converter import ConversionResult, HtmlSectionConverter, convert, convert_file
from section2md.emitter import MarkdownEmitter, emit_markdown
from section2md.exceptions import (
    EmptyRangeError,
    FileError,
    InputError,
    ParseFailure,
    RangeNotFoundError,
    Section2MdError,
    ValidationError,
)
from section2md.extractor import extract_range, extract_section, locate_range, next_element
from section2md.options import ConversionOptions, ExtractionOptions
from section2md.parsing import DocumentParser, SoupParser
from section2md.sanitizer import strip_non_content

__version__ = "0.1.0"

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "DocumentParser",
    "EmptyRangeError",
    "ExtractionOptions",
    "FileError",
    "HtmlSectionConverter",
    "InputError",
    "MarkdownEmitter",
    "ParseFailure",
    "RangeNotFoundError",
    "Section2MdError",
    "SoupParser",
    "ValidationError",
    "convert",
    "convert_file",
    "emit_markdown",
    "extract_range",
    "extract_section",
    "locate_range",
    "next_element",
    "strip_non_content",
]
