#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML to Markdown conversion pipeline.

A conversion runs four synchronous steps on a freshly parsed tree:

1. parse the raw HTML through the injected :class:`DocumentParser`;
2. remove non-content elements (scripts, styles, metadata);
3. when scoped extraction is enabled, narrow the tree to the range between
   the start and end markers;
4. render the chosen root to Markdown and strip surrounding whitespace.

A missing or empty range is not an error: the call returns a
:class:`ConversionResult` carrying a warning message instead of Markdown.
Only a parser failure raises (:class:`ParseFailure`).

Examples
--------
Convert a full document:

    >>> from section2md import ConversionOptions, ExtractionOptions, convert
    >>> options = ConversionOptions(extraction=ExtractionOptions.full_document())
    >>> convert("<p>Hello <b>world</b></p>", options).markdown
    'Hello **world**'

Convert the marked section of a task page:

    >>> result = convert(html_text)
    >>> print(result.text)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from section2md._input_utils import HtmlSource, read_html_input
from section2md.constants import RANGE_NOT_FOUND_TEMPLATE, RangeBoundary
from section2md.emitter import MarkdownEmitter
from section2md.exceptions import EmptyRangeError, RangeNotFoundError
from section2md.extractor import extract_section
from section2md.options import ConversionOptions, ExtractionOptions
from section2md.parsing import DocumentParser, SoupParser
from section2md.sanitizer import strip_non_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a single conversion.

    Parameters
    ----------
    markdown : str
        Converted Markdown. Empty when a warning was produced.
    warning : str or None
        Human-readable notice explaining why no section was converted.
    missing_boundary : {"start", "end"} or None
        Which marker could not be matched, when ``warning`` is set.

    """

    markdown: str
    warning: str | None = None
    missing_boundary: RangeBoundary | None = None

    @property
    def ok(self) -> bool:
        """True when Markdown was produced."""
        return self.warning is None

    @property
    def text(self) -> str:
        """The text to show the user: the warning if any, else the Markdown."""
        return self.warning if self.warning is not None else self.markdown


def range_warning(extraction: ExtractionOptions) -> str:
    """Build the notice shown when the marked range cannot be found."""
    return RANGE_NOT_FOUND_TEMPLATE.format(start=extraction.start_marker, end=" / ".join(extraction.end_markers))


class HtmlSectionConverter:
    """Convert HTML documents, or a marked section of them, to Markdown.

    Parameters
    ----------
    options : ConversionOptions, optional
        Conversion settings. Defaults to scoped extraction with the default
        markers.
    parser : DocumentParser, optional
        Parsing collaborator. Defaults to a :class:`SoupParser` using
        ``options.parser``.
    emitter : MarkdownEmitter, optional
        Markdown emitter to use.

    """

    def __init__(
        self,
        options: ConversionOptions | None = None,
        parser: DocumentParser | None = None,
        emitter: MarkdownEmitter | None = None,
    ):
        self.options = options or ConversionOptions()
        self.parser = parser or SoupParser(self.options.parser)
        self.emitter = emitter or MarkdownEmitter()

    def convert(self, html: str) -> ConversionResult:
        """Convert raw HTML text.

        Raises
        ------
        ParseFailure
            If the parser cannot build a tree from ``html``.

        """
        soup = self.parser.parse(html)
        strip_non_content(soup, self.options.disallowed_elements)

        extraction = self.options.extraction
        if extraction.scoped:
            try:
                root = extract_section(soup, extraction)
            except EmptyRangeError:
                logger.warning("Markers found but the section between them is empty")
                return ConversionResult(markdown="", warning=range_warning(extraction), missing_boundary="end")
            except RangeNotFoundError as e:
                logger.warning("%s", e.message)
                return ConversionResult(
                    markdown="", warning=range_warning(extraction), missing_boundary=e.boundary
                )
        else:
            root = self._document_root(soup)

        markdown = self.emitter.render_children(root).strip()
        logger.debug("Produced %d characters of Markdown", len(markdown))
        return ConversionResult(markdown=markdown)

    def convert_source(self, source: HtmlSource) -> ConversionResult:
        """Read HTML from a path, bytes, file-like object or string and convert it."""
        return self.convert(read_html_input(source))

    @staticmethod
    def _document_root(soup: BeautifulSoup) -> Tag:
        return soup.body if soup.body is not None else soup


def convert(
    html: str,
    options: ConversionOptions | None = None,
    parser: DocumentParser | None = None,
) -> ConversionResult:
    """Convert raw HTML text to Markdown.

    Parameters
    ----------
    html : str
        HTML document or fragment.
    options : ConversionOptions, optional
        Conversion settings; scoped extraction with default markers if omitted.
    parser : DocumentParser, optional
        Parsing collaborator; BeautifulSoup by default.

    Returns
    -------
    ConversionResult
        Markdown, or a warning when the marked section cannot be found.

    Raises
    ------
    ParseFailure
        If the HTML cannot be parsed.

    """
    return HtmlSectionConverter(options, parser=parser).convert(html)


def convert_file(source: HtmlSource, options: ConversionOptions | None = None) -> ConversionResult:
    """Convert HTML read from a path, bytes, file-like object or string.

    Raises
    ------
    FileError
        If a referenced file cannot be read.
    InputError
        If the input type is not supported.
    ParseFailure
        If the HTML cannot be parsed.

    """
    return HtmlSectionConverter(options).convert_source(source)


__all__ = ["ConversionResult", "HtmlSectionConverter", "convert", "convert_file", "range_warning"]
