#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML section conversion.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy instead of mutating an instance.

Examples
--------
Convert the whole document instead of the marked section:

    >>> from section2md.options import ConversionOptions, ExtractionOptions
    >>> options = ConversionOptions(extraction=ExtractionOptions.full_document())

Accept a different pair of markers:

    >>> extraction = ExtractionOptions(start_marker="Time Limit:", end_markers=("Constraints",))
    >>> options = ConversionOptions(extraction=extraction)
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from section2md.constants import (
    DEFAULT_END_MARKERS,
    DEFAULT_HTML_PARSER,
    DEFAULT_INNERMOST_MATCH,
    DEFAULT_SCOPED_EXTRACTION,
    DEFAULT_START_MARKER,
    DISALLOWED_ELEMENTS,
    HtmlParser,
)


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


@dataclass(frozen=True)
class ExtractionOptions(CloneFrozenMixin):
    """Settings for locating the section of the document to convert.

    Parameters
    ----------
    scoped : bool, default True
        Narrow the document to the range between the markers before
        conversion. When False the whole document body is converted.
    start_marker : str, default "実行時間制限:"
        Text searched for in the element that opens the range.
    end_markers : tuple of str
        Accepted aliases for the text of the element that closes the range.
        The closing element itself is not part of the range.
    innermost : bool, default False
        Only match elements none of whose child elements also contain the
        marker. By default the first matching element in document order is
        used, which is the outermost one.

    """

    scoped: bool = field(
        default=DEFAULT_SCOPED_EXTRACTION,
        metadata={"help": "Convert only the section between the start and end markers", "importance": "core"},
    )
    start_marker: str = field(
        default=DEFAULT_START_MARKER,
        metadata={"help": "Text contained in the element that opens the section", "importance": "core"},
    )
    end_markers: tuple[str, ...] = field(
        default=DEFAULT_END_MARKERS,
        metadata={"help": "Accepted texts of the element that closes the section", "importance": "core"},
    )
    innermost: bool = field(
        default=DEFAULT_INNERMOST_MATCH,
        metadata={"help": "Match the innermost element containing a marker", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize marker collections and validate them.

        Raises
        ------
        ValueError
            If scoped extraction is requested without usable markers.

        """
        if isinstance(self.end_markers, str):
            object.__setattr__(self, "end_markers", (self.end_markers,))
        elif not isinstance(self.end_markers, tuple):
            object.__setattr__(self, "end_markers", tuple(self.end_markers))

        if not self.scoped:
            return
        if not self.start_marker:
            raise ValueError("start_marker must be a non-empty string when scoped extraction is enabled")
        if not self.end_markers or not all(self.end_markers):
            raise ValueError(f"end_markers must contain non-empty strings, got {self.end_markers!r}")

    @classmethod
    def full_document(cls) -> ExtractionOptions:
        """Return options that convert the whole document."""
        return cls(scoped=False)


@dataclass(frozen=True)
class ConversionOptions(CloneFrozenMixin):
    """Configuration for a complete HTML to Markdown conversion.

    Parameters
    ----------
    parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup parser backend used to build the document tree.
    extraction : ExtractionOptions
        Range extraction settings.
    disallowed_elements : frozenset of str
        Tag names removed from the tree before conversion.

    """

    parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "HTML parser backend",
            "choices": ["html.parser", "html5lib", "lxml"],
            "importance": "advanced",
        },
    )
    extraction: ExtractionOptions = field(
        default_factory=ExtractionOptions,
        metadata={"help": "Range extraction settings", "importance": "core"},
    )
    disallowed_elements: frozenset[str] = field(
        default=DISALLOWED_ELEMENTS,
        metadata={"help": "Elements removed before conversion", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize the disallowed element collection."""
        if not isinstance(self.disallowed_elements, frozenset):
            object.__setattr__(
                self, "disallowed_elements", frozenset(name.lower() for name in self.disallowed_elements)
            )


__all__ = ["CloneFrozenMixin", "ExtractionOptions", "ConversionOptions"]
