#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Range extraction by text markers.

Documents usually mix the section of interest with unrelated boilerplate
such as site headers, footers and navigation. Rather than relying on CSS
selectors, whose validity varies from one source to the next, the section
is located through two literal text anchors:

1. the first element (document pre-order, parents before children) whose
   text content contains the start marker;
2. the first element after it, in the same order, whose text content
   contains any of the accepted end markers.

The range is then collected into a detached container by cloning the start
element and every element reached by :func:`next_element` up to, but not
including, the end element.

Because an ancestor's text always includes its descendants' text, the first
match in pre-order is the outermost element containing the marker. The
``innermost`` switch restricts matches to elements with no matching child
element.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Sequence

from bs4 import BeautifulSoup, Tag

from section2md._text_utils import text_content
from section2md.constants import RANGE_CONTAINER_TAG
from section2md.exceptions import EmptyRangeError, RangeNotFoundError
from section2md.options import ExtractionOptions

logger = logging.getLogger(__name__)


def document_elements(root: Tag) -> list[Tag]:
    """Return all descendant elements of ``root`` in document pre-order.

    The root itself is not included.
    """
    return root.find_all(True)


def _contains_any(element: Tag, markers: Iterable[str]) -> bool:
    text = text_content(element)
    return any(marker in text for marker in markers)


def _is_innermost_match(element: Tag, markers: Sequence[str]) -> bool:
    return not any(_contains_any(child, markers) for child in element.find_all(True, recursive=False))


def _find_first(
    elements: Sequence[Tag], markers: Sequence[str], begin: int = 0, innermost: bool = False
) -> int | None:
    for index in range(begin, len(elements)):
        element = elements[index]
        if not _contains_any(element, markers):
            continue
        if innermost and not _is_innermost_match(element, markers):
            continue
        return index
    return None


def locate_range(
    root: Tag,
    start_marker: str,
    end_markers: Sequence[str],
    innermost: bool = False,
) -> tuple[Tag, Tag]:
    """Find the start and end elements of the marked range.

    Parameters
    ----------
    root : Tag
        Sanitized document tree.
    start_marker : str
        Text the opening element must contain.
    end_markers : sequence of str
        Accepted texts for the closing element.
    innermost : bool, default False
        Skip elements having a child element that also matches.

    Returns
    -------
    tuple of (Tag, Tag)
        The start element and the end element.

    Raises
    ------
    RangeNotFoundError
        If no element contains the start marker (``boundary="start"``), or no
        element after the start contains an end marker (``boundary="end"``).

    """
    elements = document_elements(root)
    end_markers = tuple(end_markers)

    start_index = _find_first(elements, (start_marker,), innermost=innermost)
    if start_index is None:
        logger.info("Start marker %r not found", start_marker)
        raise RangeNotFoundError("start", (start_marker,))

    end_index = _find_first(elements, end_markers, begin=start_index + 1, innermost=innermost)
    if end_index is None:
        logger.info("End marker(s) %r not found after start element", end_markers)
        raise RangeNotFoundError("end", end_markers)

    start, end = elements[start_index], elements[end_index]
    logger.debug("Range located: <%s> (#%d) to <%s> (#%d)", start.name, start_index, end.name, end_index)
    return start, end


def next_element(element: Tag) -> Tag | None:
    """Return the element following ``element`` without entering its subtree.

    This is the next element sibling if there is one. Otherwise the nearest
    ancestor with a next element sibling is found and that sibling returned.
    Returns None once the document is exhausted.
    """
    sibling = element.find_next_sibling()
    if sibling is not None:
        return sibling

    parent = element.parent
    while parent is not None and not isinstance(parent, BeautifulSoup):
        sibling = parent.find_next_sibling()
        if sibling is not None:
            return sibling
        parent = parent.parent
    return None


def _new_container(element: Tag) -> Tag:
    # Build through the owning document so the container shares its tree builder
    for ancestor in element.parents:
        if isinstance(ancestor, BeautifulSoup):
            return ancestor.new_tag(RANGE_CONTAINER_TAG)
    return BeautifulSoup("", "html.parser").new_tag(RANGE_CONTAINER_TAG)


def extract_range(start: Tag, end: Tag) -> Tag | None:
    """Clone the elements from ``start`` up to ``end`` into a new container.

    Parameters
    ----------
    start : Tag
        First element of the range, cloned with its whole subtree.
    end : Tag
        Element closing the range. It is not included. If the walk never
        reaches it, collection continues to the end of the document.

    Returns
    -------
    Tag or None
        A detached ``div`` holding the clones in document order, or None when
        nothing was collected.

    """
    container = _new_container(start)
    container.append(copy.copy(start))

    current = next_element(start)
    while current is not None and current is not end:
        container.append(copy.copy(current))
        current = next_element(current)

    children = container.find_all(True, recursive=False)
    if not children:
        return None
    logger.debug("Extracted %d top-level element(s)", len(children))
    return container


def extract_section(root: Tag, options: ExtractionOptions) -> Tag:
    """Locate the marked range and return it as a detached container.

    Raises
    ------
    RangeNotFoundError
        If either marker is missing.
    EmptyRangeError
        If the markers were found but nothing lies between them.

    """
    start, end = locate_range(root, options.start_marker, options.end_markers, innermost=options.innermost)
    container = extract_range(start, end)
    # The start clone is always collected, so None is only reachable with a replaced extract_range
    if container is None:
        raise EmptyRangeError((options.start_marker, *options.end_markers))
    return container


__all__ = [
    "document_elements",
    "locate_range",
    "next_element",
    "extract_range",
    "extract_section",
]
