#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Removal of non-content elements from a parsed document tree.

Script, style, metadata and similar elements never contribute Markdown
output, and their text would otherwise leak into the text-content searches
performed by the range extractor. They are removed in place before any other
processing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import Tag

from section2md.constants import DISALLOWED_ELEMENTS

logger = logging.getLogger(__name__)


def strip_non_content(root: Tag, disallowed: Iterable[str] = DISALLOWED_ELEMENTS) -> int:
    """Remove every disallowed element from the tree, at any depth.

    Parameters
    ----------
    root : Tag
        Document (or element) whose descendants are inspected. The root
        itself is never removed.
    disallowed : iterable of str
        Lower-case tag names to remove.

    Returns
    -------
    int
        Number of elements removed. A second call on the same tree
        returns 0.

    """
    names = list(disallowed)
    if not names:
        return 0

    # Collect first; decomposing while iterating find_all would skip siblings
    to_remove = root.find_all(names)
    removed = 0
    for element in to_remove:
        # Nested matches are already gone with their decomposed ancestor
        if element.decomposed:
            continue
        element.decompose()
        removed += 1

    if removed:
        logger.debug("Removed %d non-content element(s)", removed)
    return removed


def contains_disallowed(root: Tag, disallowed: Iterable[str] = DISALLOWED_ELEMENTS) -> bool:
    """Return True if any disallowed element remains below ``root``."""
    names = list(disallowed)
    return bool(names) and root.find(names) is not None


__all__ = ["strip_non_content", "contains_disallowed"]
