"""
Context engine for QuickBible.

Provides a window of verses around a reference like "John 3:16", so you
can see verses before and after a given location. The window follows
corpus order, so it crosses chapter and book boundaries.

Public API:

- get_verse_window(service, book, chapter, verse, before=2, after=2) -> List[Verse]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .model import Verse
from .util import warn

if TYPE_CHECKING:
    from .service import BibleService


def get_verse_window(
    service: "BibleService",
    book: str,
    chapter: int,
    verse: int,
    before: int = 2,
    after: int = 2,
) -> List[Verse]:
    """
    Fetch a window of verses around a reference.

    Example:
        get_verse_window(service, "John", 3, 16, before=2, after=2)

    Returns
    -------
    List[Verse]:
        Up to `before` verses, the center verse, then up to `after` verses.
        Empty if the center verse does not exist.
    """
    center = service.get_verse(book, chapter, verse)
    if center is None:
        warn(f"Verse not found for context window: {book} {chapter}:{verse}")
        return []

    preceding: List[Verse] = []
    current = center
    for _ in range(max(before, 0)):
        current = service.get_previous_verse(current)
        if current is None:
            break
        preceding.append(current)

    following: List[Verse] = []
    current = center
    for _ in range(max(after, 0)):
        current = service.get_next_verse(current)
        if current is None:
            break
        following.append(current)

    return list(reversed(preceding)) + [center] + following
