"""
Reference-string parsing for the front end.

The query API only takes already-split (book, chapter, verse) arguments;
these helpers turn what a user typed into those arguments:

- parse_reference('1 Corinthians 13:4')   -> ('1 Corinthians', 13, 4)
- parse_chapter_reference('John 3')       -> ('John', 3, None)
- parse_link_token('/v_Song_of_Solomon_4_1') -> ('Song of Solomon', 4, 1)
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from . import config
from .util import warn

_LINK_TOKEN_RE = re.compile(r"^([A-Za-z0-9_]+?)_(\d+)_(\d+)$")


def _split_book(ref: str) -> Optional[Tuple[str, str]]:
    s = ref.strip()
    if not s:
        warn("Empty reference string.")
        return None

    try:
        space_idx = s.rindex(" ")
    except ValueError:
        warn(f"Could not split book and chapter/verse from reference: {ref!r}")
        return None

    book_str = s[:space_idx].strip()
    cv_str = s[space_idx + 1 :].strip()
    if not book_str:
        warn(f"Reference has no book name: {ref!r}")
        return None
    return book_str, cv_str


def parse_reference(ref: str) -> Optional[Tuple[str, int, int]]:
    """
    Parse a reference string like 'John 3:16' into:

        (book_str, chapter, verse)

    The book is returned as typed; resolve it with BookResolver.
    """
    split = _split_book(ref)
    if split is None:
        return None
    book_str, cv_str = split

    if ":" not in cv_str:
        warn(f"Reference missing ':' in chapter:verse part: {ref!r}")
        return None

    chap_str, verse_str = cv_str.split(":", 1)
    try:
        chapter = int(chap_str.strip())
        verse = int(verse_str.strip())
    except ValueError:
        warn(f"Invalid chapter/verse in reference: {ref!r}")
        return None

    return book_str, chapter, verse


def parse_chapter_reference(ref: str) -> Optional[Tuple[str, int, Optional[int]]]:
    """
    Parse 'John 3' or 'John 3:5' into (book_str, chapter, verse or None).
    """
    split = _split_book(ref)
    if split is None:
        return None
    book_str, cv_str = split

    chap_str, _, verse_str = cv_str.partition(":")
    try:
        chapter = int(chap_str)
        verse = int(verse_str) if verse_str else None
    except ValueError:
        warn(f"Invalid chapter/verse in reference: {ref!r}")
        return None

    return book_str, chapter, verse


def make_link_token(book: str, chapter: int, verse: int) -> str:
    return f"{book.replace(' ', '_')}_{chapter}_{verse}"


def parse_link_token(token: str) -> Optional[Tuple[str, int, int]]:
    """
    Parse a deep-link token ('1_John_4_8', optionally prefixed with
    the '/v_' command prefix) back into (book, chapter, verse).
    """
    s = token.strip()
    if s.startswith(config.LINK_COMMAND_PREFIX):
        s = s[len(config.LINK_COMMAND_PREFIX):]

    m = _LINK_TOKEN_RE.match(s)
    if m is None:
        return None
    return m.group(1).replace("_", " "), int(m.group(2)), int(m.group(3))
