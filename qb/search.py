"""
Verse search for QuickBible.

This module provides:

- search_verses(verses, query)
    Phrase search for quoted queries ('"Jesus wept"'), otherwise every
    whitespace-separated term must appear somewhere in the verse.
    Matching is case-insensitive substring matching; results keep
    corpus order.

- paginate(results, page, page_size)
    Slice results into 1-based pages for the front end.

- print_search_results(verses)
    Pretty-print results to the console
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from . import config
from .model import Verse
from .util import info

_SMART_QUOTES = str.maketrans({
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
})


def normalize_query(query: str) -> str:
    """Trim and turn curly quotes into straight ones."""
    return query.strip().translate(_SMART_QUOTES)


def is_phrase(query: str) -> bool:
    """
    True if a normalized query is wrapped in the same straight quote on
    both ends.
    """
    return len(query) >= 2 and query[0] in "\"'" and query[-1] == query[0]


def search_verses(verses: Iterable[Verse], query: str) -> List[Verse]:
    """
    Filter verses by a search query.

    Parameters
    ----------
    verses:
        Verses to search, in corpus order.
    query:
        '"exact phrase"' or 'any words in any order'.

    Returns
    -------
    List[Verse] in the order they were given.

    A blank query, or an empty quoted phrase such as '""', returns an
    empty list rather than every verse in the corpus.
    """
    raw = normalize_query(query)

    if is_phrase(raw):
        phrase = raw[1:-1].lower()
        if not phrase:
            return []
        return [v for v in verses if phrase in v.text.lower()]

    terms = raw.lower().split()
    if not terms:
        return []
    return [v for v in verses if all(term in v.text.lower() for term in terms)]


@dataclass(frozen=True)
class Page:
    items: Sequence[Verse]
    page: int
    total_pages: int
    total_results: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(results: Sequence[Verse], page: int = 1, page_size: int = config.SEARCH_PAGE_SIZE) -> Page:
    """
    Return one page of results. Pages are 1-based; a page outside the
    valid range is clamped to the first or last page, and a page_size
    below 1 is treated as 1.
    """
    page_size = max(page_size, 1)
    total_pages = max(1, -(-len(results) // page_size))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * page_size
    return Page(
        items=tuple(results[start:start + page_size]),
        page=page,
        total_pages=total_pages,
        total_results=len(results),
    )


def print_search_results(verses: Sequence[Verse]) -> None:
    """
    Pretty-print search or passage results to the console.
    """
    if not verses:
        info("No results.")
        return

    for v in verses:
        print(f"{v.book} {v.chapter}:{v.verse}")
        print(f"    {v.text}")
        print()
