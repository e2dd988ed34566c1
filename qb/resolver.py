"""
Book-name resolution for QuickBible.

Maps whatever the user typed ('john', 'Cor', 'Song of Solomon') to the
canonical book name, its 1-based book ID and its BibleHub slug.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple

# Slugs that do not follow the lower-case/underscore rule.
SLUG_OVERRIDES: Dict[str, str] = {
    "song of solomon": "songs",
}


class BookResolver:
    """
    Resolve book names against the canonical book list.

    Resolution order:
    1. exact, case-insensitive match;
    2. the first book (in canonical order) whose lower-cased name
       contains the query.
    """

    def __init__(self, books: Iterable[str], book_map: Optional[Mapping[str, str]] = None):
        self._books: Tuple[str, ...] = tuple(books)
        if book_map is not None:
            self._lookup: Mapping[str, str] = book_map
        else:
            lookup: Dict[str, str] = {}
            for name in self._books:
                lookup.setdefault(name.lower(), name)
            self._lookup = lookup

    @property
    def books(self) -> Tuple[str, ...]:
        return self._books

    def resolve(self, name: str) -> Optional[str]:
        """
        Canonical book name for `name`, or None if nothing matches.
        """
        query = name.strip().lower()
        if not query:
            return None

        if query in self._lookup:
            return self._lookup[query]

        for key, canonical in self._lookup.items():
            if query in key:
                return canonical
        return None

    def book_id(self, name: str) -> Optional[int]:
        """
        1-based position of the resolved book in canonical order.
        """
        canonical = self.resolve(name)
        if canonical is None:
            return None
        return self._books.index(canonical) + 1

    def slug(self, name: str) -> Optional[str]:
        """
        BibleHub path segment for a book ('1 John' -> '1_john').
        """
        canonical = self.resolve(name)
        if canonical is None:
            return None
        return book_slug(canonical)


def book_slug(canonical: str) -> str:
    lowered = canonical.lower()
    if lowered in SLUG_OVERRIDES:
        return SLUG_OVERRIDES[lowered]
    return lowered.replace(" ", "_")
