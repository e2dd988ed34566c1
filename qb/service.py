"""
Read-only query service over the loaded corpus and cross references.

Build one BibleService at startup and hand it to whatever needs it
(CLI commands, chat handlers, the daily-verse job):

    service = BibleService.from_files()
    verse = service.get_verse("John", 3, 16)

Nothing here mutates state after construction, so a single instance can
be shared freely. "Not found" is always None or an empty sequence.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .context import get_verse_window
from .links import audio_url, bible_hub_url
from .loader import LoadedCorpus, load_bible_xml
from .model import ERROR_VERSE, CrossReference, LoadSummary, Verse, VerseRef
from .paths import BIBLE_XML_PATH, CROSS_REFS_PATH
from .resolver import BookResolver, book_slug
from .search import search_verses
from .util import warn
from .xrefs import LoadedCrossReferences, load_cross_references


class BibleService:
    """
    Query facade for verses, search and cross references.

    The verse sequence order is book order, then chapter position, then
    verse order as found in the source document; next/previous and book
    IDs depend on it.
    """

    def __init__(
        self,
        corpus: LoadedCorpus,
        xrefs: Optional[LoadedCrossReferences] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            corpus: Loaded verses and book list
            xrefs: Loaded cross-reference index (empty if None)
            rng: Random source for get_random_verse (fresh random.Random if None)
        """
        self._corpus = corpus
        self._xrefs = xrefs or LoadedCrossReferences()
        self._rng = rng or random.Random()
        self.resolver = BookResolver(corpus.books, corpus.book_map)

        if not corpus.verses:
            warn("Verse corpus is empty; every lookup and search will come back empty.")

    @classmethod
    def from_files(
        cls,
        xml_path: Optional[Path] = None,
        refs_path: Optional[Path] = None,
        rng: Optional[random.Random] = None,
    ) -> "BibleService":
        """
        Load both sources (defaults from qb.paths) and build the service.
        """
        corpus = load_bible_xml(xml_path or BIBLE_XML_PATH)
        xrefs = load_cross_references(refs_path or CROSS_REFS_PATH)
        return cls(corpus, xrefs, rng=rng)

    # ---------- Corpus info ----------

    @property
    def verses(self) -> Tuple[Verse, ...]:
        return self._corpus.verses

    @property
    def corpus_summary(self) -> LoadSummary:
        return self._corpus.summary

    @property
    def xref_summary(self) -> LoadSummary:
        return self._xrefs.summary

    @property
    def is_empty(self) -> bool:
        return not self._corpus.verses

    def get_books(self) -> Tuple[str, ...]:
        return self._corpus.books

    def get_book_id(self, book: str) -> Optional[int]:
        return self.resolver.book_id(book)

    # ---------- Lookups ----------

    def get_verse(self, book: str, chapter: int, verse: int) -> Optional[Verse]:
        canonical = self.resolver.resolve(book)
        if canonical is None:
            return None
        for v in self._corpus.verses:
            if v.book == canonical and v.chapter == chapter and v.verse == verse:
                return v
        return None

    def search(self, query: str) -> List[Verse]:
        """
        Phrase search for quoted queries, all-terms search otherwise.
        See qb.search.search_verses.
        """
        return search_verses(self._corpus.verses, query)

    def get_random_verse(self) -> Verse:
        verses = self._corpus.verses
        if not verses:
            return ERROR_VERSE
        return verses[self._rng.randrange(len(verses))]

    def _index_of(self, v: Verse) -> int:
        for i, item in enumerate(self._corpus.verses):
            if item.same_ref(v):
                return i
        return -1

    def get_next_verse(self, v: Verse) -> Optional[Verse]:
        index = self._index_of(v)
        if index == -1 or index == len(self._corpus.verses) - 1:
            return None
        return self._corpus.verses[index + 1]

    def get_previous_verse(self, v: Verse) -> Optional[Verse]:
        index = self._index_of(v)
        if index <= 0:
            return None
        return self._corpus.verses[index - 1]

    def get_chapter_last_verse(self, book: str, chapter: int) -> Optional[int]:
        canonical = self.resolver.resolve(book)
        if canonical is None:
            return None
        numbers = [
            v.verse
            for v in self._corpus.verses
            if v.book == canonical and v.chapter == chapter
        ]
        return max(numbers) if numbers else None

    def get_verse_window(
        self,
        book: str,
        chapter: int,
        verse: int,
        before: int = 2,
        after: int = 2,
    ) -> List[Verse]:
        return get_verse_window(self, book, chapter, verse, before=before, after=after)

    # ---------- External links ----------

    def get_bible_hub_url(self, book: str, chapter: int, verse: int) -> Optional[str]:
        canonical = self.resolver.resolve(book)
        if canonical is None:
            return None
        return bible_hub_url(book_slug(canonical), chapter, verse)

    def get_audio_url(self, book: str, chapter: int, start_verse: int = 1) -> Optional[str]:
        """
        Audio stream for a chapter, from start_verse to the chapter's last
        verse. None if the book or chapter is not in the corpus.
        """
        book_id = self.resolver.book_id(book)
        if book_id is None:
            return None
        last_verse = self.get_chapter_last_verse(book, chapter)
        if last_verse is None:
            return None
        return audio_url(book_id, chapter, start_verse, last_verse)

    # ---------- Cross references ----------

    def get_cross_references(self, book: str, chapter: int, verse: int) -> Sequence[CrossReference]:
        """
        Cross references for a verse, highest votes first.
        """
        canonical = self.resolver.resolve(book)
        if canonical is None:
            return ()
        return self._xrefs.index.get(VerseRef(canonical, chapter, verse).key(), ())
