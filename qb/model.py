"""
Data model definitions for QuickBible.

- VerseRef      : a reference (book, chapter, verse) without text
- Verse         : one verse of the loaded corpus
- CrossReference: a weighted link from one verse to another verse or range
- LoadSummary   : accepted/skipped counts reported by a loader
"""

from __future__ import annotations

from dataclasses import dataclass

from .reference import make_link_token


@dataclass(frozen=True)
class VerseRef:
    """
    A reference to a single verse by canonical book name.

    book   : canonical book name (e.g. '1 Corinthians')
    chapter: 1..N
    verse  : 1..N
    """
    book: str
    chapter: int
    verse: int

    def key(self) -> str:
        """
        Lookup key used by the cross-reference index (e.g. 'Genesis 1:1').
        """
        return f"{self.book} {self.chapter}:{self.verse}"

    def to_link_token(self) -> str:
        """
        Deep-link token for this reference, e.g. '1_Corinthians_13_4'.
        """
        return make_link_token(self.book, self.chapter, self.verse)


@dataclass(frozen=True)
class Verse:
    """
    A verse as it appears in the corpus. Identity is (book, chapter, verse).
    """
    book: str
    chapter: int
    verse: int
    text: str

    @property
    def ref(self) -> VerseRef:
        return VerseRef(self.book, self.chapter, self.verse)

    def same_ref(self, other: "Verse") -> bool:
        """True if both verses point at the same (book, chapter, verse)."""
        return (
            self.book == other.book
            and self.chapter == other.chapter
            and self.verse == other.verse
        )


# Returned by BibleService.get_random_verse when nothing is loaded.
ERROR_VERSE = Verse(book="Error", chapter=1, verse=1, text="No verses loaded.")


@dataclass(frozen=True)
class CrossReference:
    """
    One target of a cross reference.

    display : human-readable target, possibly a range ('John 1:1-3')
    link_ref: start of the target, used for deep links
    votes   : ranking weight from the source data
    """
    display: str
    link_ref: VerseRef
    votes: int

    @property
    def link_token(self) -> str:
        return self.link_ref.to_link_token()


@dataclass(frozen=True)
class LoadSummary:
    """
    What a loader did with its source file.
    """
    source: str
    found: bool = False
    accepted: int = 0
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return self.found and self.accepted > 0
