"""
Bible/loading logic for QuickBible.

This module:
- Parses the scripture XML document (<bible><book><h/><c><v/></c></book></bible>).
- Builds the ordered verse corpus and the canonical book list.
- Builds the lower-cased book normalization map alongside the book list.

Loading never raises: a missing or malformed document leaves everything
empty and prints a warning, and individual bad verse entries are skipped
and counted in the LoadSummary.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from lxml import etree

from .errors import CorpusFormatError
from .model import LoadSummary, Verse
from .util import info, warn, ok


@dataclass
class LoadedCorpus:
    """
    Result of reading the scripture document.

    verses   : every verse in document order (book, chapter position, verse)
    books    : canonical book names, order of first appearance = book ID - 1
    book_map : lower-cased book name -> canonical name, in canonical order
    """
    verses: Tuple[Verse, ...] = ()
    books: Tuple[str, ...] = ()
    book_map: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    summary: LoadSummary = field(default_factory=lambda: LoadSummary(source=""))


def parse_verse_entry(raw: str) -> Optional[Tuple[int, str]]:
    """
    Split a verse entry like '16. For God so loved the world...' into
    (16, 'For God so loved the world...').

    Returns None when the entry has no separator or the leading token
    is not a verse number.
    """
    parts = raw.strip().split(None, 1)
    if len(parts) < 2:
        return None

    num_token = parts[0].rstrip(string.punctuation)
    try:
        verse_num = int(num_token)
    except ValueError:
        return None

    if verse_num < 1:
        return None
    return verse_num, parts[1]


def _has_child_elements(el: etree._Element) -> bool:
    return next(el.iterchildren(tag=etree.Element), None) is not None


def _read_root(path: Path) -> etree._Element:
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        tree = etree.parse(str(path), parser)
    except etree.XMLSyntaxError as e:
        raise CorpusFormatError(str(path), f"XML syntax error: {e}") from e

    root = tree.getroot()
    if root.tag != "bible":
        raise CorpusFormatError(str(path), f"root element is <{root.tag}>, expected <bible>")
    if root.find("book") is None:
        raise CorpusFormatError(str(path), "no <book> elements")
    return root


def load_bible_xml(xml_path: Path) -> LoadedCorpus:
    """
    Load the whole corpus from a scripture XML document.

    Parameters
    ----------
    xml_path:
        Path to the XML document.

    Returns
    -------
    LoadedCorpus
        Empty (with summary.found reflecting whether the file existed)
        when the document is missing or has the wrong shape.
    """
    xml_path = Path(xml_path)
    source = str(xml_path)

    info(f"Loading Bible data from: {xml_path}")
    if not xml_path.exists():
        warn(f"Bible XML not found at: {xml_path}")
        return LoadedCorpus(summary=LoadSummary(source=source))

    try:
        root = _read_root(xml_path)
    except (CorpusFormatError, OSError) as e:
        warn(f"Failed to load Bible data: {e}")
        return LoadedCorpus(summary=LoadSummary(source=source, found=True))

    verses: List[Verse] = []
    books: List[str] = []
    book_map: Dict[str, str] = {}
    skipped = 0

    for book_el in root.iterchildren("book"):
        book_name = (book_el.findtext("h") or "").strip()
        if not book_name:
            dropped = len(book_el.findall("c/v"))
            warn(f"Book element without a name; skipping {dropped} verse entries.")
            skipped += dropped
            continue

        if book_name.lower() not in book_map:
            books.append(book_name)
            book_map[book_name.lower()] = book_name
        # A repeated book (in any letter case) keeps its first spelling.
        canonical = book_map[book_name.lower()]

        # Chapter number is the position of <c> within the book.
        for chapter_num, chapter_el in enumerate(book_el.iterchildren("c"), start=1):
            for verse_el in chapter_el.iterchildren("v"):
                if _has_child_elements(verse_el):
                    skipped += 1
                    continue

                parsed = parse_verse_entry(verse_el.text or "")
                if parsed is None:
                    skipped += 1
                    continue

                verse_num, text = parsed
                verses.append(Verse(canonical, chapter_num, verse_num, text))

    ok(f"Loaded {len(verses)} verses from {len(books)} books.")
    if skipped:
        info(f"Skipped {skipped} malformed verse entries.")

    return LoadedCorpus(
        verses=tuple(verses),
        books=tuple(books),
        book_map=MappingProxyType(book_map),
        summary=LoadSummary(source=source, found=True, accepted=len(verses), skipped=skipped),
    )
