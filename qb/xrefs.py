"""
Cross-reference loading for QuickBible.

Reads the OpenBible.info style edge list, one connection per line:

    Gen.1.1<TAB>Ps.121.2<TAB>62
    Gen.1.1<TAB>John.1.1-John.1.3<TAB>354

and builds an index from 'Book Chapter:Verse' to the targets of that verse,
ranked by votes (highest first, ties in file order).
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .canon import book_for_abbreviation
from .model import CrossReference, LoadSummary, VerseRef
from .util import info, warn, ok


@dataclass
class LoadedCrossReferences:
    index: Mapping[str, Tuple[CrossReference, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    summary: LoadSummary = field(default_factory=lambda: LoadSummary(source=""))


def parse_ref_part(part: str) -> Optional[VerseRef]:
    """
    Parse 'Abbr.Chapter.Verse' (e.g. '1Cor.13.4') into a VerseRef with the
    canonical book name. Returns None for unknown books or bad numbers.
    """
    p = part.strip().split(".")
    if len(p) < 3:
        return None

    book = book_for_abbreviation(p[0])
    if book is None:
        return None

    try:
        chapter = int(p[1])
        verse = int(p[2])
    except ValueError:
        return None
    return VerseRef(book, chapter, verse)


def parse_range_end(part: str, start: VerseRef) -> Optional[VerseRef]:
    """
    Parse the end of a range. 'Abbr.C.V' stands on its own, 'C.V' stays in
    the start book and a bare 'V' stays in the start chapter.
    """
    p = part.strip().split(".")
    if len(p) >= 3:
        return parse_ref_part(part)

    try:
        nums = [int(x) for x in p]
    except ValueError:
        return None

    if len(nums) == 2:
        return VerseRef(start.book, nums[0], nums[1])
    return VerseRef(start.book, start.chapter, nums[0])


def format_target(start: VerseRef, end: Optional[VerseRef]) -> str:
    """
    Display string for a target, collapsing ranges:

        John 1:1           single verse (or unparseable range end)
        John 1:1-3         same book and chapter
        John 1:1-2:4       same book, different chapter
        John 21:25 - Acts 1:2
    """
    head = f"{start.book} {start.chapter}:{start.verse}"
    if end is None:
        return head
    if end.book == start.book and end.chapter == start.chapter:
        return f"{head}-{end.verse}"
    if end.book == start.book:
        return f"{head}-{end.chapter}:{end.verse}"
    return f"{head} - {end.book} {end.chapter}:{end.verse}"


def parse_xref_line(line: str) -> Optional[Tuple[str, CrossReference]]:
    """
    Parse one edge line into (source key, CrossReference).

    Returns None for lines that should be skipped: fewer than three
    columns, unresolvable endpoints or a non-numeric vote count.
    """
    parts = line.rstrip("\r\n").split("\t")
    if len(parts) < 3:
        return None

    from_str, to_str, votes_str = parts[0], parts[1], parts[2]

    # Only the start of a source range is indexed.
    source = parse_ref_part(from_str.split("-")[0])
    if source is None:
        return None

    to_range = to_str.split("-", 1)
    target = parse_ref_part(to_range[0])
    if target is None:
        return None

    try:
        votes = int(votes_str.strip())
    except ValueError:
        return None

    end = parse_range_end(to_range[1], target) if len(to_range) > 1 else None
    xref = CrossReference(
        display=format_target(target, end),
        link_ref=target,
        votes=votes,
    )
    return source.key(), xref


def load_cross_references(refs_path: Path) -> LoadedCrossReferences:
    """
    Load the cross-reference index from a tab-delimited file.

    A missing or unreadable file gives an empty index and a warning.
    """
    refs_path = Path(refs_path)
    source = str(refs_path)

    if not refs_path.exists():
        warn(f"{refs_path.name} not found. Cross references will be empty.")
        return LoadedCrossReferences(summary=LoadSummary(source=source))

    info(f"Loading cross references from: {refs_path}")
    try:
        data = refs_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        warn(f"Failed to load cross references: {e}")
        return LoadedCrossReferences(summary=LoadSummary(source=source, found=True))

    accepted = 0
    skipped = 0
    buckets: Dict[str, List[CrossReference]] = defaultdict(list)
    for line in data.splitlines():
        if not line.strip():
            continue
        parsed = parse_xref_line(line)
        if parsed is None:
            skipped += 1
            continue
        key, xref = parsed
        buckets[key].append(xref)
        accepted += 1

    # Stable sort keeps file order between equal vote counts.
    index = {
        key: tuple(sorted(refs, key=lambda r: r.votes, reverse=True))
        for key, refs in buckets.items()
    }

    ok(f"Loaded {accepted} cross-reference connections for {len(index)} verses.")
    if skipped:
        info(f"Skipped {skipped} unusable cross-reference lines.")

    return LoadedCrossReferences(
        index=MappingProxyType(index),
        summary=LoadSummary(source=source, found=True, accepted=accepted, skipped=skipped),
    )
