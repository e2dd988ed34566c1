#!/usr/bin/env python
"""
quickbible.py – command-line front end for the QuickBible core

Commands:

  python quickbible.py verse "John 3:16"
      Show one verse (a link token such as /v_John_3_16 also works)

  python quickbible.py search "Jesus wept" --page 2
      Keyword search (all words); quote the query for an exact phrase

  python quickbible.py random
      Show a random verse

  python quickbible.py next "John 3:16"    /    prev "John 3:16"
      Step through the corpus

  python quickbible.py context "John 3:16" --before 2 --after 2
      Show a verse with its neighbours

  python quickbible.py refs "Genesis 1:1" --limit 20
      Cross references, highest votes first

  python quickbible.py versions "Song of Solomon 4:1"
      BibleHub link for other translations

  python quickbible.py audio "John 3"
      Audio link for a chapter (optionally from a verse: "John 3:16")

  python quickbible.py books    /    status
      Canonical book list / load summary
"""

import argparse
import sys
from pathlib import Path

from qb import config
from qb.model import Verse
from qb.reference import parse_chapter_reference, parse_link_token, parse_reference
from qb.search import paginate, print_search_results
from qb.service import BibleService
from qb.util import info, warn


# ---------- Rendering helpers ----------


def format_verse(v: Verse) -> str:
    return f"{v.book} {v.chapter}:{v.verse}\n    {v.text}"


def _ref_args(ref: str):
    """
    Accept either 'Book C:V' or a deep-link token ('/v_Book_C_V').
    """
    if ref.strip().startswith(config.LINK_COMMAND_PREFIX):
        parsed = parse_link_token(ref)
        if parsed is None:
            warn(f"Invalid link token: {ref!r}")
        return parsed
    return parse_reference(ref)


def _lookup(service: BibleService, ref: str):
    parsed = _ref_args(ref)
    if parsed is None:
        return None
    verse = service.get_verse(*parsed)
    if verse is None:
        info("Verse not found.")
    return verse


# ---------- Command handlers ----------


def cmd_verse(args: argparse.Namespace, service: BibleService) -> None:
    """
    Show a single verse.
    """
    verse = _lookup(service, args.ref)
    if verse is not None:
        print(format_verse(verse))


def cmd_search(args: argparse.Namespace, service: BibleService) -> None:
    """
    Wire through to BibleService.search, then print one page of results.
    """
    results = service.search(args.query)
    if not results:
        info("No results found.")
        return

    page = paginate(results, args.page, args.page_size)
    info(
        f"Results for {args.query!r} (page {page.page}/{page.total_pages}, "
        f"{page.total_results} verses)"
    )
    print_search_results(page.items)


def cmd_random(args: argparse.Namespace, service: BibleService) -> None:
    print(format_verse(service.get_random_verse()))


def cmd_next(args: argparse.Namespace, service: BibleService) -> None:
    verse = _lookup(service, args.ref)
    if verse is None:
        return
    following = service.get_next_verse(verse)
    if following is None:
        info("This is the last verse.")
        return
    print(format_verse(following))


def cmd_prev(args: argparse.Namespace, service: BibleService) -> None:
    verse = _lookup(service, args.ref)
    if verse is None:
        return
    preceding = service.get_previous_verse(verse)
    if preceding is None:
        info("This is the first verse.")
        return
    print(format_verse(preceding))


def cmd_context(args: argparse.Namespace, service: BibleService) -> None:
    """
    Fetch a window of verses around a central reference.
    """
    parsed = _ref_args(args.ref)
    if parsed is None:
        return
    rows = service.get_verse_window(*parsed, before=args.before, after=args.after)
    print_search_results(rows)


def cmd_refs(args: argparse.Namespace, service: BibleService) -> None:
    parsed = _ref_args(args.ref)
    if parsed is None:
        return

    refs = service.get_cross_references(*parsed)
    if not refs:
        info("No cross references found.")
        return

    book, chapter, verse = parsed
    print(f"Cross references for {book} {chapter}:{verse}:")
    for r in refs[: args.limit]:
        print(f"  {config.LINK_COMMAND_PREFIX}{r.link_token} ({r.display})  [{r.votes}]")


def cmd_versions(args: argparse.Namespace, service: BibleService) -> None:
    parsed = _ref_args(args.ref)
    if parsed is None:
        return

    book, chapter, verse = parsed
    url = service.get_bible_hub_url(book, chapter, verse)
    if url is None:
        warn(f"Could not generate link for {book!r}.")
        return
    print(f"Read on BibleHub: {book} {chapter}:{verse}\n{url}")


def cmd_audio(args: argparse.Namespace, service: BibleService) -> None:
    parsed = parse_chapter_reference(args.ref)
    if parsed is None:
        return

    book, chapter, start_verse = parsed
    start_verse = start_verse or 1
    if service.get_book_id(book) is None:
        warn(f"Book {book!r} not found.")
        return

    last_verse = service.get_chapter_last_verse(book, chapter)
    if last_verse is None:
        warn(f"Chapter {chapter} not found in {book}.")
        return

    url = service.get_audio_url(book, chapter, start_verse)
    print(f"Listen to {book} {chapter}:{start_verse}-{last_verse}\n{url}")


def cmd_books(args: argparse.Namespace, service: BibleService) -> None:
    for book_id, name in enumerate(service.get_books(), start=1):
        print(f"  {book_id:2d}  {name}")


def cmd_status(args: argparse.Namespace, service: BibleService) -> None:
    """
    Print a quick load report.
    """
    for label, summary in (
        ("Bible XML", service.corpus_summary),
        ("Cross references", service.xref_summary),
    ):
        state = "found" if summary.found else "MISSING"
        print(f"{label:17}: {summary.source} ({state})")
        print(f"{'':17}  accepted={summary.accepted} skipped={summary.skipped}")
    print(f"{'Books':17}: {len(service.get_books())}")


# ---------- Parser setup ----------


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _add_ref(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "ref",
        type=str,
        help="Reference, e.g. 'John 3:16' or '/v_John_3_16'",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quickbible",
        description=f"{config.APP_NAME} CLI (v{config.__version__})",
    )
    parser.add_argument(
        "--xml",
        type=str,
        default=None,
        help="Path to the Bible XML document (default: data/web.xml or $QB_BIBLE_XML)",
    )
    parser.add_argument(
        "--xrefs",
        type=str,
        default=None,
        help="Path to cross_references.txt (default: data/ or $QB_CROSS_REFS)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # verse
    p_verse = sub.add_parser("verse", help="Show a single verse")
    _add_ref(p_verse)
    p_verse.set_defaults(func=cmd_verse)

    # search
    p_search = sub.add_parser(
        "search",
        help="Search verses (quote the query for an exact phrase)",
    )
    p_search.add_argument("query", type=str, help="Search text")
    p_search.add_argument(
        "--page",
        type=int,
        default=1,
        help="Result page to show (default: 1)",
    )
    p_search.add_argument(
        "--page-size",
        type=_positive_int,
        default=config.SEARCH_PAGE_SIZE,
        help=f"Verses per page (default: {config.SEARCH_PAGE_SIZE})",
    )
    p_search.set_defaults(func=cmd_search)

    # random
    p_random = sub.add_parser("random", help="Show a random verse")
    p_random.set_defaults(func=cmd_random)

    # next / prev
    p_next = sub.add_parser("next", help="Show the verse after a reference")
    _add_ref(p_next)
    p_next.set_defaults(func=cmd_next)

    p_prev = sub.add_parser("prev", help="Show the verse before a reference")
    _add_ref(p_prev)
    p_prev.set_defaults(func=cmd_prev)

    # context
    p_context = sub.add_parser(
        "context",
        help="Show a window of verses around a reference",
    )
    _add_ref(p_context)
    p_context.add_argument("--before", type=int, default=2, help="Verses before (default: 2)")
    p_context.add_argument("--after", type=int, default=2, help="Verses after (default: 2)")
    p_context.set_defaults(func=cmd_context)

    # refs
    p_refs = sub.add_parser("refs", help="Cross references for a verse")
    _add_ref(p_refs)
    p_refs.add_argument(
        "--limit",
        type=int,
        default=config.XREF_DISPLAY_LIMIT,
        help=f"Maximum number of references to show (default: {config.XREF_DISPLAY_LIMIT})",
    )
    p_refs.set_defaults(func=cmd_refs)

    # versions
    p_versions = sub.add_parser("versions", help="BibleHub link for a verse")
    _add_ref(p_versions)
    p_versions.set_defaults(func=cmd_versions)

    # audio
    p_audio = sub.add_parser("audio", help="Audio link for a chapter, e.g. 'John 3'")
    p_audio.add_argument("ref", type=str, help="'Book Chapter' or 'Book Chapter:Verse'")
    p_audio.set_defaults(func=cmd_audio)

    # books
    p_books = sub.add_parser("books", help="List canonical books with their IDs")
    p_books.set_defaults(func=cmd_books)

    # status
    p_status = sub.add_parser("status", help="Show what was loaded")
    p_status.set_defaults(func=cmd_status)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    service = BibleService.from_files(
        xml_path=Path(args.xml) if args.xml else None,
        refs_path=Path(args.xrefs) if args.xrefs else None,
    )
    args.func(args, service)
    return 0


if __name__ == "__main__":
    sys.exit(main())
