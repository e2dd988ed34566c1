"""Tests for the scripture XML loader."""
from dataclasses import FrozenInstanceError

import pytest

from qb.loader import load_bible_xml, parse_verse_entry
from qb.service import BibleService


def test_parse_verse_entry_variants():
    assert parse_verse_entry("16. For God so loved") == (16, "For God so loved")
    assert parse_verse_entry("2 On the seventh day") == (2, "On the seventh day")
    assert parse_verse_entry("  7:  spaced out ") == (7, "spaced out")
    assert parse_verse_entry("19") is None
    assert parse_verse_entry("abc. text") is None
    assert parse_verse_entry("0. text") is None
    assert parse_verse_entry("") is None


def test_books_in_document_order(bible_xml):
    corpus = load_bible_xml(bible_xml)
    assert corpus.books == ("Genesis", "Song of Solomon", "John", "1 Corinthians", "1 John")
    assert corpus.book_map["song of solomon"] == "Song of Solomon"
    assert list(corpus.book_map) == [b.lower() for b in corpus.books]


def test_chapter_number_is_position(bible_xml):
    corpus = load_bible_xml(bible_xml)
    song = [(v.chapter, v.verse) for v in corpus.verses if v.book == "Song of Solomon"]
    assert song == [(1, 1), (4, 1)]


def test_verse_order_and_text(bible_xml):
    corpus = load_bible_xml(bible_xml)
    first = corpus.verses[0]
    assert (first.book, first.chapter, first.verse) == ("Genesis", 1, 1)
    assert first.text == "In the beginning God created the heavens and the earth."
    assert corpus.verses[4].text == "On the seventh day God finished his work."
    assert corpus.verses[-1].book == "1 John"


def test_malformed_entries_are_counted(bible_xml):
    corpus = load_bible_xml(bible_xml)
    summary = corpus.summary
    assert summary.found
    assert summary.ok
    assert summary.accepted == len(corpus.verses) == 16
    # unnumbered, missing separator, nested markup, nameless book
    assert summary.skipped == 4
    john3 = [v.verse for v in corpus.verses if v.book == "John" and v.chapter == 3]
    assert john3 == [16, 17, 18]


def test_missing_file_degrades_to_empty(tmp_path, capsys):
    corpus = load_bible_xml(tmp_path / "nope.xml")
    assert corpus.verses == ()
    assert corpus.books == ()
    assert not corpus.summary.found
    assert not corpus.summary.ok
    assert "[warn]" in capsys.readouterr().out


def test_wrong_root_degrades_to_empty(tmp_path):
    path = tmp_path / "other.xml"
    path.write_text("<library><book><h>Genesis</h></book></library>", encoding="utf-8")
    corpus = load_bible_xml(path)
    assert corpus.summary.found
    assert corpus.verses == ()
    assert corpus.books == ()


def test_broken_xml_degrades_to_empty(tmp_path):
    path = tmp_path / "broken.xml"
    path.write_text("<bible><book><h>Genesis</h><c><v>1. In", encoding="utf-8")
    corpus = load_bible_xml(path)
    assert corpus.verses == ()
    assert corpus.summary.accepted == 0


def test_repeated_book_keeps_first_position(tmp_path):
    path = tmp_path / "dup.xml"
    path.write_text(
        "<bible>"
        "<book><h>Ruth</h><c><v>1. a</v></c></book>"
        "<book><h>Jonah</h><c><v>1. b</v></c></book>"
        "<book><h>Ruth</h><c><v>2. c</v></c></book>"
        "</bible>",
        encoding="utf-8",
    )
    corpus = load_bible_xml(path)
    assert corpus.books == ("Ruth", "Jonah")
    assert [v.text for v in corpus.verses] == ["a", "b", "c"]


def test_repeated_book_in_other_case_uses_first_spelling(tmp_path):
    path = tmp_path / "dup_case.xml"
    path.write_text(
        "<bible>"
        "<book><h>Ruth</h><c><v>1. a</v></c></book>"
        "<book><h>RUTH</h><c><v>1. b</v></c><c><v>1. c</v></c></book>"
        "</bible>",
        encoding="utf-8",
    )
    corpus = load_bible_xml(path)
    assert corpus.books == ("Ruth",)
    assert [(v.book, v.chapter, v.verse) for v in corpus.verses] == [
        ("Ruth", 1, 1),
        ("Ruth", 1, 1),
        ("Ruth", 2, 1),
    ]

    service = BibleService(corpus)
    assert service.get_verse("Ruth", 2, 1).text == "c"
    assert service.get_verse("ruth", 1, 1).text == "a"


def test_loaded_corpus_is_read_only(bible_xml):
    corpus = load_bible_xml(bible_xml)
    with pytest.raises(FrozenInstanceError):
        corpus.summary.accepted = 0
    with pytest.raises(TypeError):
        corpus.book_map["hezekiah"] = "Hezekiah"
    assert corpus.summary.accepted == 16
