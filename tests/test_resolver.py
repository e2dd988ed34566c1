"""Tests for book-name resolution."""
from types import MappingProxyType

from qb.resolver import BookResolver, book_slug

BOOKS = ["Genesis", "Song of Solomon", "John", "1 Corinthians", "2 Corinthians", "1 John"]


def test_exact_match_is_case_insensitive():
    r = BookResolver(BOOKS)
    assert r.resolve("john") == "John"
    assert r.resolve("  GENESIS ") == "Genesis"
    assert r.resolve("1 john") == "1 John"


def test_substring_match_takes_first_in_canonical_order():
    r = BookResolver(BOOKS)
    assert r.resolve("Cor") == "1 Corinthians"
    assert r.resolve("Cor") == r.resolve("cor") == "1 Corinthians"
    assert r.resolve("jo") == "John"
    assert r.resolve("solomon") == "Song of Solomon"


def test_unknown_and_blank_names():
    r = BookResolver(BOOKS)
    assert r.resolve("Hezekiah") is None
    assert r.resolve("") is None
    assert r.resolve("   ") is None
    assert r.book_id("Hezekiah") is None
    assert r.slug("Hezekiah") is None


def test_book_ids_are_one_based():
    r = BookResolver(BOOKS)
    assert r.book_id("Genesis") == 1
    assert r.book_id("john") == 3
    assert r.book_id("Cor") == 4
    assert r.books == tuple(BOOKS)


def test_slugs():
    r = BookResolver(BOOKS)
    assert r.slug("genesis") == "genesis"
    assert r.slug("Song of Solomon") == "songs"
    assert r.slug("1 Corinthians") == "1_corinthians"
    assert book_slug("1 John") == "1_john"


def test_empty_book_list():
    r = BookResolver([])
    assert r.resolve("John") is None
    assert r.book_id("John") is None


def test_uses_supplied_book_map():
    book_map = MappingProxyType({"ruth": "Ruth", "jonah": "Jonah"})
    r = BookResolver(("Ruth", "Jonah"), book_map)
    assert r.resolve("RUTH") == "Ruth"
    assert r.resolve("jon") == "Jonah"
    assert r.book_id("Jonah") == 2
