"""
External link builders: BibleHub pages and the ESV audio stream.
"""

from __future__ import annotations

from . import config


def verse_code(book_id: int, chapter: int, verse: int) -> str:
    """
    Zero-padded BBCCCVVV code used by the audio service
    (John 3:16 with book ID 43 -> '43003016').
    """
    return f"{book_id:02d}{chapter:03d}{verse:03d}"


def bible_hub_url(slug: str, chapter: int, verse: int) -> str:
    return config.BIBLEHUB_URL_TEMPLATE.format(slug=slug, chapter=chapter, verse=verse)


def audio_url(book_id: int, chapter: int, start_verse: int, end_verse: int) -> str:
    """
    Audio stream URL covering start_verse..end_verse of one chapter.
    """
    return config.AUDIO_URL_TEMPLATE.format(
        start=verse_code(book_id, chapter, start_verse),
        end=verse_code(book_id, chapter, end_verse),
    )
