"""
qb - QuickBible core package

This package contains the in-memory scripture lookup engine:
- config: Project configuration and versioning
- paths: Default source file locations
- util: Utility functions for console output
- loader: Scripture XML loading
- xrefs: Cross-reference loading
- resolver: Book-name resolution
- search: Phrase / keyword search and paging
- service: BibleService query facade
"""

from . import config
from .paths import PROJECT_ROOT, DATA_DIR, BIBLE_XML_PATH, CROSS_REFS_PATH
from .util import info, warn, ok
from .model import Verse, VerseRef, CrossReference, LoadSummary
from .loader import load_bible_xml
from .xrefs import load_cross_references
from .resolver import BookResolver
from .search import search_verses, paginate, print_search_results
from .service import BibleService

__version__ = config.__version__
__all__ = [
    "config",
    "PROJECT_ROOT",
    "DATA_DIR",
    "BIBLE_XML_PATH",
    "CROSS_REFS_PATH",
    "info",
    "warn",
    "ok",
    "Verse",
    "VerseRef",
    "CrossReference",
    "LoadSummary",
    "load_bible_xml",
    "load_cross_references",
    "BookResolver",
    "search_verses",
    "paginate",
    "print_search_results",
    "BibleService",
]
