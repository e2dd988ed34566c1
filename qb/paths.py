"""
Path configuration for QuickBible.

The two source files can be moved with environment variables:
- QB_BIBLE_XML   : scripture XML document (default data/web.xml)
- QB_CROSS_REFS  : tab-delimited cross-reference list (default data/cross_references.txt)
"""

import os
from pathlib import Path

# Project root is one level up from qb/
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"

BIBLE_XML_PATH = Path(os.getenv("QB_BIBLE_XML", str(DATA_DIR / "web.xml")))
CROSS_REFS_PATH = Path(os.getenv("QB_CROSS_REFS", str(DATA_DIR / "cross_references.txt")))
