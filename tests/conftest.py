"""
QuickBible - Test Configuration

Small fixture corpus and cross-reference files written to tmp_path.
"""
import random

import pytest

from qb.service import BibleService


BIBLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<bible>
  <book>
    <h>Genesis</h>
    <c>
      <v>1. In the beginning God created the heavens and the earth.</v>
      <v>2. The earth was formless and empty.</v>
      <v>3. God said, "Let there be light," and there was light.</v>
    </c>
    <c>
      <v>1. The heavens, the earth, and all their vast array were finished.</v>
      <v>2 On the seventh day God finished his work.</v>
    </c>
  </book>
  <book>
    <h>Song of Solomon</h>
    <c><v>1. The song of songs, which is Solomon's.</v></c>
    <c/>
    <c/>
    <c><v>1. Behold, you are beautiful, my love.</v></c>
  </book>
  <book>
    <h>John</h>
    <c><v>1. In the beginning was the Word.</v></c>
    <c><v>1. On the third day, there was a wedding in Cana of Galilee.</v></c>
    <c>
      <v>16. For God so loved the world, that he gave his one and only Son.</v>
      <v>17. For God didn't send his Son into the world to judge the world.</v>
      <v>18. He who believes in him is not judged.</v>
      <v>unnumbered entry without a verse number</v>
      <v>19</v>
      <v>20. <i>mixed</i> markup</v>
    </c>
    <c>
      <v>35. Jesus wept.</v>
      <v>36. Jesus went out, and Peter wept bitterly.</v>
    </c>
  </book>
  <book>
    <h>1 Corinthians</h>
    <c><v>1. Love is patient and is kind.</v></c>
  </book>
  <book>
    <h>1 John</h>
    <c><v>1. That which was from the beginning, which we have heard.</v></c>
  </book>
  <book>
    <c><v>1. A verse in a book without a name.</v></c>
  </book>
</bible>
"""

CROSS_REFERENCES = "\n".join([
    "From Verse\tTo Verse\tVotes\t#www.openbible.info CC-BY 2011-12-06",
    "Gen.1.1\tJohn.1.1-John.1.3\t354",
    "Gen.1.1\tPs.121.2\t62",
    "Gen.1.1\tHeb.11.3\t354",
    "Gen.1.1\tIsa.45.18-Isa.46.2\t10",
    "Gen.1.1\tMal.4.6-Matt.1.1\t5",
    "Gen.1.1\tRev.4.11-Bogus\t7",
    "Gen.1.1\tXyz.1.1\t99",
    "John.3.16\tRom.5.8\t-2",
    "John.3.16\t1John.4.9\t120",
    "bad line",
    "Gen.1.2\tJohn.1.5\tmany",
    "John.3.16-John.3.17\t1Cor.13.4-7\t3",
    "",
])


class FixedRandom(random.Random):
    """Random source that always picks the same index."""

    def __init__(self, index: int):
        super().__init__()
        self.index = index

    def randrange(self, *args, **kwargs):
        return self.index


@pytest.fixture
def bible_xml(tmp_path):
    path = tmp_path / "web.xml"
    path.write_text(BIBLE_XML, encoding="utf-8")
    return path


@pytest.fixture
def xrefs_file(tmp_path):
    path = tmp_path / "cross_references.txt"
    path.write_text(CROSS_REFERENCES, encoding="utf-8")
    return path


@pytest.fixture
def service(bible_xml, xrefs_file) -> BibleService:
    return BibleService.from_files(bible_xml, xrefs_file, rng=FixedRandom(0))


@pytest.fixture
def fixed_random():
    return FixedRandom
