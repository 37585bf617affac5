"""Matching strategies for recovering an article listing from page text.

Listings are typeset inconsistently and pass through OCR, so no single
grammar covers them. Recovery is split into independent strategies that
are tried in order, each only filling gaps left by the ones before it:

- Anchor strategies locate page numbers ("anchors") in the text. Anchors
  from all of them are merged by position and the title of each entry is
  the text between its anchor and the previous one.
- Backup strategies produce complete entries on their own and run only
  while the listing is still short of a threshold.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from schemas.index_entry import ArticleIndexEntry

from .boilerplate import (
    clean_title,
    contains_masthead_fragment,
    is_page_number,
    is_valid_title,
)

logger = logging.getLogger(__name__)

# Anchors for the same page number closer than this are the same anchor.
ANCHOR_PROXIMITY = 5


@dataclass(frozen=True)
class Anchor:
    """A page number located in listing text.

    Attributes:
        page_number: The referenced page
        start: Offset of the first digit
        end: Offset just past the last digit
    """

    page_number: int
    start: int
    end: int

    def overlaps(self, other: "Anchor") -> bool:
        return (
            self.page_number == other.page_number
            and abs(self.start - other.start) < ANCHOR_PROXIMITY
        )


class AnchorStrategy(ABC):
    """Abstract base class for strategies that locate page-number anchors."""

    name: str = "anchor"

    @abstractmethod
    def find_anchors(self, text: str) -> list[Anchor]:
        """Locate page-number anchors in masthead-free listing text.

        Args:
            text: Listing text with masthead fragments removed

        Returns:
            Anchors in order of appearance
        """
        pass


class BackupStrategy(ABC):
    """Abstract base class for strategies that produce entries directly.

    Attributes:
        threshold: The strategy runs only while fewer entries than this
            have been found
    """

    name: str = "backup"
    threshold: int = 0

    def applies(self, found: int) -> bool:
        return found < self.threshold

    @abstractmethod
    def extract(self, text: str) -> list[ArticleIndexEntry]:
        """Extract listing entries from masthead-free listing text.

        Args:
            text: Listing text with masthead fragments removed

        Returns:
            Entries in order of appearance
        """
        pass


class DotLeaderStrategy(AnchorStrategy):
    """Anchor on numbers preceded by a dot leader ("TITLE ....... 12")."""

    name = "dot-leader"
    pattern = re.compile(r"\.{2,}\s*(\d+)")

    def find_anchors(self, text: str) -> list[Anchor]:
        anchors = []
        for match in self.pattern.finditer(text):
            number = int(match.group(1))
            if is_page_number(number):
                anchors.append(Anchor(number, match.start(1), match.end(1)))
        return anchors


class LineEndStrategy(AnchorStrategy):
    """Anchor on numbers that end a line and follow leader-like typography.

    The 30 characters before the number must hold a dot run, end in a gap
    of three or more spaces, or end in a capital letter. A number closing a
    line of ordinary prose has none of these.
    """

    name = "line-end"
    pattern = re.compile(r"(?<!\d)(\d+)(?=[ \t]*(?:\n|$))")
    lookbehind = 30

    _dot_run = re.compile(r"\.{2,}")
    _space_gap = re.compile(r"[ \t]{3,}$")
    _capital_end = re.compile(r"[A-Z][ \t]*$")

    def find_anchors(self, text: str) -> list[Anchor]:
        anchors = []
        for match in self.pattern.finditer(text):
            number = int(match.group(1))
            if not is_page_number(number):
                continue

            before = text[max(0, match.start() - self.lookbehind):match.start()]
            if (
                self._dot_run.search(before)
                or self._space_gap.search(before)
                or self._capital_end.search(before)
            ):
                anchors.append(Anchor(number, match.start(1), match.end(1)))
        return anchors


class TitleNumberStrategy(AnchorStrategy):
    """Anchor on numbers that directly follow an all-caps title ("MARKET REPORT 7")."""

    name = "title-number"
    pattern = re.compile(
        r"\b([A-Z][A-Z'&\-]*(?:[ \t]+[A-Z][A-Z'&\-]*)+)[ \t]?(\d+)"
    )
    min_title_length = 5

    def find_anchors(self, text: str) -> list[Anchor]:
        anchors = []
        for match in self.pattern.finditer(text):
            title = match.group(1).strip()
            number = int(match.group(2))
            if (
                is_page_number(number)
                and len(title) > self.min_title_length
                and not contains_masthead_fragment(title)
            ):
                anchors.append(Anchor(number, match.start(2), match.end(2)))
        return anchors


class LineSplitStrategy(BackupStrategy):
    """Treat every line ending in a number as "title, page"."""

    name = "line-split"
    threshold = 3
    pattern = re.compile(r"^(.+?)\s*(\d+)$")

    def extract(self, text: str) -> list[ArticleIndexEntry]:
        entries = []
        lines = [line.strip() for line in text.split("\n") if line.strip()]
        for line in lines:
            match = self.pattern.match(line)
            if not match:
                continue

            number = int(match.group(2))
            title = clean_title(match.group(1))
            if is_page_number(number) and is_valid_title(title):
                logger.debug(f"Line-split entry: {title!r} -> page {number}")
                entries.append(ArticleIndexEntry(title=title, page_number=number))
        return entries


class SegmentScanStrategy(BackupStrategy):
    """Split the listing on digit runs and look each segment back up.

    Segments long enough to be titles and carrying an upper-case word are
    searched for in the text; the number that follows an occurrence is the
    segment's page.
    """

    name = "segment-scan"
    threshold = 5
    min_segment_length = 10

    _digits = re.compile(r"\d+")
    _upper_word = re.compile(r"\b[A-Z]{2,}\b")

    def extract(self, text: str) -> list[ArticleIndexEntry]:
        entries = []
        for segment in self._digits.split(text):
            title = clean_title(segment)
            if (
                len(title) < self.min_segment_length
                or not self._upper_word.search(title)
                or contains_masthead_fragment(title)
            ):
                continue

            words = [re.escape(word) for word in title.split(" ")]
            match = re.search(r"\s+".join(words) + r"[\s.]*(\d+)", text)
            if not match:
                continue

            number = int(match.group(1))
            if is_page_number(number) and is_valid_title(title):
                logger.debug(f"Segment-scan entry: {title!r} -> page {number}")
                entries.append(ArticleIndexEntry(title=title, page_number=number))
        return entries


def merge_anchors(strategies: list[AnchorStrategy], text: str) -> list[Anchor]:
    """Collect anchors from each strategy, earlier strategies taking precedence.

    A later strategy's anchor is kept only where no earlier anchor for the
    same page number sits at (nearly) the same position.

    Args:
        strategies: Anchor strategies in priority order
        text: Listing text with masthead fragments removed

    Returns:
        Anchors sorted by position
    """
    anchors: list[Anchor] = []
    for strategy in strategies:
        found = strategy.find_anchors(text)
        added = 0
        for anchor in found:
            if not any(anchor.overlaps(existing) for existing in anchors):
                anchors.append(anchor)
                added += 1
        logger.debug(f"{strategy.name} strategy contributed {added} of {len(found)} anchors")
    return sorted(anchors, key=lambda anchor: anchor.start)


def slice_titles(text: str, anchors: list[Anchor]) -> list[ArticleIndexEntry]:
    """Cut a title out of the text in front of each anchor.

    Each title is the text between the previous anchor (or the start of the
    text) and its own anchor. Candidates that fail title validation produce
    no entry.

    Args:
        text: Listing text with masthead fragments removed
        anchors: Anchors sorted by position

    Returns:
        Entries in anchor order
    """
    entries = []
    previous_end = 0
    for anchor in anchors:
        if anchor.start > previous_end:
            title = clean_title(text[previous_end:anchor.start], strip_leading_digits=True)
            if is_valid_title(title):
                logger.debug(f"Title candidate accepted: {title!r} -> page {anchor.page_number}")
                entries.append(ArticleIndexEntry(title=title, page_number=anchor.page_number))
            else:
                logger.debug(f"Title candidate rejected: {title!r}")
        previous_end = max(previous_end, anchor.end)
    return entries
