"""Recover a digest's article listing.

The ArticleIndexParser runs the strategy cascade over listing pages found
by the IndexLocator. When no listing page is found, the
FallbackDirectExtractor runs the same cascade over the first page of the
document as a last resort.
"""

import logging

from schemas.index_entry import ArticleIndexEntry
from schemas.page import Page

from .boilerplate import clean_title, is_valid_title, strip_masthead
from .strategies import (
    Anchor,
    AnchorStrategy,
    BackupStrategy,
    DotLeaderStrategy,
    LineEndStrategy,
    LineSplitStrategy,
    SegmentScanStrategy,
    TitleNumberStrategy,
    merge_anchors,
    slice_titles,
)

logger = logging.getLogger(__name__)


def dedupe_and_sort(entries: list[ArticleIndexEntry]) -> list[ArticleIndexEntry]:
    """Drop repeated (title, page) pairs and order entries by page.

    The first occurrence of a pair wins; entries on the same page keep
    their listing order.
    """
    unique = list(dict.fromkeys(entries))
    return sorted(unique, key=lambda entry: entry.page_number)


class ArticleIndexParser:
    """Extract (title, page) entries from listing pages.

    The parser:
    1. Strips masthead fragments from the page text
    2. Merges page-number anchors from the anchor strategies, earlier
       strategies taking precedence
    3. Cuts a title out of the text in front of each anchor
    4. Runs each backup strategy while the entry count, counted across all
       listing pages so far, is below its threshold

    Attributes:
        anchor_strategies: Anchor strategies in priority order
        backup_strategies: Backup strategies in the order they are tried
    """

    def __init__(
        self,
        anchor_strategies: list[AnchorStrategy] | None = None,
        backup_strategies: list[BackupStrategy] | None = None,
    ):
        self.anchor_strategies = anchor_strategies or [
            DotLeaderStrategy(),
            LineEndStrategy(),
            TitleNumberStrategy(),
        ]
        self.backup_strategies = backup_strategies or [
            LineSplitStrategy(),
            SegmentScanStrategy(),
        ]

    def parse_index_page(self, page_text: str, found: int = 0) -> list[ArticleIndexEntry]:
        """Extract listing entries from a single page.

        Backups count the entries of earlier listing pages towards their
        thresholds. Once earlier pages have yielded entries, backups only run
        on a page where the anchor strategies found something too, so a prose
        page that happens to pass the locator cannot add entries on its own.

        Args:
            page_text: Raw text of a listing page
            found: Entries already recovered from earlier listing pages

        Returns:
            Entries in discovery order, possibly with duplicates
        """
        text = strip_masthead(page_text or "")

        entries = slice_titles(text, self.find_anchors(text))

        if found and not entries:
            logger.debug("No anchored entries on continuation page, skipping backups")
            return entries

        for strategy in self.backup_strategies:
            if strategy.applies(found + len(entries)):
                backfill = strategy.extract(text)
                logger.debug(f"{strategy.name} backup found {len(backfill)} entries")
                entries.extend(backfill)

        return entries

    def find_anchors(self, text: str) -> list[Anchor]:
        """Merged page-number anchors for masthead-free listing text."""
        return merge_anchors(self.anchor_strategies, text)

    def parse(self, index_pages: list[Page]) -> list[ArticleIndexEntry]:
        """Build the document listing from all of its listing pages.

        Args:
            index_pages: Pages classified as listings

        Returns:
            Deduplicated entries sorted by page number
        """
        entries = []
        for page in index_pages:
            page_entries = self.parse_index_page(page.text, found=len(entries))
            logger.debug(f"Found {len(page_entries)} entries on page {page.page_number}")
            entries.extend(page_entries)
        return dedupe_and_sort(entries)


class FallbackDirectExtractor:
    """Recover a listing from the first page when no listing page was found.

    Runs the full parser cascade over the first page, then also considers
    the text in front of the first anchor as a title in its own right.

    Attributes:
        parser: Parser whose cascade is re-applied
    """

    def __init__(self, parser: ArticleIndexParser | None = None):
        self.parser = parser or ArticleIndexParser()

    def extract(self, pages: list[Page]) -> list[ArticleIndexEntry]:
        """Extract listing entries from the first page of a document.

        Args:
            pages: Segmented document pages

        Returns:
            Deduplicated entries sorted by page number; empty when the first
            page yields nothing
        """
        if not pages:
            return []

        first_page = pages[0]
        entries = self.parser.parse_index_page(first_page.text)

        leading = self._leading_entry(first_page.text)
        if leading is not None and leading not in entries:
            logger.debug(f"Recovered leading entry: {leading.title!r} -> page {leading.page_number}")
            entries.insert(0, leading)

        return dedupe_and_sort(entries)

    def _leading_entry(self, page_text: str) -> ArticleIndexEntry | None:
        """Title in front of the first anchor, paired with that anchor's page."""
        text = strip_masthead(page_text or "")
        anchors = self.parser.find_anchors(text)
        if not anchors:
            return None

        first = anchors[0]
        title = clean_title(text[:first.start], strip_leading_digits=True)
        if not is_valid_title(title):
            return None
        return ArticleIndexEntry(title=title, page_number=first.page_number)
