"""Find the pages of a digest that list its articles."""

import logging
import re

from schemas.page import Page

from .boilerplate import strip_masthead

logger = logging.getLogger(__name__)

# Listings sit at the front of a digest; later pages are never examined.
INDEX_SCAN_LIMIT = 10

DOT_LEADER_LINE = re.compile(r"[A-Z][A-Z\s]+\.{3,}\s*\d+")
TITLE_NUMBER_LINE = re.compile(r"[A-Z][A-Z \t]+[ \t]*\d+")
NUMBER = re.compile(r"\d+")


class IndexLocator:
    """Classify pages as article listings using structural signals.

    A page is a listing when any of the following holds:

    - at least two "TITLE ...... N" lines (dot leaders)
    - at least two "TITLE N" lines (no leaders)
    - its distinct numbers, in order of first appearance, are already
      ascending, with at least two of them

    Signals are evaluated with the masthead removed, since the page banner
    alone would otherwise supply an ascending pair of numbers.
    """

    def is_index_page(self, page_text: str) -> bool:
        """Decide whether a page is an article listing.

        Args:
            page_text: Raw text of one page

        Returns:
            True if any listing signal fires
        """
        text = strip_masthead(page_text or "")

        if len(DOT_LEADER_LINE.findall(text)) >= 2:
            return True

        if len(TITLE_NUMBER_LINE.findall(text)) >= 2:
            return True

        return self._has_ascending_numbers(text)

    def locate(self, pages: list[Page]) -> list[Page]:
        """Return the listing pages among the first INDEX_SCAN_LIMIT pages.

        Args:
            pages: Segmented document pages

        Returns:
            Listing pages in document order
        """
        index_pages = []
        for page in pages[:INDEX_SCAN_LIMIT]:
            if self.is_index_page(page.text):
                logger.debug(f"Page {page.page_number} identified as index page")
                index_pages.append(page)
            else:
                logger.debug(f"Page {page.page_number} is not an index page")
        return index_pages

    def _has_ascending_numbers(self, text: str) -> bool:
        distinct = list(dict.fromkeys(int(n) for n in NUMBER.findall(text)))
        return len(distinct) >= 2 and distinct == sorted(distinct)
