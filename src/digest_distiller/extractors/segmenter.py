"""Split a digest's flat text into pages."""

import logging

from schemas.page import Page

from .boilerplate import PAGE_MARKER

logger = logging.getLogger(__name__)


class PageSegmenter:
    """Segment document text on its "Page X of Y" banners.

    Each page runs from its own banner up to the next banner; the last page
    runs to the end of the text. A document without banners becomes a
    single page numbered 1.
    """

    def segment(self, full_text: str) -> list[Page]:
        """Split text into an ordered list of pages.

        Args:
            full_text: Page-concatenated document text

        Returns:
            Pages in document order; never empty
        """
        full_text = full_text or ""
        markers = [
            (int(match.group(1)), match.start())
            for match in PAGE_MARKER.finditer(full_text)
        ]

        if not markers:
            logger.debug("No page markers found, treating text as a single page")
            return [Page(page_number=1, text=full_text)]

        pages = []
        for i, (page_number, start) in enumerate(markers):
            end = markers[i + 1][1] if i + 1 < len(markers) else len(full_text)
            pages.append(Page(page_number=page_number, text=full_text[start:end].strip()))

        logger.debug(f"Segmented text into {len(pages)} pages")
        return pages
