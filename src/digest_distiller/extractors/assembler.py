"""Assemble article bodies from page spans."""

import logging

from schemas.article import ExtractedArticle
from schemas.index_entry import ArticleIndexEntry
from schemas.page import Page

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class ContentAssembler:
    """Join the pages belonging to each listing entry into a raw body.

    An article starts on its listed page and ends on the page before the
    next entry's page; the last article runs to the last page of the
    document. Page numbers missing from the document are skipped.
    """

    def assemble(
        self, entries: list[ArticleIndexEntry], pages: list[Page]
    ) -> list[ExtractedArticle]:
        """Build one article per listing entry.

        Args:
            entries: Listing entries sorted by page number
            pages: Segmented document pages

        Returns:
            Articles with text_content holding the raw page text
        """
        if not entries or not pages:
            return []

        pages_by_number: dict[int, Page] = {}
        for page in pages:
            pages_by_number.setdefault(page.page_number, page)
        last_page_number = pages[-1].page_number

        articles = []
        for i, entry in enumerate(entries):
            start = entry.page_number
            if i + 1 < len(entries):
                end = entries[i + 1].page_number - 1
            else:
                end = last_page_number

            texts = [
                pages_by_number[number].text
                for number in range(start, end + 1)
                if number in pages_by_number
            ]
            logger.debug(f"Article {entry.title!r} spans pages {start}-{end}")

            articles.append(
                ExtractedArticle(
                    title=entry.title,
                    page_number=entry.page_number,
                    text_content=PAGE_SEPARATOR.join(texts).strip(),
                )
            )

        return articles
