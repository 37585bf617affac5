"""Drop articles that cannot be real article bodies."""

import logging

from schemas.article import ExtractedArticle

logger = logging.getLogger(__name__)

MAX_ARTICLE_CHARACTERS = 50_000


class ArticleValidator:
    """Discard articles with an empty or oversized body.

    An oversized body means the page span swallowed several articles, so it
    is dropped whole rather than truncated.
    """

    def filter(
        self, articles: list[ExtractedArticle]
    ) -> tuple[list[ExtractedArticle], int]:
        """Keep only articles with a usable body.

        Args:
            articles: Sanitized articles

        Returns:
            Tuple of (kept articles in their original order, discarded count)
        """
        kept = []
        for article in articles:
            length = len(article.text_content or "")
            if length == 0:
                logger.info(f"Discarding {article.title!r}: no text")
                continue
            if length > MAX_ARTICLE_CHARACTERS:
                logger.info(f"Discarding {article.title!r}: too long ({length:,} chars)")
                continue
            kept.append(article)

        discarded = len(articles) - len(kept)
        if discarded:
            logger.info(f"Filtered out {discarded} invalid article(s)")
        return kept, discarded
