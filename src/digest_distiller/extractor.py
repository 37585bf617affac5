"""Article extraction engine.

Turns the page-concatenated text of a news digest into individual articles.
The engine is a pure function of its input: it performs no I/O, keeps no
state between runs and never raises for malformed text. Every stage
degrades to an empty or partial result instead.
"""

import hashlib
import logging
from dataclasses import asdict

from schemas.article import ExtractedArticle
from schemas.extraction import ExtractionResult

from .extractors import (
    ArticleIndexParser,
    ArticleValidator,
    ContentAssembler,
    FallbackDirectExtractor,
    IndexLocator,
    MetadataExtractor,
    PageSegmenter,
    TextSanitizer,
)

logger = logging.getLogger(__name__)


class ArticleExtractor:
    """Extract articles from digest text.

    The ArticleExtractor:
    1. Splits the text into pages on its "Page X of Y" banners
    2. Finds listing pages among the first ten pages and parses them
    3. Falls back to parsing page 1 directly when no listing page is found
    4. Assembles each listed article's body from its page span
    5. Infers metadata from each raw body
    6. Strips boilerplate from each body
    7. Drops empty and oversized articles
    """

    def __init__(self):
        self.segmenter = PageSegmenter()
        self.locator = IndexLocator()
        self.parser = ArticleIndexParser()
        self.fallback = FallbackDirectExtractor(self.parser)
        self.assembler = ContentAssembler()
        self.metadata_extractor = MetadataExtractor()
        self.sanitizer = TextSanitizer()
        self.validator = ArticleValidator()

    def extract(self, full_text: str) -> ExtractionResult:
        """Run the full extraction pipeline over one document.

        Args:
            full_text: Page-concatenated document text

        Returns:
            ExtractionResult with valid articles in ascending page order
        """
        full_text = full_text or ""
        content_hash = hashlib.sha256(full_text.encode("utf-8")).hexdigest()

        pages = self.segmenter.segment(full_text)
        logger.info(f"Document has {len(pages)} pages, {len(full_text)} characters")

        index_pages = self.locator.locate(pages)
        used_fallback = not index_pages
        if used_fallback:
            logger.info("No index pages found, trying direct extraction from page 1")
            entries = self.fallback.extract(pages)
        else:
            entries = self.parser.parse(index_pages)
        logger.info(f"Found {len(entries)} articles in index")

        articles = self.assembler.assemble(entries, pages)

        for article in articles:
            metadata = self.metadata_extractor.extract(article.text_content, article.title)
            for field, value in asdict(metadata).items():
                if value is not None:
                    setattr(article, field, value)

        for article in articles:
            article.text_content = self.sanitizer.sanitize(article.text_content)

        valid_articles, discarded = self.validator.filter(articles)
        logger.info(f"Returning {len(valid_articles)} valid articles")

        return ExtractionResult(
            articles=valid_articles,
            page_count=len(pages),
            index_pages=[page.page_number for page in index_pages],
            used_fallback=used_fallback,
            entry_count=len(entries),
            discarded_count=discarded,
            content_hash=content_hash,
        )

    def extract_articles(self, full_text: str) -> list[ExtractedArticle]:
        """Extract articles from document text, discarding run statistics."""
        return self.extract(full_text).articles
