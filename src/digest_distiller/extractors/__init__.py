"""Extraction stages for recovering articles from digest text."""

from .assembler import ContentAssembler
from .index_locator import IndexLocator
from .index_parser import ArticleIndexParser, FallbackDirectExtractor
from .metadata import ArticleMetadata, MetadataExtractor, parse_date
from .sanitizer import TextSanitizer
from .segmenter import PageSegmenter
from .validator import ArticleValidator

__all__ = [
    "ArticleIndexParser",
    "ArticleMetadata",
    "ArticleValidator",
    "ContentAssembler",
    "FallbackDirectExtractor",
    "IndexLocator",
    "MetadataExtractor",
    "PageSegmenter",
    "TextSanitizer",
    "parse_date",
]
