"""Schema definitions for Digest Distiller."""

from .article import ExtractedArticle
from .extraction import ExportManifest, ExportRecord, ExtractionResult
from .index_entry import ArticleIndexEntry
from .page import Page

__all__ = [
    "ArticleIndexEntry",
    "ExportManifest",
    "ExportRecord",
    "ExtractedArticle",
    "ExtractionResult",
    "Page",
]
