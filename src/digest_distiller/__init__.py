"""Digest Distiller: recover individual articles from aggregated news digests."""

from .exceptions import DistillerError, DocumentReadError, ExportError
from .extractor import ArticleExtractor

__all__ = [
    "ArticleExtractor",
    "DistillerError",
    "DocumentReadError",
    "ExportError",
]
