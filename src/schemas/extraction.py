"""Extraction result and export manifest schemas.

An ExtractionResult is produced for every document run through the
extractor. The CLI's batch command writes one export per document into an
output directory and records the outcome of each in an ExportManifest:

    {output}/
    ├── export-manifest.json   # ExportManifest
    ├── {document}.json        # ExtractionResult (or .mods.xml)
    └── ...
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from .article import ExtractedArticle


class ExtractionResult(BaseModel):
    """Outcome of extracting articles from one digest.

    Attributes:
        articles: Valid articles in ascending page order
        page_count: Number of pages found by segmentation
        index_pages: Page numbers classified as article listings
        used_fallback: True when the listing was recovered from page 1 directly
        entry_count: Number of listing entries before assembly
        discarded_count: Articles dropped by validation
        content_hash: SHA-256 of the input text
    """

    articles: list[ExtractedArticle] = []
    page_count: int = 0
    index_pages: list[int] = []
    used_fallback: bool = False
    entry_count: int = 0
    discarded_count: int = 0
    content_hash: str | None = None


class ExportRecord(BaseModel):
    """Outcome of exporting a single document in a batch.

    Attributes:
        source_path: Path of the source document
        export_path: Path of the written export (None on failure)
        status: "extracted" on success, "failed" when the document could not be read
        article_count: Number of articles exported
        discarded_count: Number of articles dropped by validation
        error: Error message for failed documents
    """

    source_path: str
    export_path: str | None = None
    status: Literal["extracted", "failed"] = "extracted"
    article_count: int = 0
    discarded_count: int = 0
    error: str | None = None


class ExportManifest(BaseModel):
    """Manifest describing a batch export.

    Attributes:
        version: Manifest schema version
        created: When the batch ran
        agent: Software that performed the export
        format: Export format used for every document
        documents: One record per source document
    """

    version: str = "1.0"
    created: datetime = Field(default_factory=datetime.now)
    agent: str = "digest-distiller"
    format: Literal["json", "mods"] = "json"
    documents: list[ExportRecord] = []

    model_config = {"extra": "allow"}

    @property
    def failed_count(self) -> int:
        return sum(1 for record in self.documents if record.status == "failed")
