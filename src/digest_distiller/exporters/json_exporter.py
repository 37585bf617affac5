"""JSON exporter for extraction results."""

from schemas.extraction import ExtractionResult

from .exporter import Exporter


class JSONExporter(Exporter):
    """Export an ExtractionResult as indented JSON, omitting absent fields."""

    suffix = ".json"

    def serialize(self, result: ExtractionResult) -> bytes:
        return result.model_dump_json(indent=2, exclude_none=True).encode("utf-8")
