"""Base class for article exporters."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from schemas.extraction import ExtractionResult

from digest_distiller.exceptions import ExportError

logger = logging.getLogger(__name__)


class Exporter(ABC):
    """Abstract base class for exporters.

    Exporters serialize an ExtractionResult for the system that stores the
    articles. Subclasses implement serialize(); export() writes the bytes.

    Attributes:
        suffix: File suffix for exports in this format
    """

    suffix: str = ""

    @abstractmethod
    def serialize(self, result: ExtractionResult) -> bytes:
        """Serialize an extraction result.

        Args:
            result: Result of extracting one document

        Returns:
            Encoded export document
        """
        pass

    def export(self, result: ExtractionResult, output_path: Path) -> Path:
        """Write an extraction result to a file.

        Args:
            result: Result of extracting one document
            output_path: Destination file

        Returns:
            The path written

        Raises:
            ExportError: If the destination cannot be written
        """
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(self.serialize(result))
        except OSError as e:
            raise ExportError(f"Failed to write {output_path}: {e}") from e

        logger.debug(f"Wrote {len(result.articles)} articles to {output_path}")
        return output_path
