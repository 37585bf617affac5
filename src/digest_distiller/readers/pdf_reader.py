"""Read the text layer of a digest PDF.

Decoding sits outside the extraction engine: the reader hands the engine a
single string with every page's text, in page order. Digests carry their
own "Page X of Y" banners, which the engine uses to split pages again.
"""

import logging
from pathlib import Path

import fitz  # PyMuPDF

from digest_distiller.exceptions import DocumentReadError

logger = logging.getLogger(__name__)


class PDFTextReader:
    """Extract plain text from PDF documents using PyMuPDF.

    Attributes:
        page_separator: String placed between the text of consecutive pages
    """

    def __init__(self, page_separator: str = "\n"):
        self.page_separator = page_separator

    def read(self, pdf_path: Path) -> str:
        """Read the text of a PDF file.

        Args:
            pdf_path: Path to the PDF file

        Returns:
            Text of every page joined in page order

        Raises:
            DocumentReadError: If the file is missing or cannot be decoded
        """
        if not pdf_path.exists():
            raise DocumentReadError(f"PDF not found: {pdf_path}", path=str(pdf_path))

        try:
            doc = fitz.open(str(pdf_path))
        except Exception as e:
            raise DocumentReadError(f"Failed to open PDF {pdf_path}: {e}", path=str(pdf_path)) from e

        return self._read_document(doc, str(pdf_path))

    def read_bytes(self, data: bytes, name: str = "<bytes>") -> str:
        """Read the text of an in-memory PDF.

        Args:
            data: PDF file contents
            name: Label used in log and error messages

        Returns:
            Text of every page joined in page order

        Raises:
            DocumentReadError: If the data cannot be decoded as a PDF
        """
        try:
            doc = fitz.open(stream=data, filetype="pdf")
        except Exception as e:
            raise DocumentReadError(f"Failed to open PDF {name}: {e}", path=name) from e

        return self._read_document(doc, name)

    def _read_document(self, doc: fitz.Document, name: str) -> str:
        try:
            texts = [page.get_text() for page in doc]
        except Exception as e:
            raise DocumentReadError(f"Failed to read text from {name}: {e}", path=name) from e
        finally:
            doc.close()

        logger.debug(f"Read {len(texts)} pages from {name}")
        return self.page_separator.join(texts)
