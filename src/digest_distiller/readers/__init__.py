"""Readers that decode source documents into digest text."""

from .pdf_reader import PDFTextReader

__all__ = ["PDFTextReader"]
