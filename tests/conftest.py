"""Pytest fixtures for digest-distiller tests."""

from pathlib import Path

import fitz  # PyMuPDF
import pytest

BANNER = "Page {number} of {total} © 2025 Factiva, Inc. All rights reserved."


def build_digest(pages: list[str], banner: str = BANNER) -> str:
    """Join page bodies into digest text, each page headed by its banner.

    Args:
        pages: Body text of each page, page 1 first
        banner: Banner template with ``number`` and ``total`` fields
    """
    total = len(pages)
    return "\n".join(
        f"{banner.format(number=number, total=total)}\n{text}"
        for number, text in enumerate(pages, start=1)
    )


def make_pdf(path: Path, pages: list[list[str]]) -> None:
    """Write a PDF with one line of text per string to *path*.

    Args:
        path: Destination file path.
        pages: List of pages; each page is a list of text lines.
    """
    doc = fitz.open()
    for lines in pages:
        page = doc.new_page(width=595, height=842)
        y = 72
        for line in lines:
            page.insert_text((50, y), line)
            y += 18
    doc.save(str(path))
    doc.close()


@pytest.fixture
def sample_digest_pages():
    """Page bodies of an eight-page digest listing three articles.

    Page 1 is the listing. The first and third articles open with a
    metadata block; the second has none.
    """
    return [
        "CLIMATE CRISIS DEEPENS ..... 3\n"
        "MARKET REPORT ..... 5\n"
        "TECH GIANTS MERGE ..... 7",
        "Editors notes for this edition.",
        "Climate Crisis Deepens\n"
        "Jane Doe | Environment Desk\n"
        "1,204 words\n"
        "3 September 2025\n"
        "06:50 PM\n"
        "Reuters News\n"
        "English\n"
        "Governments met on Tuesday to discuss emissions targets.",
        "Delegates agreed to reconvene next spring.",
        "Market Report\n"
        "Stocks rallied as investors cheered earnings.",
        "Bond yields were little changed.",
        "Tech Giants Merge\n"
        "John Smith\n"
        "842 words\n"
        "2025-09-01\n"
        "The Associated Press\n"
        "Two of the largest software firms agreed to combine.",
        "Regulators are expected to review the deal.",
    ]


@pytest.fixture
def sample_digest_text(sample_digest_pages):
    """Full text of the sample digest, as a PDF reader would return it."""
    return build_digest(sample_digest_pages)


@pytest.fixture
def sample_digest_pdf(tmp_path):
    """A small digest PDF with a listing page and two article pages."""
    path = tmp_path / "digest.pdf"
    make_pdf(path, [
        ["Page 1 of 3", "ALPHA STORY ..... 2", "BETA STORY ..... 3"],
        ["Page 2 of 3", "Alpha Story", "The first story body."],
        ["Page 3 of 3", "Beta Story", "The second story body."],
    ])
    return path


@pytest.fixture
def digest_builder():
    """The build_digest helper, for tests that lay out their own pages."""
    return build_digest


@pytest.fixture
def pdf_maker():
    """The make_pdf helper, for tests that write their own PDFs."""
    return make_pdf
