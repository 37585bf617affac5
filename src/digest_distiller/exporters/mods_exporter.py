"""MODS exporter for extracted articles.

Writes one MODS 3.8 record per article, wrapped in a modsCollection, so
that digest articles can be loaded into catalogue and repository systems
alongside their inferred metadata.
"""

import re

from lxml import etree

from schemas.article import ExtractedArticle
from schemas.extraction import ExtractionResult

from .exporter import Exporter

MODS_NS = "http://www.loc.gov/mods/v3"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
MODS_SCHEMA = "http://www.loc.gov/standards/mods/v3/mods-3-8.xsd"

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class MODSExporter(Exporter):
    """Export extracted articles as a MODS 3.8 collection.

    Each record carries:
    - titleInfo/title from the listing title
    - name (personal, role author) when a byline was found
    - typeOfResource "text"
    - originInfo with dateIssued and publisher when known
    - physicalDescription/extent with the printed word count
    - part/extent with the article's start page in the digest
    """

    suffix = ".mods.xml"

    def serialize(self, result: ExtractionResult) -> bytes:
        collection = self.build_collection(result.articles)
        return etree.tostring(
            collection,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=True,
        )

    def build_collection(self, articles: list[ExtractedArticle]) -> etree._Element:
        """Build a <mods:modsCollection> holding one record per article."""
        collection = etree.Element(
            _mods("modsCollection"),
            {f"{{{XSI_NS}}}schemaLocation": f"{MODS_NS} {MODS_SCHEMA}"},
            nsmap={"mods": MODS_NS, "xsi": XSI_NS},
        )
        collection.extend(self.build_mods(article) for article in articles)
        return collection

    def build_mods(self, article: ExtractedArticle) -> etree._Element:
        """Build a MODS record for a single article.

        Args:
            article: Extracted article

        Returns:
            <mods:mods> lxml element
        """
        record = etree.Element(_mods("mods"), nsmap={"mods": MODS_NS}, version="3.8")

        title_info = _child(record, "titleInfo")
        _child(title_info, "title", article.title)

        if article.author:
            name = _child(record, "name", type="personal")
            _child(name, "namePart", article.author)
            _child(_child(name, "role"), "roleTerm", "author", type="text")

        _child(record, "typeOfResource", "text")

        if article.publish_date or article.source:
            origin = _child(record, "originInfo")
            if article.source:
                _child(origin, "publisher", article.source)
            if article.publish_date:
                encoding = {"encoding": "iso8601"} if ISO_DATE.match(article.publish_date) else {}
                _child(origin, "dateIssued", article.publish_date, **encoding)

        if article.word_count is not None:
            physical = _child(record, "physicalDescription")
            _child(physical, "extent", f"{article.word_count} words")

        # Start page within the digest
        extent = _child(_child(record, "part"), "extent", unit="page")
        _child(extent, "start", str(article.page_number))

        return record


def _mods(local: str) -> str:
    return f"{{{MODS_NS}}}{local}"


def _child(
    parent: etree._Element, local: str, text: str | None = None, **attributes: str
) -> etree._Element:
    element = etree.SubElement(parent, _mods(local), attributes)
    if text is not None:
        element.text = text
    return element
