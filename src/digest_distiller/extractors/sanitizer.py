"""Remove publisher boilerplate from article bodies."""

import re

HEADER_PATTERNS = [
    re.compile(
        r"Page\s+\d+\s+of\s+\d+\s*©\s*\d{4}\s+[^\n,]+?,\s*Inc\.\s+All\s+rights\s+reserved\.",
        re.IGNORECASE,
    ),
    re.compile(r"^Page\s+\d+\s+of\s+\d+$", re.MULTILINE),
    re.compile(r"Page\s+\d+\s+of\s+\d+"),
    re.compile(
        r"©\s*\d{4}\s+[^\n,]+?,\s*Inc\.\s+All\s+rights\s+reserved\.", re.IGNORECASE
    ),
    re.compile(r"©\s*\d{4}\s+Factiva,\s*Inc\.", re.IGNORECASE),
    re.compile(r"^All\s+rights\s+reserved\.$", re.MULTILINE),
    re.compile(r"^Factiva,\s*Inc\.$", re.MULTILINE),
    re.compile(r"^Factiva$", re.MULTILINE),
]

FOOTER_PATTERNS = [
    re.compile(r"ISSN:\s*\d{4}-\d{3}[\dXx]", re.IGNORECASE),
    re.compile(r"Volume\s+\d+;\s*Issue\s+\d+", re.IGNORECASE),
    re.compile(r"Vol\.\s*\d+;\s*Issue\s+\d+", re.IGNORECASE),
    re.compile(r"\bDocument\s+\d+\b", re.IGNORECASE),
    re.compile(
        r"^(?:English|French|German|Spanish|Italian|Portuguese|Dutch|Russian|Chinese|Japanese|Arabic)$",
        re.MULTILINE,
    ),
    re.compile(r"^\d+-\d+$", re.MULTILINE),
    re.compile(r"©\s*\d{4}\s+[^.\n]+\s*provided\s+by", re.IGNORECASE),
    re.compile(r"^Volume\s+\d+$", re.MULTILINE),
    re.compile(r"^Issue\s+\d+$", re.MULTILINE),
]

_WHITESPACE = re.compile(r"\s+")


class TextSanitizer:
    """Strip masthead banners and footer metadata from an article body.

    Patterns are applied in order, headers first. Whitespace is normalized
    afterwards: every whitespace run, line breaks included, becomes a
    single space, so the cleaned body is one line of text.

    Must run after metadata extraction, which relies on the boilerplate
    lines for its line offsets.
    """

    def sanitize(self, text_content: str) -> str:
        """Return the body with boilerplate removed.

        Args:
            text_content: Raw article body

        Returns:
            Cleaned body
        """
        if not text_content:
            return ""

        text = text_content
        for pattern in HEADER_PATTERNS + FOOTER_PATTERNS:
            text = pattern.sub("", text)

        return _WHITESPACE.sub(" ", text).strip()
