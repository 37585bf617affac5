"""Infer article metadata from the block printed above each article body.

Digest articles open with a metadata block anchored on a "N words" line:

    CLIMATE CRISIS DEEPENS
    By Jane Doe | Environment Desk
    1,204 words
    3 September 2025
    06:50 PM
    Reuters News

The byline sits directly above the anchor, the publish date directly below
it, and the source follows the date, after an optional time-of-day line.
Every field is optional; articles without an anchor get no metadata.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime

logger = logging.getLogger(__name__)

METADATA_SCAN_LINES = 20

WORD_COUNT_LINE = re.compile(r"^(\d{1,3}(?:,\d{3})+|\d+)\s+words$", re.IGNORECASE)
WORD_COUNT_WITH_DATE = re.compile(
    r"^(\d{1,3}(?:,\d{3})+|\d+)\s+words\s+(.+)$", re.IGNORECASE
)
TIME_LINE = re.compile(r"^\d{1,2}:\d{2}\s*(?:AM|PM)?$", re.IGNORECASE)

DATE_FORMATS = (
    "%d %B %Y",
    "%d %b %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%m/%d/%Y",
    "%Y-%m-%d",
)

NON_AUTHOR_PATTERNS = [
    re.compile(r"^page\s+\d+", re.IGNORECASE),
    re.compile(r"^©\s*\d{4}"),
    re.compile(r"^factiva", re.IGNORECASE),
    re.compile(r"^all\s+rights\s+reserved", re.IGNORECASE),
    re.compile(r"^\d+$"),
    re.compile(r"^volume\s+\d+", re.IGNORECASE),
    re.compile(r"^issue\s+\d+", re.IGNORECASE),
    re.compile(r"^document\s+\d+", re.IGNORECASE),
]

NON_SOURCE_PATTERNS = NON_AUTHOR_PATTERNS + [
    re.compile(r"^issn:", re.IGNORECASE),
    re.compile(
        r"^(english|french|german|spanish|italian|portuguese|dutch|russian|chinese|japanese|arabic)$",
        re.IGNORECASE,
    ),
    re.compile(r"^\d+-\d+$"),
    re.compile(r"^vol(?:ume|\.)\s*\d+;\s*issue\s+\d+", re.IGNORECASE),
    re.compile(r"^©\s*\d{4}\s+[^.]+\s*provided\s+by", re.IGNORECASE),
    TIME_LINE,
]

PRESS_WORD = re.compile(r"\bPress\b", re.IGNORECASE)
OUTLET_NAME = re.compile(
    r"\b(?:News|Times|Post|Journal|Herald|Tribune|Gazette|Chronicle|Observer|"
    r"Guardian|Telegraph|Reuters|Bloomberg|Associated Press|Agence France-Presse|"
    r"AFP|AP|UPI|CNN|BBC|NBC|CBS|NPR|Xinhua|Kyodo|Interfax|TASS|Al Jazeera|"
    r"Deutsche Welle|Dow Jones|Wall Street Journal|Financial Times)\b"
)

_LETTER = re.compile(r"[A-Za-z]")
_WHITESPACE = re.compile(r"\s+")


@dataclass
class ArticleMetadata:
    """Metadata inferred for a single article; every field is optional."""

    word_count: int | None = None
    publish_date: str | None = None
    author: str | None = None
    source: str | None = None


def parse_date(date_text: str) -> str:
    """Parse a publish-date line into an ISO calendar date.

    Args:
        date_text: Date line such as "3 September 2025"

    Returns:
        Date as "YYYY-MM-DD", or the original text when no format matches

    Examples:
        >>> parse_date("3 September 2025")
        '2025-09-03'
        >>> parse_date("September 3, 2025")
        '2025-09-03'
        >>> parse_date("Last Tuesday")
        'Last Tuesday'
    """
    if not date_text:
        return date_text

    normalized = _WHITESPACE.sub(" ", date_text.replace(",", " ")).strip()
    for date_format in DATE_FORMATS:
        try:
            return datetime.strptime(normalized, date_format).date().isoformat()
        except ValueError:
            continue
    return date_text


def is_time_line(text: str) -> bool:
    return bool(TIME_LINE.match(text))


def is_valid_source(text: str) -> bool:
    """Check whether a line can be a publication name.

    Examples:
        >>> is_valid_source("Reuters News")
        True
        >>> is_valid_source("06:50 PM")
        False
        >>> is_valid_source("English")
        False
    """
    if not text or len(text) < 3:
        return False

    if len(_LETTER.findall(text)) < 2:
        return False

    if is_time_line(text) or text.isdigit():
        return False

    return not any(pattern.search(text) for pattern in NON_SOURCE_PATTERNS)


def is_source_like(text: str) -> bool:
    """Check whether a line names a publication rather than a person.

    Examples:
        >>> is_source_like("The Associated Press")
        True
        >>> is_source_like("Jane Doe")
        False
    """
    if not text or len(text) < 3:
        return False

    if PRESS_WORD.search(text) and len(text.split()) > 2:
        return True

    return bool(OUTLET_NAME.search(text))


def is_non_author(text: str) -> bool:
    return not text.strip() or any(pattern.search(text) for pattern in NON_AUTHOR_PATTERNS)


def process_author(text: str) -> str | None:
    """Normalize a byline candidate.

    Single words are not bylines. Bylines with a desk or title after a pipe
    keep only the part before the pipe.

    Examples:
        >>> process_author("Jane Doe | Environment Desk")
        'Jane Doe'
        >>> process_author("Staff") is None
        True
    """
    if not text or not text.strip():
        return None

    text = text.strip()
    if len(text.split()) == 1:
        return None

    if "|" in text:
        before_pipe = text.split("|")[0].strip()
        if len(before_pipe.split()) <= 1:
            return None
        return before_pipe

    return text


class MetadataExtractor:
    """Infer word count, publish date, source and author for an article.

    Only the first METADATA_SCAN_LINES non-empty lines are searched for the
    word-count anchor, and only the first anchor is used. The raw body must
    be passed in, before boilerplate is removed, since the block's line
    offsets depend on it.
    """

    def extract(self, text_content: str, title: str) -> ArticleMetadata:
        """Extract metadata from a raw article body.

        Args:
            text_content: Raw article body
            title: Article title from the listing

        Returns:
            ArticleMetadata; all fields None when no anchor line is found
        """
        metadata = ArticleMetadata()
        lines = [line.strip() for line in (text_content or "").split("\n") if line.strip()]

        for i, line in enumerate(lines[:METADATA_SCAN_LINES]):
            anchor = self._match_anchor(lines, i)
            if anchor is None:
                continue

            word_count, date_text, next_index = anchor
            metadata.word_count = word_count
            if date_text is not None:
                metadata.publish_date = parse_date(date_text)
                metadata.source = self._find_source(lines, next_index)
            metadata.author = self._find_author(lines, i, title, metadata.source)

            logger.debug(f"Extracted metadata for {title!r}: {metadata}")
            break

        return metadata

    def _match_anchor(self, lines: list[str], i: int) -> tuple[int, str | None, int] | None:
        """Match the word-count anchor on line i.

        Returns:
            (word count, date text, index of the first line after the date),
            or None if line i is not an anchor
        """
        line = lines[i]

        match = WORD_COUNT_LINE.match(line)
        if match:
            date_text = lines[i + 1] if i + 1 < len(lines) else None
            return _parse_count(match.group(1)), date_text, i + 2

        # Older digests print the date on the anchor line itself.
        match = WORD_COUNT_WITH_DATE.match(line)
        if match and parse_date(match.group(2)) != match.group(2):
            return _parse_count(match.group(1)), match.group(2).strip(), i + 1

        return None

    def _find_source(self, lines: list[str], index: int) -> str | None:
        if index >= len(lines):
            return None

        candidate = lines[index]
        if is_time_line(candidate):
            if index + 1 >= len(lines):
                return None
            candidate = lines[index + 1]

        return candidate if is_valid_source(candidate) else None

    def _find_author(
        self, lines: list[str], anchor_index: int, title: str, source: str | None
    ) -> str | None:
        if anchor_index == 0:
            return None

        candidate_index = anchor_index - 1
        above = lines[candidate_index]
        # A publication printed above the anchor pushes the byline up a line.
        if (source and above == source) or is_source_like(above):
            candidate_index -= 1
            if candidate_index < 0:
                return None

        author = process_author(lines[candidate_index])
        if (
            author
            and author.casefold() != (title or "").casefold()
            and not is_source_like(author)
            and not is_non_author(author)
        ):
            return author
        return None


def _parse_count(text: str) -> int:
    return int(text.replace(",", ""))
