"""Publisher boilerplate shared by the extraction stages.

Digest pages carry a masthead banner ("Page 3 of 40 © 2025 Factiva, Inc.
All rights reserved.") that is not part of any article. The listing parser
removes it before matching titles, the index locator before counting
numbers, and the title predicate rejects any candidate that still carries a
fragment of it.
"""

import re

# Page numbers a listing may legitimately point at; page 1 holds the listing.
MIN_PAGE_NUMBER = 2
MAX_PAGE_NUMBER = 500

PAGE_MARKER = re.compile(r"Page (\d+) of \d+")

MASTHEAD_PATTERNS = [
    re.compile(
        r"Page \d+ of \d+\s*©\s*\d+\s+[^\n,]+?,\s*Inc\.\s*All rights reserved\."
    ),
    re.compile(r"Page \d+ of \d+"),
    re.compile(r"©\s*\d+\s+[^\n,]+?,\s*Inc\.\s*All rights reserved\."),
]

INVALID_TITLE_FRAGMENTS = (
    "Page",
    "Factiva",
    "Inc",
    "All rights reserved",
    "©",
    "Document",
    "Unknown",
    "Dow Jones",
)

MASTHEAD_FRAGMENTS = ("Page", "Factiva", "©")

MIN_TITLE_LENGTH = 3
MIN_LETTER_RATIO = 0.1

_DOT_RUN = re.compile(r"\.{2,}")
_WHITESPACE = re.compile(r"\s+")
_LEADING_DIGITS = re.compile(r"^\d+")
_LETTER = re.compile(r"[A-Za-z]")


def strip_masthead(text: str) -> str:
    """Remove page banners and copyright lines from page text.

    Args:
        text: Raw page text

    Returns:
        Text with every masthead fragment removed

    Examples:
        >>> strip_masthead("Page 1 of 9 © 2025 Factiva, Inc. All rights reserved.\\nNEWS ... 2")
        '\\nNEWS ... 2'
    """
    for pattern in MASTHEAD_PATTERNS:
        text = pattern.sub("", text)
    return text


def contains_masthead_fragment(text: str) -> bool:
    return any(fragment in text for fragment in MASTHEAD_FRAGMENTS)


def is_page_number(number: int) -> bool:
    """Whether a number can be a page reference in an article listing."""
    return MIN_PAGE_NUMBER <= number < MAX_PAGE_NUMBER


def clean_title(text: str, strip_leading_digits: bool = False) -> str:
    """Normalize a title candidate cut out of a listing.

    Dot leaders collapse to a single space and whitespace runs are
    normalized. Column bleed from the previous listing line can leave a page
    number glued to the front of a title ("2Today in History"); pass
    ``strip_leading_digits`` to drop it.

    Examples:
        >>> clean_title("MARKET  REPORT .......")
        'MARKET REPORT'
        >>> clean_title("2Today in History", strip_leading_digits=True)
        'Today in History'
    """
    title = _DOT_RUN.sub(" ", text)
    title = _WHITESPACE.sub(" ", title).strip()
    if strip_leading_digits:
        title = _LEADING_DIGITS.sub("", title).strip()
    return title


def is_valid_title(title: str) -> bool:
    """Check whether a candidate is plausibly an article title.

    Rejects candidates shorter than three characters, candidates carrying
    publisher boilerplate, and candidates that are mostly digits or symbols.

    Examples:
        >>> is_valid_title("CLIMATE CRISIS DEEPENS")
        True
        >>> is_valid_title("Page 3 of 40")
        False
    """
    if not title or len(title) < MIN_TITLE_LENGTH:
        return False

    if any(fragment in title for fragment in INVALID_TITLE_FRAGMENTS):
        return False

    letter_count = len(_LETTER.findall(title))
    return letter_count / len(title) >= MIN_LETTER_RATIO
