"""Article index entry domain object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArticleIndexEntry:
    """A single line of a digest's article listing.

    Entries are hashable so that a listing can be deduplicated by the
    (title, page_number) pair.

    Attributes:
        title: Article title as printed in the listing
        page_number: Page on which the article body starts
    """

    title: str
    page_number: int
