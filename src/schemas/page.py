"""Page domain object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """Represents one page of a digest after segmentation.

    Attributes:
        page_number: Page number taken from the "Page X of Y" banner
        text: Plain text of the page, banner included
    """

    page_number: int
    text: str
