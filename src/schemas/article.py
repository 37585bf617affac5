"""Extracted article schema."""

from pydantic import BaseModel


class ExtractedArticle(BaseModel):
    """An article recovered from a digest.

    ``text_content`` holds the raw page text while metadata is inferred and
    is replaced by the sanitized body before the article is returned.

    Attributes:
        title: Title from the digest's article listing
        page_number: First page of the article body
        text_content: Article body
        word_count: Word count printed in the article's metadata block
        publish_date: ISO date, or the raw date line when it cannot be parsed
        author: Byline found above the word-count line
        source: Publication name found below the date line
    """

    title: str
    page_number: int
    text_content: str = ""
    word_count: int | None = None
    publish_date: str | None = None
    author: str | None = None
    source: str | None = None
