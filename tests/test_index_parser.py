"""Tests for the ArticleIndexParser and FallbackDirectExtractor."""

from digest_distiller.extractors import (
    ArticleIndexParser,
    FallbackDirectExtractor,
    PageSegmenter,
)
from digest_distiller.extractors.index_parser import dedupe_and_sort
from digest_distiller.extractors.strategies import BackupStrategy
from schemas.index_entry import ArticleIndexEntry
from schemas.page import Page


class RecordingBackup(BackupStrategy):
    """Backup strategy that records the entry counts it was offered."""

    name = "recording"

    def __init__(self, threshold: int):
        self.threshold = threshold
        self.calls = 0

    def extract(self, text):
        self.calls += 1
        return []


class TestDedupeAndSort:
    """Tests for dedupe_and_sort()."""

    def test_removes_repeated_pairs(self):
        """Identical (title, page) pairs collapse to one."""
        entries = [
            ArticleIndexEntry("ALPHA NEWS", 3),
            ArticleIndexEntry("ALPHA NEWS", 3),
        ]

        assert dedupe_and_sort(entries) == [ArticleIndexEntry("ALPHA NEWS", 3)]

    def test_keeps_same_title_on_other_page(self):
        """A title listed against two pages is two entries."""
        entries = [
            ArticleIndexEntry("ALPHA NEWS", 5),
            ArticleIndexEntry("ALPHA NEWS", 3),
        ]

        assert dedupe_and_sort(entries) == [
            ArticleIndexEntry("ALPHA NEWS", 3),
            ArticleIndexEntry("ALPHA NEWS", 5),
        ]

    def test_stable_within_page(self):
        """Entries on the same page keep their listing order."""
        entries = [
            ArticleIndexEntry("BETA NEWS", 4),
            ArticleIndexEntry("ALPHA NEWS", 4),
        ]

        assert dedupe_and_sort(entries) == entries


class TestArticleIndexParser:
    """Tests for ArticleIndexParser."""

    def test_parses_dot_leader_listing(self):
        """A banner-headed dot-leader listing yields its entries."""
        page = Page(
            1,
            "Page 1 of 10 © 2025 Factiva, Inc. All rights reserved.\n"
            "CLIMATE CRISIS DEEPENS ..... 3\n"
            "MARKET REPORT ..... 7",
        )

        entries = ArticleIndexParser().parse([page])

        assert entries == [
            ArticleIndexEntry("CLIMATE CRISIS DEEPENS", 3),
            ArticleIndexEntry("MARKET REPORT", 7),
        ]

    def test_parses_listing_without_leaders(self):
        """Titles followed directly by page numbers are recovered."""
        page = Page(1, "MARKET REPORT 7\nSPORTS ROUNDUP 9")

        assert ArticleIndexParser().parse([page]) == [
            ArticleIndexEntry("MARKET REPORT", 7),
            ArticleIndexEntry("SPORTS ROUNDUP", 9),
        ]

    def test_sorts_by_page_number(self):
        """Entries listed out of order come back sorted."""
        page = Page(1, "BETA NEWS ..... 9\nALPHA NEWS ..... 4")

        assert ArticleIndexParser().parse([page]) == [
            ArticleIndexEntry("ALPHA NEWS", 4),
            ArticleIndexEntry("BETA NEWS", 9),
        ]

    def test_merges_listing_pages(self):
        """Entries from several listing pages form one listing."""
        pages = [
            Page(1, "Page 1 of 9\nALPHA NEWS ..... 3\nBETA NEWS ..... 5"),
            Page(2, "Page 2 of 9\nGAMMA NEWS ..... 7\nDELTA NEWS ..... 8"),
        ]

        titles = [entry.title for entry in ArticleIndexParser().parse(pages)]

        assert titles == ["ALPHA NEWS", "BETA NEWS", "GAMMA NEWS", "DELTA NEWS"]

    def test_no_duplicates_across_pages(self):
        """A listing repeated on two pages is not doubled."""
        page = Page(1, "ALPHA NEWS ..... 3\nBETA NEWS ..... 5")

        entries = ArticleIndexParser().parse([page, page])

        assert len(entries) == len(set(entries)) == 2

    def test_never_returns_page_banner_title(self):
        """Page banners inside the listing never become titles."""
        text = "Page 3 of 40\nALPHA NEWS ..... 5\nBETA NEWS ..... 6"

        entries = ArticleIndexParser().parse_index_page(text)

        assert entries
        assert all("Page" not in entry.title for entry in entries)

    def test_page_numbers_in_range(self):
        """Out-of-range numbers never become entry pages."""
        page = Page(1, "ALPHA NEWS ..... 1\nBETA NEWS ..... 800\nGAMMA NEWS ..... 5")

        entries = ArticleIndexParser().parse([page])

        assert ArticleIndexEntry("GAMMA NEWS", 5) in entries
        assert all(2 <= entry.page_number < 500 for entry in entries)

    def test_backups_skipped_when_listing_is_full(self):
        """Backup strategies do not run once their threshold is reached."""
        backup = RecordingBackup(threshold=3)
        parser = ArticleIndexParser(backup_strategies=[backup])

        parser.parse_index_page("ALPHA NEWS ..... 3\nBETA NEWS ..... 5\nGAMMA NEWS ..... 7")

        assert backup.calls == 0

    def test_backups_run_when_listing_is_short(self):
        """Backup strategies run while the listing is below threshold."""
        backup = RecordingBackup(threshold=3)
        parser = ArticleIndexParser(backup_strategies=[backup])

        parser.parse_index_page("ALPHA NEWS ..... 3\nBETA NEWS ..... 5")

        assert backup.calls == 1

    def test_backups_count_entries_from_earlier_pages(self):
        """Entries from earlier listing pages count towards backup thresholds."""
        backup = RecordingBackup(threshold=3)
        parser = ArticleIndexParser(backup_strategies=[backup])

        parser.parse_index_page("GAMMA NEWS ..... 7", found=2)

        assert backup.calls == 0

    def test_backups_skipped_on_continuation_page_without_anchors(self):
        """A later page with no anchored entries does not run the backups."""
        backup = RecordingBackup(threshold=5)
        parser = ArticleIndexParser(backup_strategies=[backup])

        parser.parse_index_page("Talks that drew 5\nhundred observers.", found=2)

        assert backup.calls == 0

    def test_prose_page_adds_no_entries(self):
        """Prose with ascending numbers after a short listing adds nothing."""
        pages = [
            Page(1, "Page 1 of 7\nCLIMATE CRISIS DEEPENS ..... 3\nMARKET REPORT ..... 6"),
            Page(4, (
                "Page 4 of 7\n"
                "Delegates agreed to reconvene after 3 days of talks that drew 5\n"
                "hundred observers from member states."
            )),
        ]

        assert ArticleIndexParser().parse(pages) == [
            ArticleIndexEntry("CLIMATE CRISIS DEEPENS", 3),
            ArticleIndexEntry("MARKET REPORT", 6),
        ]

    def test_empty_page(self):
        """A page without anchors yields no entries."""
        assert ArticleIndexParser().parse_index_page("") == []


class TestFallbackDirectExtractor:
    """Tests for FallbackDirectExtractor."""

    def test_recovers_listing_from_first_page(self):
        """Entries on page 1 are recovered and sorted."""
        pages = PageSegmenter().segment(
            "Page 1 of 4\nToday in History .. 4\nWorld Briefing .. 2\n"
            "Page 2 of 4\nBriefing body.\n"
            "Page 3 of 4\nMore briefing.\n"
            "Page 4 of 4\nHistory body."
        )

        entries = FallbackDirectExtractor().extract(pages)

        assert entries == [
            ArticleIndexEntry("World Briefing", 2),
            ArticleIndexEntry("Today in History", 4),
        ]

    def test_only_first_page_is_read(self):
        """Listings on later pages are ignored."""
        pages = [
            Page(1, "Plain prose."),
            Page(2, "ALPHA NEWS ..... 3\nBETA NEWS ..... 5"),
        ]

        assert FallbackDirectExtractor().extract(pages) == []

    def test_prose_yields_nothing(self):
        """Unstructured text produces no entries."""
        pages = [Page(1, "Just some ordinary prose without any structure at all.")]

        assert FallbackDirectExtractor().extract(pages) == []

    def test_no_pages(self):
        """No pages produces no entries."""
        assert FallbackDirectExtractor().extract([]) == []

    def test_shares_parser(self):
        """The fallback re-applies the cascade of the parser it is given."""
        backup = RecordingBackup(threshold=3)
        parser = ArticleIndexParser(backup_strategies=[backup])

        FallbackDirectExtractor(parser).extract([Page(1, "Plain prose.")])

        assert backup.calls == 1
