"""Tests for the stop detectors of both crawl kinds."""

import pytest

from filmo_scraper.crawls import ActorMoviesCrawl, ListActorsCrawl
from filmo_scraper.page import Page
from filmo_scraper.stop import EmptyPageStopDetector, SentinelStopDetector, StopDetector

from tests.pages import list_page, movies_page, no_results_page


class TestSentinelStopDetector:
    detector = SentinelStopDetector(".lister-item")

    def test_fires_on_no_results_page(self):
        assert self.detector.should_stop(Page("u", no_results_page())) is True

    def test_quiet_on_results_page(self):
        rows = [("A", "(2000)", "5.0"), ("B", "(2001)", "6.0")]
        assert self.detector.should_stop(Page("u", movies_page(rows))) is False

    def test_fires_even_alongside_other_items(self):
        html = movies_page([("A", "(2000)", "5.0")]).replace(
            '<div class="lister-list">',
            '<div class="lister-list"><div class="lister-item">'
            "No results. Try removing genres, ratings, or other filters to see more."
            "</div>",
        )
        assert self.detector.should_stop(Page("u", html)) is True

    def test_partial_message_does_not_fire(self):
        html = "<div class='lister-item'>No results.</div>"
        assert self.detector.should_stop(Page("u", html)) is False

    def test_quiet_on_empty_page(self):
        assert self.detector.should_stop(Page("u", "<html></html>")) is False


class TestEmptyPageStopDetector:
    detector = EmptyPageStopDetector(".lister-item-header a")

    def test_fires_when_no_entries(self):
        assert self.detector.should_stop(Page("u", list_page([]))) is True

    def test_quiet_when_entries_present(self):
        page = Page("u", list_page([("Keanu Reeves", "nm0000206")]))
        assert self.detector.should_stop(page) is False


class TestCrawlKindDetectors:
    def test_each_kind_has_its_own_policy(self, config):
        assert isinstance(ActorMoviesCrawl(config).stop_detector, SentinelStopDetector)
        assert isinstance(ListActorsCrawl(config).stop_detector, EmptyPageStopDetector)


class TestStopDetectorBase:
    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            StopDetector()
