"""Actors on an IMDb user list."""

from ..extractor import extract_actor
from ..models import Actor, ScrapeSession
from ..page import Fragment
from ..stop import EmptyPageStopDetector
from ..urls import LIST_URL, PageUrl
from .base import BaseCrawl


class ListActorsCrawl(BaseCrawl):
    name = "listactors"
    record_selector = ".lister-item-header a"

    # A page past the end of the list simply has no entries
    _stop = EmptyPageStopDetector(record_selector)

    @property
    def stop_detector(self):
        return self._stop

    def url_builder(self, target_id: str) -> PageUrl:
        return PageUrl(LIST_URL, id=target_id)

    def extract(self, fragment: Fragment) -> Actor:
        return extract_actor(fragment.text, fragment.attr("href"))

    def artifact(self, scrape: ScrapeSession) -> list:
        return [a.to_dict() for a in scrape.accumulated]
