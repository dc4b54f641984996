"""Actor filmography: every movie an actor appears in, oldest first.

Walks IMDb's filmosearch results for one actor until the page reports
"No results". The actor's display name is read from the results header.
"""

import logging

from ..extractor import extract_movie
from ..models import Actor, ActorMovies, Movie, ScrapeSession
from ..page import Fragment, Page
from ..stop import SentinelStopDetector
from ..urls import ACTOR_MOVIES_URL, PageUrl
from .base import BaseCrawl

logger = logging.getLogger("filmo_scraper")

HEADER_SELECTOR = ".article h1.header"
HEADER_MARKER = "With"


class ActorMoviesCrawl(BaseCrawl):
    name = "actormovies"
    record_selector = ".lister-col-wrapper"

    RATING_SELECTOR = ".col-imdb-rating strong"
    TITLE_SELECTOR = ".col-title span[title] > a:first-child"
    YEAR_SELECTOR = ".col-title span[title] > .lister-item-year"

    _stop = SentinelStopDetector(".lister-item")

    @property
    def stop_detector(self):
        return self._stop

    def url_builder(self, target_id: str) -> PageUrl:
        filmo = self.config.filmography
        return PageUrl(
            ACTOR_MOVIES_URL,
            id=target_id,
            sort=filmo.sort,
            sort_order=filmo.sort_order,
            title_type=filmo.title_type,
        )

    def new_session(self, target_id: str) -> ScrapeSession:
        scrape = super().new_session(target_id)
        scrape.actor = Actor(name="", imdb_id=target_id)
        return scrape

    def begin_page(self, page: Page, scrape: ScrapeSession):
        if scrape.actor.name:
            return

        header = page.select_one(HEADER_SELECTOR)
        if header is None:
            return

        text = header.text
        i = text.find(HEADER_MARKER)
        if i == -1:
            logger.warning(f"[{self.name}] can't find actor name in header {text!r}: {scrape.target_id}")
            return
        scrape.actor.name = text[i + len(HEADER_MARKER):].strip()

    def extract(self, fragment: Fragment) -> Movie:
        return extract_movie(
            fragment.child_text(self.TITLE_SELECTOR),
            fragment.child_text(self.YEAR_SELECTOR),
            fragment.child_text(self.RATING_SELECTOR),
        )

    def artifact(self, scrape: ScrapeSession) -> dict:
        return ActorMovies(actor=scrape.actor, movies=scrape.accumulated).to_dict()
