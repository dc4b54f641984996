"""Pagination state machine for one crawl target.

    FETCHING_PAGE(n) -> PROCESSING_PAGE -> STOPPED
                                        -> FETCHING_PAGE(n+1)

Each step fetches one page, asks the crawl's stop detector whether the
results have run out, and otherwise extracts every record on the page,
persisting as it goes. There is no page limit: only the stop detector or a
TransportError from the fetcher ends a crawl.
"""

import logging
from typing import Callable, Optional

from .config import PERSIST_POLICIES
from .crawls.base import BaseCrawl
from .errors import ConfigurationError
from .models import ScrapeSession, SessionState
from .storage import JsonSink

logger = logging.getLogger("filmo_scraper")

# Persist the whole artifact after every appended record
PERSIST_PER_RECORD = "record"
# Persist once at the end of every page that yielded records
PERSIST_PER_PAGE = "page"


class PageSession:
    def __init__(self, crawl: BaseCrawl, fetcher, sink: JsonSink,
                 persist_policy: str = PERSIST_PER_RECORD):
        if persist_policy not in PERSIST_POLICIES:
            raise ConfigurationError(f"unknown persist policy '{persist_policy}'")
        self.crawl = crawl
        self.fetcher = fetcher
        self.sink = sink
        self.persist_policy = persist_policy

    def start(self, target_id: str,
              url_builder: Optional[Callable[[int], str]] = None) -> ScrapeSession:
        """Crawl target_id from page 1 until the stop detector fires.

        Returns the finished (STOPPED) session. TransportError propagates.
        """
        if not target_id or not target_id.strip():
            raise ConfigurationError(f"[{self.crawl.name}] must specify a target id")

        if url_builder is None:
            url_builder = self.crawl.url_builder(target_id)

        scrape = self.crawl.new_session(target_id)
        logger.info(f"[{self.crawl.name}] Starting crawl of {target_id}")

        while not scrape.stopped:
            self.step(scrape, url_builder)

        logger.info(
            f"[{self.crawl.name}] Done: {target_id}: {len(scrape.accumulated)} records, "
            f"{scrape.pages_fetched} pages, {scrape.failed_saves} failed saves"
        )
        return scrape

    def step(self, scrape: ScrapeSession, url_builder: Callable[[int], str]) -> ScrapeSession:
        """Fetch and process the session's current page."""
        if scrape.stopped:
            return scrape

        scrape.state = SessionState.FETCHING_PAGE
        page = self.fetcher.fetch(url_builder(scrape.page))
        scrape.pages_fetched += 1

        scrape.state = SessionState.PROCESSING_PAGE
        if self.crawl.stop_detector.should_stop(page):
            # The page past the end carries no usable records
            logger.info(f"[{self.crawl.name}] {scrape.target_id}: no more results on page {scrape.page}")
            scrape.stop()
            return scrape

        self.crawl.begin_page(page, scrape)

        found = 0
        for fragment in page.select(self.crawl.record_selector):
            scrape.accumulated.append(self.crawl.extract(fragment))
            found += 1
            if self.persist_policy == PERSIST_PER_RECORD:
                self.persist(scrape)

        if self.persist_policy == PERSIST_PER_PAGE and found:
            self.persist(scrape)

        logger.debug(f"[{self.crawl.name}] {scrape.target_id}: page {scrape.page}: {found} records")

        scrape.page += 1
        scrape.state = SessionState.FETCHING_PAGE
        return scrape

    def persist(self, scrape: ScrapeSession) -> bool:
        ok = self.sink.save(self.crawl.artifact_key(scrape.target_id), self.crawl.artifact(scrape))
        if not ok:
            scrape.failed_saves += 1
        return ok
