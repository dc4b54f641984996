"""Abstract base class for all crawl kinds."""

from abc import ABC, abstractmethod

from ..config import AppConfig
from ..models import ScrapeSession
from ..page import Fragment, Page
from ..stop import StopDetector
from ..storage import safe_key_part
from ..urls import PageUrl


class BaseCrawl(ABC):
    """What one kind of crawl extracts, where it starts and when it ends.

    A crawl kind holds no per-target state; that lives in the ScrapeSession
    handed to each hook, so one instance can serve many targets.
    """

    name: str = ""
    # CSS selector matching one record fragment
    record_selector: str = ""

    def __init__(self, config: AppConfig):
        self.config = config

    @property
    @abstractmethod
    def stop_detector(self) -> StopDetector:
        ...

    @abstractmethod
    def url_builder(self, target_id: str) -> PageUrl:
        """Return the page-N URL builder for a target."""
        ...

    @abstractmethod
    def extract(self, fragment: Fragment):
        """Turn one record fragment into a record value."""
        ...

    @abstractmethod
    def artifact(self, scrape: ScrapeSession):
        """JSON-serializable snapshot of everything accumulated so far."""
        ...

    def new_session(self, target_id: str) -> ScrapeSession:
        return ScrapeSession(target_id=target_id)

    def begin_page(self, page: Page, scrape: ScrapeSession):
        """Hook run on every page that did not stop the crawl, before its records."""

    def artifact_key(self, target_id: str) -> str:
        return f"{self.name}/{self.name}-{safe_key_part(target_id)}"
