"""Data models for the scraper."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import List, Optional

# Marks a numeric field that is in the schema but was not parsed.
NOT_AVAILABLE = -1


@dataclass
class Movie:
    title: str
    year: int = NOT_AVAILABLE
    rating: float = NOT_AVAILABLE

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Actor:
    name: str
    imdb_id: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ActorMovies:
    actor: Actor
    movies: List[Movie] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "actor": self.actor.to_dict(),
            "movies": [m.to_dict() for m in self.movies],
        }


class SessionState(str, Enum):
    FETCHING_PAGE = "fetching_page"
    PROCESSING_PAGE = "processing_page"
    STOPPED = "stopped"


@dataclass
class ScrapeSession:
    """In-memory progress of one target's crawl.

    Owned by a single PageSession and discarded once it reaches STOPPED.
    """

    target_id: str
    page: int = 1
    stopped: bool = False
    state: SessionState = SessionState.FETCHING_PAGE
    accumulated: list = field(default_factory=list)
    # Filled by crawl kinds that carry per-target metadata (actor name)
    actor: Optional[Actor] = None
    pages_fetched: int = 0
    failed_saves: int = 0

    def stop(self):
        self.stopped = True
        self.state = SessionState.STOPPED
