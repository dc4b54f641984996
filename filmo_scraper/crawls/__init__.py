"""Crawl kind registry."""

from .actor_movies import ActorMoviesCrawl
from .base import BaseCrawl
from .list_actors import ListActorsCrawl

ALL_CRAWLS = {
    "actormovies": ActorMoviesCrawl,
    "listactors": ListActorsCrawl,
}
