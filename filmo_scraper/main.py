"""CLI entry point and orchestrator."""

import argparse
import logging
import sys

from .batch import BatchOrchestrator, load_targets
from .config import load_config
from .crawls import ALL_CRAWLS
from .errors import ConfigurationError, TransportError
from .fetcher import Fetcher
from .logger import setup_logger
from .session import PageSession
from .storage import JsonSink

logger = logging.getLogger("filmo_scraper")

SCRAPE_ACTOR_MOVIES = "actormovies"
SCRAPE_MANY_ACTOR_MOVIES = "manyactormovies"
SCRAPE_LIST_ACTORS = "listactors"

SCRAPE_KINDS = [SCRAPE_ACTOR_MOVIES, SCRAPE_MANY_ACTOR_MOVIES, SCRAPE_LIST_ACTORS]


def check_args(scrape, target_id=None, targets_file=None):
    """Validate the flag combination before anything is fetched."""
    if not scrape:
        raise ConfigurationError("must specify --scrape")
    if scrape not in SCRAPE_KINDS:
        raise ConfigurationError(f"unknown scrape kind '{scrape}'")
    if scrape == SCRAPE_MANY_ACTOR_MOVIES:
        if not targets_file:
            raise ConfigurationError("must specify -f, which should be a file containing a JSON list of actors")
    elif not target_id or not target_id.strip():
        raise ConfigurationError("must specify --id")


def run_scraper(config, scrape, target_id=None, targets_file=None, fetcher=None):
    """Run one crawl (or a batch of actor crawls) and return the finished session(s)."""
    check_args(scrape, target_id, targets_file)

    # Batch files are validated before the first request goes out
    targets = load_targets(targets_file) if scrape == SCRAPE_MANY_ACTOR_MOVIES else None

    crawl_name = SCRAPE_ACTOR_MOVIES if scrape == SCRAPE_MANY_ACTOR_MOVIES else scrape
    crawl = ALL_CRAWLS[crawl_name](config)
    sink = JsonSink(config.output_dir)

    own_fetcher = fetcher is None
    if own_fetcher:
        fetcher = Fetcher(config.fetch)

    try:
        session = PageSession(crawl, fetcher, sink, config.crawl.persist_policy)
        if targets is not None:
            return BatchOrchestrator(session, config.crawl.continue_on_error).run(targets)
        return session.start(target_id)
    finally:
        if own_fetcher:
            fetcher.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="IMDb filmography and list scraper")
    parser.add_argument("--scrape", type=str, default=None, choices=SCRAPE_KINDS,
                        help="Type of page to scrape")
    parser.add_argument("--id", type=str, default=None,
                        help="IMDb id to scrape (actor nm... or list ls...)")
    parser.add_argument("-f", "--file", type=str, default=None,
                        help="JSON list of actors, for the manyactormovies kind")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to YAML config file")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Directory for scraped JSON (overrides config)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log at DEBUG level")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.output_dir:
        config.output_dir = args.output_dir
    setup_logger(config.log_dir, "DEBUG" if args.verbose else config.log_level)

    try:
        run_scraper(config, args.scrape, args.id, args.file)
    except ConfigurationError as e:
        logger.error(f"configuration error: {e}")
        return 1
    except TransportError as e:
        logger.error(f"fatal: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
