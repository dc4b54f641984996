"""Batch mode: crawl many targets one after another."""

import json
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .errors import ConfigurationError, TransportError
from .session import PageSession

logger = logging.getLogger("filmo_scraper")


@dataclass
class TargetResult:
    target_id: str
    records: int = 0
    pages: int = 0
    error: Optional[str] = None


def load_targets(path: str) -> List[str]:
    """Read target ids from a JSON file.

    The file holds a list of actors (``{"name": ..., "imdb_id": ...}``) or of
    plain id strings. Anything else is a ConfigurationError.
    """
    if not path:
        raise ConfigurationError("must specify -f, which should be a file containing a JSON list of actors")

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"cannot read batch file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"batch file {path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise ConfigurationError(f"batch file {path} must contain a JSON list")

    targets = []
    for n, entry in enumerate(raw):
        target = entry.get("imdb_id") if isinstance(entry, dict) else entry
        if not isinstance(target, str) or not target.strip():
            raise ConfigurationError(f"batch file {path}: entry {n} has no imdb_id")
        targets.append(target.strip())
    return targets


class BatchOrchestrator:
    """Runs one PageSession per target, strictly in order.

    With continue_on_error off a TransportError aborts the remaining
    targets; with it on the failure is recorded and the next target starts.
    """

    def __init__(self, session: PageSession, continue_on_error: bool = False):
        self.session = session
        self.continue_on_error = continue_on_error

    def run(self, targets: Iterable[str]) -> List[TargetResult]:
        targets = list(targets)
        results = []

        for n, target_id in enumerate(targets, start=1):
            logger.info(f"[batch] Target {n}/{len(targets)}: {target_id}")
            try:
                scrape = self.session.start(target_id)
            except TransportError as e:
                if not self.continue_on_error:
                    raise
                logger.error(f"[batch] Failed {target_id}: {e}")
                results.append(TargetResult(target_id, error=str(e)))
                continue

            results.append(TargetResult(target_id, len(scrape.accumulated), scrape.pages_fetched))

        failed = sum(1 for r in results if r.error)
        logger.info(f"[batch] Done: {len(results) - failed} completed, {failed} failed")
        return results
