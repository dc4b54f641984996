"""Error taxonomy for the scraper.

ConfigurationError and TransportError are fatal and end the run.
FieldParseError and PersistenceError are recoverable: they are logged where
they happen and the crawl carries on.
"""


class ScraperError(Exception):
    """Base class for every error raised by filmo_scraper."""


class ConfigurationError(ScraperError):
    """Missing or invalid target id, batch file or config file."""


class TransportError(ScraperError):
    """The fetcher could not retrieve a page."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"could not fetch {url}: {reason}")


class FieldParseError(ScraperError):
    """A numeric field of a single record could not be parsed."""

    def __init__(self, field: str, raw: str, reason: str):
        self.field = field
        self.raw = raw
        self.reason = reason
        super().__init__(f"cannot convert {field} {raw!r}: {reason}")


class PersistenceError(ScraperError):
    """One save attempt failed."""
