"""Incremental, paginated IMDb filmography and list scraper."""

__version__ = "0.1.0"
