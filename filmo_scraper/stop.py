"""Stop detectors: decide whether a crawl has run past the last page of results.

Each crawl kind owns one detector. They have opposite polarity: one fires on
the presence of a sentinel message, the other on the absence of records.
"""

from abc import ABC, abstractmethod

from .page import Page

NO_RESULTS_MESSAGE = "No results. Try removing genres, ratings, or other filters to see more."


class StopDetector(ABC):
    @abstractmethod
    def should_stop(self, page: Page) -> bool:
        ...


class SentinelStopDetector(StopDetector):
    """Stop when any item's trimmed text is exactly the origin's "no results" message."""

    def __init__(self, item_selector: str, message: str = NO_RESULTS_MESSAGE):
        self.item_selector = item_selector
        self.message = message

    def should_stop(self, page: Page) -> bool:
        return any(item.text == self.message for item in page.select(self.item_selector))


class EmptyPageStopDetector(StopDetector):
    """Stop when the page holds no record fragments at all."""

    def __init__(self, record_selector: str):
        self.record_selector = record_selector

    def should_stop(self, page: Page) -> bool:
        return not page.select(self.record_selector)
