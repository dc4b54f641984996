"""Fetched HTML pages and the fragments matched inside them."""

from typing import List, Optional

from bs4 import BeautifulSoup, Tag


class Fragment:
    """One element matched by a CSS selector."""

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def text(self) -> str:
        """Trimmed text content of the element and all its descendants."""
        return self._tag.get_text().strip()

    def attr(self, name: str) -> str:
        value = self._tag.get(name)
        if value is None:
            return ""
        # bs4 returns multi-valued attributes (class, rel) as lists
        if isinstance(value, list):
            return " ".join(value)
        return value

    def child_text(self, selector: str) -> str:
        """Concatenated, trimmed text of every descendant matching selector."""
        return "".join(child.get_text() for child in self._tag.select(selector)).strip()

    def select(self, selector: str) -> List["Fragment"]:
        return [Fragment(tag) for tag in self._tag.select(selector)]


class Page:
    """A fetched HTML document that can be queried by CSS selector."""

    def __init__(self, url: str, html: str):
        self.url = url
        self.soup = BeautifulSoup(html, "lxml")

    def select(self, selector: str) -> List[Fragment]:
        return [Fragment(tag) for tag in self.soup.select(selector)]

    def select_one(self, selector: str) -> Optional[Fragment]:
        tag = self.soup.select_one(selector)
        return Fragment(tag) if tag is not None else None
