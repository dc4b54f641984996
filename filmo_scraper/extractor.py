"""Field extraction: raw record strings to normalized Movie / Actor values.

Everything here is pure. A field that cannot be parsed is logged and left at
the NOT_AVAILABLE sentinel; it never aborts the record, the page or the crawl.
"""

import logging
import math
import re
import struct

from .errors import FieldParseError
from .models import NOT_AVAILABLE, Actor, Movie

logger = logging.getLogger("filmo_scraper")

FIRST_NUMBER = re.compile(r"[0-9]+")
NAME_ID = re.compile(r"nm[0-9]+")
DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

INT32_MAX = 2 ** 31 - 1
INT32_DIGITS = len(str(INT32_MAX))


def parse_year(raw: str) -> int:
    """Return the first run of digits in raw as an int32, or NOT_AVAILABLE if there is none."""
    m = FIRST_NUMBER.search(raw or "")
    if not m:
        return NOT_AVAILABLE
    digits = m.group(0)
    significant = digits.lstrip("0") or "0"
    # Length check first: int() refuses very long digit strings outright
    if len(significant) > INT32_DIGITS or int(significant) > INT32_MAX:
        raise FieldParseError("year", digits, "value out of range for int32")
    return int(significant)


def parse_rating(raw: str) -> float:
    """Parse a float32 rating, or NOT_AVAILABLE when raw is empty."""
    text = (raw or "").strip()
    if not text:
        return NOT_AVAILABLE
    if not DECIMAL.fullmatch(text):
        raise FieldParseError("rating", text, "invalid syntax")
    value = float(text)
    try:
        if math.isinf(value):
            raise OverflowError(text)
        return to_float32(value)
    except OverflowError as e:
        raise FieldParseError("rating", text, "value out of range for float32") from e


def to_float32(value: float) -> float:
    """Narrow value to float32 precision, as the shortest decimal that round-trips.

    Raises OverflowError when value does not fit in a float32.
    """
    packed = struct.pack("f", value)
    for digits in range(1, 10):
        candidate = float(f"{value:.{digits}g}")
        try:
            if struct.pack("f", candidate) == packed:
                return candidate
        except OverflowError:
            continue
    return struct.unpack("f", packed)[0]


def extract_movie(title: str, year_text: str, rating_text: str) -> Movie:
    movie = Movie(title=(title or "").strip())

    try:
        movie.year = parse_year(year_text)
    except FieldParseError as e:
        logger.error(f"error: {e} (title={movie.title!r})")

    try:
        movie.rating = parse_rating(rating_text)
    except FieldParseError as e:
        logger.error(f"error: {e} (title={movie.title!r})")

    return movie


def extract_actor(name_text: str, href: str) -> Actor:
    """Build an Actor from a list entry's link text and href."""
    m = NAME_ID.search(href or "")
    return Actor(name=(name_text or "").strip(), imdb_id=m.group(0) if m else "")
