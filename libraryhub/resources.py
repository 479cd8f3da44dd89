"""Library resources: books, theses, digital resources and articles."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)", re.ASCII)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_CSV_FIELDS = 6


def _parse_int(text: str) -> int:
    """Read a leading integer, ignoring trailing text; raise ValueError otherwise."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _split_fields(line: str, count: int) -> list[str]:
    """Split on commas into ``count`` fields; the last keeps any remaining commas."""
    parts = line.split(",", count - 1)
    return parts + [""] * (count - len(parts))


@dataclass
class Resource:
    """An item held by the library. Only the concrete kinds may be created."""

    CSV_TAG: ClassVar[str] = ""
    LABEL: ClassVar[str] = ""

    resource_id: str
    title: str
    author: str
    year: int
    available: bool = True

    def __post_init__(self) -> None:
        if not self.CSV_TAG:
            raise TypeError(f"{type(self).__name__} is not a concrete resource kind")

    def describe(self) -> str:
        """Return a one-line human-readable description."""
        return f"{self.LABEL}: {self.title} by {self.author} ({self.year})"

    def display_info(self) -> None:
        """Print the description to standard output."""
        print(self.describe())

    def to_csv(self) -> str:
        """Serialise as ``Tag,id,title,author,year,available``."""
        flag = "1" if self.available else "0"
        return ",".join(
            (self.CSV_TAG, self.resource_id, self.title, self.author, str(self.year), flag)
        )

    @classmethod
    def from_csv(cls, line: str) -> Resource:
        """Build an instance of this class from a CSV line; the tag field is ignored."""
        _tag, resource_id, title, author, year_text, flag = _split_fields(line, _CSV_FIELDS)
        resource = cls(resource_id, title, author, _parse_int(year_text))
        resource.available = flag == "1"
        return resource


class Book(Resource):
    CSV_TAG = "Book"
    LABEL = "Book"


class Thesis(Resource):
    CSV_TAG = "Thesis"
    LABEL = "Thesis"


class DigitalResource(Resource):
    CSV_TAG = "Digital"
    LABEL = "Digital Resource"


class Article(Resource):
    CSV_TAG = "Article"
    LABEL = "Article"


_KINDS: dict[str, type[Resource]] = {
    kind.CSV_TAG: kind for kind in (Book, Thesis, DigitalResource, Article)
}


def resource_from_csv(line: str) -> Resource | None:
    """Build a resource of the kind named by the line's first field.

    Returns None when the kind is not recognised.
    """
    tag = line.split(",", 1)[0]
    kind = _KINDS.get(tag)
    return kind.from_csv(line) if kind is not None else None


def create_resource(kind: str, resource_id: str, title: str, author: str, year: int) -> Resource:
    """Create a resource from a case-insensitive kind name."""
    wanted = kind.lower()
    for tag, resource_class in _KINDS.items():
        if tag.lower() == wanted:
            return resource_class(resource_id, title, author, year)
    raise ValueError("Invalid resource type.")