"""Library events and their persistence."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

from libraryhub.storage import read_lines, save_lines

EVENTS_FILE = "events.csv"


@dataclass
class Event:
    """A dated library event."""

    title: str
    date: str
    description: str

    def to_csv(self) -> str:
        """Serialise as ``title,date,description``."""
        return f"{self.title},{self.date},{self.description}"

    @classmethod
    def from_csv(cls, line: str) -> Event:
        """Parse a line written by :meth:`to_csv`; the description keeps any commas."""
        parts = line.split(",", 2)
        parts += [""] * (3 - len(parts))
        title, date, description = parts
        return cls(title, date, description)


class EventManager:
    """Holds events and stores them in a CSV file."""

    def __init__(self, path: Union[str, "PathLike[str]"] = EVENTS_FILE) -> None:
        self.path = Path(path)
        self.events: list[Event] = []

    def add_event(self, event: Event) -> None:
        """Append an event."""
        self.events.append(event)

    def load_events(self) -> None:
        """Append every event stored in the file."""
        self.events.extend(Event.from_csv(line) for line in read_lines(self.path))

    def save_events(self) -> None:
        """Write all events to the file, replacing its contents."""
        save_lines(self.path, (event.to_csv() for event in self.events))