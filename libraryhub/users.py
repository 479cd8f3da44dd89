"""Library members and the resources they hold."""

from __future__ import annotations

from dataclasses import dataclass, field

from libraryhub.resources import Resource


@dataclass
class User:
    """A library member identified by ``user_id``."""

    user_id: str = ""
    name: str = ""
    borrowed_items: list[Resource] = field(default_factory=list, compare=False, repr=False)

    def borrow_resource(self, resource: Resource) -> None:
        """Take the resource if it is available, marking it unavailable."""
        if resource.available:
            self.borrowed_items.append(resource)
            resource.available = False

    def return_resource(self, resource: Resource) -> None:
        """Give the resource back and mark it available."""
        self.borrowed_items = [item for item in self.borrowed_items if item is not resource]
        resource.available = True

    def list_borrowed_items(self) -> None:
        """Print a description of each borrowed resource."""
        for item in self.borrowed_items:
            item.display_info()

    def to_csv(self) -> str:
        """Serialise as ``user_id,name``."""
        return f"{self.user_id},{self.name}"

    @classmethod
    def from_csv(cls, line: str) -> User:
        """Parse a line written by :meth:`to_csv`; the name keeps any commas."""
        user_id, _, name = line.partition(",")
        return cls(user_id, name)