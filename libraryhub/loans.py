"""Loans of resources to users and reservations of unavailable resources."""

from __future__ import annotations

from dataclasses import dataclass, replace

from libraryhub.mydate import MyDate


def _split_fields(line: str, count: int) -> list[str]:
    """Split on commas into ``count`` fields; the last keeps any remaining commas."""
    parts = line.split(",", count - 1)
    return parts + [""] * (count - len(parts))


@dataclass
class Loan:
    """A resource lent to a user until a due date."""

    resource_id: str
    user_id: str
    due_date: MyDate

    def __post_init__(self) -> None:
        # The loan owns its due date; later changes to the caller's date must not leak in.
        self.due_date = replace(self.due_date)

    def is_overdue(self, today: MyDate) -> bool:
        """Return True if the due date lies strictly before ``today``."""
        return self.due_date.is_before(today)

    def renew(self, extra_days: int) -> None:
        """Push the due date back by ``extra_days``."""
        self.due_date.add_days(extra_days)

    def to_csv(self) -> str:
        """Serialise as ``resource_id,user_id,dd/mm/yyyy``."""
        return f"{self.resource_id},{self.user_id},{self.due_date}"

    @classmethod
    def from_csv(cls, line: str) -> Loan:
        """Parse a line written by :meth:`to_csv`; raise ValueError on a bad date."""
        resource_id, user_id, date_text = _split_fields(line, 3)
        return cls(resource_id, user_id, MyDate.from_string(date_text))


@dataclass
class Reservation:
    """A user's claim on a resource that was unavailable when requested."""

    resource_id: str
    user_id: str
    fulfilled: bool = False

    def fulfill(self) -> None:
        """Mark the reservation as fulfilled."""
        self.fulfilled = True

    def to_csv(self) -> str:
        """Serialise as ``resource_id,user_id,flag`` with flag ``1`` or ``0``."""
        flag = "1" if self.fulfilled else "0"
        return f"{self.resource_id},{self.user_id},{flag}"

    @classmethod
    def from_csv(cls, line: str) -> Reservation:
        """Parse a line written by :meth:`to_csv`."""
        resource_id, user_id, flag = _split_fields(line, 3)
        return cls(resource_id, user_id, flag == "1")