"""The library: users, resources, loans and reservations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from libraryhub import notification
from libraryhub.loans import Loan, Reservation
from libraryhub.mydate import MyDate
from libraryhub.resources import Resource, resource_from_csv
from libraryhub.search import search
from libraryhub.storage import read_lines, save_lines
from libraryhub.users import User

LOAN_PERIOD_DAYS = 7
USERS_FILE = "users.csv"
RESOURCES_FILE = "resources.csv"
LOANS_FILE = "loans.csv"
RESERVATIONS_FILE = "reservations.csv"


def due_date(today: Optional[MyDate] = None) -> MyDate:
    """Return the due date of a loan starting ``today`` (the current date by default)."""
    start = MyDate.today() if today is None else today
    due = replace(start)
    due.add_days(LOAN_PERIOD_DAYS)
    return due


class LibrarySystem:
    """Keeps the library's records and stores them as CSV files in ``directory``."""

    def __init__(
        self,
        directory: Union[str, "PathLike[str]"] = ".",
        clock: Callable[[], MyDate] = MyDate.today,
    ) -> None:
        self.directory = Path(directory)
        self._clock = clock
        self.users: list[User] = []
        self.resources: list[Resource] = []
        self.loans: list[Loan] = []
        self.reservations: list[Reservation] = []

    def add_user(self, user: User) -> None:
        """Register a user."""
        self.users.append(user)

    def add_resource(self, resource: Resource) -> None:
        """Add a resource to the collection."""
        self.resources.append(resource)

    def borrow_resource(self, user_id: str, resource_id: str) -> None:
        """Lend the resource, or reserve it when it is not available."""
        for user in self.users:
            if user.user_id != user_id:
                continue
            for resource in self.resources:
                if resource.resource_id == resource_id and resource.available:
                    user.borrow_resource(resource)
                    resource.available = False
                    notification.send(f"You have borrowed: {resource.title}")
                    self.loans.append(Loan(resource_id, user_id, due_date(self._clock())))
                    return
            self.reservations.append(Reservation(resource_id, user_id))
            notification.send(f"Resource unavailable. Reserved: {resource_id}")

    def return_resource(self, user_id: str, resource_id: str) -> None:
        """Take a resource back and fulfil the first open reservation for it."""
        for user in self.users:
            if user.user_id != user_id:
                continue
            for resource in self.resources:
                if resource.resource_id != resource_id:
                    continue
                user.return_resource(resource)
                resource.available = True
                notification.send(f"You returned: {resource.title}")
                waiting = next(
                    (
                        reservation
                        for reservation in self.reservations
                        if reservation.resource_id == resource_id and not reservation.fulfilled
                    ),
                    None,
                )
                if waiting is not None:
                    notification.send(f"Reserved item available for: {waiting.user_id}")
                    waiting.fulfill()
                return

    def search_resources(self, keyword: str) -> list[Resource]:
        """Print and return the resources whose title or author contains ``keyword``."""
        results = search(self.resources, keyword)
        for resource in results:
            resource.display_info()
        return results

    def check_overdues(self, today: MyDate) -> list[Loan]:
        """Send a notification for, and return, every loan overdue on ``today``."""
        overdue = [loan for loan in self.loans if loan.is_overdue(today)]
        for loan in overdue:
            notification.send(f"Loan overdue for resource: {loan.resource_id}")
        return overdue

    def save_data(self) -> None:
        """Write all records to their CSV files."""
        save_lines(self.directory / USERS_FILE, (user.to_csv() for user in self.users))
        save_lines(
            self.directory / RESOURCES_FILE, (resource.to_csv() for resource in self.resources)
        )
        save_lines(self.directory / LOANS_FILE, (loan.to_csv() for loan in self.loans))
        save_lines(
            self.directory / RESERVATIONS_FILE,
            (reservation.to_csv() for reservation in self.reservations),
        )

    def load_data(self) -> None:
        """Append the records stored in the CSV files; unknown resource kinds are skipped."""
        self.users.extend(User.from_csv(line) for line in read_lines(self.directory / USERS_FILE))
        for line in read_lines(self.directory / RESOURCES_FILE):
            resource = resource_from_csv(line)
            if resource is not None:
                self.resources.append(resource)
        self.loans.extend(Loan.from_csv(line) for line in read_lines(self.directory / LOANS_FILE))
        self.reservations.extend(
            Reservation.from_csv(line)
            for line in read_lines(self.directory / RESERVATIONS_FILE)
        )