"""Interactive text menu for running the library."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, Sequence

from libraryhub.library import LibrarySystem
from libraryhub.mydate import MyDate
from libraryhub.resources import create_resource
from libraryhub.users import User

MENU = (
    "\n====== Library Menu ======\n"
    "1. Add User\n"
    "2. Add Resource\n"
    "3. Borrow Resource\n"
    "4. Return Resource\n"
    "5. List All Resources\n"
    "6. Save and Exit\n"
    "Select an option: "
)

# The date checked for overdue loans when saving on exit.
CLOSING_DATE = MyDate(13, 6, 2025)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


class _EndOfInput(Exception):
    """Raised when standard input runs out."""


def _ask(prompt: str) -> str:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        raise _EndOfInput
    return line.rstrip("\r\n")


def _read_number(prompt: str, skip_blank: bool = False) -> Optional[int]:
    """Read a line and return its leading integer, or None if it has none."""
    line = _ask(prompt)
    while skip_blank and not line.strip():
        line = _ask("")
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def _add_resource(system: LibrarySystem) -> None:
    kind = _ask("Enter resource type (Book, Thesis, Digital, Article): ")
    resource_id = _ask("Enter ID: ")
    title = _ask("Enter title: ")
    author = _ask("Enter author: ")
    year = _read_number("Enter publication year: ", skip_blank=True)
    if year is None:
        print("Invalid year.")
        return
    try:
        resource = create_resource(kind, resource_id, title, author, year)
    except ValueError:
        print("Invalid type.")
        return
    system.add_resource(resource)


def _run(system: LibrarySystem) -> None:
    while True:
        choice = _read_number(MENU, skip_blank=True)
        if choice == 1:
            user_id = _ask("Enter user ID: ")
            name = _ask("Enter name: ")
            system.add_user(User(user_id, name))
            print("User added.")
        elif choice == 2:
            _add_resource(system)
        elif choice == 3:
            user_id = _ask("Enter user ID: ")
            resource_id = _ask("Enter resource ID: ")
            system.borrow_resource(user_id, resource_id)
            print("Borrow request processed.")
        elif choice == 4:
            user_id = _ask("Enter user ID: ")
            resource_id = _ask("Enter resource ID: ")
            system.return_resource(user_id, resource_id)
            print("Return request processed.")
        elif choice == 5:
            print("\n--- Resource List ---")
            system.search_resources("")
        elif choice == 6:
            system.check_overdues(CLOSING_DATE)
            system.save_data()
            print("Data saved. Exiting...")
            return
        else:
            print("Invalid choice.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the library, run the menu until the user saves and exits, return 0."""
    parser = argparse.ArgumentParser(description="Manage a small library from the terminal.")
    parser.add_argument(
        "--data-dir", default=".", help="directory holding the CSV data files"
    )
    args = parser.parse_args(argv)

    system = LibrarySystem(args.data_dir)
    system.load_data()
    try:
        _run(system)
    except _EndOfInput:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())