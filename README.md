# libraryhub

A small library management system. It keeps track of users, resources
(books, theses, digital resources and articles), loans, reservations and
library events, and stores them as plain CSV files.

## Installation

```
pip install .
```

## Command-line use

```
libraryhub [--data-dir DIR]
```

`--data-dir` names the directory that holds the CSV files. It defaults to
the current directory. The command loads `users.csv`, `resources.csv`,
`loans.csv` and `reservations.csv` from that directory. Missing files count
as empty. It then shows this menu:

1. Add User
2. Add Resource
3. Borrow Resource
4. Return Resource
5. List All Resources
6. Save and Exit

Notes on the menu:

- **Add Resource** asks for a type, which is one of Book, Thesis, Digital or
  Article and may be written in any case. It then asks for an ID, a title,
  an author and a publication year. If the type is unknown it prints
  "Invalid type."; if the year is not a number it prints "Invalid year.".
  In both cases nothing is added.
- **Borrow Resource** lends the resource if it is available. Otherwise it
  places a reservation.
- **Return Resource** marks the resource available again. The first open
  reservation for it is fulfilled, and a notification is printed.
- **List All Resources** prints every resource, for example
  `Book: Dune by Herbert (1965)`.
- **Save and Exit** first reports overdue loans. It checks them against the
  fixed date 13/06/2025 (`libraryhub.cli.CLOSING_DATE`), not against
  today's date. It then writes all four CSV files and exits. If standard
  input ends before this option is chosen, the program exits without
  saving.

Notifications are printed as `[Notification] <message>`.

## Library use

```python
from libraryhub.library import LibrarySystem
from libraryhub.resources import create_resource
from libraryhub.users import User

library = LibrarySystem("data")          # CSV files live in ./data
library.load_data()
library.add_user(User("U1", "Ada"))
library.add_resource(create_resource("book", "B1", "Dune", "Herbert", 1965))

library.borrow_resource("U1", "B1")      # lends, or reserves if unavailable
found = library.search_resources("Dune") # prints and returns matches
library.return_resource("U1", "B1")
library.save_data()
```

Main pieces:

- `libraryhub.library.LibrarySystem(directory=".", clock=MyDate.today)`
  - Holds `users`, `resources`, `loans` and `reservations`.
  - `load_data()` appends whatever is stored in the files. Resource lines of
    an unknown kind are skipped.
  - `save_data()` rewrites the files.
  - `check_overdues(today)` notifies about, and returns, loans overdue on
    that date.
- `libraryhub.library.due_date(today=None)` gives the due date of a loan
  starting on a date: seven days later.
- `libraryhub.resources`
  - Classes `Book`, `Thesis`, `DigitalResource` and `Article`.
  - `create_resource(kind, ...)` takes a case-insensitive kind. An unknown
    kind raises `ValueError`.
  - `resource_from_csv(line)` returns `None` for an unknown kind.
- `libraryhub.search.search(resources, keyword)` does a case-sensitive
  match on title or author.
- `libraryhub.loans`
  - `Loan` has `is_overdue` and `renew`.
  - `Reservation` has `fulfill`.
- `libraryhub.users.User` tracks the resources a user has borrowed.
- `libraryhub.events`
  - `Event(title, date, description)` is a single event.
  - `EventManager(path="events.csv")` offers `add_event`, `load_events` and
    `save_events`.
- `libraryhub.ids`
  - `generate_id(prefix)` yields `U1`, `U2`, … from a process-wide counter.
  - `IdGenerator` keeps its own counter.
- `libraryhub.storage` provides `save_lines` and `read_lines` for plain
  line files.

### Dates

Dates use `libraryhub.mydate.MyDate`, written as `dd/mm/yyyy`.

- `MyDate.from_string` raises `ValueError` on text that does not fit that
  form.
- Date arithmetic (`add_days`) uses a simplified calendar in which every
  month has 30 days.

### CSV format

Fields are separated by commas and are not quoted or escaped. For that
reason, a comma in any field except the last will not read back correctly.

## What this package does not do

- There is no graphical interface, only the terminal menu.
- The menu has no options for events, searching by keyword or listing
  overdue loans. These are available only through the Python API above.

## Running the tests

```
pip install .[test]
pytest
```