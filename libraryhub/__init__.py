"""Library management: users, resources, loans, reservations and events stored as CSV."""

__version__ = "0.1.0"