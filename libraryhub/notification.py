"""User-facing notifications printed to standard output."""

from __future__ import annotations

from collections.abc import Iterable


def send(message: str) -> None:
    """Print a single notification."""
    print(f"[Notification] {message}", flush=True)


def send_bulk(messages: Iterable[str]) -> None:
    """Print each message as a notification, in order."""
    for message in messages:
        send(message)