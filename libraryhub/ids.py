"""Sequential identifier generation."""

from __future__ import annotations


class IdGenerator:
    """Produces identifiers made of a prefix and a running counter starting at 1."""

    def __init__(self) -> None:
        self._counter = 0

    def generate(self, prefix: str) -> str:
        """Return ``prefix`` followed by the next counter value."""
        self._counter += 1
        return f"{prefix}{self._counter}"


_default_generator = IdGenerator()


def generate_id(prefix: str) -> str:
    """Generate an identifier from the process-wide counter."""
    return _default_generator.generate(prefix)