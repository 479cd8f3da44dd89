"""Line-oriented text file storage."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from typing import Union

PathArg = Union[str, "PathLike[str]"]


def save_lines(filename: PathArg, lines: Iterable[str]) -> None:
    """Write each line followed by a newline, replacing the file."""
    with open(filename, "w", encoding="utf-8", newline="") as handle:
        for line in lines:
            handle.write(f"{line}\n")


def read_lines(filename: PathArg) -> list[str]:
    """Return the file's lines without newlines; a missing file yields no lines."""
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except FileNotFoundError:
        return []
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines