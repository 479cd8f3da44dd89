"""Keyword search over library resources."""

from __future__ import annotations

from collections.abc import Iterable

from libraryhub.resources import Resource


def search(resources: Iterable[Resource], keyword: str) -> list[Resource]:
    """Return resources whose title or author contains ``keyword`` (case-sensitive)."""
    return [
        resource
        for resource in resources
        if keyword in resource.title or keyword in resource.author
    ]