"""Tag list attached to a line of story output."""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, TypeVar

E = TypeVar("E", bound=enum.Enum)


class TagList:
    """Ordered collection of tags with lookup helpers."""

    def __init__(self, tags: Iterable[str] = ()) -> None:
        self._tags: list[str] = list(tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __repr__(self) -> str:
        return f"TagList({self._tags!r})"

    def has(self, tag: str) -> bool:
        """Return True if ``tag`` is present exactly."""
        return tag in self._tags

    def has_enum(self, enum_type: type[E]) -> E | None:
        """Return the first member of ``enum_type`` whose name ends with a tag.

        Tags are tried in order; for each tag the members are tried in
        definition order. Matching by suffix allows member names to carry
        a prefix. Returns None if no member matches.
        """
        members = list(enum_type)
        for tag in self._tags:
            for member in members:
                if member.name.endswith(tag):
                    return member
        return None

    def get_value(self, name: str) -> str:
        """Return the trimmed text after ``name:`` in the first such tag, or ""."""
        prefix = name + ":"
        for tag in self._tags:
            if tag.startswith(prefix):
                return tag[len(prefix):].strip()
        return ""