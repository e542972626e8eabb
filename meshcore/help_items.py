"""Ordered key-binding descriptions shown in a viewer's help dialog."""

from __future__ import annotations

from typing import Iterator

from meshcore.exceptions import InvalidInputException

HelpItem = tuple[str, str]


class HelpItems:
    """An ordered list of ``(key, description)`` pairs."""

    def __init__(self) -> None:
        self._items: list[HelpItem] = []

    def add(self, key: str, description: str, position: int = -1) -> None:
        """Add an item at the end, or before ``position`` if one is given.

        A position of -1 appends. Other positions must lie between 0 and the
        current number of items.
        """
        if position == -1:
            self._items.append((key, description))
            return
        if not 0 <= position <= len(self._items):
            raise InvalidInputException(
                f"Help item position {position} is out of range "
                f"for {len(self._items)} items."
            )
        self._items.insert(position, (key, description))

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()

    def __iter__(self) -> Iterator[HelpItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"HelpItems({self._items!r})"