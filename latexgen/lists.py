"""Itemised and enumerated lists."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class ListKind(Enum):
    """Which kind of list to render."""

    ENUMERATE = "enumerate"
    ITEMIZE = "itemize"

    def environment_name(self) -> str:
        """The LaTeX environment used for this kind of list."""
        return self.value


@dataclass
class List:
    """A list of text items, either numbered or dot points."""

    kind: ListKind
    items: list[str] = field(default_factory=list)

    def push(self, item: str) -> List:
        """Append an item to the list."""
        if not isinstance(item, str):
            raise TypeError(f"list items must be str, not {type(item).__name__}")
        self.items.append(item)
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)