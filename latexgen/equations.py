"""Equations and ``align`` environments."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Equation:
    """A single equation, optionally labelled and optionally unnumbered."""

    text: str
    label: str | None = None
    numbered: bool = True

    @classmethod
    def with_label(cls, label: str, text: str) -> Equation:
        """Create an equation carrying a label."""
        return cls(text, label=label)

    def not_numbered(self) -> Equation:
        """Mark the equation so it is rendered with ``\\nonumber``."""
        self.numbered = False
        return self

    def is_numbered(self) -> bool:
        """Whether the equation receives a number."""
        return self.numbered


def _to_equation(value: Equation | str) -> Equation:
    if isinstance(value, Equation):
        return value
    if isinstance(value, str):
        return Equation(value)
    raise TypeError(f"cannot convert {type(value).__name__} to an equation")


@dataclass
class Align:
    """A list of equations for an ``align`` environment (needs ``amsmath``)."""

    equations: list[Equation] = field(default_factory=list)

    def push(self, eq: Equation | str) -> Align:
        """Append an equation; strings become unlabelled equations."""
        self.equations.append(_to_equation(eq))
        return self

    @classmethod
    def from_text(cls, text: str) -> Align:
        """Wrap a single equation in an ``align``."""
        return cls().push(text)

    def __iter__(self) -> Iterator[Equation]:
        return iter(self.equations)

    def __len__(self) -> int:
        return len(self.equations)