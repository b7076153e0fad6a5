"""Paragraphs and the inline elements they are built from."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


class ParagraphElement:
    """Base class for the pieces that make up a paragraph."""

    __slots__ = ()


@dataclass(frozen=True)
class Plain(ParagraphElement):
    """A plain run of text, rendered unchanged."""

    text: str


@dataclass(frozen=True)
class Bold(ParagraphElement):
    """A bolded paragraph element."""

    inner: ParagraphElement


@dataclass(frozen=True)
class Italic(ParagraphElement):
    """An italicised paragraph element."""

    inner: ParagraphElement


@dataclass(frozen=True)
class InlineMath(ParagraphElement):
    """An inline mathematical expression."""

    expression: str


def to_paragraph_element(value: ParagraphElement | str) -> ParagraphElement:
    """Convert a string to ``Plain`` and pass paragraph elements through."""
    if isinstance(value, ParagraphElement):
        return value
    if isinstance(value, str):
        return Plain(value)
    raise TypeError(f"cannot convert {type(value).__name__} to a paragraph element")


def bold(elem: ParagraphElement | str) -> Bold:
    """Wrap an element (or a string) in bold."""
    return Bold(to_paragraph_element(elem))


def italic(elem: ParagraphElement | str) -> Italic:
    """Wrap an element (or a string) in italics."""
    return Italic(to_paragraph_element(elem))


@dataclass
class Paragraph:
    """A single paragraph made of a sequence of paragraph elements."""

    elements: list[ParagraphElement] = field(default_factory=list)

    def push(self, elem: ParagraphElement | str) -> Paragraph:
        """Append an element; strings become ``Plain`` text."""
        self.elements.append(to_paragraph_element(elem))
        return self

    def push_text(self, text: str) -> Paragraph:
        """Append raw text to the paragraph."""
        return self.push(Plain(text))

    @classmethod
    def from_text(cls, text: str) -> Paragraph:
        """Create a paragraph holding a single run of plain text."""
        return cls().push_text(text)

    def __iter__(self) -> Iterator[ParagraphElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)