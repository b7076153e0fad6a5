"""Documents, sections, preambles and the elements they contain."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Union, overload

from .equations import Align
from .lists import List
from .paragraph import Paragraph


class DocumentClass(Enum):
    """The kind of document being generated.

    ``PART`` is a partial document without header and footer, meant to be
    included in another file. Any other class may be given as a plain string.
    """

    ARTICLE = "article"
    BOOK = "book"
    REPORT = "report"
    PART = ""


def class_name(document_class: DocumentClass | str) -> str:
    """The name written in ``\\documentclass{...}``."""
    if isinstance(document_class, DocumentClass):
        return document_class.value
    if isinstance(document_class, str):
        return document_class
    raise TypeError(f"invalid document class: {document_class!r}")


@dataclass(frozen=True)
class TableOfContents:
    """The table of contents."""


@dataclass(frozen=True)
class TitlePage:
    """The title page."""


@dataclass(frozen=True)
class ClearPage:
    """A page break."""


@dataclass(frozen=True)
class Environment:
    """A generic environment and its lines."""

    name: str
    lines: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        lines = tuple(self.lines)
        if not all(isinstance(line, str) for line in lines):
            raise TypeError("environment lines must be strings")
        object.__setattr__(self, "lines", lines)


@dataclass(frozen=True)
class UserDefined:
    """Raw TeX rendered unchanged."""

    text: str


@dataclass(frozen=True)
class Input(object):
    """An ``\\input{...}`` statement."""

    path: str


@dataclass
class Section:
    """A section: a name followed by a sequence of elements."""

    name: str
    numbered: bool = True
    elements: list[Element] = field(default_factory=list)

    def push(self, element: object) -> Section:
        """Append an element; strings become paragraphs."""
        self.elements.append(to_element(element))
        return self

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def is_empty(self) -> bool:
        """Whether the section holds no elements."""
        return not self.elements


Element = Union[
    Paragraph,
    Section,
    TableOfContents,
    TitlePage,
    ClearPage,
    Align,
    Environment,
    UserDefined,
    List,
    Input,
]

_ELEMENT_TYPES = (
    Paragraph,
    Section,
    TableOfContents,
    TitlePage,
    ClearPage,
    Align,
    Environment,
    UserDefined,
    List,
    Input,
)


def to_element(value: object) -> Element:
    """Convert a value into a document element.

    Elements pass through, strings become paragraphs, and a
    ``(name, lines)`` tuple becomes an ``Environment``.
    """
    if isinstance(value, _ELEMENT_TYPES):
        return value
    if isinstance(value, str):
        return Paragraph.from_text(value)
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], str):
        name, lines = value
        if isinstance(lines, str):
            raise TypeError("environment lines must be an iterable of strings")
        return Environment(name, tuple(lines))
    raise TypeError(f"cannot convert {type(value).__name__} to a document element")


@dataclass(frozen=True)
class UsePackage:
    """A ``\\usepackage`` line with an optional argument."""

    package: str
    argument: str | None = None


@dataclass(frozen=True)
class NewCommand:
    """A ``\\newcommand`` definition."""

    name: str
    definition: str
    args_num: int | None = None
    default_arg: str | None = None


@dataclass(frozen=True)
class RawPreamble:
    """Arbitrary TeX included in the preamble."""

    text: str


PreambleElement = Union[UsePackage, NewCommand, RawPreamble]

_PREAMBLE_TYPES = (UsePackage, NewCommand, RawPreamble)


@dataclass
class Preamble:
    """The document's preamble: metadata plus package and command lines."""

    author: str | None = None
    title: str | None = None
    contents: list[PreambleElement] = field(default_factory=list)

    def set_author(self, name: str) -> Preamble:
        """Set the document's author."""
        self.author = name
        return self

    def set_title(self, name: str) -> Preamble:
        """Set the document's title."""
        self.title = name
        return self

    def use_package(self, name: str, argument: str | None = None) -> Preamble:
        """Add a package import."""
        return self.push(UsePackage(name, argument))

    def new_command(self, name: str, args_num: int, definition: str) -> Preamble:
        """Add a ``\\newcommand`` taking ``args_num`` arguments."""
        return self.push(NewCommand(name, definition, args_num=args_num))

    def push(self, element: PreambleElement) -> Preamble:
        """Append a preamble element."""
        if not isinstance(element, _PREAMBLE_TYPES):
            raise TypeError(
                f"cannot add {type(element).__name__} to a preamble"
            )
        self.contents.append(element)
        return self

    def extend(self, elements: Iterable[PreambleElement]) -> Preamble:
        """Append several preamble elements."""
        for element in elements:
            self.push(element)
        return self

    def is_empty(self) -> bool:
        """Whether no packages, commands or raw lines were added."""
        return not self.contents

    def __iter__(self) -> Iterator[PreambleElement]:
        return iter(self.contents)

    def __len__(self) -> int:
        return len(self.contents)


@dataclass
class Document:
    """The root node of a document."""

    document_class: DocumentClass | str = DocumentClass.ARTICLE
    preamble: Preamble = field(default_factory=Preamble)
    elements: list[Element] = field(default_factory=list)

    def push(self, element: object) -> Document:
        """Append an element; strings become paragraphs."""
        self.elements.append(to_element(element))
        return self

    def push_doc(self, doc: Document) -> Document:
        """Append copies of every element of another document."""
        for element in doc:
            self.push(copy.deepcopy(element))
        return self

    def extend(self, elements: Iterable[object]) -> Document:
        """Append several elements."""
        for element in elements:
            self.push(element)
        return self

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    @overload
    def __getitem__(self, index: int) -> Element: ...

    @overload
    def __getitem__(self, index: slice) -> list[Element]: ...

    def __getitem__(self, index: int | slice) -> Element | list[Element]:
        return self.elements[index]