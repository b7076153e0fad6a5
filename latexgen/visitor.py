"""A base class for walking a document tree node by node."""

from __future__ import annotations

from collections.abc import Iterator

from .document import (
    ClearPage,
    Document,
    DocumentClass,
    Element,
    Environment,
    Input,
    Preamble,
    Section,
    TableOfContents,
    TitlePage,
    UserDefined,
)
from .equations import Align, Equation
from .lists import List
from .paragraph import Paragraph, ParagraphElement


def _require_text(value: object, what: str) -> str:
    """Return ``value`` if it is a string, otherwise raise ``TypeError``."""
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, not {type(value).__name__}")
    return value


class Visitor:
    """Recursively visit each node of a ``Document``.

    Every method has a default that descends into the node's children, so
    a subclass only overrides the nodes it cares about. Errors are raised
    as exceptions and stop the walk.
    """

    def visit_document(self, doc: Document) -> None:
        """Visit the preamble (unless the document is partial), then every element."""
        if doc.document_class is not DocumentClass.PART:
            self.visit_preamble(doc.preamble)
        for element in doc:
            self.visit_element(element)

    def visit_element(self, elem: Element) -> None:
        """Dispatch a single element to the matching ``visit_*`` method."""
        match elem:
            case Paragraph():
                self.visit_paragraph(elem)
            case Section():
                self.visit_section(elem)
            case UserDefined():
                self.visit_user_defined_line(elem.text)
            case Align():
                self.visit_align(elem)
            case Environment():
                self.visit_custom_environment(elem.name, iter(elem.lines))
            case List():
                self.visit_list(elem)
            case Input():
                self.visit_input(elem.path)
            case TableOfContents() | TitlePage() | ClearPage():
                pass
            case _:
                raise TypeError(f"not a document element: {type(elem).__name__}")

    def visit_preamble(self, preamble: Preamble) -> None:
        """Visit a document's preamble."""

    def visit_paragraph_element(self, element: ParagraphElement) -> None:
        """Visit one element of a paragraph."""

    def visit_user_defined_line(self, line: str) -> None:
        """Visit a line of raw TeX; the default checks that it is text."""
        _require_text(line, "a user-defined line")

    def visit_input(self, path: str) -> None:
        """Visit an ``\\input`` statement; the default checks the path is text."""
        _require_text(path, "an input path")

    def visit_paragraph(self, paragraph: Paragraph) -> None:
        """Visit a paragraph and each of its elements."""
        for elem in paragraph:
            self.visit_paragraph_element(elem)

    def visit_section(self, section: Section) -> None:
        """Visit a section and each of its elements."""
        for elem in section:
            self.visit_element(elem)

    def visit_align(self, align: Align) -> None:
        """Visit an ``align`` block and each of its equations."""
        for equation in align:
            self.visit_equation(equation)

    def visit_equation(self, equation: Equation) -> None:
        """Visit a single equation."""

    def visit_list(self, lst: List) -> None:
        """Visit a list and each of its items."""
        for item in lst:
            self.visit_list_item(item)

    def visit_list_item(self, item: str) -> None:
        """Visit a single list item."""

    def visit_custom_environment(self, name: str, lines: Iterator[str]) -> None:
        """Visit an arbitrary environment; the default checks its name and lines are text."""
        _require_text(name, "an environment name")
        for line in lines:
            _require_text(line, "an environment line")