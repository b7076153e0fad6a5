"""Sample documents and a command that prints them."""

from __future__ import annotations

import argparse
import copy

from .document import ClearPage, Document, DocumentClass, Input, Section, TableOfContents, TitlePage
from .equations import Align, Equation
from .lists import List, ListKind
from .printer import render


def simple_document() -> Document:
    """A title page, table of contents and two short sections."""
    doc = Document(DocumentClass.ARTICLE)
    doc.preamble.set_title("My Fancy Document")
    doc.preamble.set_author("Jane Doe")

    doc.push(TitlePage()).push(ClearPage()).push(TableOfContents()).push(ClearPage())

    section_1 = Section("Section 1")
    section_1.push("Here is some text which will be put in paragraph 1.").push(
        "And here is some more text for paragraph 2."
    )
    doc.push(section_1)

    section_2 = Section("Section 2")
    section_2.push("More text...")
    doc.push(section_2)
    return doc


def _introduction() -> Section:
    section = Section("Introduction")
    section.push("This is an example paragraph.")

    equations = Align().push("y &= mx + c").push(
        Equation.with_label("quadratic", "y &= a x^2 + bx + c")
    )
    section.push("Please refer to the equations below:").push(equations)

    objectives = (
        List(ListKind.ENUMERATE)
        .push(r"Demonstrate how to use the \textit{latex} library.")
        .push("Create a reasonably complex document")
        .push("???")
        .push("PROFIT!")
    )
    section.push("Here are our objectives:").push(objectives)
    return section


def complex_document() -> Document:
    """A document with packages, equations and an enumerated list."""
    doc = Document(DocumentClass.ARTICLE)
    (
        doc.preamble.set_title("Hello World")
        .set_author("Jane Doe")
        .use_package("amsmath")
        .use_package("parskip")
    )
    (
        doc.push(TitlePage())
        .push(ClearPage())
        .push(TableOfContents())
        .push(ClearPage())
        .push(_introduction())
    )
    return doc


def template_document() -> Document:
    """A bare template with a title page, meant to receive other content."""
    doc = Document(DocumentClass.ARTICLE)
    doc.preamble.set_title("Template document")
    doc.preamble.set_author("A. N. Author")
    doc.push(TitlePage()).push(ClearPage())
    return doc


def part_document() -> Document:
    """A partial document to be included into another one."""
    doc = Document(DocumentClass.PART)
    section = Section("Section 1")
    section.push("Some text which gets included into the main document.")
    doc.push(section)
    return doc


def main(argv: list[str] | None = None) -> int:
    """Print one of the sample documents as LaTeX."""
    parser = argparse.ArgumentParser(description="Print a sample LaTeX document.")
    parser.add_argument(
        "example",
        nargs="?",
        default="simple",
        choices=("simple", "complex", "template"),
    )
    args = parser.parse_args(argv)

    if args.example == "simple":
        print(render(simple_document()))
    elif args.example == "complex":
        print(render(complex_document()))
    else:
        template = template_document()
        template_copy = copy.deepcopy(template)
        part = part_document()
        print(render(part))

        template.push(Input("part.tex"))
        print(render(template))

        template_copy.push_doc(part)
        print(render(template_copy))
    return 0