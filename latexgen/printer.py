"""Render a document tree as LaTeX source."""

from __future__ import annotations

import io
from typing import TextIO

from .document import (
    ClearPage,
    Document,
    DocumentClass,
    Element,
    Environment,
    Input,
    NewCommand,
    Preamble,
    RawPreamble,
    Section,
    TableOfContents,
    TitlePage,
    UsePackage,
    UserDefined,
    class_name,
)
from .equations import Align, Equation
from .lists import List
from .paragraph import Bold, InlineMath, Italic, Paragraph, ParagraphElement, Plain
from .visitor import Visitor


def render(doc: Document) -> str:
    """Render a whole document to a string of LaTeX."""
    buffer = io.StringIO()
    Printer(buffer).visit_document(doc)
    return buffer.getvalue()


class Printer(Visitor):
    """A visitor that writes the TeX form of each node to a text stream."""

    def __init__(self, writer: TextIO) -> None:
        self._writer = writer

    def _write(self, text: str) -> None:
        self._writer.write(text)

    def _line(self, text: str = "") -> None:
        self._writer.write(text + "\n")

    def visit_document(self, doc: Document) -> None:
        """Write a full document, or only the body for a partial one."""
        if doc.document_class is DocumentClass.PART:
            for element in doc:
                self.visit_element(element)
            return

        self._line(f"\\documentclass{{{class_name(doc.document_class)}}}")
        self.visit_preamble(doc.preamble)
        self._line("\\begin{document}")
        for element in doc:
            self.visit_element(element)
        self._line("\\end{document}")

    def visit_paragraph(self, paragraph: Paragraph) -> None:
        """Write each element of the paragraph, then end the line."""
        for elem in paragraph:
            self.visit_paragraph_element(elem)
        self._line()

    def visit_paragraph_element(self, element: ParagraphElement) -> None:
        """Write one inline element, recursing into bold and italic wrappers."""
        match element:
            case Plain(text=text):
                self._write(text)
            case InlineMath(expression=expression):
                self._write(f"${expression}$")
            case Bold(inner=inner):
                self._write("\\textbf{")
                self.visit_paragraph_element(inner)
                self._write("}")
            case Italic(inner=inner):
                self._write("\\textit{")
                self.visit_paragraph_element(inner)
                self._write("}")
            case _:
                raise TypeError(
                    f"not a paragraph element: {type(element).__name__}"
                )

    def visit_preamble(self, preamble: Preamble) -> None:
        """Write packages, commands and raw lines, then the title and author."""
        for item in preamble:
            match item:
                case UsePackage(package=package, argument=None):
                    self._line(f"\\usepackage{{{package}}}")
                case UsePackage(package=package, argument=argument):
                    self._line(f"\\usepackage[{argument}]{{{package}}}")
                case NewCommand():
                    self._write(f"\\newcommand{{\\{item.name}}}")
                    if item.args_num is not None:
                        self._write(f"[{item.args_num}]")
                    if item.default_arg is not None:
                        self._write(f"[{item.default_arg}]")
                    self._line("{")
                    self._line(item.definition)
                    self._line("}")
                case RawPreamble(text=text):
                    self._line(text)
                case _:
                    raise TypeError(f"not a preamble element: {type(item).__name__}")

        has_metadata = preamble.title is not None or preamble.author is not None
        if not preamble.is_empty() and has_metadata:
            self._line()
        if preamble.title is not None:
            self._line(f"\\title{{{preamble.title}}}")
        if preamble.author is not None:
            self._line(f"\\author{{{preamble.author}}}")

    def visit_list(self, lst: List) -> None:
        """Write a list environment and its items."""
        env = lst.kind.environment_name()
        self._line(f"\\begin{{{env}}}")
        for item in lst:
            self.visit_list_item(item)
        self._line(f"\\end{{{env}}}")

    def visit_list_item(self, item: str) -> None:
        """Write a single ``\\item`` line."""
        self._line(f"\\item {item}")

    def visit_element(self, elem: Element) -> None:
        """Write any document element."""
        match elem:
            case Paragraph():
                self.visit_paragraph(elem)
            case Section():
                self.visit_section(elem)
            case TableOfContents():
                self._line("\\tableofcontents")
            case TitlePage():
                self._line("\\maketitle")
            case ClearPage():
                self._line("\\clearpage")
            case UserDefined(text=text):
                self._line(text)
            case Align():
                self.visit_align(elem)
            case Environment(name=name, lines=lines):
                self._line(f"\\begin{{{name}}}")
                for line in lines:
                    self._line(line)
                self._line(f"\\end{{{name}}}")
            case List():
                self.visit_list(elem)
            case Input(path=path):
                self._line(f"\\input{{{path}}}")
            case _:
                raise TypeError(f"not a document element: {type(elem).__name__}")

    def visit_section(self, section: Section) -> None:
        """Write the section heading and its elements, separated by blank lines."""
        if section.numbered:
            self._line(f"\\section{{{section.name}}}")
        else:
            self._line(f"\\section*{{{section.name}}}")

        if not section.is_empty():
            self._line()

        for element in section:
            self.visit_element(element)
            # Without a blank line LaTeX would merge consecutive paragraphs.
            self._line()

    def visit_equation(self, equation: Equation) -> None:
        """Write one equation line of an ``align`` block."""
        self._write(equation.text)
        if equation.label is not None:
            self._write(f" \\label{{{equation.label}}}")
        if not equation.is_numbered():
            self._write(" \\nonumber")
        self._line(" \\\\")

    def visit_align(self, align: Align) -> None:
        """Write an ``align`` environment and its equations."""
        self._line("\\begin{align}")
        for item in align:
            self.visit_equation(item)
        self._line("\\end{align}")