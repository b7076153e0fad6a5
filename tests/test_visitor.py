import pytest

from latexgen.document import (
    ClearPage,
    Document,
    DocumentClass,
    Environment,
    Input,
    Section,
    TableOfContents,
    TitlePage,
    UserDefined,
)
from latexgen.equations import Align, Equation
from latexgen.lists import List, ListKind
from latexgen.paragraph import Paragraph, Plain, bold
from latexgen.visitor import Visitor


class Recorder(Visitor):
    def __init__(self):
        self.calls = []

    def visit_preamble(self, preamble):
        self.calls.append(("preamble", preamble.title))
        super().visit_preamble(preamble)

    def visit_paragraph_element(self, element):
        self.calls.append(("para_elem", element))

    def visit_user_defined_line(self, line):
        self.calls.append(("user", line))

    def visit_input(self, path):
        self.calls.append(("input", path))

    def visit_equation(self, equation):
        self.calls.append(("equation", equation.text))

    def visit_list_item(self, item):
        self.calls.append(("item", item))

    def visit_custom_environment(self, name, lines):
        self.calls.append(("env", name, list(lines)))


def test_base_visitor_walks_full_document_without_output():
    doc = Document(DocumentClass.ARTICLE)
    doc.push("text").push(TitlePage()).push(Align.from_text("y = x"))
    visitor = Visitor()
    assert visitor.visit_document(doc) is None


def test_full_document_visits_preamble_first():
    doc = Document(DocumentClass.ARTICLE)
    doc.preamble.set_title("My Title")
    doc.push("Hello")
    rec = Recorder()
    rec.visit_document(doc)
    assert rec.calls == [("preamble", "My Title"), ("para_elem", Plain("Hello"))]


def test_part_document_skips_preamble():
    doc = Document(DocumentClass.PART)
    doc.preamble.set_title("Ignored")
    doc.push("Body")
    rec = Recorder()
    rec.visit_document(doc)
    assert rec.calls == [("para_elem", Plain("Body"))]


def test_other_class_string_visits_preamble():
    doc = Document("memoir")
    rec = Recorder()
    rec.visit_document(doc)
    assert rec.calls == [("preamble", None)]


def test_markers_are_ignored():
    doc = Document(DocumentClass.PART)
    doc.push(TitlePage()).push(ClearPage()).push(TableOfContents())
    rec = Recorder()
    rec.visit_document(doc)
    assert rec.calls == []


def test_elements_dispatched_in_order():
    section = Section("Intro")
    section.push("inside")
    lst = List(ListKind.ITEMIZE).push("a").push("b")
    align = Align().push(Equation.with_label("lbl", "E = mc^2")).push("y = mx + c")
    doc = Document(DocumentClass.PART)
    doc.extend([
        section,
        UserDefined(r"\vspace{1cm}"),
        Input("part.tex"),
        lst,
        align,
        Environment("verbatim", ("one", "two")),
    ])
    rec = Recorder()
    rec.visit_document(doc)
    assert rec.calls == [
        ("para_elem", Plain("inside")),
        ("user", r"\vspace{1cm}"),
        ("input", "part.tex"),
        ("item", "a"),
        ("item", "b"),
        ("equation", "E = mc^2"),
        ("equation", "y = mx + c"),
        ("env", "verbatim", ["one", "two"]),
    ]


def test_nested_sections_are_recursed():
    inner = Section("Inner").push("deep")
    outer = Section("Outer").push(inner).push("shallow")
    rec = Recorder()
    rec.visit_section(outer)
    assert rec.calls == [("para_elem", Plain("deep")), ("para_elem", Plain("shallow"))]


def test_paragraph_elements_visited_individually():
    para = Paragraph().push("Hello ").push(bold("World"))
    rec = Recorder()
    rec.visit_paragraph(para)
    assert [c[1] for c in rec.calls] == list(para)


def test_custom_environment_receives_iterator():
    seen = []

    class EnvVisitor(Visitor):
        def visit_custom_environment(self, name, lines):
            seen.append((name, next(lines), list(lines)))

    result = EnvVisitor().visit_element(Environment("quote", ("first", "second")))
    assert (result, seen) == (None, [("quote", "first", ["second"])])


def test_non_element_raises_type_error():
    with pytest.raises(TypeError):
        Visitor().visit_element(42)


def test_exception_stops_walk():
    class Failing(Recorder):
        def visit_input(self, path):
            raise ValueError(path)

    doc = Document(DocumentClass.PART)
    doc.push("before").push(Input("bad.tex")).push("after")
    rec = Failing()
    with pytest.raises(ValueError, match="bad.tex"):
        rec.visit_document(doc)
    assert rec.calls == [("para_elem", Plain("before"))]