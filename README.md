# latexgen

Build LaTeX source programmatically. You describe a document as a tree of
sections, paragraphs, lists, `align` blocks and raw environments, and
`latexgen` renders it to a `.tex` string that you can hand to your usual TeX
toolchain.

## Installing

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## A first document

```python
from latexgen.document import Document, DocumentClass, Section, TitlePage, ClearPage, TableOfContents
from latexgen.equations import Align, Equation
from latexgen.lists import List, ListKind
from latexgen.printer import render

doc = Document(DocumentClass.ARTICLE)
doc.preamble.set_title("Hello World")
doc.preamble.set_author("Jane Doe")
doc.preamble.use_package("amsmath")

doc.push(TitlePage()).push(ClearPage()).push(TableOfContents()).push(ClearPage())

intro = Section("Introduction")
intro.push("This is an example paragraph.")

equations = Align()
equations.push("y &= mx + c").push(Equation.with_label("quadratic", "y &= a x^2 + bx + c"))
intro.push("Please refer to the equations below:").push(equations)

objectives = List(ListKind.ENUMERATE)
objectives.push("Create a reasonably complex document").push("Render it")
intro.push("Here are our objectives:").push(objectives)

doc.push(intro)

print(render(doc))
```

## Building blocks

- `Document` (in `latexgen.document`) holds a document class, a `Preamble`
  and a sequence of elements. The class is a `DocumentClass` member or any
  other class name given as a plain string. Plain strings pushed onto a
  document or a section become paragraphs, and a `(name, lines)` tuple
  becomes an `Environment`. `extend` pushes several elements at once.
- `Preamble` collects packages (`use_package`, with an optional argument),
  macros (`new_command`) and the title and author (`set_title`,
  `set_author`). `NewCommand` can also be pushed directly to give a default
  argument, and `RawPreamble` carries arbitrary TeX.
- `Section` renders as `\section{...}`, or `\section*{...}` when created with
  `numbered=False`, with a blank line after each of its elements.
- `Paragraph` (in `latexgen.paragraph`) is made of `Plain`, `Bold`, `Italic`
  and `InlineMath` pieces; `bold()` and `italic()` wrap text for you.
- `Align` and `Equation` (in `latexgen.equations`) produce an `align`
  environment; equations may carry a label or be excluded from numbering
  with `not_numbered()`. The `align` environment needs the `amsmath` package.
- `List` with `ListKind` (in `latexgen.lists`) gives `itemize` or
  `enumerate` lists.
- `Environment`, `UserDefined`, `Input`, `TitlePage`, `TableOfContents` and
  `ClearPage` cover arbitrary environments, raw lines, `\input{...}`
  statements, `\maketitle`, `\tableofcontents` and `\clearpage`.

A document of class `DocumentClass.PART` renders only its elements, without
`\documentclass`, preamble or `document` environment, so it can be included in
another file. `Document.push_doc` appends copies of the elements of one
document to another.

## Walking a document

`latexgen.visitor.Visitor` visits every node of a document. Its default
methods recurse through sections, paragraphs, align blocks and lists, so a
subclass only needs to override the `visit_*` methods it cares about.
`latexgen.printer.Printer` is the visitor that writes LaTeX text to a text
stream; `latexgen.printer.render` returns it as a string.

## Examples

The bundled example documents in `latexgen.examples` can be printed from the
command line:

```
latexgen-examples
latexgen-examples complex
latexgen-examples template
```

With no argument the `simple` document is printed. `template` prints a
partial document, then a template that inputs `part.tex`, then the same
template with the partial document's elements copied in.

## What it does not do

Text is written exactly as given: special characters are not escaped, so any
`&`, `%`, `$` or `_` meant literally must be escaped by the caller. The
package only produces `.tex` source; it does not run TeX or write files.