[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latexgen"
version = "0.3.2a0"
description = "Build LaTeX documents and reports programmatically from a small document tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["latex", "reports", "pdf", "tex", "generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: LaTeX",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
latexgen-examples = "latexgen.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["latexgen"]

[tool.pytest.ini_options]
addopts = "-ra"
