"""Build LaTeX documents as a tree of nodes and render them to TeX source."""

__version__ = "0.3.2a0"