"""Deterministic text exporters for diagrams."""

from .markdown import render_markdown
from .mermaid import render_mermaid

__all__ = ["render_markdown", "render_mermaid"]
