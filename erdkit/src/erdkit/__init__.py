"""erdkit: ER diagram model, normalization and deterministic text export."""

from erdkit.ir.schema import Attribute, Cardinality, Diagram, Entity, Relation
from erdkit.ir.normalize import normalize
from erdkit.export import render_markdown, render_mermaid
from erdkit.utils.ir_io import deserialize, load_diagram, serialize

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "Cardinality",
    "Diagram",
    "Entity",
    "Relation",
    "normalize",
    "render_markdown",
    "render_mermaid",
    "deserialize",
    "load_diagram",
    "serialize",
]
