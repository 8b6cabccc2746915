"""Diagram model, normalization and load-time checks."""

from .schema import Attribute, Cardinality, Diagram, Entity, Relation
from .normalize import normalize
from .validators import validate_basic_diagram

__all__ = [
    "Attribute",
    "Cardinality",
    "Diagram",
    "Entity",
    "Relation",
    "normalize",
    "validate_basic_diagram",
]
