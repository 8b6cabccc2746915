"""Diagram model: attributes, entities, relations and the diagram itself."""

import math
from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_ENTITY_HEIGHT,
    DEFAULT_ENTITY_WIDTH,
    DEFAULT_ENTITY_X,
    DEFAULT_ENTITY_Y,
)


class Attribute(BaseModel):
    """A column-like field on an entity."""

    model_config = ConfigDict(populate_by_name=True)

    logical_name: str = Field(validation_alias=AliasChoices("logical_name", "name"))
    physical_name: str = ""  # filled by normalize() when absent
    data_type: str
    length: Optional[str] = None
    default_value: Optional[str] = None
    is_primary_key: bool = False
    is_nullable: bool = True
    is_foreign_key: bool = False
    is_unique: bool = False
    is_auto_increment: bool = False
    foreign_key_reference: Optional[str] = None  # "table.column", not checked
    remark: Optional[str] = None

    @property
    def type_display(self) -> str:
        """Data type with its length qualifier, e.g. ``VARCHAR(255)``."""
        if self.length is not None:
            return f"{self.data_type}({self.length})"
        return self.data_type


class Entity(BaseModel):
    """A table-like node on the canvas."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    logical_name: str = Field(validation_alias=AliasChoices("logical_name", "name"))
    physical_name: str = ""
    x: float = DEFAULT_ENTITY_X
    y: float = DEFAULT_ENTITY_Y
    width: float = DEFAULT_ENTITY_WIDTH
    height: float = DEFAULT_ENTITY_HEIGHT
    attributes: List[Attribute] = Field(default_factory=list)

    @field_validator("x", "y", "width", "height", mode="before")
    @classmethod
    def _null_as_nan(cls, value):
        # NaN is written as null; read it back as NaN so normalize() repairs it
        return math.nan if value is None else value


class Cardinality(str, Enum):
    """Relationship multiplicity."""

    ONE_TO_ONE = "OneToOne"
    ONE_TO_MANY = "OneToMany"
    MANY_TO_MANY = "ManyToMany"

    @property
    def markdown_symbol(self) -> str:
        return _MARKDOWN_SYMBOLS[self]

    @property
    def mermaid_symbol(self) -> str:
        return _MERMAID_SYMBOLS[self]


_MARKDOWN_SYMBOLS = {
    Cardinality.ONE_TO_ONE: "1:1",
    Cardinality.ONE_TO_MANY: "1:N",
    Cardinality.MANY_TO_MANY: "N:M",
}

_MERMAID_SYMBOLS = {
    Cardinality.ONE_TO_ONE: "||--||",
    Cardinality.ONE_TO_MANY: "||--o{",
    Cardinality.MANY_TO_MANY: "}o--o{",
}


class Relation(BaseModel):
    """A directed edge between two entities, referenced by id."""

    id: str
    from_entity_id: str
    from_attribute: str
    to_entity_id: str
    to_attribute: Optional[str] = None
    cardinality: Cardinality
    name: str


class Diagram(BaseModel):
    """Aggregate root owning all entities and relations."""

    entities: Dict[str, Entity] = Field(default_factory=dict)
    relations: List[Relation] = Field(default_factory=list)
    canvas_width: float = DEFAULT_CANVAS_WIDTH
    canvas_height: float = DEFAULT_CANVAS_HEIGHT

    @field_validator("canvas_width", "canvas_height", mode="before")
    @classmethod
    def _null_as_nan(cls, value):
        return math.nan if value is None else value

    def resolve_relation(self, relation: Relation) -> Optional[Tuple[Entity, Entity]]:
        """
        Look up both endpoints of a relation.

        Returns:
            (source, target) entities, or None if either id is dangling
        """
        source = self.entities.get(relation.from_entity_id)
        target = self.entities.get(relation.to_entity_id)
        if source is None or target is None:
            return None
        return source, target
