"""Markdown data-dictionary export."""

from typing import List

from erdkit.config.logging import get_logger
from erdkit.ir.schema import Attribute, Diagram, Entity

logger = get_logger(__name__)

_TABLE_HEADER = (
    "| Attribute | Logical Name | Physical Name | Type | Default | Constraints |\n"
    "|-----------|--------------|---------------|------|---------|-------------|\n"
)


def _constraints(attr: Attribute) -> str:
    constraints = []
    if attr.is_primary_key:
        constraints.append("PK")
    if attr.is_foreign_key:
        constraints.append("FK")
    if attr.is_unique:
        constraints.append("UNIQUE")
    if attr.is_auto_increment:
        constraints.append("AUTO_INCREMENT")
    if not attr.is_nullable:
        constraints.append("NOT NULL")
    return ", ".join(constraints)


def _entity_section(entity: Entity) -> List[str]:
    lines = [
        f"### {entity.logical_name} ({entity.physical_name})\n",
        f"**Logical Name**: {entity.logical_name} | "
        f"**Physical Name**: {entity.physical_name}\n\n",
    ]
    if entity.attributes:
        lines.append(_TABLE_HEADER)
        for attr in entity.attributes:
            default = attr.default_value if attr.default_value is not None else "-"
            lines.append(
                f"| {attr.logical_name} | {attr.logical_name} | {attr.physical_name} "
                f"| {attr.type_display} | {default} | {_constraints(attr)} |\n"
            )
        lines.append("\n")
    return lines


def render_markdown(diagram: Diagram) -> str:
    """
    Render a diagram as a Markdown document.

    Entities are emitted in entity-id order so output diffs cleanly;
    attributes keep their stored order. Relations with a dangling endpoint
    are left out.

    Args:
        diagram: Normalized diagram (not modified)

    Returns:
        Markdown text
    """
    parts = ["# ERD Diagram\n\n"]

    if diagram.entities:
        parts.append("## Entities\n\n")
        for entity_id in sorted(diagram.entities):
            parts.extend(_entity_section(diagram.entities[entity_id]))

    if diagram.relations:
        parts.append("## Relations\n\n")
        skipped = 0
        for relation in diagram.relations:
            endpoints = diagram.resolve_relation(relation)
            if endpoints is None:
                skipped += 1
                continue
            source, target = endpoints
            parts.append(
                f"- {source.logical_name} ({relation.cardinality.markdown_symbol}) "
                f"→ {target.logical_name} ({relation.name})\n"
            )
        if skipped:
            logger.debug(f"Markdown export skipped {skipped} dangling relation(s)")

    return "".join(parts)
