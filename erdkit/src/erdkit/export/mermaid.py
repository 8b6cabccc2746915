"""Mermaid ``erDiagram`` export.

Output is byte-identical for identical diagram content: entities, attributes
and relations are all sorted explicitly and never follow dict order.
"""

from typing import List, Tuple

from erdkit.config.logging import get_logger
from erdkit.ir.schema import Attribute, Diagram, Entity, Relation
from erdkit.naming import sanitize_export_token

logger = get_logger(__name__)

INDENT = "    "


def _entity_sort_key(entity: Entity) -> Tuple[str, str]:
    return entity.logical_name.lower(), entity.id


def _attribute_sort_key(attr: Attribute) -> Tuple[int, str]:
    if attr.is_primary_key:
        rank = 0
    elif attr.is_foreign_key:
        rank = 1
    else:
        rank = 2
    return rank, attr.logical_name.lower()


def _attribute_line(attr: Attribute) -> str:
    # Mermaid has no syntax for defaults or auto-increment
    parts = [sanitize_export_token(attr.physical_name), attr.type_display]
    if attr.is_primary_key:
        parts.append("PK")
    if attr.is_foreign_key:
        parts.append("FK")
    if attr.is_unique and not attr.is_primary_key:
        parts.append("UK")
    return f"{INDENT}{INDENT}{' '.join(parts)}\n"


def _entity_block(entity: Entity) -> List[str]:
    lines = [f"{INDENT}{sanitize_export_token(entity.logical_name)} {{\n"]
    for attr in sorted(entity.attributes, key=_attribute_sort_key):
        lines.append(_attribute_line(attr))
    lines.append(f"{INDENT}}}\n")
    return lines


def _resolved_relations(diagram: Diagram) -> List[Tuple[Relation, Entity, Entity]]:
    resolved = []
    for relation in diagram.relations:
        endpoints = diagram.resolve_relation(relation)
        if endpoints is None:
            continue
        resolved.append((relation, *endpoints))

    skipped = len(diagram.relations) - len(resolved)
    if skipped:
        logger.debug(f"Mermaid export skipped {skipped} dangling relation(s)")

    resolved.sort(
        key=lambda item: (
            item[1].logical_name.lower(),
            item[2].logical_name.lower(),
            item[0].name.lower(),
            item[0].id,
        )
    )
    return resolved


def render_mermaid(diagram: Diagram) -> str:
    """
    Render a diagram as a fenced Mermaid ER diagram.

    Ordering:
    1. Entities by case-insensitive logical name (id breaks ties)
    2. Attributes by PK, then FK, then the rest; case-insensitive logical
       name within each group. Shown by their physical name.
    3. Relations by source, target and relation name, all case-insensitive.
       Relations with a dangling endpoint are dropped.

    Args:
        diagram: Normalized diagram (not modified)

    Returns:
        Mermaid source wrapped in a ```mermaid code fence
    """
    parts = ["```mermaid\n", "erDiagram\n"]

    for entity in sorted(diagram.entities.values(), key=_entity_sort_key):
        parts.extend(_entity_block(entity))

    for relation, source, target in _resolved_relations(diagram):
        parts.append(
            f"{INDENT}{sanitize_export_token(source.logical_name)} "
            f"{relation.cardinality.mermaid_symbol} "
            f"{sanitize_export_token(target.logical_name)} : "
            f"{sanitize_export_token(relation.name)}\n"
        )

    parts.append("```\n")
    return "".join(parts)
