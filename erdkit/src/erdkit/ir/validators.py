"""Post-load sanity checks for diagrams."""

from erdkit.config.logging import get_logger
from .constants import MAX_ENTITIES, MAX_RELATIONS
from .errors import EntityLimitError, RelationLimitError
from .schema import Diagram

logger = get_logger(__name__)


def validate_basic_diagram(diagram: Diagram) -> None:
    """
    Reject pathologically large diagrams.

    Only counts are checked; references between relations and entities are
    left unresolved on purpose.

    Raises:
        EntityLimitError: More than MAX_ENTITIES entities
        RelationLimitError: More than MAX_RELATIONS relations
    """
    entity_count = len(diagram.entities)
    if entity_count > MAX_ENTITIES:
        logger.warning(f"Rejected diagram with {entity_count} entities")
        raise EntityLimitError(
            f"Too many entities: {entity_count} (maximum {MAX_ENTITIES})",
            count=entity_count,
            limit=MAX_ENTITIES,
        )

    relation_count = len(diagram.relations)
    if relation_count > MAX_RELATIONS:
        logger.warning(f"Rejected diagram with {relation_count} relations")
        raise RelationLimitError(
            f"Too many relations: {relation_count} (maximum {MAX_RELATIONS})",
            count=relation_count,
            limit=MAX_RELATIONS,
        )
