"""Repair pass for freshly loaded diagrams.

Diagrams saved by older versions may lack physical names or carry zero/NaN
geometry. ``normalize`` fills those gaps in place so every later consumer can
rely on the fields being populated. It never rejects input.
"""

import math

from erdkit.config.logging import get_logger
from erdkit.naming import sanitize_physical
from .constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_ENTITY_HEIGHT,
    DEFAULT_ENTITY_WIDTH,
    DEFAULT_ENTITY_X,
    DEFAULT_ENTITY_Y,
)
from .schema import Diagram, Entity

logger = get_logger(__name__)


def _positive_or(value: float, default: float) -> float:
    if math.isfinite(value) and value > 0:
        return value
    return default


def _finite_or(value: float, default: float) -> float:
    return value if math.isfinite(value) else default


def _normalize_entity(entity: Entity) -> None:
    if not entity.physical_name.strip():
        entity.physical_name = sanitize_physical(entity.logical_name)
        logger.debug(
            f"Entity '{entity.id}': derived physical name '{entity.physical_name}'"
        )

    geometry = (entity.x, entity.y, entity.width, entity.height)
    entity.width = _positive_or(entity.width, DEFAULT_ENTITY_WIDTH)
    entity.height = _positive_or(entity.height, DEFAULT_ENTITY_HEIGHT)
    entity.x = _finite_or(entity.x, DEFAULT_ENTITY_X)
    entity.y = _finite_or(entity.y, DEFAULT_ENTITY_Y)
    if not all(math.isfinite(v) for v in geometry) or min(geometry[2:]) <= 0:
        logger.debug(f"Entity '{entity.id}': reset geometry {geometry}")

    for attr in entity.attributes:
        if not attr.physical_name.strip():
            attr.physical_name = sanitize_physical(attr.logical_name)
            logger.debug(
                f"Entity '{entity.id}': attribute '{attr.logical_name}' "
                f"-> physical name '{attr.physical_name}'"
            )


def normalize(diagram: Diagram) -> Diagram:
    """
    Fill required-but-missing fields of a diagram in place.

    - Empty physical names (entity and attribute) are derived from logical names.
    - Non-positive or non-finite sizes fall back to defaults.
    - Non-finite positions fall back to defaults.

    Args:
        diagram: Diagram to repair (mutated)

    Returns:
        The same diagram instance
    """
    for entity in diagram.entities.values():
        _normalize_entity(entity)

    diagram.canvas_width = _positive_or(diagram.canvas_width, DEFAULT_CANVAS_WIDTH)
    diagram.canvas_height = _positive_or(diagram.canvas_height, DEFAULT_CANVAS_HEIGHT)
    return diagram
