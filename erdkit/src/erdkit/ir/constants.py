"""Defaults and limits shared by the diagram model."""

# Entity geometry
DEFAULT_ENTITY_X = 50.0
DEFAULT_ENTITY_Y = 50.0
DEFAULT_ENTITY_WIDTH = 150.0
DEFAULT_ENTITY_HEIGHT = 100.0

# Canvas
DEFAULT_CANVAS_WIDTH = 1200.0
DEFAULT_CANVAS_HEIGHT = 800.0

# Post-load sanity limits
MAX_ENTITIES = 1000
MAX_RELATIONS = 5000

# Sanitizer fallbacks
PHYSICAL_NAME_FALLBACK = "unnamed"
EXPORT_TOKEN_FALLBACK = "entity"
