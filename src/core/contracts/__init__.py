"""
Contract Validation Module

JSON Schema контракты сущностей и сводки прямоугольника.
"""

from .validators import (
    ENTITY_SCHEMAS,
    ContractValidator,
    load_schema,
    validate_entity,
    validate_rectangle_summary,
)

__all__ = [
    "ENTITY_SCHEMAS",
    "ContractValidator",
    "load_schema",
    "validate_entity",
    "validate_rectangle_summary",
]
