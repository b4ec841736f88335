"""
Contract Validation Module

JSON представление цепных дробей и его проверка по JSON Schema.
"""

from .validators import (
    SCHEMA_NAME,
    SCHEMA_VERSION,
    ContinuedFractionValidator,
    SchemaLoader,
    continued_fraction_from_dict,
    continued_fraction_to_dict,
    validate_continued_fraction,
)

__all__ = [
    "SCHEMA_NAME",
    "SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContinuedFractionValidator",
    # Functions
    "validate_continued_fraction",
    "continued_fraction_to_dict",
    "continued_fraction_from_dict",
]
