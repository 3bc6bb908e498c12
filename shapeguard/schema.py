"""
Schema operations for shapeguard.

Provides validate() and to_pydantic() functions.
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional as TypingOptional

from pydantic import create_model

from .core import Constraint
from .exceptions import SchemaError
from .results import ConstraintResult
from .shapes import ArrayShape, Match, ObjectShape, TypeRef

logger = logging.getLogger(__name__)


def validate(data: Any, schema: Any) -> ConstraintResult:
    """
    Validate data against a shape or constraint.

    Args:
        data: The value to validate
        schema: ObjectShape / ArrayShape / TypeRef, or any Constraint

    Returns:
        The ConstraintResult of evaluating the schema at the empty path

    Usage:
        user = ObjectShape({
            "name": Required(IsType(str)),
            "age": [IsType(int), Gte(0)],
        })
        result = validate({"name": "Alice", "age": 30}, user)
    """
    if isinstance(schema, (ObjectShape, ArrayShape, TypeRef)):
        constraint = Match(schema)
    elif isinstance(schema, Constraint) or (
        callable(schema) and not isinstance(schema, type)
    ):
        constraint = schema
    else:
        raise SchemaError(
            f"Schema must be a shape or a constraint, got {type(schema).__name__}"
        )

    result = constraint(data, ())
    if result.ok:
        logger.debug("Validation passed for %s", type(data).__name__)
    else:
        logger.debug(
            "Validation failed for %s with %d path error(s)",
            type(data).__name__,
            len(result.errors),
        )
    return result


def to_pydantic(name: str, schema: ObjectShape) -> type:
    """
    Compile an object shape to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: ObjectShape definition

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", ObjectShape({
            "name": Required(IsType(str)),
            "email": IsType(str),
        }))
        user = User(name="Alice")
    """
    if not isinstance(schema, ObjectShape):
        raise SchemaError("Schema must be an ObjectShape")

    fields: dict[str, Any] = {}

    for key, constraints in schema.fields.items():
        fields[str(key)] = _extract_pydantic_field(f"{name}_{key}", constraints)

    logger.debug("Generated pydantic model %s with fields %s", name, list(fields))
    return create_model(name, **fields)


def _extract_pydantic_field(
    name: str, constraints: tuple[Constraint, ...]
) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a field's constraints."""
    required = any(c.required for c in constraints)
    field_type: Any = Any

    for c in constraints:
        match c:
            case Constraint(shape=ObjectShape() as nested):
                field_type = to_pydantic(name, nested)
            case Constraint(shape=ArrayShape(items=items)):
                field_type = list[_item_type(name, items)]  # type: ignore[misc]
            case Constraint(type_hint=t) if t is not None:
                field_type = t
            case _:
                continue
        break

    if required:
        return (field_type, ...)
    return (TypingOptional[field_type], None)


def _item_type(name: str, items: tuple[Constraint, ...]) -> Any:
    if not items:
        return Any
    field_type, _ = _extract_pydantic_field(f"{name}_item", items)
    return field_type
