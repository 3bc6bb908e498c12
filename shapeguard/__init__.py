"""
shapeguard - composable, path-annotated data validation.

Usage:
    from shapeguard import (
        AllOf, ArrayShape, IsType, MaxLength, MinLength, ObjectShape,
        Required, validate,
    )

    company = ObjectShape({
        "title": Required(AllOf(IsType(str), MinLength(1), MaxLength(20))),
        "branches": ArrayShape([ObjectShape({"address": Required(IsType(str))})]),
    })

    result = validate(data, company)
    for path_result in result.errors:
        print(path_result.path, [e.kind for e in path_result.errors])
"""

from .context import (
    ValidationSettings,
    current_settings,
    is_strict,
    validation_context,
)
from .core import AllOf, AnyOf, Constraint, to_constraint
from .errors import (
    ConstraintError,
    EqError,
    ErrorKind,
    GteError,
    GtError,
    InSetError,
    LengthError,
    LteError,
    LtError,
    MaxLengthError,
    MinLengthError,
    RequiredError,
    TypeMismatchError,
    UnknownKeyError,
    error_adapter,
)
from .exceptions import ConstraintViolation, SchemaError, ShapeguardError
from .results import ConstraintResult, PathResult, error, error_at, ok
from .schema import to_pydantic, validate
from .shapes import ArrayShape, IsType, Match, ObjectShape, Shape, TypeRef
from .types import MISSING, Path, PathSegment, is_absent
from .validators import (
    Eq,
    Gt,
    Gte,
    InSet,
    Length,
    Lt,
    Lte,
    MaxLength,
    MinLength,
    Required,
)

__all__ = [
    # Result types
    "ConstraintResult",
    "PathResult",
    "ok",
    "error",
    "error_at",
    # Errors
    "ErrorKind",
    "ConstraintError",
    "error_adapter",
    "InSetError",
    "GtError",
    "GteError",
    "LtError",
    "LteError",
    "EqError",
    "MaxLengthError",
    "MinLengthError",
    "LengthError",
    "RequiredError",
    "TypeMismatchError",
    "UnknownKeyError",
    # Exceptions
    "ShapeguardError",
    "SchemaError",
    "ConstraintViolation",
    # Core
    "Constraint",
    "to_constraint",
    "AllOf",
    "AnyOf",
    "MISSING",
    "Path",
    "PathSegment",
    "is_absent",
    # Shapes
    "ObjectShape",
    "ArrayShape",
    "TypeRef",
    "Shape",
    "Match",
    "IsType",
    # Validators
    "Required",
    "InSet",
    "Eq",
    "Gt",
    "Gte",
    "Lt",
    "Lte",
    "MaxLength",
    "MinLength",
    "Length",
    # Schema
    "validate",
    "to_pydantic",
    # Config
    "validation_context",
    "is_strict",
    "current_settings",
    "ValidationSettings",
]
