"""
Shape descriptors and the Match constraint.

A shape is one of three explicit descriptors:

    ObjectShape({"name": IsType(str), "age": [IsType(int), Gte(0)]})
    ArrayShape([IsType(str)])
    TypeRef(str)

Match(shape) turns a descriptor into a Constraint. Field and item entries may
be a constraint, a list of constraints (all applied, in order) or a nested
shape, which is wrapped in Match automatically.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Union

from .context import is_strict, validation_context
from .core import Constraint, to_constraint
from .errors import ErrorKind, TypeMismatchError, UnknownKeyError
from .exceptions import SchemaError
from .results import ConstraintResult, error_at, ok
from .types import MISSING, Path, is_absent


def _as_constraints(entry: Any) -> tuple[Constraint, ...]:
    if isinstance(entry, (list, tuple)):
        return tuple(to_constraint(c) for c in entry)
    return (to_constraint(entry),)


@dataclass(frozen=True, slots=True)
class ObjectShape:
    """
    Per-key constraints for mapping-like input.

    Keys are checked in declaration order. Keys on the input that the shape
    does not declare are ignored unless strict is on. strict=None follows
    validation_context; True / False applies here and becomes the default
    for shapes nested inside this one.
    """

    fields: Mapping[Any, Any]
    strict: bool | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Mapping):
            raise SchemaError(
                f"ObjectShape fields must be a mapping, got {type(self.fields).__name__}"
            )
        normalized = {key: _as_constraints(v) for key, v in self.fields.items()}
        object.__setattr__(self, "fields", normalized)


@dataclass(frozen=True, slots=True)
class ArrayShape:
    """
    Constraints applied to every item of a sequence.

    ArrayShape([]) accepts anything. ArrayShape([A, B]) requires a sequence
    (str and bytes excluded, otherwise a type mismatch against list) whose
    every item passes both A and B; use AnyOf for per-item alternatives.
    """

    items: Sequence[Any] = field(default=())

    def __post_init__(self) -> None:
        if isinstance(self.items, (str, bytes)) or not isinstance(
            self.items, Sequence
        ):
            raise SchemaError(
                f"ArrayShape items must be a sequence, got {type(self.items).__name__}"
            )
        object.__setattr__(
            self, "items", tuple(to_constraint(c) for c in self.items)
        )


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Exact runtime type, compared with ``type(value) is expected``."""

    expected: type

    def __post_init__(self) -> None:
        if not isinstance(self.expected, type):
            raise SchemaError(f"TypeRef expects a type, got {self.expected!r}")


Shape = Union[ObjectShape, ArrayShape, TypeRef]


def _lookup(value: Any, key: Any) -> Any:
    if isinstance(value, Mapping):
        return value.get(key, MISSING)
    if isinstance(key, str):
        return getattr(value, key, MISSING)
    return MISSING


def _match_object(shape: ObjectShape, value: Any, path: Path) -> ConstraintResult:
    # An explicit strict= is the default for every shape nested beneath this one.
    if shape.strict is None or shape.strict == is_strict():
        return _check_object(shape, value, path, is_strict())
    with validation_context(strict=shape.strict):
        return _check_object(shape, value, path, shape.strict)


def _check_object(
    shape: ObjectShape, value: Any, path: Path, strict: bool
) -> ConstraintResult:
    result = ok()
    for key, constraints in shape.fields.items():
        field_value = _lookup(value, key)
        field_path = (*path, key)
        for constraint in constraints:
            result = result.merge(constraint(field_value, field_path))

    if strict and isinstance(value, Mapping):
        for key in value:
            if key not in shape.fields:
                result = result.merge(
                    error_at((*path, key), UnknownKeyError(key=key))
                )
    return result


def _match_array(shape: ArrayShape, value: Any, path: Path) -> ConstraintResult:
    result = ok()
    if not shape.items:
        return result
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return error_at(
            path, TypeMismatchError(expected_type=list, actual_type=type(value))
        )
    for index, item in enumerate(value):
        item_path = (*path, index)
        for constraint in shape.items:
            result = result.merge(constraint(item, item_path))
    return result


def _match_type(shape: TypeRef, value: Any, path: Path) -> ConstraintResult:
    actual = type(value)
    if actual is shape.expected:
        return ok()
    return error_at(
        path, TypeMismatchError(expected_type=shape.expected, actual_type=actual)
    )


def Match(shape: Shape) -> Constraint:
    """
    Validate input against a shape descriptor.

    None and MISSING always pass; use Required to demand presence.

    Usage:
        Match(TypeRef(str))
        Match(ArrayShape([AnyOf(IsType(str), IsType(int))]))
        Match(ObjectShape({
            "name": Required(IsType(str)),
            "settings": ArrayShape([ObjectShape({"key": Required(IsType(str))})]),
        }))
    """
    if not isinstance(shape, (ObjectShape, ArrayShape, TypeRef)):
        raise SchemaError(
            f"Match expects ObjectShape, ArrayShape or TypeRef, got {type(shape).__name__}"
        )

    def check(value: Any, path: Path) -> ConstraintResult:
        if is_absent(value):
            return ok()
        match shape:
            case ObjectShape():
                return _match_object(shape, value, path)
            case ArrayShape():
                return _match_array(shape, value, path)
            case TypeRef():
                return _match_type(shape, value, path)
        return ok()

    return Constraint(
        check=check,
        name=f"Match({type(shape).__name__})",
        type_hint=shape.expected if isinstance(shape, TypeRef) else None,
        shape=shape,
    )


Match.kind = ErrorKind.TYPE_MISMATCH  # type: ignore[attr-defined]
Match.Error = TypeMismatchError  # type: ignore[attr-defined]


def IsType(t: type) -> Constraint:
    """
    Validate that value's type is exactly t.

    Usage:
        IsType(str)
        IsType(int) & Gte(0)
    """
    return Match(TypeRef(t))


IsType.kind = ErrorKind.TYPE_MISMATCH  # type: ignore[attr-defined]
IsType.Error = TypeMismatchError  # type: ignore[attr-defined]
