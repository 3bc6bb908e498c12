"""
Core constraint node and logical combinators.

Provides the Constraint dataclass plus AllOf / AnyOf composition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Sequence

from .exceptions import SchemaError
from .results import ConstraintResult, ok
from .types import ConstraintFn, Path


@dataclass(frozen=True, slots=True)
class Constraint:
    """
    Immutable constraint node.

    Wraps a ``(value, path) -> ConstraintResult`` function with metadata used
    for composition and Pydantic generation. Constraints hold no state, so
    one instance can be reused across any number of validations.
    """

    check: ConstraintFn = field(repr=False)
    name: str = "Constraint"
    required: bool = False
    type_hint: Any = None
    shape: Any = None

    def __call__(self, value: Any, path: Sequence[str | int] = ()) -> ConstraintResult:
        """
        Validate a value.

        Returns:
            ConstraintResult.ok when every check passes, otherwise a result
            holding one PathResult per failing location.
        """
        return self.check(value, tuple(path))

    def __and__(self, other: Any) -> Constraint:
        """
        Combine with AND logic: both must pass, all failures are reported.

        Usage:
            IsType(int) & Gte(0)
        """
        return AllOf(self, other)

    def __rand__(self, other: Any) -> Constraint:
        return AllOf(other, self)

    def __or__(self, other: Any) -> Constraint:
        """
        Combine with OR logic: at least one must pass.

        Usage:
            IsType(str) | IsType(int)
        """
        return AnyOf(self, other)

    def __ror__(self, other: Any) -> Constraint:
        return AnyOf(other, self)


def to_constraint(c: Any) -> Constraint:
    """
    Coerce a value to a Constraint.

    Conversion rules:
        Constraint -> pass through
        ObjectShape | ArrayShape | TypeRef -> Match(shape)
        type -> rejected (use IsType / TypeRef, types are not predicates)
        Callable -> Constraint(check=callable), called as fn(value, path)
    """
    if isinstance(c, Constraint):
        return c

    # Import here to avoid circular dependency
    from .shapes import ArrayShape, Match, ObjectShape, TypeRef

    if isinstance(c, (ObjectShape, ArrayShape, TypeRef)):
        return Match(c)

    if isinstance(c, type):
        raise SchemaError(
            f"Got bare type {c.__name__}; wrap it as IsType({c.__name__})"
        )

    if callable(c):
        return Constraint(check=c, name=getattr(c, "__name__", "Constraint"))

    raise SchemaError(f"Expected a constraint, got {type(c).__name__}")


def AllOf(*constraints: Any) -> Constraint:
    """
    Every child must pass. Failures of all children are merged in order.

    Usage:
        AllOf(IsType(str), MinLength(1), MaxLength(20))
        AllOf()               # Always ok
    """
    children = tuple(to_constraint(c) for c in constraints)

    def check(value: Any, path: Path) -> ConstraintResult:
        return reduce(
            lambda acc, child: acc.merge(child(value, path)), children, ok()
        )

    return Constraint(
        check=check,
        name="AllOf",
        required=any(c.required for c in children),
        type_hint=next((c.type_hint for c in children if c.type_hint), None),
        shape=next((c.shape for c in children if c.shape is not None), None),
    )


def AnyOf(*constraints: Any) -> Constraint:
    """
    At least one child must pass.

    Every child is evaluated. Any success yields the canonical ok result;
    if all fail the result carries every child's errors, in order.

    Usage:
        AnyOf(IsType(str), IsType(int))
        AnyOf(Length(5), Length(6))
        AnyOf()               # Always ok
    """
    children = tuple(to_constraint(c) for c in constraints)

    def check(value: Any, path: Path) -> ConstraintResult:
        if not children:
            return ok()
        results = [child(value, path) for child in children]
        if any(r.ok for r in results):
            return ok()
        return reduce(ConstraintResult.merge, results)

    return Constraint(
        check=check,
        name="AnyOf",
        required=bool(children) and all(c.required for c in children),
    )
