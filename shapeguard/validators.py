"""
Built-in leaf constraints for shapeguard.

Provides factory functions that return Constraint instances. Each factory
exposes the error it reports as ``.Error`` and its kind as ``.kind``:

    result = Gt(5)(3)
    result.errors[0].errors[0].kind is Gt.kind   # True

Absent values (None, MISSING) pass every leaf here except Required.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from .core import Constraint, to_constraint
from .errors import (
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
)
from .results import ConstraintResult, error_at, ok
from .types import Path, is_absent


def _leaf(
    name: str, test: Callable[[Any], bool], make_error: Callable[[Any], Any]
) -> Constraint:
    def check(value: Any, path: Path) -> ConstraintResult:
        if is_absent(value) or test(value):
            return ok()
        return error_at(path, make_error(value))

    return Constraint(check=check, name=name)


_SCALARS = (int, float, complex, str, bytes, bool, Enum)


def _same(a: Any, b: Any) -> bool:
    # Containers and other objects compare by identity only. Scalars compare
    # by value, but 1, True and 1.0 stay distinct.
    if a is b:
        return True
    return type(a) is type(b) and isinstance(a, _SCALARS) and a == b


def Required(child: Any = None) -> Constraint:
    """
    Fail on None / MISSING, otherwise delegate to child (if any).

    Usage:
        Required()                      # Just present
        Required(IsType(str))           # Present string
        Required(AllOf(IsType(str), MinLength(1)))
    """
    inner = to_constraint(child) if child is not None else None

    def check(value: Any, path: Path) -> ConstraintResult:
        if is_absent(value):
            return error_at(path, RequiredError())
        if inner is not None:
            return inner(value, path)
        return ok()

    return Constraint(
        check=check,
        name="Required",
        required=True,
        type_hint=inner.type_hint if inner else None,
        shape=inner.shape if inner else None,
    )


Required.kind = ErrorKind.REQUIRED  # type: ignore[attr-defined]
Required.Error = RequiredError  # type: ignore[attr-defined]


def InSet(*options: Any) -> Constraint:
    """
    Validate value is one of the given options.

    Usage:
        InSet("active", "inactive", "pending")
        InSet(1, 2, 3)
    """
    return _leaf(
        f"InSet{options!r}",
        lambda x: any(_same(x, o) for o in options),
        lambda x: InSetError(options=options, value=x),
    )


InSet.kind = ErrorKind.IN_SET  # type: ignore[attr-defined]
InSet.Error = InSetError  # type: ignore[attr-defined]


def Eq(expected: Any) -> Constraint:
    """
    Validate strict, shallow equality.

    Scalars (numbers, strings, bytes, enum members) match on same type and
    value. Anything else, lists and dicts included, must be the same object.
    """
    return _leaf(
        f"Eq({expected!r})",
        lambda x: _same(x, expected),
        lambda x: EqError(expected=expected, value=x),
    )


Eq.kind = ErrorKind.EQ  # type: ignore[attr-defined]
Eq.Error = EqError  # type: ignore[attr-defined]


def Gt(min: Any) -> Constraint:
    """Validate greater than. Use Gte to include the bound."""
    return _leaf(
        f"Gt({min!r})",
        lambda x: x > min,
        lambda x: GtError(min=min, value=x),
    )


Gt.kind = ErrorKind.GT  # type: ignore[attr-defined]
Gt.Error = GtError  # type: ignore[attr-defined]


def Gte(min: Any) -> Constraint:
    """Validate greater than or equal."""
    return _leaf(
        f"Gte({min!r})",
        lambda x: x >= min,
        lambda x: GteError(min=min, value=x),
    )


Gte.kind = ErrorKind.GTE  # type: ignore[attr-defined]
Gte.Error = GteError  # type: ignore[attr-defined]


def Lt(max: Any) -> Constraint:
    """Validate less than. Use Lte to include the bound."""
    return _leaf(
        f"Lt({max!r})",
        lambda x: x < max,
        lambda x: LtError(max=max, value=x),
    )


Lt.kind = ErrorKind.LT  # type: ignore[attr-defined]
Lt.Error = LtError  # type: ignore[attr-defined]


def Lte(max: Any) -> Constraint:
    """Validate less than or equal."""
    return _leaf(
        f"Lte({max!r})",
        lambda x: x <= max,
        lambda x: LteError(max=max, value=x),
    )


Lte.kind = ErrorKind.LTE  # type: ignore[attr-defined]
Lte.Error = LteError  # type: ignore[attr-defined]


def MaxLength(n: int) -> Constraint:
    """
    Validate maximum length.

    The value must support len(); combine with IsType first when the input
    type is not known.
    """
    return _leaf(
        f"MaxLength({n})",
        lambda x: len(x) <= n,
        lambda x: MaxLengthError(max_len=n, value=x, value_length=len(x)),
    )


MaxLength.kind = ErrorKind.MAX_LENGTH  # type: ignore[attr-defined]
MaxLength.Error = MaxLengthError  # type: ignore[attr-defined]


def MinLength(n: int) -> Constraint:
    """Validate minimum length."""
    return _leaf(
        f"MinLength({n})",
        lambda x: len(x) >= n,
        lambda x: MinLengthError(min_len=n, value=x, value_length=len(x)),
    )


MinLength.kind = ErrorKind.MIN_LENGTH  # type: ignore[attr-defined]
MinLength.Error = MinLengthError  # type: ignore[attr-defined]


def Length(n: int) -> Constraint:
    """Validate exact length."""
    return _leaf(
        f"Length({n})",
        lambda x: len(x) == n,
        lambda x: LengthError(len=n, value=x, value_length=len(x)),
    )


Length.kind = ErrorKind.LENGTH  # type: ignore[attr-defined]
Length.Error = LengthError  # type: ignore[attr-defined]
