"""
Type definitions for shapeguard.

Provides the path aliases, the constraint function signature and the
MISSING sentinel used for absent object keys.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .results import ConstraintResult


class _Missing(Enum):
    """
    Sentinel for a key that is not present on the input at all.

    Distinct from None so that a schema can tell "key exists with None"
    apart from "key not found"; both count as absent for every constraint.
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING


def is_absent(value: Any) -> bool:
    """True for None and MISSING."""
    return value is None or value is MISSING


# Type aliases
PathSegment = str | int
Path = tuple[PathSegment, ...]
ConstraintFn = Callable[[Any, Path], "ConstraintResult"]
