"""
Result types for shapeguard constraints.

A ConstraintResult is either ok (no errors) or a list of PathResults, each
binding one or more error records to the location they were found at.
Results are immutable; merge() always builds a new result or reuses one of
its operands.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from .exceptions import ConstraintViolation
from .types import Path


@dataclass(frozen=True, slots=True)
class PathResult:
    """Failure record at a specific path. Success never has a PathResult."""

    path: Path
    errors: tuple[Any, ...]

    @classmethod
    def error(cls, path: Sequence[str | int], *errors: Any) -> PathResult:
        return cls(path=tuple(path), errors=tuple(errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": list(self.path),
            "errors": [_dump_error(e) for e in self.errors],
        }


@dataclass(frozen=True, slots=True)
class ConstraintResult:
    """
    Outcome of a constraint invocation.

    ``ok`` is derived from ``errors`` at construction and never set directly.
    Use the ok(), error() and error_at() factories.
    """

    errors: tuple[PathResult, ...] = ()
    ok: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        object.__setattr__(self, "ok", len(self.errors) == 0)

    @classmethod
    def ok_result(cls) -> ConstraintResult:
        return _OK

    @classmethod
    def error(cls, *path_results: PathResult) -> ConstraintResult:
        """
        Build a failed result from PathResults.

        Called with no arguments this returns an ok result: an error with no
        errors is indistinguishable from success.
        """
        if not path_results:
            return _OK
        return cls(errors=path_results)

    @classmethod
    def error_at(cls, path: Sequence[str | int], *errors: Any) -> ConstraintResult:
        """Shorthand for error(PathResult.error(path, *errors))."""
        return cls(errors=(PathResult.error(path, *errors),))

    def merge(self, other: ConstraintResult) -> ConstraintResult:
        """
        Combine two results, self's errors first.

        Returns self unchanged when other is ok, so folding over many ok
        results allocates nothing.
        """
        if other.ok:
            return self
        return ConstraintResult(errors=self.errors + other.errors)

    def __bool__(self) -> bool:
        return self.ok

    def __len__(self) -> int:
        return len(self.errors)

    def to_list(self) -> list[dict[str, Any]]:
        """Plain-data rendering: one dict per PathResult."""
        return [pr.to_dict() for pr in self.errors]

    def raise_if_errors(self) -> ConstraintResult:
        """Raise ConstraintViolation if this result is not ok."""
        if not self.ok:
            raise ConstraintViolation(self)
        return self


def _dump_error(error: Any) -> Any:
    if hasattr(error, "model_dump"):
        return error.model_dump()
    return error


# ConstraintResult.ok is the dataclass field, so the factory is exposed as
# ok_result() on the class and as the module-level ok() below.
_OK = ConstraintResult()


def ok() -> ConstraintResult:
    """The canonical success result."""
    return _OK


def error(*path_results: PathResult) -> ConstraintResult:
    return ConstraintResult.error(*path_results)


def error_at(path: Sequence[str | int], *errors: Any) -> ConstraintResult:
    return ConstraintResult.error_at(path, *errors)
