"""
Exceptions raised by shapeguard.

Validation failures are values (see ConstraintResult); these exceptions only
cover malformed constraint trees and the opt-in raise_if_errors() helper.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .results import ConstraintResult


class ShapeguardError(Exception):
    """Base class for all shapeguard exceptions."""


class SchemaError(ShapeguardError, TypeError):
    """Raised when a constraint or shape is built from invalid parts."""


class ConstraintViolation(ShapeguardError, ValueError):
    """Raised by ConstraintResult.raise_if_errors() on a failed result."""

    def __init__(self, result: ConstraintResult):
        self.result = result
        messages = [
            f"{_format_path(pr.path)}: {getattr(err, 'message', repr(err))}"
            for pr in result.errors
            for err in pr.errors
        ]
        super().__init__(f"Validation issues: {'; '.join(messages)}")


def _format_path(path: tuple) -> str:
    if not path:
        return "<root>"
    out = ""
    for segment in path:
        if isinstance(segment, int):
            out += f"[{segment}]"
        else:
            out += f".{segment}" if out else str(segment)
    return out
