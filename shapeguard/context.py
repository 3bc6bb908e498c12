"""
Ambient validation settings.

Settings live in a ContextVar as one frozen ValidationSettings object.
validation_context() layers overrides on top of the enclosing settings, and
an ObjectShape with an explicit ``strict=`` opens such a layer for everything
nested beneath it.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ValidationSettings:
    """
    strict: object shapes report keys on mapping input that they do not
            declare (UnknownKeyError) instead of ignoring them.
    """

    strict: bool = False


_settings: ContextVar[ValidationSettings] = ContextVar(
    "shapeguard_settings", default=ValidationSettings()
)


def current_settings() -> ValidationSettings:
    return _settings.get()


def is_strict() -> bool:
    """Check if strict object keys are currently enabled."""
    return _settings.get().strict


@contextmanager
def validation_context(*, strict: bool | None = None) -> Iterator[ValidationSettings]:
    """
    Override validation settings for the duration of the block.

    Args:
        strict: True / False to switch strict object keys on or off. None
               keeps whatever the enclosing context uses, so nested blocks
               only change what they name.

    Yields:
        The settings in effect inside the block.

    Example:
        from shapeguard import IsType, ObjectShape, validate, validation_context

        user = ObjectShape({"name": IsType(str)})

        validate({"name": "Dude", "rug": True}, user).ok  # True

        with validation_context(strict=True):
            validate({"name": "Dude", "rug": True}, user).ok  # False
    """
    outer = _settings.get()
    settings = outer if strict is None else replace(outer, strict=strict)
    token = _settings.set(settings)
    try:
        yield settings
    finally:
        _settings.reset(token)
