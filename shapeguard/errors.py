"""
Error records produced by failing constraints.

Each record is an immutable pydantic model tagged with a ``kind``
discriminator, so a list of mixed errors can be dumped, re-validated or
pattern-matched without a separate lookup table:

    match error:
        case GtError(min=bound, value=v):
            ...
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, computed_field


class ErrorKind(str, Enum):
    """Machine-readable error kinds, one per leaf constraint."""

    IN_SET = "in-set"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    EQ = "eq"
    MAX_LENGTH = "max-length"
    MIN_LENGTH = "min-length"
    LENGTH = "length"
    REQUIRED = "required"
    TYPE_MISMATCH = "type-mismatch"
    UNKNOWN_KEY = "unknown-key"


class _ErrorBase(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class InSetError(_ErrorBase):
    kind: Literal[ErrorKind.IN_SET] = ErrorKind.IN_SET
    options: tuple[Any, ...]
    value: Any

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return "Value is not among expected options"


class GtError(_ErrorBase):
    kind: Literal[ErrorKind.GT] = ErrorKind.GT
    min: Any
    value: Any

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return (
            f"Expected value ({self.value!r}) to be strictly greater than "
            f"min ({self.min!r})"
        )


class GteError(_ErrorBase):
    kind: Literal[ErrorKind.GTE] = ErrorKind.GTE
    min: Any
    value: Any

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return (
            f"Expected value ({self.value!r}) to be greater than or equal to "
            f"min ({self.min!r})"
        )


class LtError(_ErrorBase):
    kind: Literal[ErrorKind.LT] = ErrorKind.LT
    max: Any
    value: Any

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return (
            f"Expected value ({self.value!r}) to be strictly less than "
            f"max ({self.max!r})"
        )


class LteError(_ErrorBase):
    kind: Literal[ErrorKind.LTE] = ErrorKind.LTE
    max: Any
    value: Any

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return (
            f"Expected value ({self.value!r}) to be less than or equal to "
            f"max ({self.max!r})"
        )


class EqError(_ErrorBase):
    kind: Literal[ErrorKind.EQ] = ErrorKind.EQ
    expected: Any
    value: Any

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return f"Value ({self.value!r}) must be equal to expected ({self.expected!r})"


class MaxLengthError(_ErrorBase):
    kind: Literal[ErrorKind.MAX_LENGTH] = ErrorKind.MAX_LENGTH
    max_len: int
    value: Any
    value_length: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return (
            f"Expected value ({self.value!r}) to have maximum length of "
            f"{self.max_len}, got {self.value_length}"
        )


class MinLengthError(_ErrorBase):
    kind: Literal[ErrorKind.MIN_LENGTH] = ErrorKind.MIN_LENGTH
    min_len: int
    value: Any
    value_length: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return (
            f"Expected value ({self.value!r}) to have minimum length of "
            f"{self.min_len}, got {self.value_length}"
        )


class LengthError(_ErrorBase):
    kind: Literal[ErrorKind.LENGTH] = ErrorKind.LENGTH
    len: int
    value: Any
    value_length: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return (
            f"Expected value ({self.value!r}) to have length of exactly "
            f"{self.len}, got {self.value_length}"
        )


class RequiredError(_ErrorBase):
    kind: Literal[ErrorKind.REQUIRED] = ErrorKind.REQUIRED

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return "Value is required"


class TypeMismatchError(_ErrorBase):
    kind: Literal[ErrorKind.TYPE_MISMATCH] = ErrorKind.TYPE_MISMATCH
    expected_type: Any
    actual_type: Any

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return (
            f"Type mismatch: expected {_type_name(self.expected_type)}, "
            f"got {_type_name(self.actual_type)}"
        )


class UnknownKeyError(_ErrorBase):
    kind: Literal[ErrorKind.UNKNOWN_KEY] = ErrorKind.UNKNOWN_KEY
    key: Any

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return f"Key {self.key!r} is not declared in the schema"


def _type_name(t: Any) -> str:
    return getattr(t, "__name__", repr(t))


ConstraintError = Annotated[
    Union[
        InSetError,
        GtError,
        GteError,
        LtError,
        LteError,
        EqError,
        MaxLengthError,
        MinLengthError,
        LengthError,
        RequiredError,
        TypeMismatchError,
        UnknownKeyError,
    ],
    Field(discriminator="kind"),
]

error_adapter: TypeAdapter[Any] = TypeAdapter(ConstraintError)
