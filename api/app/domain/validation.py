"""Aggregable outcome of a validation check.

A ``ValidationResult`` is either a success or a failure holding a non-empty,
ordered list of ``ValidationError``. Results form a monoid: ``success()`` is
the identity and ``combine`` concatenates errors, so checks can be run
independently and merged without any of them appending to a shared list.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable


class ErrorKind(str, Enum):
    BALANCE_COUNT = "BalanceCountError"
    MOVEMENT_BEFORE_RANGE = "MovementBeforeRangeError"
    MOVEMENT_AFTER_RANGE = "MovementAfterRangeError"
    DUPLICATE_MOVEMENT_ID = "DuplicateMovementIdError"
    BALANCE_MISMATCH = "BalanceMismatchError"


@dataclass(frozen=True)
class ValidationError:
    message: str
    details: dict[str, Any] | None = None
    kind: ErrorKind | None = None


@dataclass(frozen=True)
class ValidationResult:
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def fail(
        cls,
        message: str,
        details: dict[str, Any] | None = None,
        kind: ErrorKind | None = None,
    ) -> "ValidationResult":
        return cls((ValidationError(message, details, kind),))

    @classmethod
    def combine_all(cls, results: Iterable["ValidationResult"]) -> "ValidationResult":
        errors: list[ValidationError] = []
        for result in results:
            errors.extend(result.errors)
        return cls(tuple(errors))

    def combine(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult.combine_all([self, other])

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def has_errors(self) -> bool:
        return bool(self.errors)

    def get_errors(self) -> list[ValidationError]:
        return list(self.errors)
