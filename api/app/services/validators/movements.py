from typing import Sequence

from app.domain.entities import Balance, Movement
from app.domain.validation import ErrorKind, ValidationResult


class MovementRangeValidator:
    """Checks that movements sit between the oldest and most recent balance.

    Both inputs must already be sorted by date and ``balances`` must hold at
    least two entries. Either boundary is inclusive.
    """

    def validate(self, movements: Sequence[Movement], balances: Sequence[Balance]) -> ValidationResult:
        if not movements:
            return ValidationResult.success()

        oldest_balance, most_recent_balance = balances[0], balances[-1]
        oldest_movement, most_recent_movement = movements[0], movements[-1]

        if oldest_movement.date < oldest_balance.date:
            return ValidationResult.fail(
                "Oldest movement is before oldest balance",
                kind=ErrorKind.MOVEMENT_BEFORE_RANGE,
            )
        if most_recent_movement.date > most_recent_balance.date:
            return ValidationResult.fail(
                "Most recent movement is after most recent balance",
                kind=ErrorKind.MOVEMENT_AFTER_RANGE,
            )
        return ValidationResult.success()


class MovementUniquenessValidator:
    """Reports the first movement whose id was already seen, then stops."""

    def validate(self, movements: Sequence[Movement]) -> ValidationResult:
        seen: dict[int, Movement] = {}
        for movement in movements:
            first = seen.get(movement.id)
            if first is not None:
                return ValidationResult.fail(
                    "Duplicate movement ID detected",
                    {
                        "id": movement.id,
                        "firstOccurrence": first,
                        "duplicateOccurrence": movement,
                    },
                    kind=ErrorKind.DUPLICATE_MOVEMENT_ID,
                )
            seen[movement.id] = movement
        return ValidationResult.success()
