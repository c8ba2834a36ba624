from typing import Sequence

from app.domain.entities import Balance
from app.domain.validation import ErrorKind, ValidationResult


MIN_BALANCES = 2


class BalanceSetValidator:
    def validate(self, balances: Sequence[Balance]) -> ValidationResult:
        # Later stages read both the oldest and the most recent balance
        if len(balances) < MIN_BALANCES:
            return ValidationResult.fail(
                "At least two balances are required", kind=ErrorKind.BALANCE_COUNT
            )
        return ValidationResult.success()
