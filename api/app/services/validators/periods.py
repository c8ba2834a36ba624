"""Per-period reconciliation of movements against balance snapshots.

Consecutive balances ``b[i]`` and ``b[i+1]`` delimit the period
``[b[i].date, b[i+1].date)``. The movements of a period, added to the opening
balance, must give the closing balance exactly. A movement dated on the last
balance's date belongs to no period.
"""
from typing import Sequence

from app.domain.entities import Balance, Movement
from app.domain.validation import ErrorKind, ValidationResult
from app.services.sorting import sort_by_date


class PeriodReconciler:
    def validate(self, movements: Sequence[Movement], balances: Sequence[Balance]) -> ValidationResult:
        ordered = sort_by_date(balances)
        return ValidationResult.combine_all(
            self._validate_period(initial, final, self._movements_between(movements, initial, final))
            for initial, final in zip(ordered, ordered[1:])
        )

    @staticmethod
    def _movements_between(movements: Sequence[Movement], initial: Balance, final: Balance) -> list[Movement]:
        return [m for m in movements if initial.date <= m.date < final.date]

    def _validate_period(self, initial: Balance, final: Balance, movements: list[Movement]) -> ValidationResult:
        movements_sum = sum(m.amount for m in movements)
        expected_final = initial.amount + movements_sum

        # Exact comparison, no tolerance
        if expected_final != final.amount:
            return ValidationResult.fail(
                "Balance mismatch",
                {
                    "initialBalanceDate": initial.date,
                    "initialBalanceValue": initial.amount,
                    "finalBalanceDate": final.date,
                    "finalBalanceValue": final.amount,
                    "expectedFinalBalance": expected_final,
                    "movementsSum": movements_sum,
                    "difference": final.amount - expected_final,
                    "movementsCount": len(movements),
                },
                kind=ErrorKind.BALANCE_MISMATCH,
            )
        return ValidationResult.success()
