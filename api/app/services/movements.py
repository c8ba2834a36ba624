"""Validation pipeline for movements against balance snapshots.

Stages run in a fixed order and each one gates the next:

1. ``balances``: at least two balances are required.
2. ``movements``: range and uniqueness checks, combined.
3. ``periods``: every period between consecutive balances reconciles.

Only the errors of the first failing stage are reported.
"""
from dataclasses import dataclass, field
from typing import Sequence

from app.domain.entities import Balance, Movement
from app.domain.validation import ValidationError, ValidationResult
from app.exceptions import MovementsValidationError
from app.services.observers import NullValidationObserver, ValidationObserver
from app.services.sorting import sort_by_date
from app.services.validators.balances import BalanceSetValidator
from app.services.validators.movements import MovementRangeValidator, MovementUniquenessValidator
from app.services.validators.periods import PeriodReconciler


STAGE_BALANCES = "balances"
STAGE_MOVEMENTS = "movements"
STAGE_PERIODS = "periods"


@dataclass(frozen=True)
class ValidationOutcome:
    failed_stage: str | None = None
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.failed_stage is None


class MovementsService:
    def __init__(
        self,
        balance_validator: BalanceSetValidator,
        range_validator: MovementRangeValidator,
        uniqueness_validator: MovementUniquenessValidator,
        period_reconciler: PeriodReconciler,
        observer: ValidationObserver | None = None,
    ):
        self.balance_validator = balance_validator
        self.range_validator = range_validator
        self.uniqueness_validator = uniqueness_validator
        self.period_reconciler = period_reconciler
        self.observer = observer or NullValidationObserver()

    def evaluate(self, movements: Sequence[Movement], balances: Sequence[Balance]) -> ValidationOutcome:
        sorted_movements = sort_by_date(movements)
        sorted_balances = sort_by_date(balances)

        stages = (
            (STAGE_BALANCES, lambda: self.balance_validator.validate(sorted_balances)),
            (
                STAGE_MOVEMENTS,
                lambda: self.range_validator.validate(sorted_movements, sorted_balances).combine(
                    self.uniqueness_validator.validate(sorted_movements)
                ),
            ),
            (STAGE_PERIODS, lambda: self.period_reconciler.validate(sorted_movements, sorted_balances)),
        )
        for stage, run in stages:
            result = self._run_stage(stage, run)
            if result.has_errors():
                return ValidationOutcome(stage, result.get_errors())
        return ValidationOutcome()

    def validate_movements(self, movements: Sequence[Movement], balances: Sequence[Balance]) -> None:
        """Raise ``MovementsValidationError`` unless every stage passes."""
        outcome = self.evaluate(movements, balances)
        if not outcome.accepted:
            raise MovementsValidationError(outcome.failed_stage, outcome.errors)

    def _run_stage(self, stage: str, run) -> ValidationResult:
        self.observer.stage_started(stage)
        result = run()
        self.observer.stage_finished(stage, result)
        return result
