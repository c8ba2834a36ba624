from app.services.movements import MovementsService
from app.services.observers import LoggingValidationObserver
from app.services.validators.balances import BalanceSetValidator
from app.services.validators.movements import MovementRangeValidator, MovementUniquenessValidator
from app.services.validators.periods import PeriodReconciler


def get_movements_service() -> MovementsService:
    return MovementsService(
        balance_validator=BalanceSetValidator(),
        range_validator=MovementRangeValidator(),
        uniqueness_validator=MovementUniquenessValidator(),
        period_reconciler=PeriodReconciler(),
        observer=LoggingValidationObserver(),
    )
