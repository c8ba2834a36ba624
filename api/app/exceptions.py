from app.domain.validation import ValidationError


class MovementsValidationError(Exception):
    """Raised when a pipeline stage rejects the submitted movements.

    ``errors`` always come from the single stage named by ``stage``.
    """

    def __init__(self, stage: str, errors: list[ValidationError]):
        self.stage = stage
        self.errors = list(errors)
        super().__init__(", ".join(e.message for e in self.errors) or "Validation failed")
