import logging
from typing import Protocol

from app.domain.validation import ValidationResult


logger = logging.getLogger(__name__)


class ValidationObserver(Protocol):
    def stage_started(self, stage: str) -> None: ...

    def stage_finished(self, stage: str, result: ValidationResult) -> None: ...


class LoggingValidationObserver:
    def stage_started(self, stage: str) -> None:
        logger.debug("Running stage %s", stage)

    def stage_finished(self, stage: str, result: ValidationResult) -> None:
        if result.has_errors():
            logger.warning(
                "Stage %s failed with %d error(s): %s",
                stage,
                len(result.errors),
                "; ".join(e.message for e in result.errors),
            )
        else:
            logger.debug("Stage %s passed", stage)


class NullValidationObserver:
    def stage_started(self, stage: str) -> None:
        pass

    def stage_finished(self, stage: str, result: ValidationResult) -> None:
        pass
