from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, List, Literal, Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator

from app.domain.entities import Balance, Movement


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken as UTC so every date compares with every other
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class MovementIn(BaseModel):
    id: int
    date: datetime
    # "wording" is the field name used by earlier clients
    description: str = Field(validation_alias=AliasChoices("description", "wording"))
    amount: Decimal  # negative = outflow, positive = inflow

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return _as_utc(value)

    def to_entity(self) -> Movement:
        return Movement(id=self.id, date=self.date, description=self.description, amount=self.amount)


class BalanceIn(BaseModel):
    date: datetime
    amount: Decimal = Field(validation_alias=AliasChoices("amount", "balance"))

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        return _as_utc(value)

    def to_entity(self) -> Balance:
        return Balance(date=self.date, amount=self.amount)


class ValidateMovementsRequest(BaseModel):
    movements: List[MovementIn] = Field(default_factory=list)
    balances: List[BalanceIn] = Field(default_factory=list)


class ValidateMovementsResponse(BaseModel):
    message: Literal["Accepted"] = "Accepted"


class ValidationReasonOut(BaseModel):
    code: Optional[str] = None
    message: str
    details: Optional[dict[str, Any]] = None


class ValidationFailedResponse(BaseModel):
    statusCode: int = 400
    message: str = "Validation failed"
    reasons: List[ValidationReasonOut]
    error: str = "Bad Request"
