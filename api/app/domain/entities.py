from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Movement:
    id: int
    date: datetime
    description: str
    amount: Decimal  # signed: negative = outflow


@dataclass(frozen=True)
class Balance:
    date: datetime
    amount: Decimal
