"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Self

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Price in Canadian dollars with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(amount=Decimal(value))

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def times(self, quantity: int) -> "Money":
        return Money(amount=self.amount * quantity)

    def rounded(self) -> Decimal:
        return self.amount.quantize(CENTS, rounding=ROUND_HALF_UP)

    def __str__(self) -> str:
        return f"{self.rounded():.2f}"
