"""Immutable value objects shared across the domain"""
from dataclasses import dataclass
from decimal import Decimal
from .exceptions import CurrencyMismatchError


@dataclass(frozen=True)
class Money:
    """
    Amount of money in a single currency.

    Amounts are Decimals so line item totals add up exactly.
    """
    amount: Decimal
    currency: str = "USD"

    def __post_init__(self):
        if not self.currency or len(self.currency.strip()) != 3:
            raise ValueError(f"currency must be a 3-letter code, got {self.currency!r}")
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, 'amount', Decimal(str(self.amount)))
        object.__setattr__(self, 'currency', self.currency.strip().upper())

    @classmethod
    def zero(cls, currency: str = "USD") -> 'Money':
        return cls(Decimal("0"), currency)

    def add(self, other: 'Money') -> 'Money':
        self._ensure_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def subtract(self, other: 'Money') -> 'Money':
        self._ensure_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def _ensure_same_currency(self, other: 'Money') -> None:
        if other.currency != self.currency:
            raise CurrencyMismatchError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"
