# -*- coding: utf-8 -*-
"""
Transaction types shared by the command and receipt parsers.

TransactionGuess is the only value that leaves the engine; AmountCandidate
lives for a single receipt parse.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TransactionCategory(Enum):
    """Transaction category (kategori transaksi)"""

    QRIS = "qris"               # QR merchant payment (default)
    TRANSFER = "transfer"       # bank transfer
    WITHDRAWAL = "withdrawal"   # cash withdrawal

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_string(cls, value: str) -> "TransactionCategory":
        """從字串轉換為 TransactionCategory"""
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown transaction category: {value}")


_LABELS = {
    TransactionCategory.QRIS: "QRIS",
    TransactionCategory.TRANSFER: "Transfer",
    TransactionCategory.WITHDRAWAL: "Withdrawal",
}

DEFAULT_CATEGORY = TransactionCategory.QRIS


@dataclass(frozen=True)
class TransactionGuess:
    """Parser output: best-effort reading of one transaction."""

    amount: Optional[int] = None           # None means "not found", never 0
    category: TransactionCategory = DEFAULT_CATEGORY
    description: str = ""

    @property
    def has_amount(self) -> bool:
        return self.amount is not None

    def to_dict(self) -> dict:
        """轉換為字典格式"""
        return {
            "amount": self.amount,
            "type": self.category.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class AmountCandidate:
    """One normalized numeral found in a receipt."""

    amount: int
    priority: int   # index of the pattern that produced it, lower wins
    raw: str        # numeral text as captured

    def sort_key(self) -> tuple[int, int]:
        return (self.priority, -self.amount)
