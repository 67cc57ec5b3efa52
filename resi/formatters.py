# -*- coding: utf-8 -*-
"""
Human-readable rendering of parser output.
"""

from typing import Optional

from resi.parser.types import TransactionCategory, TransactionGuess

_CATEGORY_ICONS = {
    TransactionCategory.QRIS: "📱",
    TransactionCategory.TRANSFER: "🔁",
    TransactionCategory.WITHDRAWAL: "🏧",
}


def format_rupiah(amount: Optional[int]) -> str:
    """
    Format an amount with Indonesian grouping.

    >>> format_rupiah(1500000)
    'Rp 1.500.000'
    """
    if amount is None:
        return "-"
    return "Rp " + f"{amount:,}".replace(",", ".")


def format_guess(guess: TransactionGuess) -> str:
    """
    Format a guess as a short confirmation message.

    Missing fields are shown as "-" so the user knows what to fill in.
    """
    icon = _CATEGORY_ICONS.get(guess.category, "📂")

    message = f"""💰 Jumlah: {format_rupiah(guess.amount)}
{icon} Tipe: {guess.category.label}"""

    message += f"\n📝 Keterangan: {guess.description or '-'}"
    return message
