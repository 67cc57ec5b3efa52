# -*- coding: utf-8 -*-

from resi.formatters import format_guess, format_rupiah
from resi.parser.types import TransactionCategory, TransactionGuess


def test_format_rupiah_grouping() -> None:
    assert format_rupiah(1500000) == "Rp 1.500.000"
    assert format_rupiah(1000) == "Rp 1.000"
    assert format_rupiah(500) == "Rp 500"


def test_format_rupiah_missing() -> None:
    assert format_rupiah(None) == "-"


def test_format_guess() -> None:
    guess = TransactionGuess(amount=200000, category=TransactionCategory.WITHDRAWAL, description="ATM")
    message = format_guess(guess)
    assert "💰 Jumlah: Rp 200.000" in message
    assert "Tipe: Withdrawal" in message
    assert message.endswith("📝 Keterangan: ATM")


def test_format_guess_missing_fields() -> None:
    message = format_guess(TransactionGuess())
    assert "💰 Jumlah: -" in message
    assert "Tipe: QRIS" in message
    assert message.endswith("📝 Keterangan: -")
