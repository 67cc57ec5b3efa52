# -*- coding: utf-8 -*-
"""
Transaction Category Classification

Lowercase substring scan over ordered keyword groups. The first group that
hits wins; no hit falls back to QRIS. Keyword tables come from
`resi.shared.keyword_config`.
"""

from resi.parser.types import DEFAULT_CATEGORY, TransactionCategory
from resi.shared.keyword_config import load_keyword_tables


def _classify(text: str, groups) -> TransactionCategory:
    if not text:
        return DEFAULT_CATEGORY

    lowered = text.lower()
    for category, group in groups:
        if group.matches(lowered):
            return category
    return DEFAULT_CATEGORY


def classify_command(text: str) -> TransactionCategory:
    """
    Classify a typed command.

    Order: withdrawal (tarik/withdraw/atm), transfer (transfer/tf/kirim),
    qris (qris/scan/bayar).
    """
    return _classify(text, load_keyword_tables().command_types)


def classify_receipt(text: str) -> TransactionCategory:
    """
    Classify a receipt.

    Order: transfer (m-transfer, bi fast, ke rekening...), qris (qr bayar,
    pembayaran berhasil, merchant...), withdrawal (tarik tunai, atm...).
    """
    return _classify(text, load_keyword_tables().receipt_types)
