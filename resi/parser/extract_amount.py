# -*- coding: utf-8 -*-
"""
Amount Extraction

Commands:
- First digit run, loosely grouped by '.'/',' (tarik 200.000 ATM -> 200000)

Receipts:
- Every match of an ordered pattern table becomes a candidate
- Candidates outside the plausible band are dropped (account/reference numbers)
- Ranking: pattern order first, then larger amount
- Override phrases ("nominal transfer", "total transaksi") beat the ranking
"""

import logging
import re
from typing import Optional

from resi.parser.normalize_amount import is_plausible_amount, normalize_amount
from resi.parser.types import AmountCandidate

logger = logging.getLogger(__name__)

# 編譯正則表達式以提升效能
_NUMERAL = r"([\d.,]+)"

_COMMAND_AMOUNT_PATTERN = re.compile(r"(?<!\d)(\d{1,3}(?:[.,]?\d{3})*)(?!\d)", re.ASCII)

# Most specific first; the index is the candidate priority.
_RECEIPT_AMOUNT_PATTERNS: tuple[re.Pattern, ...] = (
    # BCA transfer: "NOMINAL TRANSFER Rp 29.000,00"
    re.compile(rf"nominal\s*(?:transfer)?\s*rp\.?\s*{_NUMERAL}", re.IGNORECASE),
    # Mandiri QRIS: "Total Transaksi Rp10.000"
    re.compile(rf"(?:total\s*transaksi|total)\s*rp\.?\s*{_NUMERAL}", re.IGNORECASE),
    re.compile(rf"rp\.?\s*{_NUMERAL}", re.IGNORECASE),
    re.compile(rf"idr\.?\s*{_NUMERAL}", re.IGNORECASE),
    # Jumlah/Nominal without a currency marker
    re.compile(rf"(?:jumlah|nominal)[:\s]*{_NUMERAL}", re.IGNORECASE),
    # Last resort: any grouped numeral (1.000 / 1,000 / 1.000,00), never a slice of a longer one
    re.compile(r"(?<!\d)(?<!\d[.,])(\d{1,3}(?:[.,]\d{3})+(?:[.,]\d{2})?)(?![.,]?\d)"),
)

# Phrases that state the transaction amount outright on known layouts.
# New receipt layouts extend this table, not the ranking.
_AMOUNT_OVERRIDES: tuple[tuple[str, re.Pattern], ...] = (
    ("nominal_transfer", re.compile(rf"nominal\s*transfer\s*rp\.?\s*{_NUMERAL}", re.IGNORECASE)),
    ("total_transaksi", re.compile(rf"total\s*transaksi\s*rp\.?\s*{_NUMERAL}", re.IGNORECASE)),
)


def _clean_numeral(raw: str) -> str:
    # "Rp 10.000,-" captures "10.000,"
    return raw.rstrip(".,")


def extract_command_amount(text: str, minimum: int, maximum: int) -> Optional[int]:
    """
    Extract the amount from a typed command.

    Args:
        text: typed command (e.g. "qris 50.000 Indomaret")
        minimum: smallest amount accepted
        maximum: largest amount accepted

    Returns:
        amount, or None when absent or implausible
    """
    if not text:
        return None

    match = _COMMAND_AMOUNT_PATTERN.search(text)
    if not match:
        return None

    digits = re.sub(r"[.,]", "", match.group(1))
    if len(digits) > len(str(maximum)):
        logger.debug("Command digit run %r too long for an amount", digits)
        return None

    amount = int(digits)
    if not is_plausible_amount(amount, minimum, maximum):
        logger.debug("Command amount %s outside [%s, %s], discarded", amount, minimum, maximum)
        return None
    return amount


def collect_receipt_candidates(text: str, minimum: int, maximum: int) -> list[AmountCandidate]:
    """Run every receipt pattern and keep plausible amounts, best first."""
    candidates: list[AmountCandidate] = []
    for priority, pattern in enumerate(_RECEIPT_AMOUNT_PATTERNS):
        for match in pattern.finditer(text):
            raw = _clean_numeral(match.group(1))
            amount = normalize_amount(raw)
            if is_plausible_amount(amount, minimum, maximum):
                candidates.append(AmountCandidate(amount=amount, priority=priority, raw=raw))

    candidates.sort(key=AmountCandidate.sort_key)
    return candidates


def _find_override(text: str, minimum: int, maximum: int) -> Optional[AmountCandidate]:
    for name, pattern in _AMOUNT_OVERRIDES:
        match = pattern.search(text)
        if not match:
            continue
        raw = _clean_numeral(match.group(1))
        amount = normalize_amount(raw)
        if is_plausible_amount(amount, minimum, maximum):
            logger.debug("Receipt amount override '%s' -> %s", name, amount)
            return AmountCandidate(amount=amount, priority=-1, raw=raw)
    return None


def select_receipt_amount(text: str, minimum: int, maximum: int) -> Optional[AmountCandidate]:
    """
    Pick the transaction amount from receipt text.

    Returns:
        the winning candidate (amount plus the numeral text it came from),
        or None when nothing plausible was found
    """
    if not text:
        return None

    candidates = collect_receipt_candidates(text, minimum, maximum)
    if not candidates:
        logger.debug("No plausible amount in receipt text")
        return None

    logger.debug("Receipt amount candidates: %s", [(c.amount, c.priority) for c in candidates])

    override = _find_override(text, minimum, maximum)
    if override:
        return override
    return candidates[0]
