# -*- coding: utf-8 -*-
"""
Description / Merchant Extraction

Commands:
- Text after the last number ("qris 50000 Indomaret" -> "Indomaret")
- Otherwise the text with type keywords removed

Receipts, first non-trivial result wins:
1. Labeled fields (Penerima, Ke Rekening Tujuan, Merchant/Toko/Kepada, Tujuan Transaksi)
2. First line that looks like a proper noun
3. Bank/e-wallet brand prefix: "[BCA] Budi" or "Transaksi BCA"
"""

import logging
import re
from typing import Optional

from resi.config import DESCRIPTION_MAX_LENGTH
from resi.shared.keyword_config import load_keyword_tables

logger = logging.getLogger(__name__)

_NUMERIC_RUN = re.compile(r"\d+(?:[.,]\d+)*")
_ALL_DIGITS = re.compile(r"^\d+$")
_STARTS_UPPERCASE = re.compile(r"^[A-Z]")
_TRAILING_CURRENCY = re.compile(r"\s*\b(?:rp|idr)\.?\s*$", re.IGNORECASE)

# (rule name, pattern); group 1 is the value
_RECEIPT_LABEL_PATTERNS: tuple[tuple[str, re.Pattern], ...] = (
    # Mandiri QRIS: "Penerima" then the merchant name
    ("penerima", re.compile(r"penerima[:\s]*\n?\s*([^\n]+)", re.IGNORECASE)),
    # BCA transfer: "Ke Rekening Tujuan" / bank / account number / name
    (
        "rekening_tujuan",
        re.compile(r"ke\s*rekening\s*tujuan\s*\n?\s*\w+\s*\n?\s*\d+\s*\n?\s*([^\n]+)", re.IGNORECASE),
    ),
    ("merchant", re.compile(r"(?:merchant|toko|kepada|nama\s*penerima)[:\s]*\n?\s*([^\n]+)", re.IGNORECASE)),
    ("tujuan_transaksi", re.compile(r"tujuan\s*transaksi[:\s]*\n?\s*([^\n]+)", re.IGNORECASE)),
)

# Lines containing these are amounts or headers, not names
_LINE_SCAN_EXCLUDES = ("rp", "bank", "transaksi")


def _truncate(text: str) -> str:
    return text[:DESCRIPTION_MAX_LENGTH]


def remove_amount_text(text: str, amount_raw: Optional[str]) -> str:
    """Drop the numeral consumed as the amount, plus a dangling Rp/IDR."""
    if not text or not amount_raw:
        return text

    pattern = re.compile(rf"(?<![\d.,]){re.escape(amount_raw)}(?!\d)")
    if not pattern.search(text):
        return text

    cleaned = pattern.sub(" ", text)
    cleaned = _TRAILING_CURRENCY.sub("", cleaned)
    return re.sub(r"\s+", " ", cleaned).strip()


def extract_command_description(text: str) -> str:
    """
    Extract the description from a typed command.

    Examples:
        >>> extract_command_description("tarik 200000 ATM")
        'ATM'
        >>> extract_command_description("qris 50000")
        ''
    """
    if not text:
        return ""

    parts = [part for part in _NUMERIC_RUN.split(text) if part.strip()]
    if len(parts) > 1:
        return _truncate(parts[-1].strip())
    if len(parts) == 1:
        strip_words = sorted(load_keyword_tables().command_strip_words, key=len, reverse=True)
        if not strip_words:
            return _truncate(parts[0].strip())
        pattern = re.compile("|".join(re.escape(w) for w in strip_words), re.IGNORECASE)
        cleaned = re.sub(r"\s+", " ", pattern.sub("", parts[0]))
        return _truncate(cleaned.strip())
    return ""


def _accept_value(value: str, amount_raw: Optional[str]) -> Optional[str]:
    value = remove_amount_text(value.strip(), amount_raw)
    if not value or _ALL_DIGITS.match(value) or len(value) <= 2:
        return None
    # Amount sits inside a longer numeral ("125.000" holding "25.000")
    if amount_raw and amount_raw in value:
        return None
    return value


def _from_labels(text: str, amount_raw: Optional[str]) -> Optional[str]:
    for name, pattern in _RECEIPT_LABEL_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        value = _accept_value(match.group(1), amount_raw)
        if value:
            logger.debug("Receipt description from label '%s': %r", name, value)
            return value
    return None


def _from_lines(text: str, amount_raw: Optional[str]) -> Optional[str]:
    for line in text.split("\n"):
        line = line.strip()
        if len(line) <= 3 or _ALL_DIGITS.match(line):
            continue
        lowered = line.lower()
        if any(word in lowered for word in _LINE_SCAN_EXCLUDES):
            continue
        if not _STARTS_UPPERCASE.match(line):
            continue
        value = _accept_value(line, amount_raw)
        if value:
            logger.debug("Receipt description from line scan: %r", value)
            return value
    return None


def detect_brand(text: str) -> Optional[str]:
    """Bank or e-wallet label (Mandiri, BCA, ..., DANA), or None"""
    if not text:
        return None

    lowered = text.lower()
    for brand in load_keyword_tables().brands:
        if brand.matches(lowered):
            return brand.label
    return None


def extract_receipt_description(text: str, amount_raw: Optional[str] = None) -> str:
    """
    Extract the merchant or recipient from receipt text.

    Args:
        text: normalized receipt text
        amount_raw: numeral text consumed as the amount, never echoed back

    Returns:
        description (at most DESCRIPTION_MAX_LENGTH characters), possibly empty
    """
    if not text:
        return ""

    description = _from_labels(text, amount_raw) or _from_lines(text, amount_raw) or ""
    description = _truncate(description)

    brand = detect_brand(text)
    if brand and description:
        description = f"[{brand}] {description}"
    elif brand:
        description = f"Transaksi {brand}"

    return _truncate(description)
