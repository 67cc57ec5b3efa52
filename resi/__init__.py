# -*- coding: utf-8 -*-
"""Interpretation of Indonesian bank/e-wallet receipts and chat commands."""

from resi.parser import (
    ParserError,
    ParserErrorCode,
    TransactionCategory,
    TransactionGuess,
    normalize_amount,
    parse_command_text,
    parse_receipt_text,
    require_amount,
)

__version__ = "1.0.0"

__all__ = [
    "parse_command_text",
    "parse_receipt_text",
    "normalize_amount",
    "require_amount",
    "TransactionGuess",
    "TransactionCategory",
    "ParserError",
    "ParserErrorCode",
]
