# -*- coding: utf-8 -*-
"""
Transaction text parser.

Turns a typed command or OCR receipt text into a TransactionGuess
(amount, category, description). Both entry points are pure: no I/O, no
shared state, and they never raise for any input. A missing amount is
reported as `amount=None`; use `require_amount` to turn it into a prompt.

Entry points:
- parse_command_text(text: str) -> TransactionGuess
- parse_receipt_text(text: str) -> TransactionGuess

Usage:
    from resi.parser import parse_command_text
    guess = parse_command_text("tarik 200000 ATM")
"""

import logging
from typing import Optional

from resi.parser.errors import ParserError, ParserErrorCode, require_amount
from resi.parser.normalize_amount import normalize_amount
from resi.parser.types import TransactionCategory, TransactionGuess

logger = logging.getLogger(__name__)


def parse_command_text(text: Optional[str]) -> TransactionGuess:
    """
    Parse a manually typed command (e.g. "qris 50000 Indomaret").

    Args:
        text: short user-authored line, not OCR output

    Returns:
        TransactionGuess: amount is None when absent or below the command floor
    """
    from resi import config
    from resi.parser.extract_amount import extract_command_amount
    from resi.parser.extract_description import extract_command_description
    from resi.parser.extract_type import classify_command
    from resi.parser.normalize_input import normalize_parser_input

    message = normalize_parser_input(text)
    if not message:
        return TransactionGuess()

    guess = TransactionGuess(
        amount=extract_command_amount(message, config.COMMAND_MIN_AMOUNT, config.MAX_AMOUNT),
        category=classify_command(message),
        description=extract_command_description(message),
    )
    logger.debug("Command %r -> %s", message, guess)
    return guess


def parse_receipt_text(text: Optional[str]) -> TransactionGuess:
    """
    Parse the OCR text of a receipt.

    Only the final OCR text should be passed in; interim recognition output
    produces unstable guesses.

    Args:
        text: multi-line OCR text of a bank/e-wallet receipt

    Returns:
        TransactionGuess: amount is None when no plausible amount was found
    """
    from resi import config
    from resi.parser.extract_amount import select_receipt_amount
    from resi.parser.extract_description import extract_receipt_description
    from resi.parser.extract_type import classify_receipt
    from resi.parser.normalize_input import normalize_parser_input

    receipt = normalize_parser_input(text)
    if not receipt:
        return TransactionGuess()

    # 1. Amount
    candidate = select_receipt_amount(receipt, config.RECEIPT_MIN_AMOUNT, config.MAX_AMOUNT)

    # 2. Category
    category = classify_receipt(receipt)

    # 3. Merchant or recipient
    description = extract_receipt_description(receipt, candidate.raw if candidate else None)

    guess = TransactionGuess(
        amount=candidate.amount if candidate else None,
        category=category,
        description=description,
    )
    logger.debug("Receipt parsed -> %s", guess)
    return guess


# Export
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
