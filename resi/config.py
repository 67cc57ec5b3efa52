"""
Environment configuration module
Loads and validates the amount thresholds used by both parsers.
"""

import os
from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        return int(raw.replace('_', ''))
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


# Manual commands may legitimately be small, receipts almost never are.
COMMAND_MIN_AMOUNT = _int_env('RESI_COMMAND_MIN_AMOUNT', 100)
RECEIPT_MIN_AMOUNT = _int_env('RESI_RECEIPT_MIN_AMOUNT', 1000)
MAX_AMOUNT = _int_env('RESI_MAX_AMOUNT', 1_000_000_000)

# Not configurable: descriptions are stored in a bounded column downstream
DESCRIPTION_MAX_LENGTH = 100

LOG_LEVEL = os.getenv('RESI_LOG_LEVEL', 'WARNING').upper()

# Validate thresholds
invalid_bands = [
    name for name, floor in (
        ('RESI_COMMAND_MIN_AMOUNT', COMMAND_MIN_AMOUNT),
        ('RESI_RECEIPT_MIN_AMOUNT', RECEIPT_MIN_AMOUNT),
    )
    if floor < 0 or floor > MAX_AMOUNT
]

if invalid_bands:
    raise ValueError(f"Amount floors must lie in [0, RESI_MAX_AMOUNT]: {', '.join(invalid_bands)}")
