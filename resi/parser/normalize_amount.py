# -*- coding: utf-8 -*-
"""
Amount Normalization

Turns a numeral with '.'/',' separators into a whole Rupiah amount.
Shapes are tried in order, first match wins:
- Local:         29.000 / 29.000,00   ('.' groups, ',' decimals)
- International: 29,000 / 29,000.00   (',' groups, '.' decimals)
- Plain:         29000 / 29000.00 / 29000,00

Two-digit decimals are rounded half-up; Rupiah amounts carry no subunit.
"""

import re
from typing import Optional

_LOCAL_FORMAT = re.compile(r"^(\d{1,3}(?:\.\d{3})*)(?:,(\d{2}))?$", re.ASCII)
_INTERNATIONAL_FORMAT = re.compile(r"^(\d{1,3}(?:,\d{3})*)(?:\.(\d{2}))?$", re.ASCII)
_PLAIN_FORMAT = re.compile(r"^(\d+)(?:[.,](\d{2}))?$", re.ASCII)

# (pattern, grouping separator)
_FORMATS = (
    (_LOCAL_FORMAT, "."),
    (_INTERNATIONAL_FORMAT, ","),
    (_PLAIN_FORMAT, ""),
)


# Longer digit runs are identifiers, never amounts
_MAX_DIGITS = 18


def _round_half_up(whole: str, fraction: Optional[str]) -> int:
    return int(whole) + (1 if int(fraction or "0") >= 50 else 0)


def normalize_amount(token: str) -> Optional[int]:
    """
    Convert a numeral string to a whole amount.

    Args:
        token: numeral as found in text (e.g. "29.000,00", "29,000.00", "500.50")

    Returns:
        Whole amount, or None when the token fits none of the known shapes.

    Examples:
        >>> normalize_amount("29.000,00")
        29000
        >>> normalize_amount("500.50")
        501
    """
    if not token:
        return None

    token = token.strip()
    for pattern, separator in _FORMATS:
        match = pattern.match(token)
        if match:
            whole = match.group(1).replace(separator, "") if separator else match.group(1)
            if len(whole) > _MAX_DIGITS:
                return None
            return _round_half_up(whole, match.group(2))
    return None


def is_plausible_amount(amount: Optional[int], minimum: int, maximum: int) -> bool:
    """Amounts outside the band are most likely account or reference numbers."""
    return amount is not None and minimum <= amount <= maximum
