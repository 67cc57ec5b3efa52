# -*- coding: utf-8 -*-
"""
Parser Error Types

The parsers themselves never raise: a missing amount is a normal outcome.
These errors exist for callers that need to turn that outcome into a
message asking the user to type the transaction manually.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional

from resi.parser.types import TransactionGuess


class ParserErrorCode(Enum):
    """Parser 錯誤代碼"""

    MISSING_AMOUNT = "missing_amount"             # 指令缺少金額
    UNREADABLE_RECEIPT = "unreadable_receipt"     # 收據讀不到金額
    EMPTY_MESSAGE = "empty_message"               # 空訊息


_COMMAND_EXAMPLES = "`qris 50000 Indomaret`\n`transfer 100000 Gaji`\n`tarik 200000 ATM`"

# 錯誤訊息模板
ERROR_MESSAGES = {
    ParserErrorCode.MISSING_AMOUNT: "❓ Format tidak dikenali.\n\nContoh:\n" + _COMMAND_EXAMPLES,
    ParserErrorCode.UNREADABLE_RECEIPT: (
        "📸 Nominal tidak terbaca dari resi.\n\nMohon ketik detail transaksi:\n\n" + _COMMAND_EXAMPLES
    ),
    ParserErrorCode.EMPTY_MESSAGE: "Pesan kosong. Contoh:\n" + _COMMAND_EXAMPLES,
}


@dataclass
class ParserError(Exception):
    """Parser 解析錯誤"""

    code: ParserErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: ParserErrorCode, **kwargs) -> "ParserError":
        """從錯誤代碼建立錯誤物件"""
        template = ERROR_MESSAGES.get(code, "Gagal membaca transaksi")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)


def require_amount(guess: TransactionGuess, *, source: str = "command") -> int:
    """
    Return the guessed amount or raise the prompt the user should see.

    Args:
        guess: parser output
        source: "command" or "receipt", selects the message template

    Raises:
        ParserError: amount is absent
    """
    if guess.amount is not None:
        return guess.amount
    if source == "receipt":
        raise ParserError.from_code(ParserErrorCode.UNREADABLE_RECEIPT)
    raise ParserError.from_code(ParserErrorCode.MISSING_AMOUNT)
