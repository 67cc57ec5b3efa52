# -*- coding: utf-8 -*-
"""Local transaction parsing CLI.

Runs the parsers on a typed command or on receipt text that an OCR step has
already produced (this CLI never reads images).

Examples:
    resi command "tarik 200000 ATM"
    resi receipt ocr_output.txt --format text
    tesseract struk.png - -l ind+eng | resi receipt -
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from resi.formatters import format_guess
from resi.parser import (
    ParserError,
    ParserErrorCode,
    TransactionGuess,
    parse_command_text,
    parse_receipt_text,
    require_amount,
)

logger = logging.getLogger(__name__)


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def _emit(guess: TransactionGuess, args: argparse.Namespace, source: str) -> int:
    if args.require_amount:
        try:
            require_amount(guess, source=source)
        except ParserError as e:
            _print_json({"status": "error", "error": {"message": e.message, "reason": e.code.value}})
            return 1

    if args.format == "text":
        sys.stdout.write(format_guess(guess))
        sys.stdout.write("\n")
    else:
        _print_json({"status": "ok", "result": guess.to_dict()})
    return 0


def _empty_input() -> int:
    e = ParserError.from_code(ParserErrorCode.EMPTY_MESSAGE)
    _print_json({"status": "error", "error": {"message": e.message, "reason": e.code.value}})
    return 1


def _read_receipt(source: str) -> str:
    # OCR dumps may carry stray bytes; the parsers only need ASCII anchors
    if source == "-":
        data = sys.stdin.buffer.read()
    else:
        data = Path(source).read_bytes()
    return data.decode("utf-8", errors="replace")


def cmd_command(args: argparse.Namespace) -> int:
    text = " ".join(args.text).strip()
    if not text:
        return _empty_input()
    return _emit(parse_command_text(text), args, "command")


def cmd_receipt(args: argparse.Namespace) -> int:
    try:
        text = _read_receipt(args.source)
    except OSError as e:
        _print_json({"status": "error", "error": {"message": str(e), "reason": "unreadable_file"}})
        return 1

    logger.debug("Read %d characters of receipt text from %s", len(text), args.source)
    if not text.strip():
        return _empty_input()
    return _emit(parse_receipt_text(text), args, "receipt")


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--format", choices=("json", "text"), default="json")
    parser.add_argument(
        "--require-amount",
        action="store_true",
        help="Exit with status 1 and a prompt message when no amount is found",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="resi", description="Parse transaction commands and receipt text")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser decisions (DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    command = sub.add_parser("command", help="Parse a typed command, e.g. 'qris 50000 Indomaret'")
    command.add_argument("text", nargs="+")
    _add_output_options(command)
    command.set_defaults(func=cmd_command)

    receipt = sub.add_parser("receipt", help="Parse OCR text of a receipt")
    receipt.add_argument("source", nargs="?", default="-", help="Text file, or '-' for stdin")
    _add_output_options(receipt)
    receipt.set_defaults(func=cmd_receipt)

    return parser


def _configure_logging(verbose: bool) -> None:
    from resi.config import LOG_LEVEL

    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
