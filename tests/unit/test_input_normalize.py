# -*- coding: utf-8 -*-

from resi.parser.normalize_input import normalize_parser_input


def test_normalize_unifies_line_endings() -> None:
    assert normalize_parser_input("QRIS\r\nRp 10.000\rOK") == "QRIS\nRp 10.000\nOK"


def test_normalize_collapses_spaces_and_tabs() -> None:
    assert normalize_parser_input("Total\t\tRp   25.000") == "Total Rp 25.000"


def test_normalize_non_breaking_space() -> None:
    assert normalize_parser_input("Rp\u00a025.000") == "Rp 25.000"


def test_normalize_keeps_lines() -> None:
    assert normalize_parser_input("  Penerima  \n  KOPI  \n") == "Penerima\n KOPI"


def test_normalize_none() -> None:
    assert normalize_parser_input(None) == ""
