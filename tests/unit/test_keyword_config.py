# -*- coding: utf-8 -*-

import pytest

from resi.parser.types import TransactionCategory
from resi.shared.keyword_config import load_keyword_tables, parse_keyword_tables


def test_load_keyword_tables_is_cached() -> None:
    assert load_keyword_tables() is load_keyword_tables()


def test_command_types_precedence() -> None:
    tables = load_keyword_tables()
    assert [category for category, _ in tables.command_types] == [
        TransactionCategory.WITHDRAWAL,
        TransactionCategory.TRANSFER,
        TransactionCategory.QRIS,
    ]


def test_receipt_types_precedence() -> None:
    tables = load_keyword_tables()
    assert [category for category, _ in tables.receipt_types] == [
        TransactionCategory.TRANSFER,
        TransactionCategory.QRIS,
        TransactionCategory.WITHDRAWAL,
    ]


def test_brands_in_detection_order() -> None:
    labels = [brand.label for brand in load_keyword_tables().brands]
    assert labels == ["Mandiri", "BCA", "BNI", "BRI", "OVO", "GoPay", "DANA"]


def test_keywords_are_lowercase_tuples() -> None:
    tables = parse_keyword_tables(
        {
            "command_types": [{"category": "QRIS", "keywords": ["Scan"]}],
            "receipt_types": [{"category": "transfer", "keywords": ["BI FAST"]}],
            "command_strip_words": ["Scan"],
            "brands": [{"label": "Jago", "keywords": ["Jago"]}],
        }
    )
    assert tables.command_types[0][1].keywords == ("scan",)
    assert tables.receipt_types[0][1].keywords == ("bi fast",)
    assert tables.command_strip_words == ("scan",)
    assert tables.brands[0].matches("bank jago")


def test_missing_section_raises() -> None:
    with pytest.raises(ValueError, match="command_strip_words"):
        parse_keyword_tables({"command_types": [], "receipt_types": [], "brands": []})


def test_unknown_category_raises() -> None:
    with pytest.raises(ValueError, match="Unknown transaction category"):
        parse_keyword_tables(
            {
                "command_types": [{"category": "refund", "keywords": ["refund"]}],
                "receipt_types": [{"category": "qris", "keywords": ["qris"]}],
                "command_strip_words": [],
                "brands": [],
            }
        )


def test_non_mapping_raises() -> None:
    with pytest.raises(ValueError):
        parse_keyword_tables(["not", "a", "mapping"])
