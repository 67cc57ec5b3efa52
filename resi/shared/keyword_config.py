# -*- coding: utf-8 -*-
"""Keyword table loader.

Type keywords, description strip words and bank/e-wallet brands are kept in
YAML (resi/data/keywords.yaml) so new receipt vocabularies can be added
without touching the parsers. Tables are loaded once and returned as tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from resi.parser.types import TransactionCategory


@dataclass(frozen=True)
class KeywordGroup:
    """A label and the lowercase keywords that signal it."""

    label: str
    keywords: tuple[str, ...]

    def matches(self, lowered_text: str) -> bool:
        return any(keyword in lowered_text for keyword in self.keywords)


@dataclass(frozen=True)
class KeywordTables:
    command_types: tuple[tuple[TransactionCategory, KeywordGroup], ...]
    receipt_types: tuple[tuple[TransactionCategory, KeywordGroup], ...]
    command_strip_words: tuple[str, ...]
    brands: tuple[KeywordGroup, ...]


def _config_path() -> Path:
    # resi/shared/keyword_config.py -> resi/data/keywords.yaml
    return Path(__file__).resolve().parents[1] / "data" / "keywords.yaml"


def _keywords(item: dict[str, Any], section: str) -> tuple[str, ...]:
    keywords = item.get("keywords") or []
    if not isinstance(keywords, list) or not keywords:
        raise ValueError(f"keywords.yaml: every entry in '{section}' needs a non-empty keywords list")
    return tuple(str(k).lower() for k in keywords)


def _category_groups(data: dict, section: str) -> tuple[tuple[TransactionCategory, KeywordGroup], ...]:
    items = data.get(section)
    if not isinstance(items, list) or not items:
        raise ValueError(f"keywords.yaml: missing section '{section}'")
    groups = []
    for item in items:
        category = TransactionCategory.from_string(str(item.get("category", "")))
        groups.append((category, KeywordGroup(label=category.label, keywords=_keywords(item, section))))
    return tuple(groups)


def parse_keyword_tables(data: Any) -> KeywordTables:
    """Validate a raw YAML mapping and build the read-only tables."""
    if not isinstance(data, dict):
        raise ValueError("keywords.yaml must be a mapping")

    strip_words = data.get("command_strip_words")
    if not isinstance(strip_words, list):
        raise ValueError("keywords.yaml: missing section 'command_strip_words'")

    brands = data.get("brands")
    if not isinstance(brands, list):
        raise ValueError("keywords.yaml: missing section 'brands'")

    return KeywordTables(
        command_types=_category_groups(data, "command_types"),
        receipt_types=_category_groups(data, "receipt_types"),
        command_strip_words=tuple(str(w).lower() for w in strip_words),
        brands=tuple(
            KeywordGroup(label=str(item["label"]), keywords=_keywords(item, "brands"))
            for item in brands
        ),
    )


@lru_cache(maxsize=1)
def load_keyword_tables() -> KeywordTables:
    path = _config_path()
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return parse_keyword_tables(data)
