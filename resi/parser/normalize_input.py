# -*- coding: utf-8 -*-
"""Input normalization shared by both parsers.

Goal:
- Make OCR output and chat text look the same to the regexes.
- Be conservative: receipt heuristics are line-aware, so line breaks are kept.
"""

from __future__ import annotations

import re


def normalize_parser_input(text: str | None) -> str:
    s = text or ""

    # 1) Unify line endings: OCR engines and chat clients disagree
    s = s.replace("\r\n", "\n").replace("\r", "\n")

    # 2) Tabs and non-breaking spaces behave like plain spaces
    s = s.replace("\t", " ").replace("\u00a0", " ").replace("\u202f", " ")

    # 3) Collapse excessive spaces, keep newlines
    s = re.sub(r" {2,}", " ", s)
    s = "\n".join(line.rstrip() for line in s.split("\n"))

    return s.strip()
