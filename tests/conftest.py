from __future__ import annotations

from pathlib import Path

import pytest


def _top_level_tests_group(path: Path) -> str | None:
    parts = path.parts
    try:
        tests_index = parts.index("tests")
    except ValueError:
        return None
    if tests_index + 1 >= len(parts):
        return None
    return parts[tests_index + 1]


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        group = _top_level_tests_group(Path(str(item.fspath)))
        if group == "unit":
            item.add_marker(pytest.mark.unit)
        elif group == "parser":
            item.add_marker(pytest.mark.parser)
        elif group == "integration":
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def bca_transfer_receipt() -> str:
    """OCR text of a BCA m-Transfer receipt."""
    return (
        "m-Transfer\n"
        "BERHASIL\n"
        "Ke Rekening Tujuan\n"
        "BCA\n"
        "0123456789\n"
        "BUDI SANTOSO\n"
        "Nominal Transfer Rp 150.000,00\n"
        "Biaya Rp 2.500,00\n"
        "Total Rp 152.500,00\n"
    )


@pytest.fixture
def mandiri_qris_receipt() -> str:
    """OCR text of a Livin' by Mandiri QRIS payment."""
    return (
        "Livin' by Mandiri\n"
        "Pembayaran Berhasil\n"
        "QRIS\n"
        "Penerima\n"
        "KOPI KENANGAN\n"
        "Total Transaksi Rp 32.000\n"
        "Tanggal 12 Okt 2026\n"
    )
