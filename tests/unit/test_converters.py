from datetime import datetime
from unittest.mock import patch

import pandas as pd
import pytest

from visualizer.classification.converters import (
    legacy_spreadsheet_to_text,
    spreadsheet_to_text,
    word_document_to_text,
)
from visualizer.classification.exceptions import ConversionError


class TestSpreadsheetToText:
    def test_renders_each_sheet_as_csv(self, sample_xlsx_bytes: bytes) -> None:
        result = spreadsheet_to_text(sample_xlsx_bytes)
        assert result == (
            "=== Sheet: Orders ===\n"
            "Item,Qty,Price\n"
            "Widget,2,12.5\n"
            '"Bolt, steel",10,0.25\n'
            "\n"
            "=== Sheet: Notes ===\n"
            "Delivered on Monday"
        )

    def test_skips_empty_sheets(self, sample_xlsx_bytes: bytes) -> None:
        assert "Empty" not in spreadsheet_to_text(sample_xlsx_bytes)

    def test_invalid_bytes_raise(self) -> None:
        with pytest.raises(ConversionError, match="spreadsheet"):
            spreadsheet_to_text(b"not a workbook")


class TestLegacySpreadsheetToText:
    @pytest.fixture
    def legacy_sheets(self) -> dict[str, pd.DataFrame]:
        orders = pd.DataFrame(
            [
                ["Item", "Qty", "Price"],
                ["Widget", 2.0, 12.5],
                [None, None, None],
                ["Bolt, steel", 10, 0.25],
            ],
            dtype=object,
        )
        notes = pd.DataFrame([["Delivered on", datetime(2024, 3, 4)]], dtype=object)
        return {"Orders": orders, "Empty": pd.DataFrame(), "Notes": notes}

    def test_renders_each_sheet_as_csv(self, legacy_sheets: dict[str, pd.DataFrame]) -> None:
        with patch("visualizer.classification.converters.pd.read_excel", return_value=legacy_sheets) as read_excel:
            result = legacy_spreadsheet_to_text(b"\xd0\xcf\x11\xe0legacy")
        assert result == (
            "=== Sheet: Orders ===\n"
            "Item,Qty,Price\n"
            "Widget,2,12.5\n"
            '"Bolt, steel",10,0.25\n'
            "\n"
            "=== Sheet: Notes ===\n"
            "Delivered on,2024-03-04T00:00:00"
        )
        kwargs = read_excel.call_args.kwargs
        assert kwargs["engine"] == "xlrd"
        assert kwargs["sheet_name"] is None
        assert kwargs["header"] is None

    def test_invalid_bytes_raise(self) -> None:
        with pytest.raises(ConversionError, match="legacy spreadsheet"):
            legacy_spreadsheet_to_text(b"not a workbook")


class TestWordDocumentToText:
    def test_paragraphs_then_tables(self, sample_docx_bytes: bytes) -> None:
        result = word_document_to_text(sample_docx_bytes)
        assert result.splitlines() == [
            "Weekly schedule",
            "Monday: standup",
            "Day\tTime",
            "Tuesday\t10:00",
        ]

    def test_invalid_bytes_raise(self) -> None:
        with pytest.raises(ConversionError, match="word document"):
            word_document_to_text(b"not a docx")
