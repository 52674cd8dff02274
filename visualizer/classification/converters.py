"""Local office-format to text conversion."""

import csv
import io
from datetime import date, datetime, time
from typing import Any

import docx
import openpyxl
import pandas as pd

from visualizer.classification.exceptions import ConversionError


def spreadsheet_to_text(data: bytes) -> str:
    """Render every non-empty sheet as CSV under a ``=== Sheet: name ===`` header."""
    try:
        workbook = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except Exception as exc:
        raise ConversionError(f"Failed to open spreadsheet: {exc}") from exc

    sections: list[str] = []
    try:
        for sheet in workbook.worksheets:
            sheet_csv = _sheet_to_csv(sheet.iter_rows(values_only=True))
            if sheet_csv.strip():
                sections.append(f"=== Sheet: {sheet.title} ===\n{sheet_csv}")
    finally:
        workbook.close()
    return "\n\n".join(sections)


def legacy_spreadsheet_to_text(data: bytes) -> str:
    """Same rendering as :func:`spreadsheet_to_text` for BIFF ``.xls`` workbooks."""
    try:
        sheets = pd.read_excel(io.BytesIO(data), sheet_name=None, header=None, dtype=object, engine="xlrd")
    except Exception as exc:
        raise ConversionError(f"Failed to open legacy spreadsheet: {exc}") from exc

    sections: list[str] = []
    for title, frame in sheets.items():
        cells = frame.astype(object).where(frame.notna(), None)
        sheet_csv = _sheet_to_csv(cells.itertuples(index=False, name=None))
        if sheet_csv.strip():
            sections.append(f"=== Sheet: {title} ===\n{sheet_csv}")
    return "\n\n".join(sections)


def _sheet_to_csv(rows: Any) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in rows:
        cells = [_cell_text(value) for value in row]
        if any(cells):
            writer.writerow(cells)
    return buffer.getvalue().rstrip("\n")


def _cell_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def word_document_to_text(data: bytes) -> str:
    """Raw paragraph text followed by table rows (cells separated by tabs)."""
    try:
        document = docx.Document(io.BytesIO(data))
    except Exception as exc:
        raise ConversionError(f"Failed to open word document: {exc}") from exc

    lines = [p.text for p in document.paragraphs if p.text.strip()]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells]
            if any(cells):
                lines.append("\t".join(cells))
    return "\n".join(lines)
