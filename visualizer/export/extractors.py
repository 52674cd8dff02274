"""Structural table heuristics over a parsed markup tree."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from bs4 import BeautifulSoup, Tag

from visualizer.export.csv_format import clean_cell_text
from visualizer.export.models import StructuredTable


class TableExtractor(ABC):
    """Finds tabular content in a parsed document without calling a model."""

    @abstractmethod
    def extract(self, soup: BeautifulSoup) -> list[StructuredTable]:
        """Return every table this heuristic recognizes, header row first."""


class HtmlTableExtractor(TableExtractor):
    """Reads literal ``<table>`` elements."""

    MIN_ROWS = 2

    def extract(self, soup: BeautifulSoup) -> list[StructuredTable]:
        tables: list[StructuredTable] = []
        for index, table in enumerate(soup.find_all("table"), start=1):
            rows = self._rows(table)
            if len(rows) < self.MIN_ROWS:
                continue
            rows = self._fit_to_header(rows)
            tables.append(StructuredTable(id=f"table_{index}", label=f"Table {index}", rows=rows))
        return tables

    @classmethod
    def _rows(cls, table: Tag) -> tuple[tuple[str, ...], ...]:
        rows = []
        for tr in table.find_all("tr"):
            cells = tr.find_all(["th", "td"], recursive=False)
            if not cells:
                continue
            row: list[str] = []
            for cell in cells:
                row.append(clean_cell_text(cell.get_text()))
                row.extend([""] * (cls._span(cell) - 1))
            rows.append(tuple(row))
        return tuple(rows)

    @staticmethod
    def _span(cell: Tag) -> int:
        try:
            return max(int(cell.get("colspan", 1)), 1)
        except (TypeError, ValueError):
            return 1

    @staticmethod
    def _fit_to_header(rows: tuple[tuple[str, ...], ...]) -> tuple[tuple[str, ...], ...]:
        """Pad or trim every row to the header width."""
        width = len(rows[0])
        return tuple(row[:width] + ("",) * (width - len(row)) for row in rows)


class ItemListExtractor(TableExtractor):
    """Reads repeated card-like elements (``class="item"``) as one table.

    A column is kept for each known sub-field class that at least one item
    carries, in ``field_classes`` order. Items whose own class list contains
    ``flag_class`` get a Yes/empty column.
    """

    DEFAULT_FIELD_CLASSES: Sequence[str] = (
        "item-name",
        "item-code",
        "quantity",
        "category",
        "original-price",
        "discount",
        "final-price",
    )

    def __init__(
        self,
        *,
        item_class: str = "item",
        field_classes: Sequence[str] | None = None,
        flag_class: str = "special-order",
        flag_label: str = "Special Order",
        table_id: str = "line_items",
        label: str = "Line Items",
    ) -> None:
        self._item_class = item_class
        self._field_classes = tuple(field_classes or self.DEFAULT_FIELD_CLASSES)
        self._flag_class = flag_class
        self._flag_label = flag_label
        self._table_id = table_id
        self._label = label

    def extract(self, soup: BeautifulSoup) -> list[StructuredTable]:
        items = soup.find_all(class_=self._item_class)
        if not items:
            return []

        present = [
            cls for cls in self._field_classes
            if any(item.find(class_=cls) is not None for item in items)
        ]
        flagged = [self._is_flagged(item) for item in items]
        has_flag = any(flagged)

        header = [self._title(cls) for cls in present]
        if has_flag:
            header.append(self._flag_label)
        if len(header) < 2:
            return []

        rows = [tuple(header)]
        for item, is_flagged in zip(items, flagged):
            row = [self._field_text(item, cls) for cls in present]
            if has_flag:
                row.append("Yes" if is_flagged else "")
            rows.append(tuple(row))
        return [StructuredTable(id=self._table_id, label=self._label, rows=tuple(rows))]

    def _is_flagged(self, item: Tag) -> bool:
        return self._flag_class in (item.get("class") or [])

    @staticmethod
    def _field_text(item: Tag, cls: str) -> str:
        element = item.find(class_=cls)
        if element is None:
            return ""
        return clean_cell_text(element.get_text())

    @staticmethod
    def _title(cls: str) -> str:
        return " ".join(word.capitalize() for word in cls.split("-"))
