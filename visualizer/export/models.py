from dataclasses import dataclass

STRUCTURAL_DESCRIPTION = "Extracted directly from HTML structure"


@dataclass(frozen=True)
class CandidateTable:
    """An exportable table found in visualization markup.

    ``csv`` is set only for tables found by the structural pass; tables the
    model proposed are extracted on demand.
    """

    id: str
    label: str
    description: str
    row_count: int
    csv: str | None = None


@dataclass(frozen=True)
class StructuredTable:
    """Rows pulled out of the markup by a table extractor, header row first."""

    id: str
    label: str
    rows: tuple[tuple[str, ...], ...]

    @property
    def data_row_count(self) -> int:
        return max(len(self.rows) - 1, 0)
