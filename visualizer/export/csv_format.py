"""CSV rendering shared by the structural extractors."""

import csv
import io
import re
from collections.abc import Iterable, Sequence

# Optional "$", digits grouped by thousands separators, optional cents.
_GROUPED_AMOUNT = re.compile(r"(?P<cur>\$)?(?P<int>\d{1,3}(?:,\d{3})+)(?P<dec>\.\d{2})?(?!\d)")


def _drop_separators(match: re.Match[str]) -> str:
    if not match.group("cur") and not match.group("dec"):
        return match.group(0)
    return f"{match.group('cur') or ''}{match.group('int').replace(',', '')}{match.group('dec') or ''}"


def normalize_currency(text: str) -> str:
    """Remove thousands separators from currency amounts.

    ``$1,250.00`` becomes ``$1250.00`` and ``-$1,000.00`` becomes
    ``-$1000.00``. Grouped numbers without a ``$`` or cents are left alone.
    """
    return _GROUPED_AMOUNT.sub(_drop_separators, text)


def clean_cell_text(text: str) -> str:
    """Collapse whitespace and normalize currency in one cell."""
    return normalize_currency(" ".join(text.split()))


def rows_to_csv(rows: Iterable[Sequence[str]]) -> str:
    """Render rows as CSV, quoting fields that contain commas or quotes."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n")
