from dataclasses import dataclass
from typing import Any

from visualizer.documents.models import Category


@dataclass(frozen=True)
class ClassificationResult:
    """Output of the content classifier."""

    category: Category
    text: str
    structured: dict[str, Any] | None = None
