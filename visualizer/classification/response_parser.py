"""Lenient parsing of classification model output."""

from visualizer.classification.models import ClassificationResult
from visualizer.documents.models import CATEGORIES
from visualizer.llm.output_parsing import first_json_value
from visualizer.logging.logger import Log


def parse_classification(raw: str) -> ClassificationResult:
    """Build a ClassificationResult from raw model text.

    Never raises: unparseable output degrades to category ``unknown`` with the
    raw text and no structured payload.
    """
    parsed = first_json_value(raw, dict)
    if parsed is None:
        Log.warning("Classification response had no JSON object, using raw text")
        return ClassificationResult(category="unknown", text=raw)

    category = parsed.get("fileType")
    if category not in CATEGORIES:
        if category is not None:
            Log.warning(f"Unknown document category {category!r}, using 'unknown'")
        category = "unknown"

    text = parsed.get("extractedText")
    if not isinstance(text, str) or not text.strip():
        text = raw

    structured = parsed.get("structured")
    if not isinstance(structured, dict):
        structured = None

    return ClassificationResult(category=category, text=text, structured=structured)
