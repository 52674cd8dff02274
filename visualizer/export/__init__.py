from visualizer.export.engine import TableExtractionEngine
from visualizer.export.extractors import HtmlTableExtractor, ItemListExtractor, TableExtractor
from visualizer.export.models import CandidateTable

__all__ = [
    "CandidateTable",
    "HtmlTableExtractor",
    "ItemListExtractor",
    "TableExtractionEngine",
    "TableExtractor",
]
