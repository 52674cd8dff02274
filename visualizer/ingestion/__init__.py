from visualizer.ingestion.file_loader import FileLoader
from visualizer.ingestion.models import Upload
from visualizer.ingestion.service import IngestionService

__all__ = ["FileLoader", "IngestionService", "Upload"]
