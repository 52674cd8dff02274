class IngestionError(Exception):
    """Base exception for upload handling."""


class NoUploadsError(IngestionError):
    """Raised when an ingest or attach request carries no files."""


class FileReadError(IngestionError):
    """Raised when an upload cannot be read from disk."""
