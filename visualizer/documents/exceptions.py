class StoreError(Exception):
    """Base exception for document store errors."""


class DocumentNotFoundError(StoreError):
    """Raised when a document cannot be found in the store."""


class SourceFragmentNotFoundError(StoreError):
    """Raised when a source fragment cannot be found on its document."""
