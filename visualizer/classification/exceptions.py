class ClassificationError(Exception):
    """Raised when an upload cannot be classified."""


class ConversionError(ClassificationError):
    """Raised when an office document cannot be converted to text locally."""
