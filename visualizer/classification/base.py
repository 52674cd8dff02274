from abc import ABC, abstractmethod

from visualizer.classification.models import ClassificationResult


class BaseClassifier(ABC):
    """Contract for content classifiers."""

    @abstractmethod
    async def classify(self, data: bytes, media_type: str, file_name: str) -> ClassificationResult:
        """Classify an upload and extract its content.

        Args:
            data: Raw uploaded bytes.
            media_type: Declared media type; guessed from *file_name* when empty.
            file_name: Original file name.

        Returns:
            ClassificationResult with category, text and optional structured payload.

        Raises:
            GenerationError: when the model call itself fails.
            ConversionError: when a local office conversion fails.
        """
