"""AI-powered content classifier."""

import asyncio

from visualizer.classification.base import BaseClassifier
from visualizer.classification.converters import (
    legacy_spreadsheet_to_text,
    spreadsheet_to_text,
    word_document_to_text,
)
from visualizer.classification.exceptions import ConversionError
from visualizer.classification.media_types import (
    PDF,
    guess_media_type,
    is_binary_for_model,
    is_legacy_spreadsheet,
    is_spreadsheet,
    is_word_document,
)
from visualizer.classification.models import ClassificationResult
from visualizer.classification.response_parser import parse_classification
from visualizer.llm.language_model import LanguageModel
from visualizer.llm.models import BinaryPart, ContentPart, TextPart
from visualizer.logging.logger import Log
from visualizer.pdf.base import BasePdfExtractor
from visualizer.pdf.exceptions import PdfExtractionError


class ContentClassifier(BaseClassifier):
    """Routes uploads by media type and asks the model to classify and extract them."""

    def __init__(
        self,
        *,
        model: LanguageModel,
        instruction: str,
        max_tokens: int = 4096,
        pdf_extractor: BasePdfExtractor | None = None,
    ) -> None:
        self._model = model
        self._instruction = instruction
        self._max_tokens = max_tokens
        self._pdf_extractor = pdf_extractor

    async def classify(self, data: bytes, media_type: str, file_name: str) -> ClassificationResult:
        media_type = media_type or guess_media_type(file_name)
        parts = await self._build_parts(data, media_type, file_name)

        raw = await self._model.complete(parts, max_tokens=self._max_tokens)
        result = parse_classification(raw)

        Log.info(
            f"Classified {file_name} as {result.category}",
            media_type=media_type,
            structured=result.structured is not None,
        )
        return result

    async def _build_parts(self, data: bytes, media_type: str, file_name: str) -> list[ContentPart]:
        if is_binary_for_model(media_type) and not self._converts_locally(media_type):
            return [
                BinaryPart(data=data, media_type=media_type, file_name=file_name),
                TextPart(self._instruction),
            ]
        text = await asyncio.to_thread(self._to_text, data, media_type, file_name)
        return [TextPart(f"{self._instruction}\n\nDocument content:\n\n{text}")]

    def _converts_locally(self, media_type: str) -> bool:
        return media_type == PDF and self._pdf_extractor is not None

    def _to_text(self, data: bytes, media_type: str, file_name: str) -> str:
        if media_type == PDF and self._pdf_extractor is not None:
            try:
                return self._pdf_extractor.extract(data)
            except PdfExtractionError as exc:
                raise ConversionError(str(exc)) from exc
        if is_legacy_spreadsheet(media_type, file_name):
            return legacy_spreadsheet_to_text(data)
        if is_spreadsheet(media_type, file_name):
            return spreadsheet_to_text(data)
        if is_word_document(media_type, file_name):
            return word_document_to_text(data)
        return data.decode("utf-8", errors="replace")
