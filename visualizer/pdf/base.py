from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for local PDF text extraction adapters.

    Used by the classifier when PDFs are converted locally instead of being
    sent to the model as binary documents.
    """

    PAGE_HEADER = "--- Page {number} ---"

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes, one header line per non-empty page.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """

    @classmethod
    def join_pages(cls, pages: list[str]) -> str:
        sections = [
            f"{cls.PAGE_HEADER.format(number=i)}\n{text.strip()}"
            for i, text in enumerate(pages, start=1)
            if text and text.strip()
        ]
        return "\n\n".join(sections)
