from visualizer.config.settings import Settings
from visualizer.pdf.base import BasePdfExtractor
from visualizer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from visualizer.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the local PDF extractor, or None when PDFs go to the model natively."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor | None:
        mode = settings.classifier_pdf_mode.lower()
        if mode == "native":
            return None
        if mode != "local":
            raise ValueError(
                f"Unknown classifier PDF mode '{mode}'. Choose from: ['local', 'native']"
            )
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
