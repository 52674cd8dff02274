"""Turns uploaded files into stored documents and source fragments."""

from collections.abc import Sequence
from pathlib import PurePath

from visualizer.classification.base import BaseClassifier
from visualizer.classification.media_types import guess_media_type
from visualizer.classification.models import ClassificationResult
from visualizer.documents.models import Document, SourceFragment
from visualizer.documents.store_base import BaseDocumentStore
from visualizer.ingestion.exceptions import NoUploadsError
from visualizer.ingestion.models import Upload
from visualizer.logging.logger import Log


class IngestionService:
    def __init__(self, classifier: BaseClassifier, store: BaseDocumentStore) -> None:
        self._classifier = classifier
        self._store = store

    async def ingest(self, uploads: Sequence[Upload], display_name: str | None = None) -> Document:
        """Classify every upload and store them as one new document.

        Raises:
            NoUploadsError: if *uploads* is empty.
        """
        if not uploads:
            raise NoUploadsError("No files provided")

        results = [await self._classify(upload) for upload in uploads]
        single = len(uploads) == 1

        if single:
            text = results[0].text
        else:
            text = "\n\n".join(
                f"=== File {i}: {upload.file_name} ===\n{result.text}"
                for i, (upload, result) in enumerate(zip(uploads, results), start=1)
            )

        categories = {result.category for result in results}
        category = categories.pop() if len(categories) == 1 else "unknown"

        first = uploads[0]
        document = Document(
            display_name=display_name or self._default_name(uploads),
            category=category,
            extracted_text=text,
            original_name=first.file_name if single else f"{len(uploads)} files",
            media_type=self._media_type(first) if single else None,
            structured=results[0].structured if single else None,
            source_fragments=[
                self._fragment(upload, result) for upload, result in zip(uploads, results)
            ],
        )
        await self._store.create(document)
        Log.info(
            f"Ingested document {document.id}",
            category=category,
            files=len(uploads),
        )
        return document

    async def attach(self, document_id: str, uploads: Sequence[Upload]) -> list[SourceFragment]:
        """Classify uploads and append them to an existing document.

        The document's category is left as it is.

        Raises:
            NoUploadsError: if *uploads* is empty.
            DocumentNotFoundError: if the document does not exist.
        """
        if not uploads:
            raise NoUploadsError("No files provided")
        await self._store.get(document_id)

        added: list[SourceFragment] = []
        for upload in uploads:
            result = await self._classify(upload)
            fragment = await self._store.add_source_fragment(
                document_id, self._fragment(upload, result)
            )
            added.append(fragment)
        Log.info(f"Attached {len(added)} files to document {document_id}")
        return added

    async def detach(self, document_id: str, fragment_id: str) -> None:
        await self._store.remove_source_fragment(document_id, fragment_id)
        Log.info(f"Detached fragment {fragment_id} from document {document_id}")

    async def _classify(self, upload: Upload) -> ClassificationResult:
        return await self._classifier.classify(
            upload.data, self._media_type(upload), upload.file_name
        )

    def _fragment(self, upload: Upload, result: ClassificationResult) -> SourceFragment:
        return SourceFragment(
            origin_name=upload.file_name,
            extracted_text=result.text,
            media_type=self._media_type(upload),
        )

    @staticmethod
    def _media_type(upload: Upload) -> str:
        return upload.media_type or guess_media_type(upload.file_name)

    @staticmethod
    def _default_name(uploads: Sequence[Upload]) -> str:
        if len(uploads) == 1:
            return PurePath(uploads[0].file_name).stem or uploads[0].file_name
        return f"{len(uploads)} files"
