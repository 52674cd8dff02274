import copy
from collections.abc import Sequence

from visualizer.documents.exceptions import DocumentNotFoundError, SourceFragmentNotFoundError
from visualizer.documents.models import ConversationTurn, Document, SourceFragment
from visualizer.documents.store_base import BaseDocumentStore


class InMemoryDocumentStore(BaseDocumentStore):
    """Process-local store for development and tests.

    Records are copied on the way in and out, so callers never share state
    with the store.
    """

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}

    async def create(self, document: Document) -> Document:
        self._documents[document.id] = copy.deepcopy(document)
        return copy.deepcopy(document)

    async def get(self, document_id: str) -> Document:
        return copy.deepcopy(self._require(document_id))

    async def save_state(
        self,
        document_id: str,
        visualization: str | None,
        chat_history: Sequence[ConversationTurn],
    ) -> None:
        document = self._require(document_id)
        document.visualization = visualization
        document.chat_history = list(chat_history)

    async def add_source_fragment(self, document_id: str, fragment: SourceFragment) -> SourceFragment:
        self._require(document_id).source_fragments.append(copy.deepcopy(fragment))
        return fragment

    async def remove_source_fragment(self, document_id: str, fragment_id: str) -> None:
        document = self._require(document_id)
        remaining = [f for f in document.source_fragments if f.id != fragment_id]
        if len(remaining) == len(document.source_fragments):
            raise SourceFragmentNotFoundError(
                f"Source fragment {fragment_id} not found on document {document_id}"
            )
        document.source_fragments = remaining

    async def list_documents(self) -> list[Document]:
        ordered = sorted(self._documents.values(), key=lambda d: d.created_at, reverse=True)
        return [copy.deepcopy(d) for d in ordered]

    async def rename(self, document_id: str, display_name: str) -> None:
        self._require(document_id).display_name = display_name

    async def delete(self, document_id: str) -> None:
        self._require(document_id)
        del self._documents[document_id]

    def _require(self, document_id: str) -> Document:
        document = self._documents.get(document_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return document
