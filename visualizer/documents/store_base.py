from abc import ABC, abstractmethod
from collections.abc import Sequence

from visualizer.documents.models import ConversationTurn, Document, SourceFragment


class BaseDocumentStore(ABC):
    """Contract for document persistence backends.

    Writes are last-write-wins; no backend arbitrates concurrent sessions.
    """

    @abstractmethod
    async def create(self, document: Document) -> Document:
        """Persist a newly classified document, including its source fragments."""

    @abstractmethod
    async def get(self, document_id: str) -> Document:
        """Load a document.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """

    @abstractmethod
    async def save_state(
        self,
        document_id: str,
        visualization: str | None,
        chat_history: Sequence[ConversationTurn],
    ) -> None:
        """Replace the visualization markup and the whole transcript.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """

    @abstractmethod
    async def add_source_fragment(self, document_id: str, fragment: SourceFragment) -> SourceFragment:
        """Append a fragment to a document.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """

    @abstractmethod
    async def remove_source_fragment(self, document_id: str, fragment_id: str) -> None:
        """Detach a fragment from a document.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
            SourceFragmentNotFoundError: if the fragment is not attached to it.
        """

    @abstractmethod
    async def list_documents(self) -> list[Document]:
        """Return all documents, newest first."""

    @abstractmethod
    async def rename(self, document_id: str, display_name: str) -> None:
        """Change a document's display name."""

    @abstractmethod
    async def delete(self, document_id: str) -> None:
        """Delete a document and its fragments."""
