from visualizer.config.settings import Settings
from visualizer.database.document_repository import PostgresDocumentStore
from visualizer.documents.memory_store import InMemoryDocumentStore
from visualizer.documents.store_base import BaseDocumentStore


class DocumentStoreFactory:
    """Creates the configured document store backend."""

    BACKENDS: dict[str, type[BaseDocumentStore]] = {
        "memory": InMemoryDocumentStore,
        "postgres": PostgresDocumentStore,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseDocumentStore:
        backend = settings.store_backend.lower()
        store_cls = cls.BACKENDS.get(backend)
        if store_cls is None:
            raise ValueError(
                f"Unknown store backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
            )
        return store_cls()
