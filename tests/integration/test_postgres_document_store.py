import pytest

from visualizer.database.document_repository import PostgresDocumentStore
from visualizer.documents.exceptions import DocumentNotFoundError
from visualizer.documents.models import ConversationTurn, Document, SourceFragment


def _document() -> Document:
    return Document(
        display_name="Invoice",
        category="invoice",
        extracted_text="Widget $1,250.00",
        original_name="invoice.pdf",
        media_type="application/pdf",
        structured={"title": "Invoice", "items": [{"amount": 1250}]},
        source_fragments=[SourceFragment("invoice.pdf", "Widget $1,250.00", "application/pdf")],
    )


class TestPostgresDocumentStore:
    @pytest.mark.asyncio
    async def test_create_and_get(
        self, postgres_store: PostgresDocumentStore, created_ids: list[str]
    ) -> None:
        document = await postgres_store.create(_document())
        created_ids.append(document.id)

        loaded = await postgres_store.get(document.id)
        assert loaded.display_name == "Invoice"
        assert loaded.structured == {"title": "Invoice", "items": [{"amount": 1250}]}
        assert [f.origin_name for f in loaded.source_fragments] == ["invoice.pdf"]

    @pytest.mark.asyncio
    async def test_save_state_round_trip(
        self, postgres_store: PostgresDocumentStore, created_ids: list[str]
    ) -> None:
        document = await postgres_store.create(_document())
        created_ids.append(document.id)
        transcript = [ConversationTurn("user", "chart it"), ConversationTurn("assistant", "Done")]

        await postgres_store.save_state(document.id, "<div>chart</div>", transcript)

        loaded = await postgres_store.get(document.id)
        assert loaded.visualization == "<div>chart</div>"
        assert loaded.chat_history == transcript

    @pytest.mark.asyncio
    async def test_fragments_attach_and_detach(
        self, postgres_store: PostgresDocumentStore, created_ids: list[str]
    ) -> None:
        document = await postgres_store.create(_document())
        created_ids.append(document.id)

        fragment = await postgres_store.add_source_fragment(document.id, SourceFragment("extra.txt", "more"))
        assert len((await postgres_store.get(document.id)).source_fragments) == 2

        await postgres_store.remove_source_fragment(document.id, fragment.id)
        assert len((await postgres_store.get(document.id)).source_fragments) == 1

    @pytest.mark.asyncio
    async def test_delete_removes_document(
        self, postgres_store: PostgresDocumentStore
    ) -> None:
        document = await postgres_store.create(_document())
        await postgres_store.delete(document.id)
        with pytest.raises(DocumentNotFoundError):
            await postgres_store.get(document.id)
