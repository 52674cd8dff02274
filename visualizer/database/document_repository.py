from collections.abc import Sequence
from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from visualizer.database.connection import get_connection
from visualizer.database.schema import SCHEMA_SQL
from visualizer.documents.exceptions import DocumentNotFoundError, SourceFragmentNotFoundError
from visualizer.documents.models import ConversationTurn, Document, SourceFragment
from visualizer.documents.store_base import BaseDocumentStore

_DOCUMENT_COLUMNS = """
    id, display_name, original_name, category, extracted_text, media_type,
    structured, visualization, chat_history, created_at
"""

_FRAGMENT_COLUMNS = "id, origin_name, extracted_text, media_type, attached_at"


class PostgresDocumentStore(BaseDocumentStore):
    """Database operations for the documents and source_fragments tables."""

    async def ensure_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        async with get_connection() as conn:
            await conn.execute(SCHEMA_SQL)
            await conn.commit()

    async def create(self, document: Document) -> Document:
        async with get_connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    """
                    INSERT INTO documents
                    (id, display_name, original_name, category, extracted_text,
                     media_type, structured, visualization, chat_history, created_at)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                    """,
                    (
                        document.id,
                        document.display_name,
                        document.original_name,
                        document.category,
                        document.extracted_text,
                        document.media_type,
                        Jsonb(document.structured) if document.structured is not None else None,
                        document.visualization,
                        Jsonb([turn.to_dict() for turn in document.chat_history]),
                        document.created_at,
                    ),
                )
                for fragment in document.source_fragments:
                    await self._insert_fragment(cur, document.id, fragment)
            await conn.commit()
        return document

    async def get(self, document_id: str) -> Document:
        async with get_connection() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(
                    f"SELECT {_DOCUMENT_COLUMNS} FROM documents WHERE id = %s",
                    (document_id,),
                )
                row = await cur.fetchone()
                if row is None:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
                await cur.execute(
                    f"""
                    SELECT {_FRAGMENT_COLUMNS}
                    FROM source_fragments
                    WHERE document_id = %s
                    ORDER BY attached_at, id
                    """,
                    (document_id,),
                )
                fragment_rows = await cur.fetchall()

        return self._to_document(row, fragment_rows)

    async def save_state(
        self,
        document_id: str,
        visualization: str | None,
        chat_history: Sequence[ConversationTurn],
    ) -> None:
        async with get_connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    """
                    UPDATE documents
                    SET visualization = %s,
                        chat_history = %s
                    WHERE id = %s
                    """,
                    (
                        visualization,
                        Jsonb([turn.to_dict() for turn in chat_history]),
                        document_id,
                    ),
                )
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            await conn.commit()

    async def add_source_fragment(self, document_id: str, fragment: SourceFragment) -> SourceFragment:
        async with get_connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute("SELECT 1 FROM documents WHERE id = %s", (document_id,))
                if await cur.fetchone() is None:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
                await self._insert_fragment(cur, document_id, fragment)
            await conn.commit()
        return fragment

    async def remove_source_fragment(self, document_id: str, fragment_id: str) -> None:
        async with get_connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute(
                    "DELETE FROM source_fragments WHERE id = %s AND document_id = %s",
                    (fragment_id, document_id),
                )
                if cur.rowcount == 0:
                    raise SourceFragmentNotFoundError(
                        f"Source fragment {fragment_id} not found on document {document_id}"
                    )
            await conn.commit()

    async def list_documents(self) -> list[Document]:
        async with get_connection() as conn:
            async with conn.cursor(row_factory=dict_row) as cur:
                await cur.execute(
                    f"SELECT {_DOCUMENT_COLUMNS} FROM documents ORDER BY created_at DESC"
                )
                rows = await cur.fetchall()
        return [self._to_document(row, []) for row in rows]

    async def rename(self, document_id: str, display_name: str) -> None:
        await self._execute_for_document(
            "UPDATE documents SET display_name = %s WHERE id = %s",
            (display_name, document_id),
            document_id,
        )

    async def delete(self, document_id: str) -> None:
        await self._execute_for_document(
            "DELETE FROM documents WHERE id = %s",
            (document_id,),
            document_id,
        )

    async def _execute_for_document(
        self, query: str, params: tuple[Any, ...], document_id: str
    ) -> None:
        async with get_connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute(query, params)
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            await conn.commit()

    @staticmethod
    async def _insert_fragment(cur: Any, document_id: str, fragment: SourceFragment) -> None:
        await cur.execute(
            """
            INSERT INTO source_fragments
            (id, document_id, origin_name, extracted_text, media_type, attached_at)
            VALUES (%s, %s, %s, %s, %s, %s)
            """,
            (
                fragment.id,
                document_id,
                fragment.origin_name,
                fragment.extracted_text,
                fragment.media_type,
                fragment.attached_at,
            ),
        )

    @staticmethod
    def _to_document(row: dict[str, Any], fragment_rows: list[dict[str, Any]]) -> Document:
        return Document(
            id=row["id"],
            display_name=row["display_name"],
            original_name=row["original_name"],
            category=row["category"],
            extracted_text=row["extracted_text"],
            media_type=row["media_type"],
            structured=row["structured"],
            visualization=row["visualization"],
            chat_history=[ConversationTurn.from_dict(t) for t in row["chat_history"] or []],
            created_at=row["created_at"],
            source_fragments=[
                SourceFragment(
                    id=f["id"],
                    origin_name=f["origin_name"],
                    extracted_text=f["extracted_text"],
                    media_type=f["media_type"],
                    attached_at=f["attached_at"],
                )
                for f in fragment_rows
            ],
        )
