SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS documents (
    id TEXT PRIMARY KEY,
    display_name TEXT NOT NULL,
    original_name TEXT NOT NULL DEFAULT '',
    category TEXT NOT NULL,
    extracted_text TEXT NOT NULL DEFAULT '',
    media_type TEXT,
    structured JSONB,
    visualization TEXT,
    chat_history JSONB NOT NULL DEFAULT '[]'::jsonb,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE TABLE IF NOT EXISTS source_fragments (
    id TEXT PRIMARY KEY,
    document_id TEXT NOT NULL REFERENCES documents (id) ON DELETE CASCADE,
    origin_name TEXT NOT NULL,
    extracted_text TEXT NOT NULL DEFAULT '',
    media_type TEXT,
    attached_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS source_fragments_document_id_idx
    ON source_fragments (document_id, attached_at);
"""
