import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Literal

Category = Literal["schedule", "invoice", "healthcare", "unknown"]
CATEGORIES: frozenset[str] = frozenset({"schedule", "invoice", "healthcare", "unknown"})

Role = Literal["user", "assistant"]


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ConversationTurn:
    """One transcript entry."""

    role: Role
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.text}

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ConversationTurn":
        role = raw.get("role")
        if role not in ("user", "assistant"):
            raise ValueError(f"Invalid conversation role: {role!r}")
        return cls(role=role, text=str(raw.get("content", raw.get("text", ""))))


@dataclass
class SourceFragment:
    """Extracted text of one file attached to a document."""

    origin_name: str
    extracted_text: str
    media_type: str | None = None
    id: str = field(default_factory=new_id)
    attached_at: datetime = field(default_factory=utcnow)


@dataclass
class Document:
    """Persisted document record.

    ``category`` is fixed at creation. Only the orchestrator writes
    ``visualization`` and ``chat_history``.
    """

    display_name: str
    category: Category
    extracted_text: str
    original_name: str = ""
    media_type: str | None = None
    structured: dict[str, Any] | None = None
    source_fragments: list[SourceFragment] = field(default_factory=list)
    visualization: str | None = None
    chat_history: list[ConversationTurn] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
