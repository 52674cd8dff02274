from dataclasses import dataclass, field
from enum import Enum

from visualizer.documents.models import ConversationTurn


class Mode(str, Enum):
    """How much context a turn sends to the model."""

    REFINING = "refining"
    NEEDS_CONTEXT = "needs_context"


class TurnOutcome(str, Enum):
    UPDATED = "updated"
    ANSWERED = "answered"
    FAILED = "failed"
    RESTORED = "restored"


@dataclass(frozen=True)
class TurnRequest:
    """One user message with the caller's view of the session state."""

    document_id: str
    instruction: str
    transcript: tuple[ConversationTurn, ...] = ()
    current_markup: str = ""
    related_document_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class TurnResult:
    """State after a turn.

    ``markup`` is the new visualization for UPDATED (and the saved one for
    RESTORED); it is None when the visualization did not change.
    """

    outcome: TurnOutcome
    message: str
    markup: str | None = None
    transcript: tuple[ConversationTurn, ...] = field(default_factory=tuple)
