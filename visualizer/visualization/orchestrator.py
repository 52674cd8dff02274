"""Conversation turns over a document visualization.

Each turn makes exactly one model call. The mode decides what is sent:

- refining: current markup + instruction under the short refinement prompt;
- needs context: the assembled document context (cacheable) + instruction
  under the full visualization prompt.

The reply is parsed into an Answer or an Update and the session state is
written back to the store.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

from visualizer.documents.exceptions import DocumentNotFoundError
from visualizer.documents.models import ConversationTurn, Document
from visualizer.documents.store_base import BaseDocumentStore
from visualizer.llm.exceptions import GenerationError
from visualizer.llm.language_model import LanguageModel
from visualizer.llm.models import ContentPart, TextPart
from visualizer.llm.prompt_loader import PromptSet
from visualizer.logging.logger import Log
from visualizer.visualization.context import ContextAssembler
from visualizer.visualization.intent import IntentClassifier, PatternIntentClassifier
from visualizer.visualization.models import Mode, TurnOutcome, TurnRequest, TurnResult
from visualizer.visualization.response_parser import Update, parse_response

INITIAL_INSTRUCTION = (
    "Create an initial visualization for this document. "
    "Make it clear, informative, and visually appealing."
)


@dataclass(frozen=True)
class _Notices:
    """Assistant messages used when the model reply cannot be used as-is."""

    default: str
    failure: str
    cancelled: str


FOLLOW_UP_NOTICES = _Notices(
    default="Updated the visualization.",
    failure="Sorry, I had trouble updating the visualization. Please try again.",
    cancelled="Cancelled. What would you like to do instead?",
)

INITIAL_NOTICES = _Notices(
    default="Created an initial visualization. How would you like me to modify it?",
    failure=(
        "I had trouble generating the initial visualization. "
        "Please describe how you'd like to see your data displayed."
    ),
    cancelled="Generation cancelled. Describe how you'd like to visualize your data.",
)


class VisualizationOrchestrator:
    """Runs conversation turns and persists markup and transcript together."""

    def __init__(
        self,
        *,
        model: LanguageModel,
        store: BaseDocumentStore,
        prompts: PromptSet,
        max_tokens: int = 16384,
        assembler: ContextAssembler | None = None,
        intent_classifier: IntentClassifier | None = None,
    ) -> None:
        self._model = model
        self._store = store
        self._prompts = prompts
        self._max_tokens = max_tokens
        self._assembler = assembler or ContextAssembler()
        self._intent = intent_classifier or PatternIntentClassifier()

    def select_mode(
        self,
        instruction: str,
        transcript: Sequence[ConversationTurn],
        current_markup: str,
    ) -> Mode:
        if (
            current_markup.strip()
            and transcript
            and not self._intent.needs_original_data(instruction)
        ):
            return Mode.REFINING
        return Mode.NEEDS_CONTEXT

    async def send_message(self, request: TurnRequest) -> TurnResult:
        """Apply one user instruction.

        Raises:
            ValueError: if the instruction is empty.
            DocumentNotFoundError: if the document does not exist.
            asyncio.CancelledError: re-raised after the cancellation notice is saved.
        """
        if not request.instruction.strip():
            raise ValueError("Instruction must not be empty")

        mode = self.select_mode(request.instruction, request.transcript, request.current_markup)
        transcript = (*request.transcript, ConversationTurn("user", request.instruction))
        return await self._run_turn(request, mode, transcript, FOLLOW_UP_NOTICES)

    async def start(self, document_id: str) -> TurnResult:
        """Restore the saved visualization, or generate the first one."""
        document = await self._store.get(document_id)
        if document.visualization:
            return TurnResult(
                outcome=TurnOutcome.RESTORED,
                message="",
                markup=document.visualization,
                transcript=tuple(document.chat_history),
            )
        request = TurnRequest(document_id=document_id, instruction=INITIAL_INSTRUCTION)
        return await self._run_turn(request, Mode.NEEDS_CONTEXT, (), INITIAL_NOTICES, document)

    async def _run_turn(
        self,
        request: TurnRequest,
        mode: Mode,
        transcript: tuple[ConversationTurn, ...],
        notices: _Notices,
        document: Document | None = None,
    ) -> TurnResult:
        Log.info(f"Turn started for document {request.document_id}", mode=mode.value)

        try:
            if mode is Mode.REFINING:
                raw = await self._refine(request)
            else:
                raw = await self._generate_with_context(request, document)
        except asyncio.CancelledError:
            Log.info(f"Turn cancelled for document {request.document_id}")
            cancelled = (*transcript, ConversationTurn("assistant", notices.cancelled))
            await asyncio.shield(self._save_transcript_only(request.document_id, cancelled))
            raise
        except GenerationError as exc:
            Log.error(f"Generation failed for document {request.document_id}: {exc}")
            failed = (*transcript, ConversationTurn("assistant", notices.failure))
            await self._save_transcript_only(request.document_id, failed)
            return TurnResult(
                outcome=TurnOutcome.FAILED,
                message=notices.failure,
                transcript=failed,
            )

        parsed = parse_response(raw)
        message = parsed.message or notices.default
        final = (*transcript, ConversationTurn("assistant", message))

        if isinstance(parsed, Update):
            await self._store.save_state(request.document_id, parsed.markup, final)
            Log.info(
                f"Visualization updated for document {request.document_id}",
                markup_chars=len(parsed.markup),
            )
            return TurnResult(
                outcome=TurnOutcome.UPDATED,
                message=message,
                markup=parsed.markup,
                transcript=final,
            )

        await self._save_transcript_only(request.document_id, final)
        Log.info(f"Answered question for document {request.document_id}")
        return TurnResult(outcome=TurnOutcome.ANSWERED, message=message, transcript=final)

    async def _refine(self, request: TurnRequest) -> str:
        prompt = (
            f"Current visualization HTML:\n\n{request.current_markup}\n\n---\n\n"
            f"Please make this change: {request.instruction}"
        )
        return await self._model.complete(
            [TextPart(prompt)],
            max_tokens=self._max_tokens,
            system_prompt=self._prompts.refinement_system,
        )

    async def _generate_with_context(self, request: TurnRequest, document: Document | None) -> str:
        if document is None:
            document = await self._store.get(request.document_id)
        document.visualization = request.current_markup or None
        related = await self._load_related(request.related_document_ids)
        context = self._assembler.assemble(document, related)

        parts: list[ContentPart] = [
            TextPart(context, cacheable=True),
            TextPart(f"User request: {request.instruction}"),
        ]
        return await self._model.complete(
            parts,
            max_tokens=self._max_tokens,
            system_prompt=self._prompts.visualization_system,
            cache_system_prompt=True,
        )

    async def _load_related(self, document_ids: Sequence[str]) -> list[Document]:
        related: list[Document] = []
        for document_id in document_ids:
            try:
                related.append(await self._store.get(document_id))
            except DocumentNotFoundError:
                Log.warning(f"Related document {document_id} not found, skipping")
        return related

    async def _save_transcript_only(
        self, document_id: str, transcript: tuple[ConversationTurn, ...]
    ) -> None:
        """Append to the transcript while keeping the stored markup byte-identical."""
        stored = await self._store.get(document_id)
        await self._store.save_state(document_id, stored.visualization, transcript)
