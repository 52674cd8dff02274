"""Example generation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerationClient and register the provider in LanguageModelFactory.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from visualizer.llm.client_base import BaseGenerationClient
from visualizer.llm.models import ContentPart


@dataclass(frozen=True)
class RecordedCall:
    """One request received by the example adapter."""

    model: str
    max_tokens: int
    system_prompt: str
    parts: tuple[ContentPart, ...]
    cache_system_prompt: bool


class ExampleClientAdapter(BaseGenerationClient):
    """Example adapter that replays scripted responses.

    No network calls. Responses are returned in order and the last one is
    repeated once the script runs out. Every request is recorded in ``calls``.
    """

    DEFAULT_RESPONSE: ClassVar[str] = (
        "Created an example visualization.\n"
        "---HTML---\n"
        "<div><h1>Example</h1><p>Configure a real provider to render documents.</p></div>"
    )

    def __init__(self, responses: Sequence[str] | None = None) -> None:
        self._responses = list(responses) if responses else [self.DEFAULT_RESPONSE]
        self.calls: list[RecordedCall] = []

    async def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        temperature: float,
        system_prompt: str,
        parts: Sequence[ContentPart],
        cache_system_prompt: bool = False,
    ) -> str:
        _ = temperature
        self.calls.append(
            RecordedCall(
                model=model,
                max_tokens=max_tokens,
                system_prompt=system_prompt,
                parts=tuple(parts),
                cache_system_prompt=cache_system_prompt,
            )
        )
        index = min(len(self.calls) - 1, len(self._responses) - 1)
        return self._responses[index]
