"""Model-bound wrapper shared by the classifier, orchestrator and exporter."""

from collections.abc import Sequence

from visualizer.llm.client_base import BaseGenerationClient
from visualizer.llm.models import ContentPart
from visualizer.logging.logger import Log


class LanguageModel:
    """Binds a provider client to a model name and sampling temperature."""

    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        model: str,
        temperature: float = 0.0,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        parts: Sequence[ContentPart],
        *,
        max_tokens: int,
        system_prompt: str = "",
        cache_system_prompt: bool = False,
    ) -> str:
        """Send *parts* as one user message and return the raw reply text."""
        Log.debug(f"Model request: {len(parts)} parts", model=self._model)
        raw = await self._client.create_message(
            model=self._model,
            max_tokens=max_tokens,
            temperature=self._temperature,
            system_prompt=system_prompt,
            parts=parts,
            cache_system_prompt=cache_system_prompt,
        )
        Log.debug(f"AI raw response:\n{raw}")
        return raw
