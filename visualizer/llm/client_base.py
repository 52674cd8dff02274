from abc import ABC, abstractmethod
from collections.abc import Sequence

from visualizer.llm.models import ContentPart


class BaseGenerationClient(ABC):
    """Contract for provider-specific generative model clients."""

    @abstractmethod
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
        """Send one user message built from *parts* and return the reply text.

        Raises:
            GenerationNetworkError: on connection, timeout or API errors.
            GenerationError: when the provider returns no usable text.
        """
