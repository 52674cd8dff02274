from collections.abc import Sequence
from typing import Any

import anthropic
import httpx

from visualizer.llm.client_base import BaseGenerationClient
from visualizer.llm.exceptions import GenerationError, GenerationNetworkError
from visualizer.llm.models import BinaryPart, ContentPart, TextPart

_EPHEMERAL_CACHE = {"type": "ephemeral"}


class AnthropicClientAdapter(BaseGenerationClient):
    """Generation client adapter built on the Anthropic Messages API.

    Supports native image and PDF input and explicit prompt caching.
    """

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = anthropic.AsyncAnthropic(api_key=api_key, timeout=timeout_seconds)

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
        kwargs: dict[str, Any] = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [
                {"role": "user", "content": [self._to_block(p) for p in parts]},
            ],
        }
        if system_prompt:
            kwargs["system"] = self._system_blocks(system_prompt, cache_system_prompt)

        try:
            response = await self._client.messages.create(**kwargs)
        except (anthropic.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(f"AI provider network error: {exc}") from exc
        except anthropic.APIError as exc:
            raise GenerationNetworkError(f"AI provider API error: {exc}") from exc

        texts = [block.text for block in response.content if block.type == "text"]
        if not texts:
            raise GenerationError("AI returned no text content")
        return "".join(texts)

    @staticmethod
    def _system_blocks(system_prompt: str, cache: bool) -> str | list[dict[str, Any]]:
        if not cache:
            return system_prompt
        return [{"type": "text", "text": system_prompt, "cache_control": _EPHEMERAL_CACHE}]

    @staticmethod
    def _to_block(part: ContentPart) -> dict[str, Any]:
        if isinstance(part, TextPart):
            block: dict[str, Any] = {"type": "text", "text": part.text}
            if part.cacheable:
                block["cache_control"] = _EPHEMERAL_CACHE
            return block
        return AnthropicClientAdapter._binary_block(part)

    @staticmethod
    def _binary_block(part: BinaryPart) -> dict[str, Any]:
        source = {
            "type": "base64",
            "media_type": part.media_type,
            "data": part.to_base64(),
        }
        if part.is_image:
            return {"type": "image", "source": source}
        if part.is_pdf:
            return {"type": "document", "source": source}
        raise GenerationError(f"Unsupported binary media type: {part.media_type}")
