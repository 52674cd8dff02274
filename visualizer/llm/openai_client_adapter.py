from collections.abc import Sequence
from typing import Any

import httpx
import openai

from visualizer.llm.client_base import BaseGenerationClient
from visualizer.llm.exceptions import GenerationError, GenerationNetworkError
from visualizer.llm.models import BinaryPart, ContentPart, TextPart


class OpenAIClientAdapter(BaseGenerationClient):
    """Generation client adapter built on the OpenAI-compatible chat API.

    Prompt caching is automatic on this API, so ``cacheable`` hints are ignored.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

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
        _ = cache_system_prompt
        messages: list[dict[str, Any]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": [self._to_content(p) for p in parts]})

        try:
            response = await self._client.chat.completions.create(
                model=model,
                max_tokens=max_tokens,
                temperature=temperature,
                messages=messages,  # type: ignore[arg-type]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise GenerationNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise GenerationError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise GenerationError("AI returned empty response")
        return content

    @staticmethod
    def _to_content(part: ContentPart) -> dict[str, Any]:
        if isinstance(part, TextPart):
            return {"type": "text", "text": part.text}
        return OpenAIClientAdapter._binary_content(part)

    @staticmethod
    def _binary_content(part: BinaryPart) -> dict[str, Any]:
        data_url = f"data:{part.media_type};base64,{part.to_base64()}"
        if part.is_image:
            return {"type": "image_url", "image_url": {"url": data_url}}
        if part.is_pdf:
            return {
                "type": "file",
                "file": {"filename": part.file_name or "document.pdf", "file_data": data_url},
            }
        raise GenerationError(f"Unsupported binary media type: {part.media_type}")
