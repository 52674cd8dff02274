from typing import ClassVar

from visualizer.config.settings import Settings
from visualizer.llm.anthropic_client_adapter import AnthropicClientAdapter
from visualizer.llm.example_client_adapter import ExampleClientAdapter
from visualizer.llm.language_model import LanguageModel
from visualizer.llm.openai_client_adapter import OpenAIClientAdapter


class LanguageModelFactory:
    """Creates the configured generation client bound to its model."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> LanguageModel:
        """Create a configured language model from application settings."""
        provider = settings.generation_provider.lower()
        if provider == "example":
            return LanguageModel(client=ExampleClientAdapter(), model="example")
        if provider == "anthropic":
            return LanguageModel(
                client=AnthropicClientAdapter(
                    api_key=settings.generation_anthropic_api_key,
                    timeout_seconds=settings.generation_anthropic_timeout_seconds,
                ),
                model=settings.generation_anthropic_model_name,
                temperature=settings.generation_temperature,
            )
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
            base_url=cls._resolve_base_url(provider, settings),
        )
        return LanguageModel(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.generation_temperature,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["anthropic", "example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.generation_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "generation_openai_compatible_base_url is required for "
                    "generation_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.generation_openai_api_key,
            "openai_compatible": settings.generation_openai_compatible_api_key,
            "openrouter": settings.generation_openrouter_api_key,
            "groq": settings.generation_groq_api_key,
            "together": settings.generation_together_api_key,
            "deepseek": settings.generation_deepseek_api_key,
            "ollama": settings.generation_ollama_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.generation_openai_model_name,
            "openai_compatible": settings.generation_openai_compatible_model_name,
            "openrouter": settings.generation_openrouter_model_name,
            "groq": settings.generation_groq_model_name,
            "together": settings.generation_together_model_name,
            "deepseek": settings.generation_deepseek_model_name,
            "ollama": settings.generation_ollama_model_name,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        if provider == "openai":
            return settings.generation_openai_timeout_seconds
        return settings.generation_openai_compatible_timeout_seconds
