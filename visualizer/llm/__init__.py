from visualizer.llm.client_base import BaseGenerationClient
from visualizer.llm.factory import LanguageModelFactory
from visualizer.llm.language_model import LanguageModel
from visualizer.llm.models import BinaryPart, ContentPart, TextPart
from visualizer.llm.prompt_loader import PromptSet

__all__ = [
    "BaseGenerationClient",
    "BinaryPart",
    "ContentPart",
    "LanguageModel",
    "LanguageModelFactory",
    "PromptSet",
    "TextPart",
]
