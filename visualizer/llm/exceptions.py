class GenerationError(Exception):
    """Raised when a generative model call fails or returns unusable output."""


class GenerationNetworkError(GenerationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class PromptLoadError(GenerationError):
    """Raised when a bundled or custom prompt file cannot be read."""
