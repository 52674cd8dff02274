from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    generation_provider: str = "anthropic"
    generation_max_tokens: int = 16384
    generation_temperature: float = 0.0
    classification_max_tokens: int = 4096
    table_identify_max_tokens: int = 2048
    prompts_dir: Path | None = None

    generation_anthropic_api_key: str = ""
    generation_anthropic_model_name: str = "claude-sonnet-4-20250514"
    generation_anthropic_timeout_seconds: int = 120

    generation_openai_api_key: str = ""
    generation_openai_model_name: str = "gpt-4.1"
    generation_openai_timeout_seconds: int = 120

    generation_openai_compatible_base_url: str = ""
    generation_openai_compatible_api_key: str = ""
    generation_openai_compatible_model_name: str = ""
    generation_openai_compatible_timeout_seconds: int = 120

    generation_openrouter_api_key: str = ""
    generation_openrouter_model_name: str = ""
    generation_groq_api_key: str = ""
    generation_groq_model_name: str = ""
    generation_together_api_key: str = ""
    generation_together_model_name: str = ""
    generation_deepseek_api_key: str = ""
    generation_deepseek_model_name: str = ""
    generation_ollama_api_key: str = "ollama"
    generation_ollama_model_name: str = ""

    classifier_pdf_mode: str = "native"
    pdf_engine: str = "pdfplumber"

    store_backend: str = "memory"
    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "visualizer"
    db_username: str = "visualizer"
    db_password: str = "secret"
    db_pool_max_size: int = 10
