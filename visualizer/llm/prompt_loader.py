from dataclasses import dataclass
from pathlib import Path

from visualizer.llm.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str, directory: Path | None = None) -> str:
    """Load a prompt text file by name.

    Args:
        name: File name inside the prompt directory, e.g. ``classification.txt``.
        directory: Directory holding prompt files.
                   Defaults to the bundled ``prompts`` directory.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    path = (directory or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt '{name}': {exc}") from exc


@dataclass(frozen=True)
class PromptSet:
    """Fixed instruction texts used by the model-facing components."""

    classification: str
    visualization_system: str
    refinement_system: str
    identify_tables: str
    extract_table: str

    @classmethod
    def load(cls, directory: Path | None = None) -> "PromptSet":
        """Load every prompt from *directory* (or the bundled defaults)."""
        return cls(
            classification=load_prompt("classification.txt", directory),
            visualization_system=load_prompt("visualization_system.txt", directory),
            refinement_system=load_prompt("refinement_system.txt", directory),
            identify_tables=load_prompt("identify_tables.txt", directory),
            extract_table=load_prompt("extract_table.txt", directory),
        )
