"""Detects instructions that need the original source material again."""

import re
from collections.abc import Iterable
from typing import ClassVar, Protocol


class IntentClassifier(Protocol):
    """Binary intent check used to pick the orchestrator mode."""

    def needs_original_data(self, instruction: str) -> bool: ...


class PatternIntentClassifier:
    """Case-insensitive phrase matcher over a fixed pattern list."""

    DEFAULT_PATTERNS: ClassVar[tuple[str, ...]] = (
        r"re-?read",
        r"original\s+(data|document|file)",
        r"all\s+(the\s+)?(data|items|courses|entries)",
        r"missing\s+(data|items|courses|entries)",
        r"from\s+(the\s+)?(source|document|file)",
        r"don'?t\s+see",
        r"where\s+(is|are)",
        r"repopulate",
        r"reload",
        r"start\s+over",
        r"regenerate",
    )

    def __init__(self, patterns: Iterable[str] | None = None) -> None:
        self._patterns = [
            re.compile(p, re.IGNORECASE) for p in (patterns or self.DEFAULT_PATTERNS)
        ]

    def needs_original_data(self, instruction: str) -> bool:
        return any(p.search(instruction) for p in self._patterns)
