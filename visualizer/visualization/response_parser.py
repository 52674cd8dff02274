"""Splits a generation response into a chat message and optional new markup.

A response either answers a question (no delimiter) or carries a full
replacement of the visualization after the delimiter line.
"""

from dataclasses import dataclass

from visualizer.llm.output_parsing import strip_code_fences
from visualizer.logging.logger import Log

DELIMITER = "---HTML---"


@dataclass(frozen=True)
class Answer:
    """Read-only reply; the visualization stays as it is."""

    message: str


@dataclass(frozen=True)
class Update:
    """Reply that replaces the visualization with ``markup``."""

    message: str
    markup: str


ParsedResponse = Answer | Update


def parse_response(raw: str) -> ParsedResponse:
    index = raw.find(DELIMITER)
    if index == -1:
        return Answer(message=raw.strip())

    message = raw[:index].strip()
    remainder = raw[index + len(DELIMITER):]
    if DELIMITER in remainder:
        Log.warning("Generation response repeated the markup delimiter; keeping the first split")
        remainder = "\n".join(
            line for line in remainder.splitlines() if line.strip() != DELIMITER
        )

    markup = strip_code_fences(remainder)
    if not markup:
        Log.warning("Generation response had an empty markup section; treating as an answer")
        return Answer(message=message)
    return Update(message=message, markup=markup)
