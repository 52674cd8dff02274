"""Finds exportable tables in visualization markup and renders them as CSV.

The structural pass reads the markup tree directly and never calls a model.
Only when it finds nothing does the engine ask the model, and every model
failure degrades to "nothing found" rather than raising.
"""

import json
from collections.abc import Sequence
from typing import Any

from bs4 import BeautifulSoup

from visualizer.export.csv_format import rows_to_csv
from visualizer.export.extractors import HtmlTableExtractor, ItemListExtractor, TableExtractor
from visualizer.export.models import STRUCTURAL_DESCRIPTION, CandidateTable
from visualizer.llm.exceptions import GenerationError
from visualizer.llm.language_model import LanguageModel
from visualizer.llm.models import TextPart
from visualizer.llm.output_parsing import first_json_value, strip_code_fences
from visualizer.llm.prompt_loader import PromptSet
from visualizer.logging.logger import Log


class TableExtractionEngine:
    def __init__(
        self,
        *,
        model: LanguageModel,
        prompts: PromptSet,
        extractors: Sequence[TableExtractor] | None = None,
        identify_max_tokens: int = 2048,
        extract_max_tokens: int = 16384,
    ) -> None:
        self._model = model
        self._prompts = prompts
        self._extractors = tuple(extractors or (HtmlTableExtractor(), ItemListExtractor()))
        self._identify_max_tokens = identify_max_tokens
        self._extract_max_tokens = extract_max_tokens

    def find_structural(self, markup: str) -> list[CandidateTable]:
        """Run every structural extractor; the CSV of each result is cached on it."""
        try:
            soup = BeautifulSoup(markup, "lxml")
            found = [table for extractor in self._extractors for table in extractor.extract(soup)]
        except Exception as exc:
            Log.warning(f"Structural table pass failed: {exc}")
            return []

        candidates: list[CandidateTable] = []
        seen: set[str] = set()
        for table in found:
            if table.id in seen:
                continue
            seen.add(table.id)
            candidates.append(
                CandidateTable(
                    id=table.id,
                    label=table.label,
                    description=STRUCTURAL_DESCRIPTION,
                    row_count=table.data_row_count,
                    csv=rows_to_csv(table.rows),
                )
            )
        return candidates

    async def identify(self, markup: str) -> list[CandidateTable]:
        candidates = self.find_structural(markup)
        if candidates:
            Log.info(f"Found {len(candidates)} tables in markup structure")
            return candidates

        Log.info("No structural tables found, asking the model")
        try:
            raw = await self._model.complete(
                [TextPart(f"{self._prompts.identify_tables}\n\nHTML:\n{markup}")],
                max_tokens=self._identify_max_tokens,
            )
        except GenerationError as exc:
            Log.error(f"Table identification failed: {exc}")
            return []

        candidates = self._parse_candidates(raw)
        Log.info(f"Model identified {len(candidates)} tables")
        return candidates

    async def extract(
        self,
        markup: str,
        table_id: str | None = None,
        table_name: str | None = None,
    ) -> str | None:
        """Return the CSV for one table, or None when nothing could be extracted.

        Raises:
            ValueError: if neither ``table_id`` nor ``table_name`` is given.
        """
        if not table_id and not table_name:
            raise ValueError("Either table_id or table_name is required")

        for candidate in self.find_structural(markup):
            if candidate.id == table_id or candidate.label == table_name:
                Log.info(f"Exporting structural table {candidate.id}")
                return candidate.csv

        description = table_name or table_id
        prompt = f'{self._prompts.extract_table}\n\nTable to extract: "{description}"\n\nHTML:\n{markup}'
        try:
            raw = await self._model.complete([TextPart(prompt)], max_tokens=self._extract_max_tokens)
        except GenerationError as exc:
            Log.error(f"Table extraction failed for {description!r}: {exc}")
            return None

        csv = strip_code_fences(raw)
        if not csv:
            Log.warning(f"Model returned no CSV for {description!r}")
            return None
        return csv

    @staticmethod
    def _parse_candidates(raw: str) -> list[CandidateTable]:
        items = first_json_value(raw, list)
        if items is None:
            try:
                items = json.loads(strip_code_fences(raw))
            except json.JSONDecodeError:
                Log.warning("Table identification response had no JSON array")
                return []
        if not isinstance(items, list):
            return []

        candidates: list[CandidateTable] = []
        seen: set[str] = set()
        for item in items:
            candidate = _candidate_from_item(item)
            if candidate is None or candidate.id in seen:
                continue
            seen.add(candidate.id)
            candidates.append(candidate)
        return candidates


def _candidate_from_item(item: Any) -> CandidateTable | None:
    if not isinstance(item, dict):
        return None
    table_id, name = item.get("id"), item.get("name")
    if not table_id or not name:
        return None
    try:
        row_count = int(item.get("rowCount") or 0)
    except (TypeError, ValueError):
        row_count = 0
    return CandidateTable(
        id=str(table_id),
        label=str(name),
        description=str(item.get("description") or ""),
        row_count=row_count,
    )
