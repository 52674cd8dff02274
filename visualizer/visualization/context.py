"""Builds the full-context block sent on grounding turns."""

import json
from collections.abc import Sequence

from visualizer.documents.models import Document

_SEPARATOR = "---"


class ContextAssembler:
    """Concatenates a document record into one ordered text block.

    Order: header, primary content, source fragments, related documents,
    current visualization. Everything before the visualization is source
    material; the visualization is the state being edited.
    """

    def assemble(self, document: Document, related: Sequence[Document] = ()) -> str:
        sections = [
            "Here is the document content to visualize. Treat it as ground truth "
            "and never alter the data itself.",
            self._header("Document", document),
            self._primary_content(document),
        ]
        for fragment in document.source_fragments:
            sections.append(f"{_SEPARATOR}\nSource File: {fragment.origin_name}\n{_SEPARATOR}")
            sections.append(fragment.extracted_text)
        for other in related:
            sections.append(self._header("Additional Document", other))
            sections.append(other.extracted_text)
        if document.visualization:
            sections.append(
                f"{_SEPARATOR}\nCurrent visualization HTML (the state you are editing):\n"
                f"{document.visualization}\n{_SEPARATOR}"
            )
        return "\n".join(sections)

    @staticmethod
    def _header(label: str, document: Document) -> str:
        return f"{_SEPARATOR}\n{label}: {document.display_name}\nType: {document.category}\n{_SEPARATOR}"

    @staticmethod
    def _primary_content(document: Document) -> str:
        if document.structured:
            return json.dumps(document.structured, indent=2, ensure_ascii=False)
        return document.extracted_text
