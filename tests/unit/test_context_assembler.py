import json

from visualizer.documents.models import Document, SourceFragment
from visualizer.visualization.context import ContextAssembler


def _document(**overrides: object) -> Document:
    fields: dict[str, object] = {
        "display_name": "Fall Schedule",
        "category": "schedule",
        "extracted_text": "CS101 Mon 10:00",
    }
    fields.update(overrides)
    return Document(**fields)  # type: ignore[arg-type]


class TestContextAssembler:
    def test_header_and_raw_text(self) -> None:
        context = ContextAssembler().assemble(_document())
        assert "Document: Fall Schedule\nType: schedule" in context
        assert "CS101 Mon 10:00" in context
        assert "Current visualization HTML" not in context

    def test_structured_payload_replaces_raw_text(self) -> None:
        structured = {"title": "Fall", "items": [{"code": "CS101"}]}
        context = ContextAssembler().assemble(_document(structured=structured))
        assert json.dumps(structured, indent=2) in context
        assert "CS101 Mon 10:00" not in context

    def test_sections_in_order(self) -> None:
        document = _document(
            source_fragments=[SourceFragment("extra.txt", "FRAGMENT TEXT")],
            visualization="<div>CURRENT</div>",
        )
        related = Document(display_name="Spring", category="schedule", extracted_text="RELATED TEXT")
        context = ContextAssembler().assemble(document, [related])

        positions = [
            context.index("Document: Fall Schedule"),
            context.index("CS101 Mon 10:00"),
            context.index("Source File: extra.txt"),
            context.index("FRAGMENT TEXT"),
            context.index("Additional Document: Spring"),
            context.index("RELATED TEXT"),
            context.index("<div>CURRENT</div>"),
        ]
        assert positions == sorted(positions)

    def test_visualization_is_marked_as_state_being_edited(self) -> None:
        context = ContextAssembler().assemble(_document(visualization="<p>v</p>"))
        assert context.rstrip().endswith("<p>v</p>\n---")
        assert "the state you are editing" in context
