import pytest

from visualizer.documents.models import ConversationTurn, Document


class TestConversationTurn:
    def test_round_trips_through_dict(self) -> None:
        turn = ConversationTurn("assistant", "Updated.")
        assert turn.to_dict() == {"role": "assistant", "content": "Updated."}
        assert ConversationTurn.from_dict(turn.to_dict()) == turn

    def test_invalid_role_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid conversation role"):
            ConversationTurn.from_dict({"role": "system", "content": "x"})


class TestDocument:
    def test_defaults(self) -> None:
        document = Document(display_name="d", category="unknown", extracted_text="t")
        assert document.visualization is None
        assert document.chat_history == []
        assert document.source_fragments == []
        assert len(document.id) == 32
        assert document.created_at.tzinfo is not None
