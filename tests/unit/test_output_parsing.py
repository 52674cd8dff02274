from visualizer.llm.output_parsing import first_json_value, strip_code_fences


class TestStripCodeFences:
    def test_removes_language_fence(self) -> None:
        assert strip_code_fences("```html\n<div></div>\n```") == "<div></div>"

    def test_removes_bare_fence(self) -> None:
        assert strip_code_fences("```\na,b\n1,2\n```\n") == "a,b\n1,2"

    def test_leaves_unfenced_text(self) -> None:
        assert strip_code_fences("  a,b\n1,2  ") == "a,b\n1,2"


class TestFirstJsonValue:
    def test_object_inside_prose(self) -> None:
        raw = 'Here you go: {"fileType": "invoice"} hope it helps {"x": 1}'
        assert first_json_value(raw, dict) == {"fileType": "invoice"}

    def test_skips_malformed_candidates(self) -> None:
        raw = '{not json} then {"ok": true}'
        assert first_json_value(raw, dict) == {"ok": True}

    def test_array_inside_fence(self) -> None:
        raw = '```json\n[{"id": "a"}]\n```'
        assert first_json_value(raw, list) == [{"id": "a"}]

    def test_none_when_absent(self) -> None:
        assert first_json_value("no json here", dict) is None
        assert first_json_value("no json here", list) is None
