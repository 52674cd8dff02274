import pytest

from visualizer.visualization.intent import PatternIntentClassifier


class TestPatternIntentClassifier:
    @pytest.mark.parametrize(
        "instruction",
        [
            "Please re-read the file",
            "Use the ORIGINAL data",
            "show all the items",
            "There are missing entries",
            "pull it from the source",
            "I don't see Friday",
            "Where are the totals?",
            "regenerate it",
            "let's start over",
        ],
    )
    def test_detects_grounding_requests(self, instruction: str) -> None:
        assert PatternIntentClassifier().needs_original_data(instruction)

    @pytest.mark.parametrize(
        "instruction",
        ["make the header blue", "sort by date", "What is the total?"],
    )
    def test_plain_edits_do_not_need_source(self, instruction: str) -> None:
        assert not PatternIntentClassifier().needs_original_data(instruction)

    def test_custom_patterns(self) -> None:
        classifier = PatternIntentClassifier(patterns=[r"\bsource\b"])
        assert classifier.needs_original_data("check the SOURCE")
        assert not classifier.needs_original_data("re-read it")
