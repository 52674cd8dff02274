import logging

import pytest

from visualizer.logging.logger import Log, _ContextFormatter


def _record(message: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("visualizer", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestContextFormatter:
    def test_plain_message_has_no_context_suffix(self) -> None:
        formatter = _ContextFormatter("[%(levelname)s] %(message)s")
        assert formatter.format(_record("hello")) == "[INFO] hello"

    def test_appends_sorted_context_pairs(self) -> None:
        formatter = _ContextFormatter("%(message)s")
        line = formatter.format(_record("turn", mode="refining", document="d1"))
        assert line == "turn | document=d1 mode=refining"


class TestLog:
    def test_info_passes_kwargs_as_extra(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="visualizer"):
            Log.info("Classified file", category="invoice")
        assert caplog.records[-1].getMessage() == "Classified file"
        assert caplog.records[-1].category == "invoice"

    def test_debug_hidden_at_info_level(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="visualizer"):
            Log.debug("raw response")
        assert not any(r.getMessage() == "raw response" for r in caplog.records)

    def test_configure_sets_level(self) -> None:
        Log.configure("warning")
        assert logging.getLogger("visualizer").level == logging.WARNING
        Log.configure("INFO")
