from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from visualizer.config.settings import Settings
from visualizer.main import NOTHING_TO_EXPORT, build_parser, main, run

SCENARIO = (
    "<table><tr><th>Item</th><th>Price</th></tr>"
    "<tr><td>Widget</td><td>$1,250.00</td></tr></table>"
)


def _settings() -> Settings:
    return Settings(generation_provider="example", store_backend="memory")


class TestBuildParser:
    def test_export_requires_table_target(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["export", str(tmp_path / "m.html")])

    def test_chat_collects_related_ids(self) -> None:
        args = build_parser().parse_args(["chat", "d1", "hi", "--related", "d2", "--related", "d3"])
        assert args.related == ["d2", "d3"]


class TestRun:
    @pytest.mark.asyncio
    async def test_tables_lists_candidates(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        markup = tmp_path / "viz.html"
        markup.write_text(SCENARIO, encoding="utf-8")
        args = build_parser().parse_args(["tables", str(markup)])
        assert await run(args, _settings()) == 0
        assert capsys.readouterr().out.splitlines() == [
            "table_1\tTable 1\t1\tExtracted directly from HTML structure"
        ]

    @pytest.mark.asyncio
    async def test_export_prints_csv(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        markup = tmp_path / "viz.html"
        markup.write_text(SCENARIO, encoding="utf-8")
        args = build_parser().parse_args(["export", str(markup), "--table-id", "table_1"])
        await run(args, _settings())
        assert capsys.readouterr().out == "Item,Price\nWidget,$1250.00\n"

    @pytest.mark.asyncio
    async def test_export_nothing(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        markup = tmp_path / "viz.html"
        markup.write_text("<div>chart</div>", encoding="utf-8")
        args = build_parser().parse_args(["export", str(markup), "--table-name", "Totals"])
        with patch("visualizer.main.TableExtractionEngine.extract", AsyncMock(return_value=None)):
            await run(args, _settings())
        assert capsys.readouterr().out == f"{NOTHING_TO_EXPORT}\n"

    @pytest.mark.asyncio
    async def test_ingest_prints_document(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello", encoding="utf-8")
        args = build_parser().parse_args(["ingest", str(path), "--name", "My notes"])
        assert await run(args, _settings()) == 0
        _id, category, name = capsys.readouterr().out.strip().split("\t")
        assert category == "unknown"
        assert name == "My notes"


class TestMain:
    def test_main_runs_tables_command(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("GENERATION_PROVIDER", "example")
        markup = tmp_path / "viz.html"
        markup.write_text(SCENARIO, encoding="utf-8")
        assert main(["tables", str(markup)]) == 0
        assert "table_1" in capsys.readouterr().out

    def test_main_reports_unknown_document(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GENERATION_PROVIDER", "example")
        monkeypatch.setenv("STORE_BACKEND", "memory")
        assert main(["chat", "missing", "hello"]) == 1

    def test_main_reports_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GENERATION_PROVIDER", "example")
        assert main(["export", str(tmp_path / "absent.html"), "--table-id", "table_1"]) == 1
