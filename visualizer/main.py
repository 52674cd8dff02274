import argparse
import asyncio
from collections.abc import Sequence
from pathlib import Path

from visualizer.classification.classifier import ContentClassifier
from visualizer.classification.exceptions import ClassificationError
from visualizer.config.settings import Settings
from visualizer.database.connection import close_pool, init_pool
from visualizer.database.document_repository import PostgresDocumentStore
from visualizer.documents.exceptions import StoreError
from visualizer.documents.factory import DocumentStoreFactory
from visualizer.documents.store_base import BaseDocumentStore
from visualizer.export.engine import TableExtractionEngine
from visualizer.ingestion.exceptions import IngestionError
from visualizer.ingestion.file_loader import FileLoader
from visualizer.ingestion.service import IngestionService
from visualizer.llm.exceptions import GenerationError
from visualizer.llm.factory import LanguageModelFactory
from visualizer.llm.language_model import LanguageModel
from visualizer.llm.prompt_loader import PromptSet
from visualizer.logging.logger import Log
from visualizer.pdf.factory import PdfExtractorFactory
from visualizer.visualization.models import TurnRequest
from visualizer.visualization.orchestrator import VisualizationOrchestrator

NOTHING_TO_EXPORT = "Nothing to export."


def build_ingestion_service(
    settings: Settings, model: LanguageModel, prompts: PromptSet, store: BaseDocumentStore
) -> IngestionService:
    classifier = ContentClassifier(
        model=model,
        instruction=prompts.classification,
        max_tokens=settings.classification_max_tokens,
        pdf_extractor=PdfExtractorFactory.create(settings),
    )
    return IngestionService(classifier, store)


def build_orchestrator(
    settings: Settings, model: LanguageModel, prompts: PromptSet, store: BaseDocumentStore
) -> VisualizationOrchestrator:
    return VisualizationOrchestrator(
        model=model,
        store=store,
        prompts=prompts,
        max_tokens=settings.generation_max_tokens,
    )


def build_table_engine(
    settings: Settings, model: LanguageModel, prompts: PromptSet
) -> TableExtractionEngine:
    return TableExtractionEngine(
        model=model,
        prompts=prompts,
        identify_max_tokens=settings.table_identify_max_tokens,
        extract_max_tokens=settings.generation_max_tokens,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="visualizer", description="Document visualizer")
    commands = parser.add_subparsers(dest="command", required=True)

    ingest = commands.add_parser("ingest", help="Classify files and store them as one document")
    ingest.add_argument("paths", nargs="+", type=Path)
    ingest.add_argument("--name", help="Display name for the new document")

    chat = commands.add_parser("chat", help="Send one instruction about a document")
    chat.add_argument("document_id")
    chat.add_argument("message")
    chat.add_argument("--output", type=Path, help="Write the resulting markup to this file")
    chat.add_argument(
        "--related", action="append", default=[], metavar="DOCUMENT_ID",
        help="Include another document as context (repeatable)",
    )

    tables = commands.add_parser("tables", help="List exportable tables in a markup file")
    tables.add_argument("markup_file", type=Path)

    export = commands.add_parser("export", help="Print one table of a markup file as CSV")
    export.add_argument("markup_file", type=Path)
    target = export.add_mutually_exclusive_group(required=True)
    target.add_argument("--table-id")
    target.add_argument("--table-name")

    return parser


async def run(args: argparse.Namespace, settings: Settings) -> int:
    """Build dependencies for one command, run it and release the pool."""
    prompts = PromptSet.load(settings.prompts_dir)
    model = LanguageModelFactory.create(settings)

    if args.command == "tables":
        engine = build_table_engine(settings, model, prompts)
        candidates = await engine.identify(args.markup_file.read_text(encoding="utf-8"))
        if not candidates:
            print(NOTHING_TO_EXPORT)
        for candidate in candidates:
            print(f"{candidate.id}\t{candidate.label}\t{candidate.row_count}\t{candidate.description}")
        return 0

    if args.command == "export":
        engine = build_table_engine(settings, model, prompts)
        csv = await engine.extract(
            args.markup_file.read_text(encoding="utf-8"),
            table_id=args.table_id,
            table_name=args.table_name,
        )
        print(csv or NOTHING_TO_EXPORT)
        return 0

    store = DocumentStoreFactory.create(settings)
    if isinstance(store, PostgresDocumentStore):
        await init_pool(settings)
    try:
        if isinstance(store, PostgresDocumentStore):
            await store.ensure_schema()
        if args.command == "ingest":
            return await _ingest(args, build_ingestion_service(settings, model, prompts, store))
        return await _chat(args, build_orchestrator(settings, model, prompts, store), store)
    finally:
        if isinstance(store, PostgresDocumentStore):
            await close_pool()


async def _ingest(args: argparse.Namespace, service: IngestionService) -> int:
    loader = FileLoader()
    uploads = [loader.load(path) for path in args.paths]
    document = await service.ingest(uploads, display_name=args.name)
    print(f"{document.id}\t{document.category}\t{document.display_name}")
    return 0


async def _chat(
    args: argparse.Namespace, orchestrator: VisualizationOrchestrator, store: BaseDocumentStore
) -> int:
    document = await store.get(args.document_id)
    result = await orchestrator.send_message(
        TurnRequest(
            document_id=document.id,
            instruction=args.message,
            transcript=tuple(document.chat_history),
            current_markup=document.visualization or "",
            related_document_ids=tuple(args.related),
        )
    )
    print(result.message)
    if result.markup is not None and args.output is not None:
        args.output.write_text(result.markup, encoding="utf-8")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse arguments -> load settings -> run one command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    try:
        return asyncio.run(run(args, settings))
    except (StoreError, IngestionError, ClassificationError, GenerationError, OSError) as exc:
        Log.error(f"Command {args.command} failed: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
