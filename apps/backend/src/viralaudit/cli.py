"""ViralAudit command-line interface with subcommands.

Usage:
    viralaudit-cli analyze <video> [--json] [-o report.md] [--model gemini-2.5-flash]
    viralaudit-cli schema
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from viralaudit.config import settings
from viralaudit.errors import MissingAPIKeyError
from viralaudit.export.report import generate_report, generate_report_json, save_report
from viralaudit.models.media import SelectedFile
from viralaudit.services.ingest import FileIngestor
from viralaudit.services.result_schema import result_schema_json
from viralaudit.session.machine import AnalysisStateMachine
from viralaudit.session.models import AnalysisPhase


# --- Analyze subcommand ---

async def cmd_analyze(args: argparse.Namespace) -> int:
    """Critique one video and print or save the report."""
    from viralaudit.services.inference import GeminiInferenceClient

    video_path = Path(args.input).resolve()
    if not video_path.is_file():
        print(f"Error: file not found: {video_path}", file=sys.stderr)
        return 1

    try:
        client = GeminiInferenceClient(model=args.model)
    except MissingAPIKeyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    machine = AnalysisStateMachine(client, ingestor=FileIngestor(settings.max_upload_bytes))
    selected = SelectedFile.from_path(video_path, mime_type=args.mime_type)

    print(f"Analyzing {selected.name}", file=sys.stderr)
    print(f"  Type: {selected.mime_type or 'unknown'}", file=sys.stderr)
    print(f"  Size: {selected.size / (1024 * 1024):.1f} MB", file=sys.stderr)
    print(f"  Model: {client.model}", file=sys.stderr)

    state = await machine.submit(selected)

    if state.phase is not AnalysisPhase.SUCCESS or state.result is None:
        print(f"\nAnalysis failed: {state.error}", file=sys.stderr)
        return 1

    report_format = "json" if args.json else "markdown"
    if args.output:
        output_path = save_report(
            state.result, Path(args.output), format=report_format, title=selected.name
        )
        print(f"\nReport saved: {output_path}", file=sys.stderr)
    elif args.json:
        print(json.dumps(generate_report_json(state.result), ensure_ascii=False, indent=2))
    else:
        print(generate_report(state.result, title=selected.name))

    return 0


# --- Schema subcommand ---

async def cmd_schema(args: argparse.Namespace) -> int:
    """Print the result schema sent to the engine."""
    print(json.dumps(result_schema_json(), indent=2))
    return 0


# --- Main CLI ---

def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="viralaudit-cli",
        description="ViralAudit - brutal ad video critique",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- analyze ---
    p_analyze = subparsers.add_parser("analyze", help="Critique an ad video")
    p_analyze.add_argument("input", type=str, help="Input video file")
    p_analyze.add_argument("--mime-type", type=str, help="Override the guessed MIME type")
    p_analyze.add_argument("--model", type=str, help=f"Gemini model (default: {settings.gemini_model})")
    p_analyze.add_argument("--json", action="store_true", help="Output JSON instead of Markdown")
    p_analyze.add_argument("-o", "--output", type=str, help="Write the report to this file")

    # --- schema ---
    subparsers.add_parser("schema", help="Print the result schema")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Dispatch
    if args.command == "analyze":
        sys.exit(asyncio.run(cmd_analyze(args)))
    elif args.command == "schema":
        sys.exit(asyncio.run(cmd_schema(args)))


if __name__ == "__main__":
    main()
