"""Command-line entry point — count sentences, words and characters in documents.

Usage:
  sentence-counter notes.md draft.md
  cat notes.md | sentence-counter --json
  sentence-counter --watch notes.md
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from dataclasses import replace

import structlog

from src.cli.watcher import analyze_file, watch_document
from src.counter.pipeline import AnalysisResult, AnalysisSettings, analyze
from src.shared.config import CounterSettings, load_settings
from src.shared.display import format_result

log = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sentence-counter",
        description="Count sentences, words and characters in Markdown text.",
    )
    parser.add_argument("files", nargs="*", help="documents to analyse (default: stdin)")
    parser.add_argument("--ignore-callouts", action=argparse.BooleanOptionalAction, default=None,
                        help="exclude callout blocks from all counts")
    parser.add_argument("--strip-markdown", action=argparse.BooleanOptionalAction, default=None,
                        help="count characters with Markdown syntax removed")
    parser.add_argument("--json", action="store_true", help="emit one JSON object per document")
    parser.add_argument("--watch", action="store_true",
                        help="re-analyse the single FILE every time it changes")
    parser.add_argument("--settings", help="settings file (default: $SENTENCE_COUNTER_SETTINGS)")
    return parser


def resolve_settings(args: argparse.Namespace, stored: CounterSettings) -> AnalysisSettings:
    """Command-line flags win over persisted settings."""
    settings = stored.analysis_settings()
    if args.ignore_callouts is not None:
        settings = replace(settings, ignore_callouts=args.ignore_callouts)
    if args.strip_markdown is not None:
        settings = replace(settings, strip_markdown_for_char_count=args.strip_markdown)
    return settings


def render(name: str, result: AnalysisResult, as_json: bool, show_word_count: bool) -> str:
    if as_json:
        return json.dumps({"document": name, **result.as_dict()})
    return f"{name}: {format_result(result, show_word_count)}"


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    args = build_parser().parse_args(argv)
    stored = load_settings(args.settings)
    settings = resolve_settings(args, stored)

    if args.watch:
        if len(args.files) != 1:
            print("--watch needs exactly one FILE", file=sys.stderr)
            return 2

        def _print(path: str, result: AnalysisResult) -> None:
            print(render(path, result, args.json, stored.show_word_count), flush=True)

        try:
            _print(args.files[0], analyze_file(args.files[0], settings))
        except OSError as exc:
            log.error("document_read_failed", path=args.files[0], error=str(exc))
            return 1
        try:
            asyncio.run(watch_document(args.files[0], _print, settings))
        except KeyboardInterrupt:
            log.info("watcher_interrupted")
        return 0

    if not args.files:
        result = analyze(sys.stdin.read(), settings)
        print(render("<stdin>", result, args.json, stored.show_word_count))
        return 0

    status = 0
    for path in args.files:
        try:
            result = analyze_file(path, settings)
        except OSError as exc:
            log.error("document_read_failed", path=path, error=str(exc))
            status = 1
            continue
        print(render(path, result, args.json, stored.show_word_count))
    return status


def main() -> None:
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, os.getenv("LOG_LEVEL", "INFO"))
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )
    sys.exit(run())


if __name__ == "__main__":
    main()
