"""Watchfiles-based document monitor — re-analyses a file whenever it changes."""
from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path

import structlog
from watchfiles import DefaultFilter, awatch

from src.counter.pipeline import AnalysisResult, AnalysisSettings, analyze

log = structlog.get_logger()


class DocumentFilter(DefaultFilter):
    """Accept only changes to one specific document."""

    def __init__(self, document: str | Path) -> None:
        super().__init__()
        self.document = str(Path(document).resolve())

    def __call__(self, change: object, path: str) -> bool:
        return super().__call__(change, path) and str(Path(path).resolve()) == self.document


def read_document(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8", errors="replace")


def analyze_file(path: str | Path, settings: AnalysisSettings | None = None) -> AnalysisResult:
    """Read *path* and return its analysis."""
    return analyze(read_document(path), settings)


async def watch_document(
    path: str | Path,
    on_result: Callable[[str, AnalysisResult], None],
    settings: AnalysisSettings | None = None,
    stop_event: asyncio.Event | None = None,
) -> None:
    """Watch *path* and call on_result(path, result) after every change batch.

    Read failures (file deleted, permissions) are logged and skipped; the
    watch continues until *stop_event* is set.
    """
    document = Path(path).resolve()
    log.info("watcher_started", path=str(document))
    async for _changes in awatch(
        document.parent, watch_filter=DocumentFilter(document), stop_event=stop_event
    ):
        try:
            result = analyze_file(document, settings)
        except OSError as exc:
            log.warning("document_read_failed", path=str(document), error=str(exc))
            continue
        log.info("document_analyzed", path=str(document), **result.as_dict())
        on_result(str(document), result)
    log.info("watcher_stopped", path=str(document))
