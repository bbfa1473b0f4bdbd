"""Analyze API — count text posted by a host editor; read and write settings.

POST /analyze   — counts for a document body
GET  /settings  — current persisted settings
PUT  /settings  — replace persisted settings
"""
from __future__ import annotations

import structlog
from fastapi import APIRouter
from pydantic import BaseModel, Field

from src.counter.pipeline import AnalysisSettings, analyze
from src.shared.config import CounterSettings, load_settings, save_settings

log = structlog.get_logger()

router = APIRouter()

MAX_TEXT_LENGTH = 2_000_000


class AnalyzeRequest(BaseModel):
    text: str = Field(..., max_length=MAX_TEXT_LENGTH)
    ignore_callouts: bool | None = None
    strip_markdown_for_char_count: bool | None = None


class AnalyzeResponse(BaseModel):
    sentence_count: int
    word_count: int
    char_count: int


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze_text(req: AnalyzeRequest) -> AnalyzeResponse:
    """Analyse req.text; omitted flags come from the persisted settings."""
    stored = load_settings()
    settings = AnalysisSettings(
        ignore_callouts=(
            stored.ignore_callouts if req.ignore_callouts is None else req.ignore_callouts
        ),
        strip_markdown_for_char_count=(
            stored.strip_markdown_for_char_count
            if req.strip_markdown_for_char_count is None
            else req.strip_markdown_for_char_count
        ),
    )
    result = analyze(req.text, settings)
    log.info("analyze_request", chars=len(req.text), **result.as_dict())
    return AnalyzeResponse(**result.as_dict())


@router.get("/settings", response_model=CounterSettings)
def get_settings() -> CounterSettings:
    return load_settings()


@router.put("/settings", response_model=CounterSettings)
def update_settings(settings: CounterSettings) -> CounterSettings:
    save_settings(settings)
    log.info("settings_updated", **settings.model_dump())
    return settings
