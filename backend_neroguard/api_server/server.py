"""
FastAPI server — analysis, history, and report endpoints.

POST /analyze validates and analyses one input and records it in history.
History endpoints list, fetch, delete, and export past analyses as
plain-text reports. Config via env (see backend_neroguard.config).
"""

from __future__ import annotations

import uuid
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from backend_neroguard.analysis_engine import analyze
from backend_neroguard.analysis_engine.breakdown import (
    category_breakdown,
    security_metrics,
    severity_breakdown,
)
from backend_neroguard.config import get_settings
from backend_neroguard.core.exceptions import (
    HistoryEntryNotFound,
    InputValidationError,
    validate_input,
)
from backend_neroguard.history import (
    clear_history,
    delete_entry,
    init_db as history_init_db,
    load_history,
    require_entry,
    result_to_dict,
    save_to_history,
)
from backend_neroguard.neroguard_logging import get_logger
from backend_neroguard.neroguard_logging.logger import bind_request
from backend_neroguard.reporting import render_report

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------


class AnalyzeRequest(BaseModel):
    """POST /analyze body. Length is checked after trimming, not by the model."""

    input: str = Field(..., description="URL, domain, or free text to analyze")
    save: bool = Field(True, description="Record the analysis in history")


class IndicatorModel(BaseModel):
    type: str
    severity: str
    description: str


class AnalysisResultModel(BaseModel):
    riskLevel: str = Field(..., description="safe | low | medium | high | critical")
    confidence: int = Field(..., ge=0, le=95)
    summary: str
    details: list[str]
    recommendations: list[str]
    indicators: list[IndicatorModel]
    timestamp: str = Field(..., description="ISO 8601")
    inputType: str = Field(..., description="url | domain | text")


class BreakdownModel(BaseModel):
    severity: dict[str, int]
    categories: dict[str, int]
    metrics: dict[str, float]


class AnalyzeResponse(BaseModel):
    id: str | None = Field(None, description="History entry id, null when not saved")
    result: AnalysisResultModel
    breakdown: BreakdownModel


class HistoryEntryModel(BaseModel):
    id: str
    input: str
    result: AnalysisResultModel


# -----------------------------------------------------------------------------
# Lifespan
# -----------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the history table before serving."""
    try:
        history_init_db()
    except Exception as e:
        logger.warning("history_init_skip", error=str(e))
    yield


app = FastAPI(
    title="NeroGuard API",
    description="Heuristic risk analysis for URLs, domains, and free text.",
    version="0.1.0",
    lifespan=lifespan,
)


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze_input(body: AnalyzeRequest) -> dict[str, Any]:
    """
    Analyze one input. Blank or over-long input (after trimming) is rejected
    with 400 before the engine runs.
    """
    settings = get_settings()
    try:
        text = validate_input(body.input, settings.max_input_length)
    except InputValidationError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    log = bind_request(uuid.uuid4().hex)
    result = analyze(text)
    entry_id = save_to_history(text, result) if body.save else None
    log.info(
        "analyze_called",
        input_type=result.input_type,
        risk_level=result.risk_level,
        indicator_count=len(result.indicators),
        entry_id=entry_id,
    )
    return {
        "id": entry_id,
        "result": result_to_dict(result),
        "breakdown": {
            "severity": severity_breakdown(result.indicators),
            "categories": category_breakdown(result.indicators),
            "metrics": security_metrics(result),
        },
    }


@app.get("/history", response_model=list[HistoryEntryModel])
def get_history(q: str | None = None) -> list[dict[str, Any]]:
    """Return saved analyses newest first, optionally filtered by input substring."""
    return [entry.to_dict() for entry in load_history(q)]


@app.get("/history/{entry_id}", response_model=HistoryEntryModel)
def get_history_entry(entry_id: str) -> dict[str, Any]:
    try:
        return require_entry(entry_id).to_dict()
    except HistoryEntryNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@app.get("/history/{entry_id}/report", response_class=PlainTextResponse)
def get_history_report(entry_id: str) -> PlainTextResponse:
    """Plain-text report for one saved analysis."""
    try:
        entry = require_entry(entry_id)
    except HistoryEntryNotFound as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return PlainTextResponse(render_report(entry.result))


@app.delete("/history/{entry_id}")
def delete_history_entry(entry_id: str) -> dict[str, bool]:
    if not delete_entry(entry_id):
        raise HTTPException(status_code=404, detail=str(HistoryEntryNotFound(entry_id)))
    return {"deleted": True}


@app.delete("/history")
def delete_all_history() -> dict[str, int]:
    return {"deleted": clear_history()}


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(HTTPException)
def http_exception_handler(request: Any, exc: HTTPException) -> JSONResponse:
    """Consistent JSON error response for HTTPException."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )
