"""API routes for indicator statistics."""
import logging
from typing import Any, Dict, List, Union

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from econstats.analysis.formatting import format_for_display
from econstats.analysis.models import DisplayRow, SeriesSummary, StatisticsReport
from econstats.analysis.report import compute_report
from econstats.analysis.statistics import calculate_summary
from econstats.config import DISPLAY_LOCALE
from econstats.utils.data_loader import DataLoader
from econstats.utils.validators import validate_selection

logger = logging.getLogger(__name__)

router = APIRouter()


class SampleRequest(BaseModel):
    label: str = ""
    values: List[Any] = Field(default_factory=list)


class IndicatorPayload(BaseModel):
    """Provider response; keys other than ``values`` are ignored."""

    # {indicator: {entity: {period: value}}}
    values: Dict[str, Dict[str, Dict[str, Any]]] = Field(default_factory=dict)


class IndicatorStatisticsRequest(BaseModel):
    indicator: str = ""
    entities: List[str] = Field(default_factory=list)
    periods: List[Union[str, int]] = Field(default_factory=list)
    payload: IndicatorPayload = Field(default_factory=IndicatorPayload)


@router.post("/api/statistics", response_model=StatisticsReport)
async def get_statistics(request: SampleRequest):
    """Full statistics report for one sample."""
    return compute_report(request.values, label=request.label)


@router.post("/api/statistics/display", response_model=List[DisplayRow])
async def get_display_statistics(request: SampleRequest, locale: str = DISPLAY_LOCALE):
    """Statistics report flattened into labelled display rows."""
    report = compute_report(request.values, label=request.label)
    try:
        return format_for_display(report, locale=locale)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/api/statistics/summary", response_model=SeriesSummary)
async def get_summary(request: SampleRequest):
    """Average, extremes and total percentage change of one sample."""
    return calculate_summary(request.values, label=request.label)


@router.post("/api/indicators/statistics", response_model=List[StatisticsReport])
async def get_indicator_statistics(request: IndicatorStatisticsRequest):
    """One report per selected entity, in selection order."""
    validation = validate_selection(request.indicator, request.entities, request.periods)
    if not validation.is_valid:
        raise HTTPException(status_code=400, detail=validation.errors)

    def _compute() -> List[StatisticsReport]:
        frame = DataLoader.frame_from_payload(
            request.payload.model_dump(), request.indicator, request.entities, request.periods
        )
        samples = DataLoader.samples_from_frame(frame)
        return [compute_report(samples.get(entity, []), label=entity) for entity in request.entities]

    reports = await run_in_threadpool(_compute)
    logger.info(
        "Computed %s statistics for %d entities over %d periods",
        request.indicator,
        len(reports),
        len(request.periods),
    )
    return reports


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
