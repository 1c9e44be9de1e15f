from __future__ import annotations

import logging
from typing import List

from fastapi import Depends, FastAPI, HTTPException, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy.engine import Connection

from ..common.config import get_settings
from ..common.db import get_db
from ..ml.trend import TrendConfig, get_trend
from ..repository.reading_repository import load_chemical_series, save_reading
from .classification import (
    MAHC_STANDARDS,
    ChemicalReading,
    ChemicalType,
    UnknownChemicalError,
    standard_for,
    validate_chemical,
)
from .metrics import REGISTRY, record_closure, record_report
from .pipelines import (
    build_report,
    closure_from_details,
    evaluate_reading,
    get_adjustments,
    get_pool_status,
    sort_by_priority,
    validate_chemical_reading,
)
from .schemas import (
    AdjustmentOut,
    ChemicalTestIn,
    ClosureOut,
    ComplianceReportOut,
    EvaluationOut,
    PoolStatusOut,
    ReadingCheckOut,
    ReadingDetailOut,
    ReadingsIn,
    StandardOut,
    StoredTestOut,
    TrendOut,
    ValidateIn,
    ValidationOut,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Pool Chemistry Compliance Service", version="0.1.0")


def _parse_chemical(chemical: str) -> ChemicalType:
    try:
        return ChemicalType.parse(chemical)
    except UnknownChemicalError:
        raise HTTPException(status_code=404, detail=f"Unknown chemical: {chemical}") from None


def _evaluate(readings: ChemicalReading) -> EvaluationOut:
    # Una sola pasada de validación para informe, cierre y prioridades
    details = evaluate_reading(readings)
    report = build_report(details)
    closure = closure_from_details(details)

    record_report(report)
    record_closure(closure)

    adjustments = {
        chemical: AdjustmentOut(action=adj.action, amount=adj.amount, unit=adj.unit)
        for chemical, adj in get_adjustments(readings).items()
    }
    return EvaluationOut(
        report=ComplianceReportOut.from_report(report),
        closure=ClosureOut.from_decision(closure),
        adjustments=adjustments,
        issues=[ReadingDetailOut.from_detail(d) for d in sort_by_priority(details)],
        status=PoolStatusOut.from_status(get_pool_status(readings)),
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/standards", response_model=List[StandardOut])
def list_standards() -> List[StandardOut]:
    return [StandardOut.from_standard(chem, std) for chem, std in MAHC_STANDARDS.items()]


@app.get("/standards/{chemical}", response_model=StandardOut)
def get_standard(chemical: str) -> StandardOut:
    chem = _parse_chemical(chemical)
    return StandardOut.from_standard(chem, standard_for(chem))


@app.post("/validate", response_model=ValidationOut)
def validate_value(payload: ValidateIn) -> ValidationOut:
    return ValidationOut.from_result(validate_chemical(payload.value, payload.chemical))


@app.post("/reports", response_model=EvaluationOut)
def create_report(payload: ReadingsIn) -> EvaluationOut:
    return _evaluate(payload.readings)


@app.post("/readings/check", response_model=ReadingCheckOut)
def check_reading(payload: ReadingsIn) -> ReadingCheckOut:
    return ReadingCheckOut.from_check(validate_chemical_reading(payload.readings))


@app.post("/pools/{pool_id}/tests", response_model=StoredTestOut)
def record_test(pool_id: str, payload: ChemicalTestIn, db: Connection = Depends(get_db)) -> StoredTestOut:
    check = validate_chemical_reading(payload.readings)
    if not check.is_valid:
        logger.info("[API] test rechazado pool=%s errors=%s", pool_id, check.errors)
        raise HTTPException(status_code=422, detail={"errors": check.errors, "warnings": check.warnings})

    stored = save_reading(db, pool_id, payload.readings, payload.measured_at)
    evaluation = _evaluate(payload.readings)
    if evaluation.closure.should_close:
        logger.warning("[API] pool=%s requiere cierre: %s", pool_id, evaluation.closure.reasons)
    return StoredTestOut(pool_id=pool_id, stored=stored, evaluation=evaluation)


@app.get("/pools/{pool_id}/trend/{chemical}", response_model=TrendOut)
def chemical_trend(pool_id: str, chemical: str, db: Connection = Depends(get_db)) -> TrendOut:
    chem = _parse_chemical(chemical)
    settings = get_settings()

    series = load_chemical_series(db, pool_id, chem, settings.trend_max_points)
    if not series.values:
        raise HTTPException(status_code=404, detail=f"No history for {chem.value} in pool {pool_id}")

    trend = get_trend(
        zip(series.timestamps, series.values),
        chem,
        TrendConfig(threshold_ratio=settings.trend_threshold_ratio),
    )
    return TrendOut(
        pool_id=pool_id,
        chemical=chem,
        points=len(series.values),
        direction=trend.direction,
        percentage=trend.percentage,
    )


@app.get("/metrics")
def metrics() -> Response:
    return Response(generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
