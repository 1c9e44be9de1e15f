from __future__ import annotations

from datetime import datetime
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, Field

from ..ml.trend import TrendDirection
from .classification import (
    AdjustmentAction,
    ChemicalStandard,
    ChemicalType,
    ClosureDecision,
    ComplianceReport,
    ComplianceVerdict,
    ReadingCheck,
    ReadingDetail,
    Severity,
    ValidationResult,
    ValidationStatus,
    format_chemical_value,
    get_acceptable_range,
    get_ideal_range,
)
from .pipelines import PoolStatus, PoolStatusLevel, get_chemical_priority


# NaN/Infinity no son lecturas válidas en el wire
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]


class StandardOut(BaseModel):
    chemical: ChemicalType
    description: str
    unit: str
    min_value: float
    max_value: float
    ideal_min: float
    ideal_max: float
    critical_low: float
    critical_high: float
    regulation: str
    acceptable_range: str
    ideal_range: str

    @classmethod
    def from_standard(cls, chemical: ChemicalType, std: ChemicalStandard) -> "StandardOut":
        return cls(
            chemical=chemical,
            description=std.description,
            unit=std.unit,
            min_value=std.min_value,
            max_value=std.max_value,
            ideal_min=std.ideal.min_value,
            ideal_max=std.ideal.max_value,
            critical_low=std.critical_low,
            critical_high=std.critical_high,
            regulation=std.regulation,
            acceptable_range=get_acceptable_range(chemical),
            ideal_range=get_ideal_range(chemical),
        )


class ValidateIn(BaseModel):
    chemical: ChemicalType
    value: float = Field(..., allow_inf_nan=False)


class ValidationOut(BaseModel):
    status: ValidationStatus
    severity: Severity
    message: str
    recommendation: Optional[str] = None
    requires_action: bool
    requires_closure: bool

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationOut":
        return cls(
            status=result.status,
            severity=result.severity,
            message=result.message,
            recommendation=result.recommendation,
            requires_action=result.requires_action,
            requires_closure=result.requires_closure,
        )


class ReadingsIn(BaseModel):
    # El orden de las claves se conserva en los detalles del informe
    readings: Dict[ChemicalType, Optional[FiniteFloat]] = Field(default_factory=dict)


class ChemicalTestIn(ReadingsIn):
    measured_at: Optional[datetime] = None


class ReadingDetailOut(BaseModel):
    chemical: ChemicalType
    value: float
    formatted_value: str
    priority: int
    validation: ValidationOut

    @classmethod
    def from_detail(cls, detail: ReadingDetail) -> "ReadingDetailOut":
        return cls(
            chemical=detail.chemical,
            value=detail.value,
            formatted_value=format_chemical_value(detail.value, detail.chemical),
            priority=get_chemical_priority(detail.chemical, detail.validation),
            validation=ValidationOut.from_result(detail.validation),
        )


class ComplianceReportOut(BaseModel):
    overall: ComplianceVerdict
    total_tests: int
    passed_tests: int
    warning_tests: int
    critical_tests: int
    emergency_tests: int
    details: List[ReadingDetailOut] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    required_actions: List[str] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: ComplianceReport) -> "ComplianceReportOut":
        return cls(
            overall=report.overall,
            total_tests=report.total_tests,
            passed_tests=report.passed_tests,
            warning_tests=report.warning_tests,
            critical_tests=report.critical_tests,
            emergency_tests=report.emergency_tests,
            details=[ReadingDetailOut.from_detail(d) for d in report.details],
            recommendations=list(report.recommendations),
            required_actions=list(report.required_actions),
        )


class ClosureOut(BaseModel):
    should_close: bool
    reasons: List[str] = Field(default_factory=list)

    @classmethod
    def from_decision(cls, decision: ClosureDecision) -> "ClosureOut":
        return cls(should_close=decision.should_close, reasons=list(decision.reasons))


class AdjustmentOut(BaseModel):
    action: AdjustmentAction
    amount: float
    unit: str


class PoolStatusOut(BaseModel):
    level: PoolStatusLevel
    message: str
    issues: List[str] = Field(default_factory=list)

    @classmethod
    def from_status(cls, status: PoolStatus) -> "PoolStatusOut":
        return cls(level=status.level, message=status.message, issues=list(status.issues))


class EvaluationOut(BaseModel):
    report: ComplianceReportOut
    closure: ClosureOut
    adjustments: Dict[ChemicalType, AdjustmentOut] = Field(default_factory=dict)
    issues: List[ReadingDetailOut] = Field(default_factory=list)
    status: PoolStatusOut


class ReadingCheckOut(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @classmethod
    def from_check(cls, check: ReadingCheck) -> "ReadingCheckOut":
        return cls(is_valid=check.is_valid, errors=list(check.errors), warnings=list(check.warnings))


class StoredTestOut(BaseModel):
    pool_id: str
    stored: int
    evaluation: EvaluationOut


class TrendOut(BaseModel):
    pool_id: str
    chemical: ChemicalType
    points: int
    direction: TrendDirection
    percentage: float
