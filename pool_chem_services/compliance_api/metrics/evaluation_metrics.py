"""Métricas Prometheus de evaluación química.

Se registran en la capa de servicio (API / CLI); el motor de evaluación
permanece puro y sin efectos secundarios.
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter

from ..classification import ClosureDecision, ComplianceReport

REGISTRY = CollectorRegistry(auto_describe=True)

VALIDATIONS_TOTAL = Counter(
    "pool_chem_validations_total",
    "Chemical validations by chemical and status",
    ["chemical", "status"],  # status: good, warning, critical, emergency
    registry=REGISTRY,
)

REPORTS_TOTAL = Counter(
    "pool_chem_reports_total",
    "Compliance reports generated by overall verdict",
    ["overall"],
    registry=REGISTRY,
)

CLOSURES_TOTAL = Counter(
    "pool_chem_closures_total",
    "Readings that required immediate pool closure",
    registry=REGISTRY,
)


def record_report(report: ComplianceReport) -> None:
    for detail in report.details:
        VALIDATIONS_TOTAL.labels(
            chemical=detail.chemical.value,
            status=detail.validation.status.value,
        ).inc()
    REPORTS_TOTAL.labels(overall=report.overall.value).inc()


def record_closure(decision: ClosureDecision) -> None:
    if decision.should_close:
        CLOSURES_TOTAL.inc()
