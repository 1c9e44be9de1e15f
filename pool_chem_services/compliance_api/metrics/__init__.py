from .evaluation_metrics import (
    CLOSURES_TOTAL,
    REGISTRY,
    REPORTS_TOTAL,
    VALIDATIONS_TOTAL,
    record_closure,
    record_report,
)

__all__ = [
    "CLOSURES_TOTAL",
    "REGISTRY",
    "REPORTS_TOTAL",
    "VALIDATIONS_TOTAL",
    "record_closure",
    "record_report",
]
