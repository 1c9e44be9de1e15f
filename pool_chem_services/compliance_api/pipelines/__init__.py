"""Pipelines de evaluación sobre lecturas completas.

- adjustments.py: Ajustes hacia el rango ideal
- compliance_report.py: Informe de cumplimiento agregado
- closure_rules.py: Decisión de cierre de piscina
- pool_status.py: Resumen de estado para dashboards
- priority.py: Orden de incidencias simultáneas
- shared/validation.py: Validación estructural (pre-check)
"""

from .adjustments import get_adjustments
from .closure_rules import closure_from_details, should_close_pool
from .compliance_report import CLOSURE_ACTION, build_report, generate_compliance_report
from .pool_status import PoolStatus, PoolStatusLevel, get_pool_status
from .priority import (
    BASE_PRIORITY,
    SEVERITY_MULTIPLIER,
    get_chemical_priority,
    prioritize_issues,
    sort_by_priority,
)
from .shared.readings import evaluate_reading, iter_present_values
from .shared.validation import PHYSICAL_BOUNDS, validate_chemical_reading

__all__ = [
    "BASE_PRIORITY",
    "CLOSURE_ACTION",
    "PHYSICAL_BOUNDS",
    "PoolStatus",
    "PoolStatusLevel",
    "SEVERITY_MULTIPLIER",
    "build_report",
    "closure_from_details",
    "evaluate_reading",
    "generate_compliance_report",
    "get_adjustments",
    "get_chemical_priority",
    "get_pool_status",
    "iter_present_values",
    "prioritize_issues",
    "should_close_pool",
    "sort_by_priority",
    "validate_chemical_reading",
]
