"""Resumen de estado de la piscina para dashboards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from ..classification import ChemicalReading, format_chemical_value, standard_for
from .shared.readings import iter_present_values
from .shared.validation import validate_chemical_reading


class PoolStatusLevel(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    CAUTION = "caution"
    CRITICAL = "critical"


@dataclass(frozen=True)
class PoolStatus:
    level: PoolStatusLevel
    message: str
    issues: Tuple[str, ...] = ()


def get_pool_status(reading: ChemicalReading) -> PoolStatus:
    """Nivel global según cuántos químicos están fuera del rango aceptable.

    Errores estructurales -> CRITICAL directamente con la lista de errores.
    """
    check = validate_chemical_reading(reading)
    if not check.is_valid:
        return PoolStatus(
            level=PoolStatusLevel.CRITICAL,
            message="Critical chemical imbalance detected",
            issues=check.errors,
        )

    issues: list[str] = []
    for chemical, value in iter_present_values(reading):
        std = standard_for(chemical)
        if value < std.min_value or value > std.max_value:
            issues.append(f"{std.description}: {format_chemical_value(value, chemical)}")

    if not issues:
        return PoolStatus(PoolStatusLevel.EXCELLENT, "All chemical levels are optimal")
    if len(issues) == 1:
        return PoolStatus(PoolStatusLevel.GOOD, "Minor adjustment needed", tuple(issues))
    if len(issues) == 2:
        return PoolStatus(PoolStatusLevel.CAUTION, "Multiple chemical adjustments needed", tuple(issues))
    return PoolStatus(PoolStatusLevel.CRITICAL, "Immediate attention required", tuple(issues))
