"""Clasificador de una lectura química contra la tabla MAHC.

Clasifica un valor en 4 niveles (primera regla que aplica gana):
1. EMERGENCY: valor <= critical_low o >= critical_high (cierre inmediato)
2. CRITICAL: fuera de [min, max]
3. WARNING: dentro de [min, max] pero fuera del rango ideal
4. GOOD: dentro del rango ideal

Los límites críticos son inclusivos hacia el nivel peor; min/max son
inclusivos hacia el lado seguro.
"""

from __future__ import annotations

import logging
import math
from typing import Union

from ...utils.numeric_precision import format_number
from .models import ChemicalType, Severity, ValidationResult, ValidationStatus
from .remediation import EMERGENCY_RECOMMENDATION, get_recommendation
from .standards import standard_for

logger = logging.getLogger(__name__)


def _with_unit(value: float, unit: str) -> str:
    return f"{format_number(value)} {unit}".strip()


def validate_chemical(value: float, chemical: Union[ChemicalType, str]) -> ValidationResult:
    """Clasifica un valor según el estándar MAHC del químico.

    No valida rangos físicos (negativos, pH > 14): eso es responsabilidad de
    ``validate_chemical_reading``. Solo lanza ValueError si el valor es NaN.
    """
    chem = ChemicalType.parse(chemical)
    std = standard_for(chem)

    # NaN no cae en ningún nivel; tratarlo como GOOD ocultaría una lectura rota.
    if math.isnan(value):
        raise ValueError(f"Valor NaN para {chem.value}")

    if value <= std.critical_low or value >= std.critical_high:
        logger.debug("[CLASSIFIER] %s=%s EMERGENCY", chem.value, value)
        return ValidationResult(
            status=ValidationStatus.EMERGENCY,
            severity=Severity.CRITICAL,
            message=f"EMERGENCY: {std.description} critically out of range",
            recommendation=EMERGENCY_RECOMMENDATION,
            requires_action=True,
            requires_closure=True,
        )

    if value < std.min_value or value > std.max_value:
        direction = "low" if value < std.min_value else "high"
        return ValidationResult(
            status=ValidationStatus.CRITICAL,
            severity=Severity.HIGH,
            message=f"CRITICAL: {std.description} too {direction} ({_with_unit(value, std.unit)})",
            recommendation=get_recommendation(chem, direction),
            requires_action=True,
        )

    if not std.ideal.contains(value):
        direction = "low" if value < std.ideal.min_value else "high"
        return ValidationResult(
            status=ValidationStatus.WARNING,
            severity=Severity.MEDIUM,
            message=f"WARNING: {std.description} outside ideal range ({_with_unit(value, std.unit)})",
            recommendation=get_recommendation(chem, direction),
            requires_action=True,
        )

    return ValidationResult(
        status=ValidationStatus.GOOD,
        severity=Severity.LOW,
        message=f"GOOD: {std.description} within ideal range ({_with_unit(value, std.unit)})",
    )
