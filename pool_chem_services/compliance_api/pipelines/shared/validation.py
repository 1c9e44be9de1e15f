"""Validación estructural de lecturas (pre-check de formulario).

Distinta de la clasificación MAHC: aquí se rechazan valores físicamente
imposibles (negativos, pH fuera de [0, 14], temperatura fuera de [32, 120] °F)
y se generan avisos en texto libre para valores fuera del rango ideal.
Nunca lanza por valores; los errores se devuelven en la lista.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ...classification import ChemicalReading, ChemicalType, ReadingCheck, standard_for
from ....utils.numeric_precision import format_number, is_valid_reading_value

logger = logging.getLogger(__name__)

# Límites físicos (inclusivos). None = sin límite superior.
PHYSICAL_BOUNDS: Mapping[ChemicalType, Tuple[float, Optional[float]]] = MappingProxyType({
    ChemicalType.PH: (0.0, 14.0),
    ChemicalType.TEMPERATURE: (32.0, 120.0),
})

_BOUND_ERRORS: Mapping[ChemicalType, str] = MappingProxyType({
    ChemicalType.PH: "pH must be between 0 and 14",
    ChemicalType.TEMPERATURE: "Temperature must be between 32°F and 120°F",
})


def _structural_error(chemical: ChemicalType, value: float) -> Optional[str]:
    std = standard_for(chemical)
    low, high = PHYSICAL_BOUNDS.get(chemical, (0.0, None))
    if value >= low and (high is None or value <= high):
        return None
    if chemical in _BOUND_ERRORS:
        return _BOUND_ERRORS[chemical]
    return f"{std.description} cannot be negative"


def _ideal_warning(chemical: ChemicalType, value: float) -> Optional[str]:
    std = standard_for(chemical)
    unit = std.unit
    if value < std.ideal.min_value:
        return (
            f"{std.description} ({format_number(value)}{_suffix(unit)}) is below ideal minimum "
            f"({format_number(std.ideal.min_value)}{_suffix(unit)})"
        )
    if value > std.ideal.max_value:
        return (
            f"{std.description} ({format_number(value)}{_suffix(unit)}) is above ideal maximum "
            f"({format_number(std.ideal.max_value)}{_suffix(unit)})"
        )
    return None


def _suffix(unit: str) -> str:
    # "°F" va pegado al número; "ppm" separado
    if not unit:
        return ""
    return unit if unit.startswith("°") else f" {unit}"


def validate_chemical_reading(reading: ChemicalReading) -> ReadingCheck:
    """Valida la estructura de una lectura parcial.

    - Campos ausentes (None) no generan error ni aviso.
    - Valores no numéricos o no finitos -> error.
    - Valores físicamente imposibles -> error.
    - Valores fuera del rango ideal -> aviso (no invalida la lectura).

    Returns:
        ReadingCheck(is_valid, errors, warnings); is_valid solo depende de errors.
    """
    errors: list[str] = []
    warnings: list[str] = []

    for key, raw in reading.items():
        chemical = ChemicalType.parse(key)
        if raw is None:
            continue

        std = standard_for(chemical)
        if not is_valid_reading_value(raw):
            errors.append(f"{std.description} must be a finite number")
            continue

        value = float(raw)
        error = _structural_error(chemical, value)
        if error:
            errors.append(error)
            continue

        warning = _ideal_warning(chemical, value)
        if warning:
            warnings.append(warning)

    if errors:
        logger.debug("[READING_CHECK] errores estructurales: %s", errors)

    return ReadingCheck(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
