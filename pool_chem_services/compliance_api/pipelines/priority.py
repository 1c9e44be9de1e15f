"""Puntuación de prioridad para ordenar incidencias simultáneas."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Union

from ..classification import (
    ChemicalReading,
    ChemicalType,
    ReadingDetail,
    ValidationResult,
    ValidationStatus,
)
from .shared.readings import evaluate_reading

BASE_PRIORITY: Mapping[ChemicalType, int] = MappingProxyType({
    ChemicalType.FREE_CHLORINE: 10,  # seguridad: desinfección
    ChemicalType.PH: 9,  # afecta la eficacia del cloro
    ChemicalType.TOTAL_CHLORINE: 8,  # cloraminas
    ChemicalType.ALKALINITY: 6,
    ChemicalType.CYANURIC_ACID: 4,
    ChemicalType.CALCIUM: 3,
    ChemicalType.TEMPERATURE: 2,  # confort
})

SEVERITY_MULTIPLIER: Mapping[ValidationStatus, int] = MappingProxyType({
    ValidationStatus.EMERGENCY: 4,
    ValidationStatus.CRITICAL: 3,
    ValidationStatus.WARNING: 2,
    ValidationStatus.GOOD: 1,
})


def get_chemical_priority(chemical: Union[ChemicalType, str], validation: ValidationResult) -> int:
    """Clave de orden (mayor = más urgente). Sin otra semántica."""
    return BASE_PRIORITY[ChemicalType.parse(chemical)] * SEVERITY_MULTIPLIER[validation.status]


def sort_by_priority(details: Iterable[ReadingDetail]) -> list[ReadingDetail]:
    """Detalles que requieren acción, de más a menos urgente (orden estable)."""
    issues = [d for d in details if d.validation.requires_action]
    return sorted(issues, key=lambda d: get_chemical_priority(d.chemical, d.validation), reverse=True)


def prioritize_issues(reading: ChemicalReading) -> list[ReadingDetail]:
    return sort_by_priority(evaluate_reading(reading))
