"""Informe de cumplimiento agregado para un test completo.

Regla de veredicto (peor nivel presente):
EMERGENCY > NON_COMPLIANT > WARNING > COMPLIANT
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from ..classification import (
    ChemicalReading,
    ComplianceReport,
    ComplianceVerdict,
    ReadingDetail,
    ValidationStatus,
)
from .shared.readings import evaluate_reading

logger = logging.getLogger(__name__)

CLOSURE_ACTION = "IMMEDIATE POOL CLOSURE REQUIRED"


class _OrderedSet:
    """Conjunto con orden de inserción para deduplicar mensajes."""

    def __init__(self) -> None:
        self._items: dict[str, None] = {}

    def add(self, item: Optional[str]) -> None:
        if item:
            self._items.setdefault(item, None)

    def to_tuple(self) -> Tuple[str, ...]:
        return tuple(self._items)


def _verdict(warning: int, critical: int, emergency: int) -> ComplianceVerdict:
    if emergency > 0:
        return ComplianceVerdict.EMERGENCY
    if critical > 0:
        return ComplianceVerdict.NON_COMPLIANT
    if warning > 0:
        return ComplianceVerdict.WARNING
    return ComplianceVerdict.COMPLIANT


def build_report(details: Iterable[ReadingDetail]) -> ComplianceReport:
    """Construye el informe a partir de validaciones ya calculadas."""
    details = tuple(details)
    counts = {status: 0 for status in ValidationStatus}
    recommendations = _OrderedSet()
    required_actions = _OrderedSet()

    for detail in details:
        validation = detail.validation
        counts[validation.status] += 1
        if validation.status is ValidationStatus.WARNING:
            recommendations.add(validation.recommendation)
        elif validation.status is ValidationStatus.CRITICAL:
            required_actions.add(validation.recommendation)
        elif validation.status is ValidationStatus.EMERGENCY:
            required_actions.add(CLOSURE_ACTION)
            required_actions.add(validation.recommendation)

    overall = _verdict(
        counts[ValidationStatus.WARNING],
        counts[ValidationStatus.CRITICAL],
        counts[ValidationStatus.EMERGENCY],
    )
    if overall is ComplianceVerdict.EMERGENCY:
        logger.warning(
            "[COMPLIANCE] veredicto EMERGENCY: %d químico(s) en nivel crítico de cierre",
            counts[ValidationStatus.EMERGENCY],
        )
    else:
        logger.debug("[COMPLIANCE] veredicto=%s tests=%d", overall.value, len(details))

    return ComplianceReport(
        overall=overall,
        total_tests=len(details),
        passed_tests=counts[ValidationStatus.GOOD],
        warning_tests=counts[ValidationStatus.WARNING],
        critical_tests=counts[ValidationStatus.CRITICAL],
        emergency_tests=counts[ValidationStatus.EMERGENCY],
        details=details,
        recommendations=recommendations.to_tuple(),
        required_actions=required_actions.to_tuple(),
    )


def generate_compliance_report(reading: ChemicalReading) -> ComplianceReport:
    """Valida cada químico presente y agrega el resultado.

    Químicos ausentes (None) se omiten y no cuentan en los totales. Los
    detalles conservan el orden de la lectura de entrada.
    """
    return build_report(evaluate_reading(reading))
