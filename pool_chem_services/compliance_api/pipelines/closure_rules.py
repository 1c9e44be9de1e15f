"""Reglas de cierre de piscina (gate de seguridad)."""

from __future__ import annotations

import logging
from typing import Iterable

from ..classification import ChemicalReading, ClosureDecision, ReadingDetail, standard_for
from .shared.readings import evaluate_reading

logger = logging.getLogger(__name__)


def closure_from_details(details: Iterable[ReadingDetail]) -> ClosureDecision:
    """Filtra las validaciones que exigen cierre.

    Regla estricta: una sola lectura con requires_closure cierra la piscina.
    """
    reasons = tuple(
        f"{standard_for(d.chemical).description}: {d.validation.message}"
        for d in details
        if d.validation.requires_closure
    )
    if reasons:
        logger.warning("[CLOSURE] cierre requerido: %s", "; ".join(reasons))
    return ClosureDecision(should_close=bool(reasons), reasons=reasons)


def should_close_pool(reading: ChemicalReading) -> ClosureDecision:
    """Decide si la lectura obliga a cerrar la piscina.

    Usa la misma pasada de validación que el informe de cumplimiento, por lo
    que ``should_close`` coincide con ``overall == EMERGENCY``.
    """
    return closure_from_details(evaluate_reading(reading))
