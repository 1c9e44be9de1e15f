"""Recomendador de ajustes hacia el rango ideal."""

from __future__ import annotations

from ..classification import (
    Adjustment,
    AdjustmentAction,
    ChemicalReading,
    ChemicalType,
    display_precision,
    standard_for,
)
from ...utils.numeric_precision import round_half_up
from .shared.readings import iter_present_values


def get_adjustments(reading: ChemicalReading) -> dict[ChemicalType, Adjustment]:
    """Calcula dirección y magnitud de corrección por químico.

    Solo incluye químicos fuera de su rango ideal; los que están dentro no
    aparecen en el resultado. La magnitud es la distancia al centro del rango
    ideal, redondeada a la precisión de display del químico.
    """
    adjustments: dict[ChemicalType, Adjustment] = {}
    for chemical, value in iter_present_values(reading):
        std = standard_for(chemical)
        if std.ideal.contains(value):
            continue
        action = AdjustmentAction.INCREASE if value < std.ideal.min_value else AdjustmentAction.DECREASE
        amount = round_half_up(abs(std.ideal.target - value), display_precision(chemical))
        adjustments[chemical] = Adjustment(action=action, amount=amount, unit=std.unit)
    return adjustments
