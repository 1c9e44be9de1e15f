"""Funciones canónicas de precisión numérica.

Política de precisión:
- Cálculos internos: Python float (IEEE 754 double), sin redondeos intermedios
- Redondeo: SOLO en frontera (UI / respuesta de la API)
- Redondeo half-up en frontera, igual que los kits de test de piscina
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


def safe_float(value, default: Optional[float] = 0.0) -> Optional[float]:
    """Convierte un valor a float con validación de NaN/Infinity.

    Args:
        value: Valor a convertir (puede ser None, str, Decimal, etc.)
        default: Valor por defecto si es inválido

    Returns:
        Float válido o default si el valor es None, NaN o Infinity
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        f = float(value)
        if not math.isfinite(f):
            return default
        return f
    except (TypeError, ValueError):
        return default


def is_valid_reading_value(value) -> bool:
    """True si el valor es un número finito (bool no cuenta como número)."""
    return safe_float(value, None) is not None


def round_half_up(value: float, decimals: int = 0) -> float:
    """Redondea alejándose de cero en el punto medio (2.5 -> 3, -2.5 -> -3).

    USAR SOLO para display o respuestas, nunca para cálculos intermedios.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_fixed(value: float, decimals: int) -> str:
    """Formatea con decimales fijos usando redondeo half-up."""
    if not math.isfinite(value):
        return "N/A"
    quantum = Decimal(1).scaleb(-decimals)
    return str(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Representación corta para mensajes: 7.0 -> '7', 7.25 -> '7.25'."""
    if not math.isfinite(value):
        return "N/A"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def compute_relative_change(current: float, previous: float) -> float:
    """Cambio relativo absoluto en porcentaje.

    Sin base (previous == 0): 0.0 si no hay cambio, 100.0 en otro caso.
    """
    if not math.isfinite(current) or not math.isfinite(previous):
        return 0.0
    if previous == 0:
        return 0.0 if current == 0 else 100.0
    return abs(current - previous) / abs(previous) * 100.0
