"""Utilidades comunes para recorrer lecturas parciales."""

from __future__ import annotations

import math
from typing import Iterator, Tuple

from ...classification import ChemicalReading, ChemicalType, ReadingDetail, validate_chemical


def iter_present_values(reading: ChemicalReading) -> Iterator[Tuple[ChemicalType, float]]:
    """Itera (químico, valor) en el orden de la lectura.

    Solo los valores ausentes (None) se omiten: no cuentan como test.
    ±inf pasa tal cual y las reglas MAHC lo clasifican como EMERGENCY.

    Raises:
        UnknownChemicalError: clave fuera del enum.
        ValueError: valor NaN o no numérico (lectura rota, nunca "ausente").
    """
    for key, raw in reading.items():
        chemical = ChemicalType.parse(key)
        if raw is None:
            continue
        value = float(raw)
        if math.isnan(value):
            raise ValueError(f"Valor NaN para {chemical.value}")
        yield chemical, value


def evaluate_reading(reading: ChemicalReading) -> list[ReadingDetail]:
    """Pasada única de validación por químico, compartida por informe y cierre."""
    return [
        ReadingDetail(chemical=chemical, value=value, validation=validate_chemical(value, chemical))
        for chemical, value in iter_present_values(reading)
    ]
