"""Tabla de estándares MAHC (Model Aquatic Health Code).

Configuración estática: se construye una vez al importar y nunca se muta.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from ...utils.numeric_precision import format_fixed
from .models import ChemicalStandard, ChemicalType, IdealRange, UnknownChemicalError

MAHC_STANDARDS: Mapping[ChemicalType, ChemicalStandard] = MappingProxyType({
    ChemicalType.FREE_CHLORINE: ChemicalStandard(
        min_value=1.0,
        max_value=3.0,
        ideal=IdealRange(1.5, 2.5),
        unit="ppm",
        critical_low=0.5,
        critical_high=5.0,
        description="Free Available Chlorine",
        regulation="MAHC 5.7.3.1.1",
    ),
    ChemicalType.TOTAL_CHLORINE: ChemicalStandard(
        min_value=1.0,
        max_value=4.0,
        ideal=IdealRange(1.5, 3.0),
        unit="ppm",
        critical_low=0.5,
        critical_high=6.0,
        description="Total Available Chlorine",
        regulation="MAHC 5.7.3.1.2",
    ),
    ChemicalType.PH: ChemicalStandard(
        min_value=7.2,
        max_value=7.6,
        ideal=IdealRange(7.3, 7.5),
        unit="",
        critical_low=6.8,
        critical_high=8.0,
        description="pH Level",
        regulation="MAHC 5.7.3.2",
    ),
    ChemicalType.ALKALINITY: ChemicalStandard(
        min_value=80,
        max_value=120,
        ideal=IdealRange(90, 110),
        unit="ppm",
        critical_low=60,
        critical_high=180,
        description="Total Alkalinity",
        regulation="MAHC 5.7.3.3",
    ),
    ChemicalType.CYANURIC_ACID: ChemicalStandard(
        min_value=30,
        max_value=50,
        ideal=IdealRange(35, 45),
        unit="ppm",
        critical_low=10,
        critical_high=100,
        description="Cyanuric Acid (Stabilizer)",
        regulation="MAHC 5.7.3.4",
    ),
    ChemicalType.CALCIUM: ChemicalStandard(
        min_value=200,
        max_value=400,
        ideal=IdealRange(250, 350),
        unit="ppm",
        critical_low=150,
        critical_high=500,
        description="Calcium Hardness",
        regulation="MAHC 5.7.3.5",
    ),
    ChemicalType.TEMPERATURE: ChemicalStandard(
        min_value=78,
        max_value=84,
        ideal=IdealRange(80, 82),
        unit="°F",
        critical_low=75,
        critical_high=90,
        description="Water Temperature",
        regulation="MAHC 4.7.3.1",
    ),
})


# Decimales de display por químico; el resto se redondea a enteros.
DISPLAY_PRECISION: Mapping[ChemicalType, int] = MappingProxyType({
    ChemicalType.FREE_CHLORINE: 1,
    ChemicalType.TOTAL_CHLORINE: 1,
    ChemicalType.PH: 1,
})


def standard_for(chemical: Union[ChemicalType, str]) -> ChemicalStandard:
    """Obtiene el estándar de un químico.

    Raises:
        UnknownChemicalError: clave fuera del enum (error de programación).
    """
    chem = ChemicalType.parse(chemical)
    try:
        return MAHC_STANDARDS[chem]
    except KeyError:
        raise UnknownChemicalError(chem) from None


def display_precision(chemical: Union[ChemicalType, str]) -> int:
    return DISPLAY_PRECISION.get(ChemicalType.parse(chemical), 0)


def _format_span(chemical: Union[ChemicalType, str], low: float, high: float, unit: str) -> str:
    decimals = display_precision(chemical)
    return f"{format_fixed(low, decimals)}-{format_fixed(high, decimals)} {unit}".strip()


def get_acceptable_range(chemical: Union[ChemicalType, str]) -> str:
    """Rango aceptable MAHC para display, p.ej. ``"1.0-3.0 ppm"``."""
    std = standard_for(chemical)
    return _format_span(chemical, std.min_value, std.max_value, std.unit)


def get_ideal_range(chemical: Union[ChemicalType, str]) -> str:
    """Rango ideal para display, p.ej. ``"7.3-7.5"``."""
    std = standard_for(chemical)
    return _format_span(chemical, std.ideal.min_value, std.ideal.max_value, std.unit)


def format_chemical_value(value: float, chemical: Union[ChemicalType, str]) -> str:
    """Valor con la precisión del químico y su unidad: ``"7.5"``, ``"100 ppm"``."""
    std = standard_for(chemical)
    return f"{format_fixed(value, display_precision(chemical))} {std.unit}".strip()
