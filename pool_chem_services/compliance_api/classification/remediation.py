"""Tabla estática de remediación por químico y dirección (7 x 2)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

from .models import ChemicalType

Direction = Literal["low", "high"]

EMERGENCY_RECOMMENDATION = "Immediate pool closure required. Contact facility manager."

REMEDIATION: Mapping[ChemicalType, Mapping[str, str]] = MappingProxyType({
    ChemicalType.FREE_CHLORINE: MappingProxyType({
        "low": "Add liquid chlorine or granular chlorine. Check chlorine feeder operation.",
        "high": "Reduce chlorine addition. Allow natural dissipation or add sodium thiosulfate.",
    }),
    ChemicalType.TOTAL_CHLORINE: MappingProxyType({
        "low": "Increase chlorine levels. Check for chloramine formation.",
        "high": "Shock treatment may be needed to break chloramines. Test combined chlorine levels.",
    }),
    ChemicalType.PH: MappingProxyType({
        "low": "Add sodium carbonate (soda ash) to raise pH. Check alkalinity first.",
        "high": "Add muriatic acid or sodium bisulfate to lower pH. Test in small increments.",
    }),
    ChemicalType.ALKALINITY: MappingProxyType({
        "low": "Add sodium bicarbonate (baking soda) to increase alkalinity.",
        "high": "Add muriatic acid to lower alkalinity. Monitor pH changes closely.",
    }),
    ChemicalType.CYANURIC_ACID: MappingProxyType({
        "low": "Add cyanuric acid (stabilizer). Only needed for outdoor pools with chlorine.",
        "high": "Partial drain and refill required. Cannot be chemically reduced.",
    }),
    ChemicalType.CALCIUM: MappingProxyType({
        "low": "Add calcium chloride to increase hardness. Prevents equipment corrosion.",
        "high": "Partial drain and refill required. Check for scale formation on surfaces.",
    }),
    ChemicalType.TEMPERATURE: MappingProxyType({
        "low": "Check heater operation. Adjust thermostat settings.",
        "high": "Check cooling system. Reduce heater temperature or increase circulation.",
    }),
})


def get_recommendation(chemical: ChemicalType, direction: Direction) -> str:
    return REMEDIATION[chemical][direction]
