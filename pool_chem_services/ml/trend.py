from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from statistics import mean
from typing import Iterable, Sequence, Tuple, Union

from ..compliance_api.classification import ChemicalType
from ..utils.numeric_precision import compute_relative_change, round_half_up, safe_float

logger = logging.getLogger(__name__)

Timestamp = Union[datetime, float, int]


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class TrendConfig:
    """Config del análisis de tendencia.

    Attributes
    ----------
    threshold_ratio: float
        Banda de estabilidad como fracción de la media global de la serie.
        Un cambio entre tercios dentro de ``±threshold_ratio * media`` es STABLE.
    """

    threshold_ratio: float = 0.05


@dataclass(frozen=True)
class TrendPoint:
    timestamp: Timestamp
    value: float


@dataclass(frozen=True)
class TrendResult:
    direction: TrendDirection
    percentage: float


DEFAULT_TREND_CONFIG = TrendConfig()


def _sort_key(point: TrendPoint) -> float:
    ts = point.timestamp
    return ts.timestamp() if isinstance(ts, datetime) else float(ts)


def _coerce(readings: Iterable[Union[TrendPoint, Tuple[Timestamp, float]]]) -> list[TrendPoint]:
    points = []
    for r in readings:
        p = r if isinstance(r, TrendPoint) else TrendPoint(timestamp=r[0], value=r[1])
        # Puntos sin valor finito no aportan a la tendencia
        if safe_float(p.value, None) is not None:
            points.append(p)
    return points


def split_thirds(values: Sequence[float]) -> Tuple[Sequence[float], Sequence[float]]:
    """Primer y último tercio (división entera, mínimo 1 punto cada uno).

    Con n < 3 son el primer y el último punto. El resto de la división
    queda en el tramo central y no se usa: n=5 -> tercios de 1 punto.
    """
    third = max(1, len(values) // 3)
    return values[:third], values[-third:]


def get_trend(
    readings: Iterable[Union[TrendPoint, Tuple[Timestamp, float]]],
    chemical: Union[ChemicalType, str],
    cfg: TrendConfig = DEFAULT_TREND_CONFIG,
) -> TrendResult:
    """Clasifica la dirección de una serie comparando el primer y el último tercio.

    - percentage: |media_final - media_inicial| / media_inicial * 100 (1 decimal).
    - direction: UP/DOWN si la diferencia supera ``cfg.threshold_ratio`` por la
      media global; STABLE en otro caso.
    - Con 0 o 1 punto: (STABLE, 0.0).
    """
    chem = ChemicalType.parse(chemical)
    points = sorted(_coerce(readings), key=_sort_key)
    if len(points) < 2:
        return TrendResult(direction=TrendDirection.STABLE, percentage=0.0)

    values = [float(p.value) for p in points]
    first, last = split_thirds(values)
    first_avg = float(mean(first))
    last_avg = float(mean(last))

    difference = last_avg - first_avg
    threshold = abs(float(mean(values))) * cfg.threshold_ratio
    percentage = round_half_up(compute_relative_change(last_avg, first_avg), 1)

    if difference > threshold:
        direction = TrendDirection.UP
    elif difference < -threshold:
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.STABLE

    logger.debug(
        "[TREND] %s n=%d first=%.4f last=%.4f band=%.4f -> %s",
        chem.value, len(values), first_avg, last_avg, threshold, direction.value,
    )
    return TrendResult(direction=direction, percentage=percentage)
