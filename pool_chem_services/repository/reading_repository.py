from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Float, bindparam, text
from sqlalchemy.engine import Connection

from ..compliance_api.classification import ChemicalReading, ChemicalType
from ..compliance_api.pipelines import iter_present_values


@dataclass(frozen=True)
class ChemicalSeries:
    pool_id: str
    chemical: ChemicalType
    timestamps: list[datetime]
    values: list[float]


def ensure_schema(conn: Connection) -> None:
    conn.execute(
        text(
            """
            CREATE TABLE IF NOT EXISTS chemical_readings (
              id INTEGER PRIMARY KEY AUTOINCREMENT,
              pool_id VARCHAR(64) NOT NULL,
              chemical VARCHAR(32) NOT NULL,
              value FLOAT NOT NULL,
              measured_at TIMESTAMP NOT NULL
            )
            """
        )
    )
    conn.execute(
        text(
            """
            CREATE INDEX IF NOT EXISTS ix_chemical_readings_pool_chem_ts
            ON chemical_readings (pool_id, chemical, measured_at)
            """
        )
    )


def save_reading(
    conn: Connection,
    pool_id: str,
    reading: ChemicalReading,
    measured_at: Optional[datetime] = None,
) -> int:
    """Persiste los valores presentes de una lectura. Devuelve nº de filas."""
    measured_at = _to_utc_naive(measured_at or datetime.now(timezone.utc))

    rows = [
        {"pool_id": pool_id, "chemical": chemical.value, "value": value, "ts": measured_at}
        for chemical, value in iter_present_values(reading)
    ]
    if not rows:
        return 0

    conn.execute(
        text(
            """
            INSERT INTO chemical_readings (pool_id, chemical, value, measured_at)
            VALUES (:pool_id, :chemical, :value, :ts)
            """
        ).bindparams(bindparam("ts", type_=DateTime())),
        rows,
    )
    return len(rows)


def load_chemical_series(
    conn: Connection,
    pool_id: str,
    chemical: ChemicalType,
    limit_points: int,
) -> ChemicalSeries:
    # Últimos N puntos, devueltos en orden cronológico ascendente
    rows = conn.execute(
        text(
            """
            SELECT measured_at, value FROM (
              SELECT measured_at, value, id
              FROM chemical_readings
              WHERE pool_id = :pool_id AND chemical = :chemical
              ORDER BY measured_at DESC, id DESC
              LIMIT :limit
            ) recent
            ORDER BY measured_at ASC, id ASC
            """
        ).columns(measured_at=DateTime(), value=Float()),
        {"pool_id": pool_id, "chemical": chemical.value, "limit": limit_points},
    ).fetchall()

    ts: list[datetime] = []
    vals: list[float] = []
    for t, v in rows:
        ts.append(t.replace(tzinfo=timezone.utc))
        vals.append(float(v))

    return ChemicalSeries(pool_id=pool_id, chemical=chemical, timestamps=ts, values=vals)


def _to_utc_naive(value: datetime) -> datetime:
    # Se guarda en UTC sin tzinfo; naive se asume UTC
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
