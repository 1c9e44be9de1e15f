from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine

from ..repository.reading_repository import ensure_schema
from .config import get_settings


logger = logging.getLogger(__name__)


def build_engine(url: str) -> Engine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, pool_pre_ping=True, future=True, connect_args=connect_args)

    # Test de conexión: ayuda a ver en logs si el servicio realmente llega a la BD
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("[DB] Test de conexión OK")
    except Exception:
        logger.exception("[DB] Test de conexión FALLÓ")

    return engine


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    settings = get_settings()
    # Log básico sin credenciales
    logger.info("[DB] Crear engine dialect=%s", settings.database_url.split(":", 1)[0])
    engine = build_engine(settings.database_url)
    with engine.begin() as conn:
        ensure_schema(conn)
    return engine


def get_db() -> Iterator[Connection]:
    with get_engine().begin() as conn:
        yield conn
