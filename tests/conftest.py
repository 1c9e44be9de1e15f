"""Fixtures compartidas para los tests del motor MAHC y la API."""

from typing import Dict, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from pool_chem_services.common.db import get_db
from pool_chem_services.compliance_api.main import app
from pool_chem_services.repository import ensure_schema


@pytest.fixture
def ideal_reading() -> Dict[str, float]:
    """Lectura con todos los químicos en su rango ideal."""
    return {
        "freeChlorine": 2.0,
        "totalChlorine": 2.2,
        "ph": 7.4,
        "alkalinity": 100,
        "cyanuricAcid": 40,
        "calcium": 300,
        "temperature": 81,
    }


@pytest.fixture
def engine() -> Iterator[Engine]:
    """SQLite en memoria compartida entre conexiones."""
    eng = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        future=True,
    )
    with eng.begin() as conn:
        ensure_schema(conn)
    yield eng
    eng.dispose()


@pytest.fixture
def client(engine: Engine) -> Iterator[TestClient]:
    def _get_test_db():
        with engine.begin() as conn:
            yield conn

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
