# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import duckdb
import pytest
from fastapi.testclient import TestClient

SCHEMA_PATH = Path(__file__).parent.parent.parent / "pipeline" / "output" / "schema.sql"

# Desabilitar rate limit em testes
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"


@pytest.fixture(scope="session")
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com o schema da aplicacao, sem submissoes."""
    conn = duckdb.connect(":memory:")
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
    yield conn
    conn.close()


@pytest.fixture(scope="session")
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from api.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    # Limpar cache de settings para pegar API_RATE_LIMIT_PER_MINUTE=0
    from api.infrastructure.config import get_settings
    get_settings.cache_clear()

    from api.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def banco_limpo(test_db: duckdb.DuckDBPyConnection) -> None:
    """Cada teste que grava comeca sem submissoes."""
    for tabela in ("resposta", "categoria_score", "evidencia", "submissao"):
        test_db.execute(f"DELETE FROM {tabela}")  # noqa: S608


SubmissaoFactory = Callable[..., dict[str, Any]]


@pytest.fixture()
def submissao_payload() -> SubmissaoFactory:
    """Monta o corpo de POST /api/submissoes. Padrao: 1.5 de 3 pontos (50%)."""

    def _payload(
        nome: str = "Maria Souza",
        setor: str = "Meio Ambiente",
        respostas: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return {
            "respondente": {"nome": nome, "setor": setor},
            "respostas": respostas if respostas is not None else {"1_1": "YES", "1_2": "NO", "2_1": "PARTIAL"},
        }

    return _payload
