# api/infrastructure/duckdb_connection.py
from __future__ import annotations

from pathlib import Path

import duckdb

from .config import get_settings

# Fonte unica do schema: o pipeline gera o .duckdb com o mesmo arquivo.
SCHEMA_PATH = Path(__file__).resolve().parents[2] / "pipeline" / "output" / "schema.sql"

_connection: duckdb.DuckDBPyConnection | None = None


def get_connection() -> duckdb.DuckDBPyConnection:
    global _connection  # noqa: PLW0603
    if _connection is None:
        settings = get_settings()
        # :memory: nunca e read-only (nao haveria onde ler)
        read_only = settings.duckdb_read_only and settings.duckdb_path != ":memory:"
        conn = duckdb.connect(settings.duckdb_path, read_only=read_only)
        if not read_only:
            aplicar_schema(conn)
        _connection = conn
    return _connection


def aplicar_schema(conn: duckdb.DuckDBPyConnection) -> None:
    """Idempotente: schema.sql usa CREATE TABLE IF NOT EXISTS."""
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))


def set_connection(conn: duckdb.DuckDBPyConnection) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    global _connection  # noqa: PLW0603
    _connection = conn
