# pipeline/output/build_duckdb.py
#
# Atomic DuckDB build: staging Parquet files -> final .duckdb artifact that
# the API opens with DUCKDB_READ_ONLY=true.
#
# Design decisions:
#   - Atomicity: the build writes to a .tmp.duckdb and renames it over the
#     final path only on success. On failure the tmp file is deleted and the
#     previous output is untouched, so the API never serves a half-built file.
#   - Schema comes from schema.sql, the same file the API applies to writable
#     connections. Both sides agree on table shapes by construction.
#   - Staging files are loaded with DuckDB's native read_parquet(), selecting
#     only the columns shared by table and file. Staging frames may carry
#     helper columns that the schema does not know about.
#   - The staging stem -> table mapping is explicit. A new staging file
#     without a mapping entry is not loaded by accident.
from __future__ import annotations

from pathlib import Path

import duckdb

from pipeline.log import log

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

# Staging parquet stem -> table in schema.sql. Parent table first.
STAGING_TO_TABLE: dict[str, str] = {
    "submissoes": "submissao",
    "respostas": "resposta",
    "categoria_scores": "categoria_score",
    "evidencias": "evidencia",
    "consolidado_categorias": "consolidado_categoria",
    "setores": "setor_participacao",
}


def build_duckdb(staging_dir: Path, output_path: Path) -> Path:
    """Build the DuckDB database atomically from staging Parquet files.

    Args:
        staging_dir:  Directory containing staging ``.parquet`` files.
        output_path:  Desired final path for the DuckDB database.

    Returns:
        The final output_path after a successful rename.

    Raises:
        Any exception from duckdb or the filesystem propagates unchanged after
        cleaning up the tmp file.
    """
    tmp_path = output_path.with_suffix(".tmp.duckdb")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Stale tmp from a crashed run
    if tmp_path.exists():
        tmp_path.unlink()

    try:
        conn = duckdb.connect(str(tmp_path))
        try:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
            _load_staging_data(conn, staging_dir)
        finally:
            conn.close()

        tmp_path.replace(output_path)
        return output_path

    except Exception:
        if tmp_path.exists():
            tmp_path.unlink()
        raise


def _load_staging_data(conn: duckdb.DuckDBPyConnection, staging_dir: Path) -> None:
    """Insert every existing staging Parquet into its table.

    Missing files are skipped; validar_completude() decides beforehand which
    ones are mandatory.
    """
    loaded = 0
    for file_stem, table_name in STAGING_TO_TABLE.items():
        parquet_path = staging_dir / f"{file_stem}.parquet"
        if not parquet_path.exists():
            continue

        log(f"  Loading {file_stem} -> {table_name}...")

        # S608 noqa: table_name comes from STAGING_TO_TABLE and posix_path is a
        # local staging path. Neither is user-controlled.
        table_cols = [
            row[0]
            for row in conn.execute(
                "SELECT column_name FROM information_schema.columns WHERE table_name = ? ORDER BY ordinal_position",
                [table_name],
            ).fetchall()
        ]

        posix_path = parquet_path.as_posix()
        parquet_cols = {
            row[0]
            for row in conn.execute(f"SELECT name FROM parquet_schema('{posix_path}')").fetchall()  # noqa: S608
        }

        shared_cols = [c for c in table_cols if c in parquet_cols]
        if not shared_cols:
            continue

        cols_sql = ", ".join(shared_cols)
        conn.execute(
            f"INSERT INTO {table_name} ({cols_sql}) "  # noqa: S608
            f"SELECT {cols_sql} FROM read_parquet('{posix_path}')"
        )
        loaded += 1

    log(f"  DuckDB: {loaded} tables loaded")


def validate_tables(output_path: Path) -> dict[str, int]:
    """Open the finished DuckDB read-only and return row counts per table."""
    conn = duckdb.connect(str(output_path), read_only=True)
    try:
        counts: dict[str, int] = {}
        for (table_name,) in conn.execute("SHOW TABLES").fetchall():
            row = conn.execute(f"SELECT COUNT(*) FROM {table_name}").fetchone()  # noqa: S608
            counts[table_name] = int(row[0]) if row else 0
        return counts
    finally:
        conn.close()
