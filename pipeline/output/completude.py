# pipeline/output/completude.py
#
# Completude validation: asserts that all required staging files are present
# and non-empty before the DuckDB build begins.
#
# Design decisions:
#   - This is a pure guard function. It reads files but does not write or
#     modify anything. Raised exceptions are the only side effect.
#   - REQUIRED_SOURCES is a module-level tuple so it can be imported by tests
#     and the orchestrator without instantiating anything.
#   - A file with 0 rows is treated as missing: replacing a served database
#     with an empty one is worse than an explicit failure.
#   - The error message always includes the offending file name.
#
# ADR: evidencias is optional. Most submissions carry no evidence at all, and
# a collection without any is a valid state. A warning is logged instead.
from __future__ import annotations

from pathlib import Path

import polars as pl

from pipeline.log import warn

REQUIRED_SOURCES: tuple[str, ...] = (
    "submissoes",
    "respostas",
    "categoria_scores",
    "consolidado_categorias",
    "setores",
)

OPTIONAL_SOURCES: tuple[str, ...] = ("evidencias",)


class CompletudeError(Exception):
    """Raised when one or more required staging files are missing or empty.

    The message identifies the offending file so the operator knows which
    step to re-run.
    """


def _contar_linhas(path: Path) -> int:
    return int(pl.scan_parquet(path).select(pl.len()).collect().item())


def validar_completude(staging_dir: Path) -> None:
    """Assert that all required staging Parquet files exist and have rows.

    Raises:
        CompletudeError: if any required file is absent or contains zero rows.
    """
    for source in REQUIRED_SOURCES:
        path = staging_dir / f"{source}.parquet"

        if not path.exists():
            raise CompletudeError(f"Missing staging file: {source}.parquet (expected at {path})")

        if _contar_linhas(path) == 0:
            raise CompletudeError(f"Empty staging file: {source}.parquet (0 rows). Re-run the Firestore sync.")

    for source in OPTIONAL_SOURCES:
        path = staging_dir / f"{source}.parquet"
        if not path.exists():
            warn(f"optional source '{source}' missing, skipping.")
        elif _contar_linhas(path) == 0:
            warn(f"optional source '{source}' has 0 rows.")
