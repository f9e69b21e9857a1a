# tests/pipeline/test_build_atomico.py
#
# Tests for the atomic DuckDB build.
#
# Strategy: staging parquets are produced by the real transforms from a tiny
# in-memory dataset, so the loaded tables have the exact shape the pipeline
# writes. Failure tests break a primary key and check that nothing is left
# behind.
from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path

import duckdb
import polars as pl
import pytest

from pipeline.output.build_duckdb import build_duckdb, validate_tables
from pipeline.transform.consolidacao import (
    calcular_categoria_scores,
    calcular_resultados,
    consolidar_categorias,
    contar_setores,
)


def _write_parquet(directory: Path, name: str, df: pl.DataFrame) -> None:
    df.write_parquet(directory / f"{name}.parquet")


def _write_staging(directory: Path, submissoes: pl.DataFrame | None = None) -> None:
    if submissoes is None:
        submissoes = pl.DataFrame(
            {
                "id": ["s1", "s2"],
                "registrada_em": [datetime(2025, 3, 1, 10), datetime(2025, 3, 2, 11)],
                "nome": ["Ana", "Bruno"],
                "setor": ["Obras", ""],
            }
        )
    respostas = pl.DataFrame(
        {
            "fk_submissao": ["s1", "s1", "s2"],
            "pergunta_id": ["1_1", "2_1", "1_1"],
            "valor": ["YES", "NA", "PARTIAL"],
        }
    )
    scores = calcular_categoria_scores(submissoes, respostas)
    resultados = calcular_resultados(submissoes, scores)
    _write_parquet(directory, "submissoes", resultados)
    _write_parquet(directory, "respostas", respostas)
    _write_parquet(directory, "categoria_scores", scores)
    _write_parquet(directory, "consolidado_categorias", consolidar_categorias(scores))
    _write_parquet(directory, "setores", contar_setores(resultados))


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


def test_build_cria_todas_as_tabelas(tmp_path: Path) -> None:
    staging = tmp_path / "staging"
    staging.mkdir()
    _write_staging(staging)
    output = tmp_path / "out" / "diagnostico.duckdb"

    assert build_duckdb(staging, output) == output
    assert not output.with_suffix(".tmp.duckdb").exists()

    counts = validate_tables(output)
    assert counts["submissao"] == 2
    assert counts["resposta"] == 3
    assert counts["categoria_score"] == 20
    assert counts["consolidado_categoria"] == 10
    assert counts["setor_participacao"] == 2
    assert counts["evidencia"] == 0  # opcional, ausente


def test_build_grava_resultado_recalculado(tmp_path: Path) -> None:
    _write_staging(tmp_path)
    output = tmp_path / "x.duckdb"
    build_duckdb(tmp_path, output)

    conn = duckdb.connect(str(output), read_only=True)
    try:
        rows = conn.execute("SELECT id, percentual, nivel FROM submissao ORDER BY id").fetchall()
    finally:
        conn.close()
    assert rows == [("s1", 100.0, "Excelente"), ("s2", 50.0, "Em Desenvolvimento")]


def test_build_remove_tmp_antigo(tmp_path: Path) -> None:
    _write_staging(tmp_path)
    output = tmp_path / "x.duckdb"
    output.with_suffix(".tmp.duckdb").write_bytes(b"lixo de execucao anterior")

    build_duckdb(tmp_path, output)
    assert validate_tables(output)["submissao"] == 2


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


def _submissoes_duplicadas() -> pl.DataFrame:
    return pl.DataFrame(
        {
            "id": ["s1", "s1"],
            "registrada_em": [datetime(2025, 3, 1), datetime(2025, 3, 1)],
            "nome": ["Ana", "Ana"],
            "setor": ["", ""],
        }
    )


def test_build_falha_sem_deixar_tmp(tmp_path: Path) -> None:
    _write_staging(tmp_path, _submissoes_duplicadas())
    output = tmp_path / "x.duckdb"

    with pytest.raises(duckdb.ConstraintException):
        build_duckdb(tmp_path, output)

    assert not output.exists()
    assert not output.with_suffix(".tmp.duckdb").exists()


def test_build_does_not_overwrite_existing_output_on_failure(tmp_path: Path) -> None:
    """A failed build leaves a previously existing valid output file untouched."""
    boa = tmp_path / "boa"
    boa.mkdir()
    _write_staging(boa)
    output = tmp_path / "x.duckdb"
    build_duckdb(boa, output)
    mtime = output.stat().st_mtime

    time.sleep(0.01)
    ruim = tmp_path / "ruim"
    ruim.mkdir()
    _write_staging(ruim, _submissoes_duplicadas())
    with pytest.raises(duckdb.ConstraintException):
        build_duckdb(ruim, output)

    assert output.stat().st_mtime == mtime
    assert validate_tables(output)["submissao"] == 2
