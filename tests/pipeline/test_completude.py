# tests/pipeline/test_completude.py
#
# Tests for the completude guard that runs before the DuckDB build.
#
# Strategy: write minimal parquet files into tmp_path and remove or empty
# one at a time.
from __future__ import annotations

from pathlib import Path

import polars as pl
import pytest

from pipeline.output.completude import (
    OPTIONAL_SOURCES,
    REQUIRED_SOURCES,
    CompletudeError,
    validar_completude,
)


def _write_parquet(directory: Path, name: str, df: pl.DataFrame) -> None:
    df.write_parquet(directory / f"{name}.parquet")


def _write_all(directory: Path) -> None:
    for name in REQUIRED_SOURCES:
        _write_parquet(directory, name, pl.DataFrame({"id": ["a"]}))


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


def test_completude_ok_sem_opcionais(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """All required files present: passes and only warns about evidencias."""
    _write_all(tmp_path)
    validar_completude(tmp_path)
    assert "evidencias" in capsys.readouterr().err


def test_completude_ok_com_opcionais(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_all(tmp_path)
    for name in OPTIONAL_SOURCES:
        _write_parquet(tmp_path, name, pl.DataFrame({"id": ["a"]}))
    validar_completude(tmp_path)
    assert capsys.readouterr().err == ""


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("faltando", REQUIRED_SOURCES)
def test_completude_falha_sem_arquivo(tmp_path: Path, faltando: str) -> None:
    _write_all(tmp_path)
    (tmp_path / f"{faltando}.parquet").unlink()
    with pytest.raises(CompletudeError, match=f"Missing staging file: {faltando}.parquet"):
        validar_completude(tmp_path)


def test_completude_falha_com_arquivo_vazio(tmp_path: Path) -> None:
    """Zero rows counts as missing: an empty municipality view must not replace a served DB."""
    _write_all(tmp_path)
    _write_parquet(tmp_path, "submissoes", pl.DataFrame({"id": []}, schema={"id": pl.Utf8}))
    with pytest.raises(CompletudeError, match="Empty staging file: submissoes.parquet"):
        validar_completude(tmp_path)


def test_evidencias_vazio_apenas_avisa(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write_all(tmp_path)
    _write_parquet(tmp_path, "evidencias", pl.DataFrame({"id": []}, schema={"id": pl.Utf8}))
    validar_completude(tmp_path)
    assert "0 rows" in capsys.readouterr().err
