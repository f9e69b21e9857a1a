# tests/pipeline/test_orchestrator.py
#
# End-to-end pipeline runs: Firestore (MockTransport) -> staging -> DuckDB,
# then the API repository reads the built file.
from __future__ import annotations

from pathlib import Path
from typing import Any

import duckdb
import httpx
import pytest

from api.infrastructure.repositories.duckdb_submissao_repo import DuckDBSubmissaoRepo
from pipeline.config import FirestoreSource, PipelineConfig
from pipeline.main import run_pipeline
from pipeline.output.build_duckdb import validate_tables
from pipeline.output.completude import CompletudeError
from pipeline.sources.firestore.source import FirestoreSubmissoes
from pipeline.staging.parquet_writer import read_parquet

FIRESTORE = FirestoreSource(project_id="esg-test")


def _config(tmp_path: Path) -> PipelineConfig:
    return PipelineConfig(
        data_dir=tmp_path / "data",
        duckdb_output_path=tmp_path / "output" / "diagnostico_esg.duckdb",
        firestore=FIRESTORE,
    )


def _source(documentos: list[dict[str, Any]]) -> FirestoreSubmissoes:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"documents": documentos}))
    return FirestoreSubmissoes(FIRESTORE, retries=1, client=httpx.Client(transport=transport))


def test_pipeline_completo(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    config = _config(tmp_path)
    output = run_pipeline(config, source=_source(documentos))

    assert output == config.duckdb_output_path
    assert (config.raw_dir / "firestore" / "submissions.json").exists()
    counts = validate_tables(output)
    assert counts["submissao"] == 2  # docC sem nome descartado
    assert counts["resposta"] == 6
    assert counts["categoria_score"] == 20
    assert counts["evidencia"] == 1
    assert counts["consolidado_categoria"] == 10
    assert counts["setor_participacao"] == 2


def test_api_le_banco_gerado(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    """The API repository reads the pipeline output without any conversion."""
    output = run_pipeline(_config(tmp_path), source=_source(documentos))

    conn = duckdb.connect(str(output), read_only=True)
    try:
        submissoes = DuckDBSubmissaoRepo(conn).listar()
    finally:
        conn.close()

    assert [s.respondente.nome for s in submissoes] == ["Bruno", "Ana"]  # mais recente primeiro
    ana = submissoes[1]
    assert ana.resultado.pontuacao_total == 1.5
    assert ana.resultado.pontuacao_maxima == 3.0
    assert ana.resultado.percentual == pytest.approx(50.0)
    assert ana.resultado.categorias["legislacao"].maximo == 2.0
    assert ana.evidencias[0].arquivo_nome == "lei.pdf"
    assert submissoes[0].respondente.setor == ""


def test_skip_download_reconstroi_do_staging(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    config = _config(tmp_path)
    run_pipeline(config, source=_source(documentos))
    primeira = validate_tables(config.duckdb_output_path)

    run_pipeline(config, skip_download=True)

    assert validate_tables(config.duckdb_output_path) == primeira
    colunas = read_parquet(config.staging_dir / "submissoes.parquet").columns
    assert len(colunas) == len(set(colunas))


def test_colecao_vazia_nao_substitui_banco(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    config = _config(tmp_path)
    run_pipeline(config, source=_source(documentos))

    with pytest.raises(CompletudeError, match="submissoes.parquet"):
        run_pipeline(config, source=_source([]))

    assert validate_tables(config.duckdb_output_path)["submissao"] == 2


def test_fonte_invalida_rejeitada(tmp_path: Path) -> None:
    with pytest.raises(TypeError, match="SourcePipeline"):
        run_pipeline(_config(tmp_path), source=object())  # type: ignore[arg-type]
