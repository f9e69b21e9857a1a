# tests/pipeline/test_ingestao_firestore.py
#
# Tests for Firestore typed-value decoding, parse and validate.
# Pure: tmp_path only, no network.
from __future__ import annotations

import json
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

import polars as pl

from pipeline.sources.firestore.parse import (
    EVIDENCIAS_SCHEMA,
    decode_value,
    load_documents,
    parse_evidencias,
    parse_respostas,
    parse_submissoes,
    parse_timestamp,
    submissao_id,
)
from pipeline.sources.firestore.validate import (
    validate_evidencias,
    validate_respostas,
    validate_submissoes,
)


def _load(tmp_path: Path, documentos: list[dict[str, Any]]) -> list[dict[str, Any]]:
    raw = tmp_path / "submissions.json"
    raw.write_text(json.dumps(documentos), encoding="utf-8")
    return load_documents(raw)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def test_decode_value_tipos_escalares() -> None:
    assert decode_value({"stringValue": "x"}) == "x"
    assert decode_value({"integerValue": "42"}) == 42
    assert decode_value({"doubleValue": 0.5}) == 0.5
    assert decode_value({"booleanValue": True}) is True
    assert decode_value({"nullValue": None}) is None


def test_decode_value_map_e_array() -> None:
    value = {
        "mapValue": {
            "fields": {
                "a": {"arrayValue": {"values": [{"integerValue": "1"}, {"stringValue": "b"}]}},
                "vazio": {"mapValue": {}},
            }
        }
    }
    assert decode_value(value) == {"a": [1, "b"], "vazio": {}}


def test_load_documents_aceita_resposta_paginada(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    raw = tmp_path / "page.json"
    raw.write_text(json.dumps({"documents": documentos}), encoding="utf-8")
    docs = load_documents(raw)
    assert len(docs) == 3
    assert docs[0]["respondent"]["name"] == " Ana "


def test_parse_timestamp_converte_para_utc_naive() -> None:
    assert parse_timestamp("2025-03-11T09:00:00-03:00") == datetime(2025, 3, 11, 12, 0)
    assert parse_timestamp("2025-03-10T14:30:00.000Z") == datetime(2025, 3, 10, 14, 30)
    assert parse_timestamp("ontem") is None
    assert parse_timestamp(None) is None


def test_submissao_id_usa_campo_id_ou_uuid5_do_nome() -> None:
    com_id = {"id": "0B7C5A8E-3F0E-4C61-9D3A-1F2E3D4C5B6A", "_name": "x"}
    assert submissao_id(com_id) == "0b7c5a8e-3f0e-4c61-9d3a-1f2e3d4c5b6a"

    sem_id = {"_name": "projects/p/databases/(default)/documents/submissions/abc"}
    gerado = submissao_id(sem_id)
    uuid.UUID(gerado)
    assert submissao_id(sem_id) == gerado  # deterministico


# ---------------------------------------------------------------------------
# Parse
# ---------------------------------------------------------------------------


def test_parse_submissoes(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    df = parse_submissoes(_load(tmp_path, documentos))
    assert df.columns == ["id", "registrada_em", "nome", "setor"]
    assert len(df) == 3
    assert df["id"][0] == "0b7c5a8e-3f0e-4c61-9d3a-1f2e3d4c5b6a"
    assert "percentual" not in df.columns


def test_parse_respostas_mantem_valores_brutos(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    df = parse_respostas(_load(tmp_path, documentos))
    assert len(df) == 5 + 2 + 1
    assert "TALVEZ" in df["valor"].to_list()


def test_parse_evidencias(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    df = parse_evidencias(_load(tmp_path, documentos))
    assert len(df) == 1
    row = df.row(0, named=True)
    assert row["pergunta_id"] == "1_1"
    assert row["arquivo_tamanho"] == 1024
    assert row["registrada_em"] == datetime(2025, 3, 9, 10, 0)


def test_parse_sem_documentos_retorna_frames_vazios_tipados() -> None:
    assert parse_submissoes([]).schema["registrada_em"] == pl.Datetime("us")
    assert parse_respostas([]).is_empty()
    assert parse_evidencias([]).is_empty()


# ---------------------------------------------------------------------------
# Validate
# ---------------------------------------------------------------------------


def test_validate_submissoes_descarta_sem_nome_e_faz_trim(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    df = validate_submissoes(parse_submissoes(_load(tmp_path, documentos)))
    assert df["nome"].to_list() == ["Ana", "Bruno"]
    assert df["setor"].to_list() == ["Meio Ambiente", ""]


def test_validate_submissoes_deduplica_por_id() -> None:
    df = pl.DataFrame(
        {
            "id": ["a", "a"],
            "registrada_em": [datetime(2025, 1, 1), datetime(2025, 1, 2)],
            "nome": ["Primeiro", "Segundo"],
            "setor": ["", ""],
        }
    )
    assert validate_submissoes(df)["nome"].to_list() == ["Primeiro"]


def test_validate_respostas_normaliza_e_descarta(tmp_path: Path, documentos: list[dict[str, Any]]) -> None:
    docs = _load(tmp_path, documentos)
    submissoes = validate_submissoes(parse_submissoes(docs))
    respostas = validate_respostas(parse_respostas(docs), submissoes)

    assert set(respostas["valor"].unique().to_list()) <= {"YES", "PARTIAL", "NO", "NA"}
    assert "NA" in respostas["valor"].to_list()  # "na" normalizado
    # docC (sem nome) descartado -> suas respostas tambem
    assert set(respostas["fk_submissao"].unique().to_list()) == set(submissoes["id"].to_list())
    assert len(respostas) == 4 + 2


def test_validate_respostas_ultima_ocorrencia_vence() -> None:
    submissoes = pl.DataFrame({"id": ["s1"]})
    respostas = pl.DataFrame(
        {"fk_submissao": ["s1", "s1"], "pergunta_id": ["1_1", "1_1"], "valor": ["NO", "YES"]}
    )
    assert validate_respostas(respostas, submissoes)["valor"].to_list() == ["YES"]


def test_validate_evidencias_preenche_data_e_comentario() -> None:
    submissoes = pl.DataFrame({"id": ["s1"], "registrada_em": [datetime(2025, 5, 1, 8, 0)]})
    evidencias = pl.DataFrame(
        [
            {"fk_submissao": "s1", "pergunta_id": "1_1", "comentario": None, "arquivo_tamanho": -5},
            {"fk_submissao": "orfa", "pergunta_id": "1_2", "comentario": "x", "arquivo_tamanho": 10},
        ],
        schema=EVIDENCIAS_SCHEMA,
    )
    df = validate_evidencias(evidencias, submissoes)
    assert len(df) == 1
    row = df.row(0, named=True)
    assert row["comentario"] == ""
    assert row["registrada_em"] == datetime(2025, 5, 1, 8, 0)
    assert row["arquivo_tamanho"] is None
    assert "_enviada_em" not in df.columns
