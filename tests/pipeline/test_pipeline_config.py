# tests/pipeline/test_pipeline_config.py
from __future__ import annotations

from pathlib import Path

import pytest

from pipeline.config import load_config


@pytest.fixture(autouse=True)
def _env_limpo(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "FIRESTORE_PROJECT_ID",
        "FIRESTORE_COLLECTION",
        "FIRESTORE_API_KEY",
        "PIPELINE_DATA_DIR",
        "DUCKDB_OUTPUT_PATH",
        "PIPELINE_DOWNLOAD_TIMEOUT",
        "PIPELINE_DOWNLOAD_RETRIES",
    ):
        monkeypatch.delenv(var, raising=False)


def test_exige_projeto_para_download() -> None:
    with pytest.raises(ValueError, match="FIRESTORE_PROJECT_ID"):
        load_config()


def test_rebuild_dispensa_projeto() -> None:
    config = load_config(require_source=False)
    assert config.firestore.project_id == ""
    assert config.duckdb_output_path.name == "diagnostico_esg.duckdb"


def test_le_variaveis(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FIRESTORE_PROJECT_ID", "prefeitura-x")
    monkeypatch.setenv("FIRESTORE_COLLECTION", "avaliacoes")
    monkeypatch.setenv("PIPELINE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PIPELINE_DOWNLOAD_RETRIES", "5")

    config = load_config()

    assert config.staging_dir == tmp_path / "staging"
    assert config.duckdb_output_path == tmp_path / "output" / "diagnostico_esg.duckdb"
    assert config.download_retries == 5
    assert config.firestore.api_key is None
    assert config.firestore.documents_url.endswith("/projects/prefeitura-x/databases/(default)/documents/avaliacoes")


def test_rejeita_timeout_nao_positivo(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PIPELINE_DOWNLOAD_TIMEOUT", "0")
    with pytest.raises(ValueError, match="positive"):
        load_config(require_source=False)
