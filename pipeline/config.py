# pipeline/config.py
#
# Pipeline configuration loaded from environment variables.
#
# Design decisions:
#   - Uses a frozen dataclass (not pydantic Settings) because the pipeline is a
#     standalone offline process and pydantic is reserved for the API layer.
#   - FIRESTORE_PROJECT_ID has no default: a run that downloads must know which
#     project to read. load_config(require_source=False) relaxes this for
#     rebuilds from existing staging data.
#   - FIRESTORE_API_KEY is optional. Collections readable by rules do not need it.
#   - Paths default to pipeline/data relative to this file's directory so the
#     pipeline works out of the box after a fresh checkout.
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PIPELINE_DIR = Path(__file__).parent

FIRESTORE_BASE_URL = "https://firestore.googleapis.com/v1"


@dataclass(frozen=True)
class FirestoreSource:
    """Location of the submissions collection in Firestore.

    Invariant: collection is non-empty. project_id may be empty only when the
    pipeline runs with skip_download.
    """

    project_id: str = ""
    collection: str = "submissions"
    api_key: str | None = None
    base_url: str = FIRESTORE_BASE_URL

    @property
    def documents_url(self) -> str:
        return f"{self.base_url}/projects/{self.project_id}/databases/(default)/documents/{self.collection}"


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable pipeline configuration.

    Invariants:
      - data_dir / staging_dir / output_dir are Path objects.
      - download_timeout and download_retries are positive integers.
    """

    data_dir: Path
    duckdb_output_path: Path
    firestore: FirestoreSource = field(default_factory=FirestoreSource)
    download_timeout: int = 60
    download_retries: int = 3

    @property
    def raw_dir(self) -> Path:
        """Directory for downloaded raw files."""
        return self.data_dir / "raw"

    @property
    def staging_dir(self) -> Path:
        """Directory for cleaned Parquet staging files."""
        return self.data_dir / "staging"

    @property
    def output_dir(self) -> Path:
        """Directory for the final DuckDB output."""
        return self.data_dir / "output"


def load_config(*, require_source: bool = True) -> PipelineConfig:
    """Build PipelineConfig from environment variables.

    Raises:
        ValueError: if FIRESTORE_PROJECT_ID is not set and require_source is True,
            or if a numeric variable is not a positive integer.
    """
    project_id = os.environ.get("FIRESTORE_PROJECT_ID", "")
    if require_source and not project_id:
        raise ValueError(
            "FIRESTORE_PROJECT_ID environment variable is required to download submissions. "
            "Set it before running the pipeline, or run with --skip-download. "
            "See .env.example for instructions."
        )

    data_dir = Path(os.environ.get("PIPELINE_DATA_DIR", str(_PIPELINE_DIR / "data")))
    duckdb_output_path = Path(
        os.environ.get(
            "DUCKDB_OUTPUT_PATH",
            str(data_dir / "output" / "diagnostico_esg.duckdb"),
        )
    )

    download_timeout = int(os.environ.get("PIPELINE_DOWNLOAD_TIMEOUT", "60"))
    download_retries = int(os.environ.get("PIPELINE_DOWNLOAD_RETRIES", "3"))
    if download_timeout <= 0 or download_retries <= 0:
        raise ValueError("PIPELINE_DOWNLOAD_TIMEOUT and PIPELINE_DOWNLOAD_RETRIES must be positive")

    return PipelineConfig(
        data_dir=data_dir,
        duckdb_output_path=duckdb_output_path,
        firestore=FirestoreSource(
            project_id=project_id,
            collection=os.environ.get("FIRESTORE_COLLECTION", "submissions"),
            api_key=os.environ.get("FIRESTORE_API_KEY") or None,
        ),
        download_timeout=download_timeout,
        download_retries=download_retries,
    )
