# pipeline/sources/firestore/source.py
#
# SourcePipeline implementation for the Firestore submissions collection.
# Thin adapter: wires download/parse/validate of this package together.
from __future__ import annotations

from pathlib import Path

import httpx

from pipeline.config import FirestoreSource
from pipeline.sources.base import StagingFrames
from pipeline.sources.firestore.download import download_submissoes
from pipeline.sources.firestore.parse import (
    load_documents,
    parse_evidencias,
    parse_respostas,
    parse_submissoes,
)
from pipeline.sources.firestore.validate import (
    validate_evidencias,
    validate_respostas,
    validate_submissoes,
)


class FirestoreSubmissoes:
    name = "firestore"

    def __init__(
        self,
        source: FirestoreSource,
        timeout: int = 60,
        retries: int = 3,
        client: httpx.Client | None = None,
    ) -> None:
        self._source = source
        self._timeout = timeout
        self._retries = retries
        self._client = client

    def download(self, raw_dir: Path) -> Path:
        return download_submissoes(self._source, raw_dir, self._timeout, self._retries, self._client)

    def parse(self, raw_path: Path) -> StagingFrames:
        documents = load_documents(raw_path)
        return {
            "submissoes": parse_submissoes(documents),
            "respostas": parse_respostas(documents),
            "evidencias": parse_evidencias(documents),
        }

    def validate(self, frames: StagingFrames) -> StagingFrames:
        submissoes = validate_submissoes(frames["submissoes"])
        return {
            "submissoes": submissoes,
            "respostas": validate_respostas(frames["respostas"], submissoes),
            "evidencias": validate_evidencias(frames["evidencias"], submissoes),
        }
