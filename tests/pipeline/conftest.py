# tests/pipeline/conftest.py
#
# Firestore wire-format fixtures shared by the ingestion, download and
# orchestrator tests. Documents mirror what the web client writes:
# {id, timestamp, respondent{name, sector}, answers{qid: value}, evidences{qid: {...}}}.
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

NAME_PREFIX = "projects/esg-test/databases/(default)/documents/submissions"


def _string(value: str) -> dict[str, Any]:
    return {"stringValue": value}


def firestore_doc(
    doc_id: str,
    *,
    submissao_id: str | None = None,
    timestamp: str = "2025-03-10T14:30:00.000Z",
    nome: str = "Maria",
    setor: str = "Meio Ambiente",
    answers: dict[str, str] | None = None,
    evidences: dict[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "timestamp": _string(timestamp),
        "respondent": {"mapValue": {"fields": {"name": _string(nome), "sector": _string(setor)}}},
        "answers": {"mapValue": {"fields": {k: _string(v) for k, v in (answers or {}).items()}}},
        # resultado calculado pelo cliente: deve ser ignorado
        "result": {"mapValue": {"fields": {"percentage": {"doubleValue": 99.0}}}},
    }
    if submissao_id is not None:
        fields["id"] = _string(submissao_id)
    if evidences:
        fields["evidences"] = {
            "mapValue": {
                "fields": {
                    qid: {"mapValue": {"fields": _encode_evidence(ev)}} for qid, ev in evidences.items()
                }
            }
        }
    return {"name": f"{NAME_PREFIX}/{doc_id}", "fields": fields}


def _encode_evidence(ev: dict[str, Any]) -> dict[str, Any]:
    encoded: dict[str, Any] = {}
    for key, value in ev.items():
        if isinstance(value, int):
            encoded[key] = {"integerValue": str(value)}
        elif value is None:
            encoded[key] = {"nullValue": None}
        else:
            encoded[key] = _string(value)
    return encoded


@pytest.fixture()
def documento_firestore() -> Callable[..., dict[str, Any]]:
    """Factory de documentos no formato REST do Firestore."""
    return firestore_doc


@pytest.fixture()
def documentos() -> list[dict[str, Any]]:
    """Tres submissoes: uma completa com evidencia, uma sem setor, uma invalida (sem nome)."""
    return [
        firestore_doc(
            "docA",
            submissao_id="0b7c5a8e-3f0e-4c61-9d3a-1f2e3d4c5b6a",
            timestamp="2025-03-10T14:30:00.000Z",
            nome=" Ana ",
            setor="Meio Ambiente",
            answers={"1_1": "YES", "1_2": "NO", "1_3": "na", "2_1": "PARTIAL", "9_9": "TALVEZ"},
            evidences={
                "1_1": {
                    "questionId": "1_1",
                    "comment": "Lei 100/2019",
                    "fileUrl": "https://storage.example/lei.pdf",
                    "fileName": "lei.pdf",
                    "fileType": "application/pdf",
                    "fileSize": 1024,
                    "timestamp": "2025-03-09T10:00:00Z",
                }
            },
        ),
        firestore_doc(
            "docB",
            timestamp="2025-03-11T09:00:00-03:00",
            nome="Bruno",
            setor="",
            answers={"1_1": "YES", "1_2": "YES"},
        ),
        firestore_doc("docC", nome="   ", answers={"1_1": "NO"}),
    ]
