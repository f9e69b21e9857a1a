# pipeline/sources/firestore/parse.py
#
# Parse the raw Firestore export into staging DataFrames.
#
# Design decisions:
#   - Firestore REST returns typed values ({"stringValue": ...},
#     {"mapValue": {"fields": ...}}). decode_value() unwraps them recursively
#     into plain Python so the extractors below read like the web client's
#     document shape: {id, timestamp, respondent, answers, evidences}.
#   - The stored `result` field is ignored. Scores are recomputed from the
#     answers by the transform layer; a result written by an old client must
#     never leak into the consolidated view.
#   - Submission ids must be UUIDs (the API parses them). Documents carry their
#     own `id` field; when it is missing or not a UUID, a deterministic uuid5 of
#     the document name is used so reruns produce the same key.
#   - Timestamps are parsed here into naive UTC datetimes; unparseable values
#     become null and are dropped by the validate step.
#   - Answer values are kept raw. Normalisation is the validator's job.
from __future__ import annotations

import json
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import polars as pl

SUBMISSOES_SCHEMA: dict[str, pl.DataType] = {
    "id": pl.Utf8(),
    "registrada_em": pl.Datetime("us"),
    "nome": pl.Utf8(),
    "setor": pl.Utf8(),
}

RESPOSTAS_SCHEMA: dict[str, pl.DataType] = {
    "fk_submissao": pl.Utf8(),
    "pergunta_id": pl.Utf8(),
    "valor": pl.Utf8(),
}

EVIDENCIAS_SCHEMA: dict[str, pl.DataType] = {
    "fk_submissao": pl.Utf8(),
    "pergunta_id": pl.Utf8(),
    "comentario": pl.Utf8(),
    "registrada_em": pl.Datetime("us"),
    "arquivo_url": pl.Utf8(),
    "arquivo_nome": pl.Utf8(),
    "arquivo_tipo": pl.Utf8(),
    "arquivo_tamanho": pl.Int64(),
}


def decode_value(value: dict[str, Any]) -> Any:
    """Unwrap one Firestore typed value into a plain Python object."""
    if "mapValue" in value:
        return decode_fields(value["mapValue"].get("fields", {}))
    if "arrayValue" in value:
        return [decode_value(v) for v in value["arrayValue"].get("values", [])]
    if "integerValue" in value:
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    if "nullValue" in value:
        return None
    for key in ("stringValue", "booleanValue", "timestampValue", "referenceValue"):
        if key in value:
            return value[key]
    return None


def decode_fields(fields: dict[str, Any]) -> dict[str, Any]:
    return {name: decode_value(v) for name, v in fields.items()}


def load_documents(raw_path: Path) -> list[dict[str, Any]]:
    """Read the raw export and return decoded documents with a `_name` key."""
    raw = json.loads(raw_path.read_text(encoding="utf-8"))
    documents = raw.get("documents", []) if isinstance(raw, dict) else raw
    decoded: list[dict[str, Any]] = []
    for doc in documents:
        data = decode_fields(doc.get("fields", {}))
        data["_name"] = doc.get("name", "")
        decoded.append(data)
    return decoded


def submissao_id(document: dict[str, Any]) -> str:
    raw_id = document.get("id")
    if isinstance(raw_id, str):
        try:
            return str(uuid.UUID(raw_id))
        except ValueError:
            pass
    return str(uuid.uuid5(uuid.NAMESPACE_URL, str(document.get("_name", ""))))


def parse_timestamp(value: object) -> datetime | None:
    """ISO-8601 (with or without offset) -> naive UTC datetime, or None."""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def parse_submissoes(documents: list[dict[str, Any]]) -> pl.DataFrame:
    """One row per document: id, registrada_em, nome, setor."""
    rows = []
    for doc in documents:
        respondent = doc.get("respondent") or {}
        rows.append(
            {
                "id": submissao_id(doc),
                "registrada_em": parse_timestamp(doc.get("timestamp")),
                "nome": respondent.get("name"),
                "setor": respondent.get("sector"),
            }
        )
    return pl.DataFrame(rows, schema=SUBMISSOES_SCHEMA)


def parse_respostas(documents: list[dict[str, Any]]) -> pl.DataFrame:
    """One row per (document, question) present in `answers`."""
    rows = []
    for doc in documents:
        sid = submissao_id(doc)
        answers = doc.get("answers") or {}
        for pergunta_id, valor in answers.items():
            rows.append(
                {
                    "fk_submissao": sid,
                    "pergunta_id": pergunta_id,
                    "valor": valor if isinstance(valor, str) else None,
                }
            )
    return pl.DataFrame(rows, schema=RESPOSTAS_SCHEMA)


def parse_evidencias(documents: list[dict[str, Any]]) -> pl.DataFrame:
    """One row per evidence in `evidences` (keyed by question id)."""
    rows = []
    for doc in documents:
        sid = submissao_id(doc)
        evidences = doc.get("evidences") or {}
        for pergunta_id, ev in evidences.items():
            if not isinstance(ev, dict):
                continue
            tamanho = ev.get("fileSize")
            rows.append(
                {
                    "fk_submissao": sid,
                    "pergunta_id": ev.get("questionId") or pergunta_id,
                    "comentario": ev.get("comment"),
                    "registrada_em": parse_timestamp(ev.get("timestamp")),
                    "arquivo_url": ev.get("fileUrl"),
                    "arquivo_nome": ev.get("fileName"),
                    "arquivo_tipo": ev.get("fileType"),
                    "arquivo_tamanho": int(tamanho) if isinstance(tamanho, int | float) else None,
                }
            )
    return pl.DataFrame(rows, schema=EVIDENCIAS_SCHEMA)
