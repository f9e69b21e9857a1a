# pipeline/sources/firestore/validate.py
#
# Validate and clean the staging DataFrames produced by parse.py.
#
# Design decisions:
#   - Submissions without a respondent name or a parseable timestamp are
#     dropped: the API refuses to build a Respondente with an empty name, and
#     listing order depends on registrada_em.
#   - Answers are normalised (trim + upper) and only the four known values
#     survive. Anything else is treated as unanswered, the same policy the
#     scoring engine applies to unknown values.
#   - Child rows (answers, evidences) whose submission did not survive are
#     dropped so the DuckDB build never holds orphans.
#   - Duplicated answers for the same (submission, question) keep the last
#     occurrence, matching a dict update on the client.
#
# Invariants:
#   - nome is non-empty and trimmed; setor is trimmed (may be empty).
#   - valor is one of YES, PARTIAL, NO, NA.
#   - every fk_submissao exists in the validated submissions frame.
from __future__ import annotations

import polars as pl

from pipeline.log import warn

# Source of truth: api/domain/avaliacao/enums.py (Resposta)
RESPOSTAS_VALIDAS: tuple[str, ...] = ("YES", "PARTIAL", "NO", "NA")


def validate_submissoes(df: pl.DataFrame) -> pl.DataFrame:
    """Trim text, drop incomplete rows, deduplicate by id (first wins)."""
    total = len(df)
    df = df.with_columns(
        pl.col("nome").fill_null("").str.strip_chars().alias("nome"),
        pl.col("setor").fill_null("").str.strip_chars().alias("setor"),
    )
    df = df.filter((pl.col("nome") != "") & pl.col("registrada_em").is_not_null())
    df = df.unique(subset=["id"], keep="first", maintain_order=True)

    dropped = total - len(df)
    if dropped:
        warn(f"firestore: {dropped} submission(s) dropped (no name, bad timestamp or duplicate id)")
    return df


def validate_respostas(df: pl.DataFrame, submissoes: pl.DataFrame) -> pl.DataFrame:
    """Normalise values, keep known ones, drop orphans, dedupe per question."""
    df = df.with_columns(pl.col("valor").str.strip_chars().str.to_uppercase().alias("valor"))
    df = df.filter(pl.col("valor").is_in(list(RESPOSTAS_VALIDAS)))
    df = df.join(submissoes.select(pl.col("id").alias("fk_submissao")), on="fk_submissao", how="semi")
    return df.unique(subset=["fk_submissao", "pergunta_id"], keep="last", maintain_order=True)


def validate_evidencias(df: pl.DataFrame, submissoes: pl.DataFrame) -> pl.DataFrame:
    """Drop orphans; default comment to ""; missing timestamp falls back to the submission's."""
    enviadas = submissoes.select(pl.col("id").alias("fk_submissao"), pl.col("registrada_em").alias("_enviada_em"))
    df = df.join(enviadas, on="fk_submissao", how="inner")
    df = df.with_columns(
        pl.col("comentario").fill_null(""),
        pl.coalesce("registrada_em", "_enviada_em").alias("registrada_em"),
        pl.when(pl.col("arquivo_tamanho") >= 0).then(pl.col("arquivo_tamanho")).otherwise(None).alias("arquivo_tamanho"),
    )
    return df.drop("_enviada_em")
