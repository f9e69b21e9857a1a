# pipeline/transform/consolidacao.py
#
# Recompute per-submission scores and the consolidated municipal view.
#
# Design decisions:
#   - Scoring mirrors api/domain/avaliacao/resultado.py: YES=1, PARTIAL=0.5,
#     NO=0, each counting 1 toward the maximum. NA and unanswered questions
#     are excluded from both numerator and denominator.
#   - Every submission gets one row per category, even with zero answered
#     questions (maximo=0, percentual=0), so consolidated means divide by the
#     full submission count, same as agregar_resultados in the API.
#   - The question -> category link is the explicit PERGUNTA_CATEGORIA table,
#     built from the per-category question counts of the catalogue. Answers
#     whose id is not in the table ("3_99", "1_0") are ignored, like unknown
#     ids in calcular_score.
#
# ADR: Why not import from api/domain?
#   The pipeline is an offline standalone artefact. Importing from the API
#   package would couple its runtime environment to the web stack. Constants
#   copied here are annotated with their source so divergence is caught in
#   code review.
#
# Invariants:
#   - All functions are pure over DataFrames. No IO.
#   - percentual is never NaN (zero-guarded).
#   - Output columns match schema.sql (categoria_score, submissao,
#     consolidado_categoria, setor_participacao).
from __future__ import annotations

import polars as pl

# Source of truth: api/domain/questionario/catalogo_esg.py (ordem das categorias e
# quantidade de perguntas; ids "<ordem>_<n>" com n de 1 ate a quantidade)
PERGUNTAS_POR_CATEGORIA: dict[str, int] = {
    "legislacao": 8,
    "agua": 9,
    "residuos": 12,
    "energia": 8,
    "biodiversidade": 9,
    "riscos": 6,
    "ar_ruido": 5,
    "vida_agua": 9,
    "educacao": 6,
    "governanca": 14,
}

CATEGORIAS: tuple[str, ...] = tuple(PERGUNTAS_POR_CATEGORIA)

PERGUNTA_CATEGORIA: dict[str, str] = {
    f"{ordem}_{n}": categoria_id
    for ordem, (categoria_id, total) in enumerate(PERGUNTAS_POR_CATEGORIA.items(), start=1)
    for n in range(1, total + 1)
}

# Source of truth: api/domain/avaliacao/resultado.py :: CREDITO (NA ausente = excluida)
CREDITO: dict[str, float] = {"YES": 1.0, "PARTIAL": 0.5, "NO": 0.0}

# Source of truth: api/domain/avaliacao/resultado.py :: LIMIAR_*
LIMIAR_EXCELENTE = 80.0
LIMIAR_REGULAR = 40.0

# Source of truth: api/domain/avaliacao/enums.py :: NivelMaturidade
NIVEL_EXCELENTE = "Excelente"
NIVEL_REGULAR = "Em Desenvolvimento"
NIVEL_CRITICO = "Crítico"

# Source of truth: api/domain/avaliacao/entities.py :: SETOR_NAO_INFORMADO
SETOR_NAO_INFORMADO = "Não informado"

_COLUNAS_RESULTADO = ["pontuacao_total", "pontuacao_maxima", "percentual", "nivel"]


def _percentual(pontos: str, maximo: str) -> pl.Expr:
    return pl.when(pl.col(maximo) > 0).then(pl.col(pontos) / pl.col(maximo) * 100).otherwise(0.0)


def _nivel(percentual: str) -> pl.Expr:
    return (
        pl.when(pl.col(percentual) >= LIMIAR_EXCELENTE)
        .then(pl.lit(NIVEL_EXCELENTE))
        .when(pl.col(percentual) >= LIMIAR_REGULAR)
        .then(pl.lit(NIVEL_REGULAR))
        .otherwise(pl.lit(NIVEL_CRITICO))
    )


def calcular_categoria_scores(submissoes: pl.DataFrame, respostas: pl.DataFrame) -> pl.DataFrame:
    """One row per (submission, category): pontos, maximo, percentual."""
    perguntas = pl.DataFrame(
        {"pergunta_id": list(PERGUNTA_CATEGORIA), "categoria_id": list(PERGUNTA_CATEGORIA.values())},
        schema={"pergunta_id": pl.Utf8, "categoria_id": pl.Utf8},
    )
    creditadas = (
        respostas.filter(pl.col("valor").is_in(list(CREDITO)))
        .with_columns(pl.col("valor").replace_strict(CREDITO, return_dtype=pl.Float64).alias("_credito"))
        # inner: ids fora do catalogo nao pontuam
        .join(perguntas, on="pergunta_id", how="inner")
        .group_by("fk_submissao", "categoria_id")
        .agg(
            pl.col("_credito").sum().alias("pontos"),
            pl.len().cast(pl.Float64).alias("maximo"),
        )
    )

    grade = submissoes.select(pl.col("id").alias("fk_submissao")).join(
        pl.DataFrame({"categoria_id": list(CATEGORIAS)}), how="cross"
    )
    return (
        grade.join(creditadas, on=["fk_submissao", "categoria_id"], how="left")
        .with_columns(pl.col("pontos").fill_null(0.0), pl.col("maximo").fill_null(0.0))
        .with_columns(_percentual("pontos", "maximo").alias("percentual"))
        .select("fk_submissao", "categoria_id", "pontos", "maximo", "percentual")
    )


def calcular_resultados(submissoes: pl.DataFrame, categoria_scores: pl.DataFrame) -> pl.DataFrame:
    """Add pontuacao_total, pontuacao_maxima, percentual and nivel to each submission."""
    totais = categoria_scores.group_by("fk_submissao").agg(
        pl.col("pontos").sum().alias("pontuacao_total"),
        pl.col("maximo").sum().alias("pontuacao_maxima"),
    )
    # Rebuilds from staging already carry a previous result
    base = submissoes.drop(_COLUNAS_RESULTADO, strict=False)
    return (
        base.join(totais, left_on="id", right_on="fk_submissao", how="left")
        .with_columns(
            pl.col("pontuacao_total").fill_null(0.0),
            pl.col("pontuacao_maxima").fill_null(0.0),
        )
        .with_columns(_percentual("pontuacao_total", "pontuacao_maxima").alias("percentual"))
        .with_columns(_nivel("percentual").alias("nivel"))
    )


def consolidar_categorias(categoria_scores: pl.DataFrame) -> pl.DataFrame:
    """Mean category percentual across all submissions, with its tier."""
    return (
        categoria_scores.group_by("categoria_id", maintain_order=True)
        .agg(
            pl.col("percentual").mean().alias("media_percentual"),
            pl.col("fk_submissao").n_unique().cast(pl.Int32).alias("total_submissoes"),
        )
        .with_columns(_nivel("media_percentual").alias("nivel"))
        .select("categoria_id", "media_percentual", "nivel", "total_submissoes")
    )


def contar_setores(submissoes: pl.DataFrame) -> pl.DataFrame:
    """Submissions per sector; blank sector -> "Não informado". Most frequent first."""
    return (
        submissoes.with_columns(
            pl.when(pl.col("setor").fill_null("").str.strip_chars() == "")
            .then(pl.lit(SETOR_NAO_INFORMADO))
            .otherwise(pl.col("setor").str.strip_chars())
            .alias("setor")
        )
        .group_by("setor")
        .agg(pl.len().cast(pl.Int32).alias("quantidade"))
        .sort(["quantidade", "setor"], descending=[True, False])
    )
